from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

OrderKey = NewType("OrderKey", str)


@dataclass(frozen=True)
class CorrelationId:
    value: str
