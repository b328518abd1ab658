from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from fulfillment_runtime.domain.common.ids import CorrelationId


@dataclass(frozen=True)
class RunContext:
    as_of_ts: datetime
    correlation_id: CorrelationId

    @classmethod
    def from_args(
        cls,
        as_of_ts: Optional[datetime] = None,
        correlation_id: Optional[str] = None,
    ) -> "RunContext":
        return cls(
            as_of_ts=as_of_ts or datetime.now(timezone.utc),
            correlation_id=CorrelationId(correlation_id or "auto"),
        )
