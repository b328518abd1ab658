class PackCatalogError(ValueError):
    """Raised when a pack catalog is structurally invalid. Surfaced at load time."""

    def __init__(self, message: str, source: str | None = None, pack_key: str | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.pack_key = pack_key


class NotFoundError(KeyError):
    """A requested record does not exist in the current fulfillment set."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class OrderNotFoundError(NotFoundError):
    pass


class RunCancelledError(Exception):
    pass
