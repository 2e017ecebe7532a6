class RoommatesError(RuntimeError):
    """Base class for errors raised by this package."""


class ConfigurationError(RoommatesError):
    pass


class RowMappingError(RoommatesError):
    """A result row is missing a column the record needs."""

    def __init__(self, column: str, available: list[str]):
        self.column = column
        self.available = available
        super().__init__(
            f"Column '{column}' not found in result row "
            f"(columns: {', '.join(available) or 'none'})"
        )
