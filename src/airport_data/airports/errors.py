"""Error kinds raised by the airport query engines.

All errors derive from AirportDataError so callers can catch the whole
family at once. Engines fail fast: the first violated precondition raises.
"""


class AirportDataError(Exception):
    """Base class for airport data errors."""


class FormatError(AirportDataError):
    """Raised when a code does not match its required shape.

    Attributes:
        value: The rejected input.
        pattern: Regular expression the input had to match.
    """

    def __init__(self, value: str, pattern: str, label: str = "code") -> None:
        self.value = value
        self.pattern = pattern
        super().__init__(f"Invalid {label} format {value!r}: expected pattern {pattern}")


class NotFoundError(AirportDataError):
    """Raised when a well-formed code matches no record.

    Attributes:
        code: The code that was looked up.
        field: Record field the code was matched against.
    """

    def __init__(self, code: str, field: str) -> None:
        self.code = code
        self.field = field
        super().__init__(f"No data found for {field} code: {code}")


class ValidationError(AirportDataError):
    """Raised when a non-code input violates a precondition."""


class UnresolvedCodesError(AirportDataError):
    """Raised by batch operations when one or more codes cannot be resolved.

    Attributes:
        codes: Every unresolved code, in input order.
    """

    def __init__(self, codes: list[str]) -> None:
        self.codes = list(codes)
        super().__init__(f"Could not resolve airport codes: {', '.join(map(str, self.codes))}")


class DatasetLoadError(AirportDataError):
    """Raised when the dataset blob cannot be read or decoded."""
