"""
Exception hierarchy for solarwind.

Callers can catch ``SolarWindError`` for anything raised by this package,
or ``InvalidFormatError`` specifically when a NOAA document or one of its
cells does not have the expected shape.

Network failures are not wrapped: ``requests`` exceptions reach the caller
unchanged.
"""


class SolarWindError(Exception):
    """Base exception for all solarwind errors."""


class InvalidFormatError(SolarWindError):
    """Raised when retrieved data does not conform to what is expected.

    The message is the human-readable detail string and is also available
    as ``details``. Typical causes:
    - A JSON cell of an unsupported type (boolean, object, fractional number).
    - A data row whose length differs from the product's field count.
    - A numeric cell that cannot be parsed, or a malformed time tag.
    - A document with no data rows or an unexpected header.
    """

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class ConfigValidationError(SolarWindError):
    """Raised when a client config or product descriptor is unusable.

    This can happen if:
    - The YAML config file is empty.
    - A product name is not known to the registry.
    - A product descriptor has no record type to build measurements with.
    """
