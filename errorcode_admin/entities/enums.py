from enum import Enum


class ErrorCodeType(str, Enum):
    """Provenance of an error code record."""

    MANUAL_OPERATION = "MANUAL_OPERATION"
    AUTO_GENERATION = "AUTO_GENERATION"
