class CelnavError(Exception):
    """Base error."""

class CoordinateRangeError(CelnavError, ValueError):
    """Raised when latitude or longitude is outside its valid range."""

class TimeFieldError(CelnavError, ValueError):
    """Raised when a Time component is outside its valid range."""

class IlluminationRangeError(CelnavError, ValueError):
    """Raised when a lunar illumination percentage is outside [0, 100]."""

class DeltaTDomainError(CelnavError, ValueError):
    """Raised when ΔT is requested outside the supported year range."""

class HorizonOrderError(CelnavError, ValueError):
    """Raised when a ring's upper threshold lies below its lower threshold."""

class NaiveDateTimeError(CelnavError, ValueError):
    """Raised when a datetime without tzinfo is passed where an offset is required."""
