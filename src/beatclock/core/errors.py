class BeatClockError(Exception):
    """Base error."""

class OracleUnavailableError(BeatClockError):
    """Raised when an optional oracle backend (e.g. Skyfield) is not available."""

class InvalidPositionError(BeatClockError, ValueError):
    """Raised when latitude/longitude fall outside their valid ranges."""
