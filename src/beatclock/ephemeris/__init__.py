"""Ephemeris-backed oracles (optional).

This package wraps an external ephemeris library as a drop-in oracle set.
Install with:
  pip install "beatclock[ephemeris]"
"""

from ..core.errors import OracleUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise OracleUnavailableError('Ephemeris support requires: pip install "beatclock[ephemeris]"') from e
