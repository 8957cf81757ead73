"""Diagnostics package.

- equinox_anchors: always available (no extras)
- new_moon_offsets, solar_day: need the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["equinox_anchors", "new_moon_offsets", "solar_day"]
