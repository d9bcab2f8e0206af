"""Constants used throughout the library."""

from __future__ import annotations

from typing import Final

PERCENT_DENOMINATOR: Final = 100
"""The denominator of a percentage. 100% = 100."""

BASIS_POINT_DENOMINATOR: Final = 10_000
"""
The denominator of a basis point value.

A basis point (bps) is 1/100th of a percent. 100% = 10,000 bps.
"""

LERP_MAX_T: Final = PERCENT_DENOMINATOR
"""The largest interpolation factor accepted by `lerp` (100%)."""
