"""
Global configuration for the safe arithmetic library.

This module contains environment-specific settings that apply across all modules.
"""

import os

_SUPPORTED_BITS: list[int] = [8, 16, 32, 64, 128, 256]

_RAW_BITS = os.environ.get("SAFE_UINT_BITS", "128").strip()

if not _RAW_BITS.isdigit() or int(_RAW_BITS) not in _SUPPORTED_BITS:
    raise ValueError(
        f"Invalid SAFE_UINT_BITS environment variable: '{_RAW_BITS}'. "
        f"Supported values: {_SUPPORTED_BITS}"
    )

SAFE_UINT_BITS = int(_RAW_BITS)
"""The native unsigned integer width in bits. Defaults to 128."""
