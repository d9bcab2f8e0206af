"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "SAFE_UINT_BITS" not in os.environ:
    os.environ["SAFE_UINT_BITS"] = "128"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
