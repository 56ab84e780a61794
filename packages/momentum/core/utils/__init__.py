"""Shared utilities for Momentum."""

from momentum.core.utils.json import read_json, write_json
from momentum.core.utils.math import clamp, golden_section_minimize, lerp, sign

__all__ = [
    "clamp",
    "golden_section_minimize",
    "lerp",
    "read_json",
    "sign",
    "write_json",
]
