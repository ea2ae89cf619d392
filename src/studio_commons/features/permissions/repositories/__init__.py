"""Restriction map loading."""

from .restriction_loader import load_restriction_map, build_restriction_map, get_restriction_map

__all__ = [
    "load_restriction_map",
    "build_restriction_map",
    "get_restriction_map",
]
