"""Acceptability rules deciding which media items may be picked."""

from .filters import Filter, MaxSizeFilter, VideoDurationFilter, MinDimensionFilter
from .acceptability import MediaAcceptabilityPolicy

__all__ = [
    "Filter",
    "MaxSizeFilter",
    "VideoDurationFilter",
    "MinDimensionFilter",
    "MediaAcceptabilityPolicy",
]
