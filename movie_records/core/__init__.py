"""
Core domain layer: record model, view parameters, the view pipeline
and the error taxonomy
"""

from .exceptions import ConfigError, RecordsError, TransportError, ValidationError
from .pipeline import ChartPoint, DerivedView, compute
from .record import Record
from .view_state import FilterMode, SortMode, ViewParams

__all__ = [
    "ChartPoint",
    "ConfigError",
    "DerivedView",
    "FilterMode",
    "Record",
    "RecordsError",
    "SortMode",
    "TransportError",
    "ValidationError",
    "ViewParams",
    "compute",
]
