"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityGraphError,
    ConfigurationError,
    DatasetLoadError,
    DatasetValidationError,
    InvalidDistanceError,
    InvalidInputError,
    UnknownCityError,
)
from .models import EdgeRecord, GraphDataset, Neighbor, ValidationResult

__all__ = [
    # Models
    "Neighbor",
    "EdgeRecord",
    "GraphDataset",
    "ValidationResult",
    # Errors
    "CityGraphError",
    "InvalidInputError",
    "UnknownCityError",
    "InvalidDistanceError",
    "DatasetLoadError",
    "DatasetValidationError",
    "ConfigurationError",
]
