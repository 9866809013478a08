"""Typed domain errors for the city graph.

The mutation API and the query guard raise these immediately: they signal
programmer errors. Dataset validation never raises, it reports instead.

All errors inherit from CityGraphError and can optionally wrap a root
cause exception for debugging. The core errors also inherit from the
matching builtin (ValueError, KeyError) so generic callers can catch them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CityGraphError(Exception):
    """Base error for the city graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInputError(CityGraphError, ValueError):
    """A call received an argument it cannot accept.

    Raised for empty or non-string city names, self-loop edges,
    malformed edge records and non-graph arguments to queries.

    Attributes:
        value: The offending value, if useful for debugging
    """

    value: Any = field(default=None, repr=False)


@dataclass
class UnknownCityError(CityGraphError, KeyError):
    """An edge references a city that is not in the graph.

    Attributes:
        city: The missing city name
    """

    city: str = ""


@dataclass
class InvalidDistanceError(CityGraphError, ValueError):
    """A distance is not a finite number strictly greater than zero.

    Attributes:
        distance: The rejected distance value
    """

    distance: Any = None


@dataclass
class DatasetLoadError(CityGraphError):
    """A dataset file could not be read or parsed.

    Attributes:
        file_path: Path to the dataset file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DatasetValidationError(CityGraphError):
    """A dataset was loaded but failed validation.

    Attributes:
        errors: Every problem reported by the validator
    """

    errors: tuple[str, ...] = ()


@dataclass
class ConfigurationError(CityGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
