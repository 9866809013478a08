"""Shared validation step for file-backed repositories."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from ...domain.errors import DatasetValidationError
from ...domain.models import GraphDataset
from ...graph.validation import validate_graph_data

logger = logging.getLogger(__name__)


def ensure_valid(data: Union[GraphDataset, Mapping[str, Any]], source: str) -> None:
    """Raise DatasetValidationError listing every problem in ``data``."""
    result = validate_graph_data(data)
    if result.ok:
        return

    logger.warning(
        "Dataset failed validation",
        extra={"source": source, "error_count": len(result.errors)},
    )
    raise DatasetValidationError(
        f"Dataset {source} is invalid ({len(result.errors)} problem(s))",
        errors=result.errors,
    )
