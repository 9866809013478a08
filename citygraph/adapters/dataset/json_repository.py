"""JSON dataset repository adapter.

Reads a dataset shaped like::

    {"cities": ["A", "B"], "edges": [{"from": "A", "to": "B", "distance": 10}]}

The raw document is validated before it is converted, so structural
problems (wrong types, missing keys) are reported rather than raised
from deep inside the conversion.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import DatasetConfig, get_config
from ...domain.errors import DatasetLoadError
from ...domain.models import EdgeRecord, GraphDataset
from ._validated import ensure_valid


@dataclass
class JSONDatasetRepository:
    """Dataset repository that loads from a JSON file.

    Implements DatasetRepositoryPort.

    Attributes:
        config: Dataset configuration (paths, file names)
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().dataset)
    _logger: logging.Logger = field(init=False, repr=False)

    _dataset: Optional[GraphDataset] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphDataset:
        """Load the dataset from the configured JSON file.

        Raises:
            DatasetLoadError: If the file cannot be read or parsed.
            DatasetValidationError: If the content fails validation.
        """
        if self._dataset is not None:
            return self._dataset

        path = self.config.json_path
        self._logger.debug("Loading dataset", extra={"json_path": str(path)})

        try:
            with path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise DatasetLoadError(
                f"Failed to load dataset: {e}",
                file_path=str(path),
                cause=e,
            )

        ensure_valid(raw, source=str(path))

        dataset = GraphDataset(
            cities=tuple(raw["cities"]),
            edges=tuple(EdgeRecord.from_mapping(edge) for edge in raw["edges"]),
        )
        self._dataset = dataset
        self._logger.info(
            "Dataset loaded",
            extra={"cities": len(dataset.cities), "edges": len(dataset.edges)},
        )
        return dataset
