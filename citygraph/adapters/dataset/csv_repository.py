"""CSV dataset repository adapter.

Reads a dataset from two CSV files:
- cities file with a ``city`` column
- edges file with ``from_city``, ``to_city`` and ``distance_km`` columns

The repository only reads; the result is validated before it is
returned so bad files are reported all at once.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ...config import DatasetConfig, get_config
from ...domain.errors import DatasetLoadError
from ...domain.models import EdgeRecord, GraphDataset
from ._validated import ensure_valid


def _parse_distance(raw: str) -> Any:
    # Unparsable values are kept as-is for the validator to report
    try:
        return float(raw)
    except ValueError:
        return raw


@dataclass
class CSVDatasetRepository:
    """Dataset repository that loads from CSV files.

    Implements DatasetRepositoryPort.

    Attributes:
        config: Dataset configuration (paths, file names)
    """

    config: DatasetConfig = field(default_factory=lambda: get_config().dataset)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _dataset: Optional[GraphDataset] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GraphDataset:
        """Load the dataset from CSV files.

        Raises:
            DatasetLoadError: If a file cannot be read.
            DatasetValidationError: If the content fails validation.
        """
        if self._dataset is not None:
            return self._dataset

        self._logger.debug(
            "Loading dataset",
            extra={
                "cities_path": str(self.config.cities_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        try:
            cities = self._read_cities()
            edges = self._read_edges()
        except (OSError, KeyError, ValueError, csv.Error) as e:
            raise DatasetLoadError(
                f"Failed to load dataset: {e}",
                file_path=str(self.config.data_dir),
                cause=e,
            )

        dataset = GraphDataset(cities=tuple(cities), edges=tuple(edges))
        ensure_valid(dataset, source=str(self.config.data_dir))
        self._dataset = dataset
        self._logger.info(
            "Dataset loaded",
            extra={"cities": len(dataset.cities), "edges": len(dataset.edges)},
        )
        return dataset

    def _read_cities(self) -> List[str]:
        cities: List[str] = []
        with self.config.cities_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                city = (row["city"] or "").strip()
                if city:
                    cities.append(city)
        return cities

    def _read_edges(self) -> List[EdgeRecord]:
        edges: List[EdgeRecord] = []
        with self.config.edges_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for row in reader:
                from_city = (row["from_city"] or "").strip()
                to_city = (row["to_city"] or "").strip()
                distance_str = (row["distance_km"] or "").strip()

                if not from_city and not to_city and not distance_str:
                    continue

                edges.append(
                    EdgeRecord(from_city, to_city, _parse_distance(distance_str))
                )
        return edges
