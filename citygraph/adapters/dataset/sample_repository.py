"""Repository serving the bundled sample dataset."""

from __future__ import annotations

from dataclasses import dataclass

from ...domain.models import GraphDataset
from ...graph.sample_data import SAMPLE_DATA


@dataclass
class SampleDatasetRepository:
    """Implements DatasetRepositoryPort over SAMPLE_DATA. No I/O."""

    dataset: GraphDataset = SAMPLE_DATA

    def load(self) -> GraphDataset:
        return self.dataset
