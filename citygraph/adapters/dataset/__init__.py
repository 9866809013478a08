"""Dataset adapters - Implementations of DatasetRepositoryPort.

Available implementations:
- SampleDatasetRepository: Serves the bundled sample dataset
- JSONDatasetRepository: Loads a dataset from a JSON file
- CSVDatasetRepository: Loads a dataset from cities/edges CSV files
"""

from .csv_repository import CSVDatasetRepository
from .json_repository import JSONDatasetRepository
from .sample_repository import SampleDatasetRepository

__all__ = ["CSVDatasetRepository", "JSONDatasetRepository", "SampleDatasetRepository"]
