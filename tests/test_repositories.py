import json
from pathlib import Path

import pytest

from citygraph.adapters.dataset import (
    CSVDatasetRepository,
    JSONDatasetRepository,
    SampleDatasetRepository,
)
from citygraph.config import DatasetConfig
from citygraph.domain.errors import DatasetLoadError, DatasetValidationError
from citygraph.domain.models import EdgeRecord
from citygraph.graph.sample_data import SAMPLE_DATA


DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _write_csv(tmp_path: Path, cities: str, edges: str) -> DatasetConfig:
    (tmp_path / "cities.csv").write_text(cities, encoding="utf-8")
    (tmp_path / "edges.csv").write_text(edges, encoding="utf-8")
    return DatasetConfig(source="csv", data_dir=tmp_path)


def test_sample_repository_returns_sample_data():
    assert SampleDatasetRepository().load() is SAMPLE_DATA


def test_bundled_csv_files_load():
    repository = CSVDatasetRepository(DatasetConfig(data_dir=DATA_DIR))
    dataset = repository.load()

    assert "Guadalajara" in dataset.cities
    assert EdgeRecord("Guadalajara", "Zapopan", 12.0) in dataset.edges


def test_bundled_json_file_loads():
    repository = JSONDatasetRepository(DatasetConfig(data_dir=DATA_DIR))
    dataset = repository.load()

    assert dataset.cities[0] == "Guadalajara"
    assert dataset.edges[0] == EdgeRecord("Guadalajara", "Zapopan", 12)


def test_csv_repository_skips_blank_cities_and_caches(tmp_path):
    config = _write_csv(
        tmp_path,
        "city\nA\n  \nB\n",
        "from_city,to_city,distance_km\nA,B,4.5\n,,\n",
    )
    repository = CSVDatasetRepository(config)
    dataset = repository.load()

    assert dataset.cities == ("A", "B")
    assert dataset.edges == (EdgeRecord("A", "B", 4.5),)

    (tmp_path / "cities.csv").unlink()
    assert repository.load() is dataset


def test_csv_repository_reports_every_problem(tmp_path):
    config = _write_csv(
        tmp_path,
        "city\nA\nA\nB\n",
        "from_city,to_city,distance_km\nA,B,far\nA,C,3\n",
    )

    with pytest.raises(DatasetValidationError) as excinfo:
        CSVDatasetRepository(config).load()

    errors = excinfo.value.errors
    assert len(errors) == 3
    assert any("'far'" in e for e in errors)
    assert any("unknown city 'C'" in e for e in errors)


def test_csv_repository_missing_file(tmp_path):
    config = DatasetConfig(data_dir=tmp_path)
    with pytest.raises(DatasetLoadError) as excinfo:
        CSVDatasetRepository(config).load()
    assert excinfo.value.file_path == str(tmp_path)


def test_csv_repository_missing_column(tmp_path):
    config = _write_csv(tmp_path, "name\nA\n", "from_city,to_city,distance_km\n")
    with pytest.raises(DatasetLoadError):
        CSVDatasetRepository(config).load()


def test_json_repository_rejects_invalid_dataset(tmp_path):
    payload = {"cities": ["A"], "edges": [{"from": "A", "to": "B", "distance": 10}]}
    (tmp_path / "graph.json").write_text(json.dumps(payload), encoding="utf-8")

    with pytest.raises(DatasetValidationError) as excinfo:
        JSONDatasetRepository(DatasetConfig(data_dir=tmp_path)).load()
    assert len(excinfo.value.errors) == 1


def test_json_repository_rejects_malformed_json(tmp_path):
    (tmp_path / "graph.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DatasetLoadError) as excinfo:
        JSONDatasetRepository(DatasetConfig(data_dir=tmp_path)).load()
    assert excinfo.value.file_path == str(tmp_path / "graph.json")
    assert excinfo.value.cause is not None


def test_json_repository_rejects_wrong_shape(tmp_path):
    (tmp_path / "graph.json").write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(DatasetValidationError):
        JSONDatasetRepository(DatasetConfig(data_dir=tmp_path)).load()


def test_csv_repository_rejects_non_utf8_file(tmp_path):
    (tmp_path / "cities.csv").write_bytes(b"city\nLe\xf3n\n")
    (tmp_path / "edges.csv").write_text("from_city,to_city,distance_km\n", encoding="utf-8")

    with pytest.raises(DatasetLoadError) as excinfo:
        CSVDatasetRepository(DatasetConfig(data_dir=tmp_path)).load()
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)
