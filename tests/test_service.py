from dataclasses import dataclass

import pytest

from citygraph.adapters.dataset import SampleDatasetRepository
from citygraph.domain.errors import DatasetValidationError
from citygraph.domain.models import EdgeRecord, GraphDataset, Neighbor
from citygraph.services import NearbyCitiesService


@dataclass
class CountingRepository:
    dataset: GraphDataset
    calls: int = 0

    def load(self) -> GraphDataset:
        self.calls += 1
        return self.dataset


@pytest.fixture
def service() -> NearbyCitiesService:
    return NearbyCitiesService(repository=SampleDatasetRepository())


def test_nearby_uses_the_sample_graph(service):
    result = service.nearby("Guadalajara", 20)
    assert result == [
        Neighbor("Tlaquepaque", 10),
        Neighbor("Zapopan", 12),
        Neighbor("Tonalá", 17),
    ]


def test_nearby_falls_back_to_default_bound():
    service = NearbyCitiesService(
        repository=SampleDatasetRepository(), default_max_distance=12
    )
    assert [n.to for n in service.nearby("Guadalajara")] == ["Tlaquepaque", "Zapopan"]
    assert len(service.nearby("Guadalajara", 1000)) == 9


def test_nearby_unknown_city(service):
    assert service.nearby("Atlantis") == []


def test_graph_is_built_once_and_reloaded_on_demand():
    repository = CountingRepository(
        GraphDataset(cities=("A", "B"), edges=(EdgeRecord("A", "B", 2),))
    )
    service = NearbyCitiesService(repository=repository)

    first = service.graph()
    assert service.graph() is first
    assert repository.calls == 1

    service.reload()
    assert service.graph() is not first
    assert repository.calls == 2


def test_invalid_dataset_is_rejected_before_building():
    repository = CountingRepository(
        GraphDataset(cities=("A", "A"), edges=(EdgeRecord("A", "B", -1),))
    )
    service = NearbyCitiesService(repository=repository)

    assert service.validate().ok is False
    with pytest.raises(DatasetValidationError) as excinfo:
        service.nearby("A")
    assert len(excinfo.value.errors) == 3


def test_validate_sample(service):
    assert service.validate().ok is True
