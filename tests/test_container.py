import pytest

from campus_nav.adapters.data import InMemoryCampusRepository, JsonCampusRepository
from campus_nav.config import AppConfig, DataConfig
from campus_nav.container import Container
from campus_nav.ports.data import CampusDataPort
from campus_nav.services import RouteFinderService


@pytest.fixture
def config(data_dir):
    return AppConfig(data=DataConfig(data_dir=data_dir))


def test_create_default_wires_route_finder(config):
    container = Container.create_default(config)

    finder = container.resolve(RouteFinderService)

    assert isinstance(finder.data, JsonCampusRepository)
    assert finder.data.config.data_dir == config.data.data_dir
    assert finder.find_path("library", "science").path[-1] == "science-building"


def test_singletons_are_shared(config):
    container = Container.create_default(config)

    finder = container.resolve(RouteFinderService)

    assert container.resolve(RouteFinderService) is finder
    assert container.resolve(CampusDataPort) is finder.data


def test_register_overrides_binding(config, campus_locations):
    container = Container.create_default(config)
    container.register(
        CampusDataPort,
        lambda: InMemoryCampusRepository(campus_locations[:1], []),
    )

    finder = container.resolve(RouteFinderService)

    assert isinstance(finder.data, InMemoryCampusRepository)
    assert finder.find_path("library", "science") is None


def test_rebinding_rebuilds_dependent_services(config, campus_data):
    container = Container.create_default(config)
    before = container.resolve(RouteFinderService)

    container.register(CampusDataPort, lambda: campus_data)
    after = container.resolve(RouteFinderService)

    assert after is not before
    assert after.data is campus_data


def test_resolve_unregistered_type_raises(config):
    container = Container(config=config)

    with pytest.raises(KeyError, match="not registered"):
        container.resolve(RouteFinderService)
