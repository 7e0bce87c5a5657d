"""Shared fixtures: a small campus and the wired route finder."""

import json

import pytest

from campus_nav.adapters.data import InMemoryCampusRepository
from campus_nav.adapters.graph import DijkstraRouteSolver
from campus_nav.adapters.matching import SubstringLocationMatcher
from campus_nav.config import RoutingConfig, reset_config
from campus_nav.domain.models import Location, LocationCategory, Pathway
from campus_nav.services import RouteFinderService


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def campus_locations():
    return [
        Location("main-library", "Main Library", 30, 40,
                 description="Central library with study rooms",
                 amenities=("WiFi", "Printing")),
        Location("student-center", "Student Center", 50, 45,
                 description="Dining hall and bookstore",
                 amenities=("Food Court", "ATM", "WiFi")),
        Location("science-building", "Science Building", 70, 30,
                 description="Chemistry labs"),
        Location("engineering-hall", "Engineering Hall", 75, 60,
                 amenities=("Maker Space",)),
        Location("gymnasium", "Gymnasium", 20, 75, accessible=False,
                 amenities=("Pool", "Lockers")),
        Location("clock-tower", "Clock Tower", 45, 60,
                 category=LocationCategory.LANDMARK,
                 description="Historic tower on the quad"),
        Location("north-parking", "North Parking Lot", 45, 10,
                 category=LocationCategory.PARKING),
        Location("observatory", "Observatory", 95, 5),
    ]


@pytest.fixture
def campus_pathways():
    return [
        Pathway("path-1", "main-library", "student-center", 220),
        Pathway("path-2", "student-center", "science-building", 260),
        Pathway("path-3", "student-center", "clock-tower", 170),
        Pathway("path-4", "clock-tower", "engineering-hall", 320,
                surface="gravel", accessible=False, lit=False),
        Pathway("path-5", "science-building", "engineering-hall", 330),
        Pathway("path-6", "clock-tower", "gymnasium", 310),
        Pathway("path-8", "north-parking", "student-center", 360),
        Pathway("path-9", "main-library", "gymnasium", 400,
                surface="stairs", accessible=False),
    ]


@pytest.fixture
def campus_data(campus_locations, campus_pathways):
    return InMemoryCampusRepository(campus_locations, campus_pathways)


@pytest.fixture
def finder(campus_data):
    return RouteFinderService(
        data=campus_data,
        matcher=SubstringLocationMatcher(),
        route_solver=DijkstraRouteSolver(),
        config=RoutingConfig(),
    )


@pytest.fixture
def data_dir(tmp_path, campus_locations, campus_pathways):
    """Campus data written as the host's JSON files."""
    (tmp_path / "locations.json").write_text(
        json.dumps([loc.to_dict() for loc in campus_locations]), encoding="utf-8"
    )
    (tmp_path / "pathways.json").write_text(
        json.dumps([p.to_dict() for p in campus_pathways]), encoding="utf-8"
    )
    return tmp_path
