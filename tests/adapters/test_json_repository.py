"""Tests for the JSON and in-memory campus data adapters."""

import json

import pytest

from campus_nav.adapters.data import InMemoryCampusRepository, JsonCampusRepository
from campus_nav.config import DataConfig
from campus_nav.domain.errors import DataSourceError
from campus_nav.domain.models import Location, LocationCategory, Pathway


@pytest.fixture
def repository(data_dir):
    return JsonCampusRepository(DataConfig(data_dir=data_dir))


class TestJsonCampusRepository:
    def test_loads_locations_in_file_order(self, repository, campus_locations):
        assert repository.get_locations() == campus_locations

    def test_parses_wire_format(self, tmp_path):
        (tmp_path / "locations.json").write_text(
            json.dumps(
                [
                    {
                        "id": "lot-b",
                        "name": "Lot B",
                        "x": 12.5,
                        "y": 80,
                        "type": "parking",
                        "description": "Overflow parking",
                        "amenities": ["EV Charging"],
                        "accessibility": False,
                    }
                ]
            ),
            encoding="utf-8",
        )
        (tmp_path / "pathways.json").write_text(
            json.dumps(
                [
                    {
                        "id": "p1",
                        "from": "lot-b",
                        "to": "gym",
                        "distance": 140,
                        "surface": "gravel",
                        "accessibility": False,
                        "lighting": False,
                    }
                ]
            ),
            encoding="utf-8",
        )
        repository = JsonCampusRepository(DataConfig(data_dir=tmp_path))

        assert repository.get_locations() == [
            Location(
                "lot-b",
                "Lot B",
                12.5,
                80.0,
                category=LocationCategory.PARKING,
                description="Overflow parking",
                amenities=("EV Charging",),
                accessible=False,
            )
        ]
        assert repository.get_pathways() == [
            Pathway("p1", "lot-b", "gym", 140.0, "gravel", accessible=False, lit=False)
        ]

    def test_accessible_only_filters_pathways(self, repository):
        ids = {p.id for p in repository.get_pathways(accessible_only=True)}

        assert "path-4" not in ids
        assert "path-9" not in ids
        assert "path-1" in ids

    def test_get_location(self, repository):
        assert repository.get_location("clock-tower").name == "Clock Tower"
        assert repository.get_location("nope") is None

    def test_data_is_cached_until_invalidated(self, repository, data_dir):
        assert len(repository.get_locations()) == 8

        (data_dir / "locations.json").write_text("[]", encoding="utf-8")
        assert len(repository.get_locations()) == 8

        repository.invalidate()
        assert repository.get_locations() == []

    def test_returned_lists_are_copies(self, repository):
        repository.get_locations().clear()

        assert len(repository.get_locations()) == 8

    def test_missing_file_raises_data_source_error(self, tmp_path):
        repository = JsonCampusRepository(DataConfig(data_dir=tmp_path))

        with pytest.raises(DataSourceError) as exc_info:
            repository.get_locations()

        assert exc_info.value.file_path == str(tmp_path / "locations.json")
        assert isinstance(exc_info.value.cause, OSError)

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '{"id": "a"}',
            '[{"id": "a", "name": "A"}]',
            '[{"id": "a", "name": "A", "x": 150, "y": 0}]',
        ],
    )
    def test_malformed_locations_raise_data_source_error(self, data_dir, content):
        (data_dir / "locations.json").write_text(content, encoding="utf-8")
        repository = JsonCampusRepository(DataConfig(data_dir=data_dir))

        with pytest.raises(DataSourceError):
            repository.get_locations()

    def test_non_positive_distance_is_rejected(self, data_dir):
        (data_dir / "pathways.json").write_text(
            '[{"id": "p", "from": "a", "to": "b", "distance": 0}]', encoding="utf-8"
        )
        repository = JsonCampusRepository(DataConfig(data_dir=data_dir))

        with pytest.raises(DataSourceError):
            repository.get_pathways()

    def test_transaction_persists_changes(self, repository, data_dir):
        repository.get_pathways()

        with repository.transaction() as snapshot:
            snapshot.pathways.append(
                Pathway("path-10", "observatory", "science-building", 400)
            )
            snapshot.locations = [
                loc for loc in snapshot.locations if loc.id != "north-parking"
            ]

        saved = json.loads((data_dir / "pathways.json").read_text(encoding="utf-8"))
        assert saved[-1]["id"] == "path-10"
        assert saved[-1]["from"] == "observatory"

        # Cache was invalidated by the commit.
        assert repository.get_location("north-parking") is None
        assert repository.get_pathways()[-1].id == "path-10"

    def test_failed_transaction_writes_nothing(self, repository, data_dir):
        before = (data_dir / "pathways.json").read_text(encoding="utf-8")

        with pytest.raises(RuntimeError):
            with repository.transaction() as snapshot:
                snapshot.pathways.clear()
                raise RuntimeError("abort")

        assert (data_dir / "pathways.json").read_text(encoding="utf-8") == before
        assert len(repository.get_pathways()) == 8

    def test_partial_write_failure_still_invalidates_cache(self, repository, data_dir):
        repository.get_locations()
        repository.get_pathways()
        pathways_file = data_dir / "pathways.json"
        pathways_file.unlink()
        pathways_file.mkdir()

        with pytest.raises(DataSourceError) as exc_info:
            with repository.transaction() as snapshot:
                snapshot.locations.append(Location("annex", "Annex", 50, 50))

        assert exc_info.value.file_path == str(pathways_file)
        saved = json.loads((data_dir / "locations.json").read_text(encoding="utf-8"))
        assert len(saved) == 9
        assert len(repository.get_locations()) == 9
        assert repository.get_location("annex").name == "Annex"

    def test_transaction_leaves_no_temp_files(self, repository, data_dir):
        with repository.transaction():
            pass

        assert sorted(p.name for p in data_dir.iterdir()) == [
            "locations.json",
            "pathways.json",
        ]


class TestInMemoryCampusRepository:
    def test_serves_copies_of_collections(self, campus_locations, campus_pathways):
        repository = InMemoryCampusRepository(campus_locations, campus_pathways)
        campus_locations.clear()

        assert len(repository.get_locations()) == 8
        assert len(repository.get_pathways()) == 8

    def test_accessible_only(self, campus_data):
        assert all(p.accessible for p in campus_data.get_pathways(True))
        assert len(campus_data.get_pathways(True)) == 6

    def test_get_location(self, campus_data):
        assert campus_data.get_location("gymnasium").accessible is False
        assert campus_data.get_location("missing") is None
