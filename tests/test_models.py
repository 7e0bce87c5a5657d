import pytest

from campus_nav.domain.models import Location, Pathway, RouteResult


@pytest.mark.parametrize("x, y", [(-1, 50), (50, 100.5)])
def test_location_rejects_out_of_range_coordinates(x, y):
    with pytest.raises(ValueError):
        Location("a", "A", x, y)


def test_pathway_rejects_non_positive_distance():
    with pytest.raises(ValueError):
        Pathway("p", "a", "b", 0)


def test_pathway_connects_either_direction():
    pathway = Pathway("p", "a", "b", 10)

    assert pathway.connects("a", "b")
    assert pathway.connects("b", "a")
    assert not pathway.connects("a", "c")


class TestRouteResult:
    @pytest.mark.parametrize("path", [(), ("a",)])
    def test_requires_at_least_two_stops(self, path):
        with pytest.raises(ValueError, match="at least 2 stops"):
            RouteResult(path=path, total_distance=0.0, duration_minutes=0)

    def test_formatted_properties(self):
        result = RouteResult(
            path=("a", "b", "c"),
            total_distance=1500.0,
            duration_minutes=75,
        )

        assert result.num_stops == 3
        assert result.formatted_distance == "1.5km"
        assert result.formatted_duration == "1h 15m"
