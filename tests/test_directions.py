from campus_nav.directions import generate_directions
from campus_nav.domain.models import Location


def _grid():
    return [
        Location("center", "Center", 50, 50),
        Location("east", "East Gate", 90, 50),
        Location("west", "West Gate", 10, 50),
        Location("north", "North Gate", 50, 10),
        Location("south", "South Gate", 50, 90),
        Location("start", "Start Hall", 50, 70),
    ]


def test_short_paths_have_no_directions():
    assert generate_directions([], _grid()) == []
    assert generate_directions(["center"], _grid()) == []


def test_two_stop_path_starts_and_arrives():
    assert generate_directions(["center", "east"], _grid()) == [
        "Start at Center",
        "Arrive at East Gate",
    ]


def test_interior_heading_follows_outgoing_vector():
    locations = _grid()

    assert generate_directions(["start", "center", "east"], locations)[1] == (
        "Head east toward Center"
    )
    assert generate_directions(["start", "center", "west"], locations)[1] == (
        "Head west toward Center"
    )
    assert generate_directions(["start", "center", "north"], locations)[1] == (
        "Head north toward Center"
    )
    assert generate_directions(["east", "center", "south"], locations)[1] == (
        "Head south toward Center"
    )


def test_one_direction_per_stop():
    path = ["west", "center", "north", "east"]

    directions = generate_directions(path, _grid())

    assert directions == [
        "Start at West Gate",
        "Head north toward Center",
        "Head south toward North Gate",
        "Arrive at East Gate",
    ]


def test_equal_offsets_use_vertical_heading():
    locations = [
        Location("a", "A", 0, 0),
        Location("b", "B", 10, 10),
        Location("c", "C", 20, 20),
    ]

    assert generate_directions(["a", "b", "c"], locations)[1] == "Head south toward B"


def test_unknown_ids_are_skipped():
    directions = generate_directions(["center", "ghost", "east"], _grid())

    assert directions == ["Start at Center", "Arrive at East Gate"]
