"""Unit tests for /src/enclosure/reachability.py"""

import pytest

from src.enclosure.coordinate import Coordinate, Direction
from src.enclosure.player import Player
from src.enclosure.reachability import area, is_connected, reachable_set
from src.enclosure.walls import Walls


def diamond(center: Coordinate, radius: int, width: int, height: int) -> set[Coordinate]:
    """All cells on the board within Manhattan distance `radius` of `center`"""
    return {
        Coordinate(x, y)
        for x in range(width)
        for y in range(height)
        if abs(x - center.x) + abs(y - center.y) <= radius
    }


@pytest.mark.parametrize("depth, expected_size", [(0, 1), (1, 3), (2, 6), (3, 10)])
def test_bounded_search_from_corner(depth: int, expected_size: int) -> None:
    """Without walls, the bounded search is a (clipped) diamond around the origin"""
    walls = Walls(7, 7)
    origin = Coordinate(0, 0)
    reachable = reachable_set(walls, origin, depth)
    assert len(reachable) == expected_size
    assert reachable == diamond(origin, depth, 7, 7)


def test_bounded_search_from_center() -> None:
    walls = Walls(7, 7)
    reachable = reachable_set(walls, Coordinate(3, 3), 3)
    assert len(reachable) == 25
    assert reachable == diamond(Coordinate(3, 3), 3, 7, 7)


def test_origin_is_always_reachable() -> None:
    """Even when every side of the origin is walled off"""
    walls = Walls(3, 3)
    center = Coordinate(1, 1)
    for direction in Direction:
        walls.place(center, direction, Player.BLUE)
    assert reachable_set(walls, center, 3) == {center}
    assert reachable_set(walls, center) == {center}


def test_unbounded_search_covers_the_board() -> None:
    walls = Walls(7, 7)
    assert len(reachable_set(walls, Coordinate(0, 0))) == 49
    assert area(walls, Coordinate(4, 2)) == 49


def test_wall_forces_detour() -> None:
    """Wall below (0, 0): (0, 1) is now 3 hops away via (1, 0) -> (1, 1) -> (0, 1)"""
    walls = Walls(7, 7)
    walls.place(Coordinate(0, 0), Direction.DOWN, Player.BLUE)
    origin = Coordinate(0, 0)

    assert Coordinate(0, 1) not in reachable_set(walls, origin, 1)
    assert Coordinate(0, 1) not in reachable_set(walls, origin, 2)
    assert Coordinate(0, 1) in reachable_set(walls, origin, 3)
    assert Coordinate(0, 1) in reachable_set(walls, origin)


def test_depth_cutoff_uses_shortest_hop_count() -> None:
    """A cell found at the cutoff is included, but not expanded"""
    walls = Walls(7, 7)
    walls.place(Coordinate(0, 0), Direction.DOWN, Player.BLUE)
    reachable = reachable_set(walls, Coordinate(0, 0), 3)
    assert reachable == {
        Coordinate(0, 0),
        Coordinate(1, 0),
        Coordinate(2, 0),
        Coordinate(1, 1),
        Coordinate(3, 0),
        Coordinate(2, 1),
        Coordinate(1, 2),
        Coordinate(0, 1),
    }
    assert Coordinate(0, 2) not in reachable


@pytest.mark.parametrize("direction", list(Direction))
def test_walled_edge_cannot_be_crossed_in_either_direction(direction: Direction) -> None:
    walls = Walls(7, 7)
    a = Coordinate(3, 3)
    b = a.move_to(direction)
    walls.place(a, direction, Player.GREEN)

    assert b not in reachable_set(walls, a, 1)
    assert a not in reachable_set(walls, b, 1)
    # ... but a single wall does not disconnect anything
    assert b in reachable_set(walls, a)
    assert a in reachable_set(walls, b)


def test_enclosed_region() -> None:
    """Wall off the 2x2 block in the bottom-right corner of a 7x7 board"""
    walls = Walls(7, 7)
    for x in (5, 6):
        walls.place(Coordinate(x, 5), Direction.UP, Player.BLUE)
    for y in (5, 6):
        walls.place(Coordinate(5, y), Direction.LEFT, Player.GREEN)

    inside = reachable_set(walls, Coordinate(6, 6))
    outside = reachable_set(walls, Coordinate(0, 0))
    assert inside == {Coordinate(5, 5), Coordinate(6, 5), Coordinate(5, 6), Coordinate(6, 6)}
    assert len(outside) == 45
    assert inside.isdisjoint(outside)
    assert not is_connected(walls, Coordinate(0, 0), Coordinate(6, 6))
    assert is_connected(walls, Coordinate(5, 5), Coordinate(6, 6))
