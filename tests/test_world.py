"""Tests for the static world."""

from dunnet.engine import tables
from dunnet.engine.world import (
    Direction,
    Exit,
    ExitKind,
    ObjectKind,
    World,
    object_kind,
)


def test_world_size(world: World):
    """Every room has a full row of exits."""
    assert world.room_count == 105
    assert len(world.items) == 28
    assert all(len(room.exits) == len(Direction) for room in world.rooms.values())


def test_exit_cells():
    """Exit cells decode to their kinds."""
    assert Exit.from_cell(-1).kind is ExitKind.BLOCKED
    assert Exit.from_cell(255).kind is ExitKind.SPECIAL
    room_exit = Exit.from_cell(12)
    assert room_exit.kind is ExitKind.ROOM
    assert room_exit.target == 12


def test_object_kinds():
    """Object numbers map to their kinds."""
    assert object_kind(tables.SHOVEL) is ObjectKind.PORTABLE
    assert object_kind(tables.BEAR) is ObjectKind.FIXED
    assert object_kind(tables.SENTINEL) is ObjectKind.SENTINEL


def test_starting_room(world: World):
    """The dead end is lit and leads east."""
    room = world.rooms[tables.START_ROOM]
    assert room.short_description == "Dead end"
    assert room.exit(Direction.E).target == tables.EW_DIRT_ROAD
    assert room.is_light


def test_room_slugs_are_path_safe(world: World):
    """Slugs name shell directories, so they never contain slashes or spaces."""
    for room in world.rooms.values():
        assert "/" not in room.slug
        assert " " not in room.slug
    assert world.rooms[tables.EW_DIRT_ROAD].slug == "e-w-dirt-road"


def test_item_by_file(world: World):
    """Items are found by their shell file name."""
    assert world.item_by_file("lamp.o").number == tables.LAMP
    assert world.item_by_file("nothing.o") is None


def test_treasures_add_up(world: World):
    """Treasure points add up to the endgame maximum."""
    total = sum(item.points for item in world.items.values())
    assert total == tables.ENDGAME_MAX_SCORE
