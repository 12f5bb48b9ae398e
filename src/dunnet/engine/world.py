"""Immutable data structures for the dunnet game world.

The world is built once from the static tables and shared across all players.
"""

import enum
from dataclasses import dataclass, field

from . import tables


class Direction(enum.IntEnum):
    """The twelve movement directions, in exit-table column order."""

    N = 0
    S = 1
    E = 2
    W = 3
    NE = 4
    SE = 5
    NW = 6
    SW = 7
    UP = 8
    DOWN = 9
    IN = 10
    OUT = 11


class ExitKind(enum.Enum):
    BLOCKED = "blocked"
    ROOM = "room"
    SPECIAL = "special"


@dataclass(frozen=True)
class Exit:
    """One cell of a room's exit table."""

    kind: ExitKind
    target: int | None = None

    @classmethod
    def from_cell(cls, cell: int) -> "Exit":
        """Decode a raw adjacency cell (-1 blocked, 255 special, else a room)."""
        if cell == tables.BLOCKED:
            return cls(ExitKind.BLOCKED)
        if cell == tables.SPECIAL:
            return cls(ExitKind.SPECIAL)
        return cls(ExitKind.ROOM, cell)


class ObjectKind(enum.Enum):
    PORTABLE = "portable"
    FIXED = "fixed"
    SENTINEL = "sentinel"


def object_kind(obj_id: int) -> ObjectKind:
    """Classify an object id by its sign."""
    if obj_id == tables.SENTINEL:
        return ObjectKind.SENTINEL
    if obj_id < 0:
        return ObjectKind.FIXED
    return ObjectKind.PORTABLE


@dataclass(frozen=True)
class Room:
    """A location in the game world."""

    number: int
    long_description: str
    short_description: str
    exits: tuple[Exit, ...]
    is_light: bool = False

    @property
    def slug(self) -> str:
        """Directory name used for this room in the shell's /rooms tree."""
        return self.short_description.lower().replace(" ", "-").replace("/", "-")

    def exit(self, direction: Direction) -> Exit:
        return self.exits[direction]


@dataclass(frozen=True)
class Item:
    """A portable object."""

    number: int
    room_line: str
    inventory_name: str
    weight: int
    points: int
    file_name: str
    examine: str | None = None


@dataclass(frozen=True)
class Fixture:
    """A piece of fixed scenery."""

    number: int
    room_line: str | None = None
    examine: str | None = None


@dataclass
class World:
    """The complete immutable game world."""

    rooms: dict[int, Room] = field(default_factory=dict)
    items: dict[int, Item] = field(default_factory=dict)
    fixtures: dict[int, Fixture] = field(default_factory=dict)
    object_names: dict[str, int] = field(default_factory=dict)
    scenery: dict[int, tuple[int, ...]] = field(default_factory=dict)
    initial_contents: dict[int, tuple[int, ...]] = field(default_factory=dict)
    diggables: dict[int, tuple[int, ...]] = field(default_factory=dict)
    questions: tuple[tuple[str, tuple[str, ...]], ...] = ()

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    def item_by_file(self, file_name: str) -> Item | None:
        """Look up a portable object by its shell file name."""
        for item in self.items.values():
            if item.file_name == file_name:
                return item
        return None


def build_world() -> World:
    """Assemble the world from the static tables."""
    world = World()
    for number, (long_text, short_text) in enumerate(tables.ROOMS):
        world.rooms[number] = Room(
            number=number,
            long_description=long_text,
            short_description=short_text,
            exits=tuple(Exit.from_cell(cell) for cell in tables.EXITS[number]),
            is_light=number in tables.LIGHT_ROOMS,
        )
    for number, entry in enumerate(tables.PORTABLES):
        room_line, inventory_name, weight, points, file_name, examine = entry
        world.items[number] = Item(
            number, room_line, inventory_name, weight, points, file_name, examine
        )
    for number, (room_line, examine) in tables.FIXTURES.items():
        world.fixtures[number] = Fixture(number, room_line, examine)
    world.object_names = dict(tables.OBJECT_NAMES)
    world.scenery = dict(tables.ROOM_SCENERY)
    world.initial_contents = dict(tables.ROOM_CONTENTS)
    world.diggables = dict(tables.DIGGABLES)
    world.questions = tables.ENDGAME_QUESTIONS
    return world
