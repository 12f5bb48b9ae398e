"""Movement: darkness, the exit table, the bus, and special transitions."""

from collections.abc import Callable

from . import tables
from .describe import describe_room, is_dark
from .endgame import die
from .state import GameState, Pending
from .world import Direction, ExitKind, World

GRUE_DEATH = (
    "You trip over a grue and fall into a pit and break every bone in your body."
)
NO_EXIT = "You can't go that way."
NO_KEY = "You don't have a key that can open this door."


def go_to(world: World, state: GameState, room: int) -> str:
    """Relocate the player, dragging the bus along when riding it."""
    if state.in_bus:
        if room not in tables.BUS_ROOMS:
            return "The bus cannot go this way."
        _move_bus(state, room)
        state.current_room = room
        return (
            "The bus lurches ahead and comes to a screeching halt.\n"
            + describe_room(world, state)
        )
    state.current_room = room
    return describe_room(world, state)


def _move_bus(state: GameState, room: int) -> None:
    contents = state.contents()
    if tables.BUS in contents:
        contents.remove(tables.BUS)
    state.contents(room).append(tables.BUS)


def move(world: World, state: GameState, direction: Direction) -> str:
    """Try to move one step in a direction."""
    if is_dark(world, state):
        return die(world, state, GRUE_DEATH)

    exit_ = world.rooms[state.current_room].exit(direction)
    if exit_.kind is ExitKind.BLOCKED:
        return NO_EXIT
    state.last_dir = direction
    if exit_.kind is ExitKind.ROOM:
        return go_to(world, state, exit_.target)

    handler = _SPECIAL_MOVES.get((state.current_room, direction))
    if handler is None:
        return NO_EXIT
    return handler(world, state)


def swim_across(world: World, state: GameState) -> str:
    """Swim to the opposite lake shore; drowns the player without a preserver."""
    if not state.holds(tables.LIFE_PRESERVER):
        return die(
            world,
            state,
            "You dive in the water, and at first notice it is quite cold.  You then\n"
            "start to get used to it as you realize that you never really learned\n"
            "how to swim.",
        )
    if state.current_room == tables.LAKE_NORTH:
        target = tables.LAKE_SOUTH
    else:
        target = tables.LAKE_NORTH
    return go_to(world, state, target)


def enter_combination(world: World, state: GameState, line: str) -> str:
    """Check the line typed at the combination prompt."""
    state.pending = Pending.NONE
    if line.strip() != state.combination:
        return "Sorry, that combination is incorrect."
    return go_to(world, state, tables.GAMMA_ROOM)


def _building_door(world: World, state: GameState) -> str:
    if not state.holds(tables.KEY):
        return NO_KEY
    return go_to(world, state, tables.OLD_HALLWAY)


def _meadow_door(world: World, state: GameState) -> str:
    if not state.holds(tables.KEY) or state.key_level < 1:
        return NO_KEY
    return go_to(world, state, tables.MEADOW)


def _pass_bear(world: World, state: GameState) -> str:
    if tables.BEAR not in state.contents():
        return NO_EXIT
    return die(
        world,
        state,
        "The bear is very annoyed that you would be so presumptuous as to try\n"
        "and walk right by it.  He tells you so by tearing your head off.",
    )


def _maze_passage(world: World, state: GameState) -> str:
    if tables.WEIGHT not in state.contents():
        return NO_EXIT
    return go_to(world, state, tables.MAZE_FIRST)


def _maze_ladder(world: World, state: GameState) -> str:
    if tables.WEIGHT in state.contents():
        return NO_EXIT
    return go_to(world, state, tables.WEIGHT_ROOM)


def _leave_health_club(world: World, state: GameState) -> str:
    if state.sauna_level == 3:
        return die(
            world,
            state,
            "As you exit the building, you notice some flames coming out of one of\n"
            "the windows.  Suddenly, the building explodes in a huge ball of fire.",
        )
    return go_to(world, state, tables.HEALTH_CLUB_FRONT)


def _cave_in(world: World, state: GameState) -> str:
    state.current_room = tables.MISTY_ROOM
    return (
        "You enter the cave.  As soon as you walk in, rocks fall from the\n"
        "ceiling and seal the entrance behind you.\n" + describe_room(world, state)
    )


def _combination_door(world: World, state: GameState) -> str:
    state.pending = Pending.COMBINATION
    return "The door is locked.  You must enter the combination to pass."


def _red_room_hole(world: World, state: GameState) -> str:
    if tables.TOWEL in state.contents():
        return NO_EXIT
    return go_to(world, state, tables.LONG_NS_HALL)


def _board_bus(world: World, state: GameState) -> str:
    if tables.BUS not in state.contents():
        return NO_EXIT
    if state.in_bus:
        return "You are already in the bus!"
    if not state.holds(tables.LICENSE):
        return "You do not have a license to drive this vehicle."
    state.in_bus = True
    state.nomail = True
    return "You board the bus and get in the driver's seat."


def _leave_bus(world: World, state: GameState) -> str:
    if tables.BUS not in state.contents():
        return NO_EXIT
    if not state.in_bus:
        return "You are already off the bus!"
    state.in_bus = False
    return "You hop off the bus."


def _museum_gate(world: World, state: GameState) -> str:
    if not state.in_bus:
        return "The gate will not open."
    _move_bus(state, tables.MUSEUM_ENTRANCE)
    state.current_room = tables.MUSEUM_ENTRANCE
    return (
        "As the bus approaches, the gate opens and you drive through.\n"
        + describe_room(world, state)
    )


def _cliff(world: World, state: GameState) -> str:
    if state.in_bus:
        return die(
            world,
            state,
            "You drive the bus off the cliff, and plunge to your death.",
        )
    return die(world, state, "You fall down the cliff and land on your head.")


def _classroom_door(world: World, state: GameState) -> str:
    return "The door is locked."


def _subway(world: World, state: GameState) -> str:
    state.current_room = tables.MUSEUM_STATION
    return (
        "As you board the train it immediately leaves the station.  It is a very\n"
        "bumpy ride.  It is shaking from side to side, and up and down.  You\n"
        "sit down in one of the chairs in order to be more comfortable.\n"
        "Finally the train comes to a sudden stop, and the doors open, and\n"
        "some force throws you out.  The train speeds away.\n"
        + describe_room(world, state)
    )


_SPECIAL_MOVES: dict[tuple[int, Direction], Callable] = {
    (tables.BUILDING_FRONT, Direction.NE): _building_door,
    (tables.BUILDING_FRONT, Direction.IN): _building_door,
    (tables.OLD_HALLWAY, Direction.N): _meadow_door,
    (tables.BEAR_HANGOUT, Direction.SE): _pass_bear,
    (tables.MAZE_BUTTON_ROOM, Direction.NW): _maze_passage,
    (tables.MAZE_BUTTON_ROOM, Direction.UP): _maze_ladder,
    (tables.RECEPTION, Direction.S): _leave_health_club,
    (tables.LAKE_NORTH, Direction.S): swim_across,
    (tables.LAKE_NORTH, Direction.IN): swim_across,
    (tables.LAKE_SOUTH, Direction.N): swim_across,
    (tables.LAKE_SOUTH, Direction.IN): swim_across,
    (tables.CAVE_ENTRANCE, Direction.S): _cave_in,
    (tables.CAVE_ENTRANCE, Direction.IN): _cave_in,
    (tables.NORTH_CAVE_PASSAGE, Direction.W): _combination_door,
    (tables.RED_ROOM, Direction.DOWN): _red_room_hole,
    **{(room, Direction.IN): _board_bus for room in tables.BUS_ROOMS},
    **{(room, Direction.OUT): _leave_bus for room in tables.BUS_ROOMS},
    (tables.MAIN_MAPLE, Direction.NW): _museum_gate,
    (tables.FIFTH_OAK, Direction.E): _cliff,
    (tables.CLASSROOM, Direction.E): _classroom_door,
    (tables.VERMONT_STATION, Direction.IN): _subway,
}
