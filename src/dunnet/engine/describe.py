"""Room descriptions, including the side effects some rooms run on entry."""

from collections.abc import Callable

from . import tables
from .endgame import die, question_text
from .state import GameState
from .world import ObjectKind, World, object_kind

DARK_TEXT = "It is pitch dark.  You are likely to be eaten by a grue."

SAUNA_TEXTS = (
    "It is normal room temperature in here.",
    "It is luke warm in here.",
    "It is comfortably hot in here.",
    "It is refreshingly hot in here.",
)


def is_dark(world: World, state: GameState) -> bool:
    """A room is dark unless it is always lit or the lamp is held or lying here."""
    if world.rooms[state.current_room].is_light:
        return False
    return not (state.holds(tables.LAMP) or tables.LAMP in state.contents())


def is_present(state: GameState, obj_id: int) -> bool:
    """Check if an object is in the current room, as contents or scenery."""
    return obj_id in state.contents() or obj_id in state.scenery_here()


def melt_in_sauna(world: World, state: GameState) -> list[str]:
    """Melt the wax statuette and the floppy when the sauna is at level 3."""
    if state.sauna_level != 3 or state.current_room != tables.SAUNA:
        return []
    lines = []
    for holder in (state.inventory, state.contents()):
        if tables.RMS in holder:
            holder[holder.index(tables.RMS)] = tables.DIAMOND
            lines.append(
                "You notice the wax on your statuette beginning to melt, until it\n"
                "completely melts off.  You are left with a beautiful diamond!"
            )
    for holder in (state.inventory, state.contents()):
        if tables.FLOPPY in holder:
            holder.remove(tables.FLOPPY)
            state.floppy_melted = True
            lines.append(
                "You notice your floppy disk beginning to melt.  As you grab for it,\n"
                "the disk bursts into flames, and disintegrates."
            )
    return lines


def _computer_room(world: World, state: GameState) -> str:
    if state.computer_on:
        return "The panel lights are flashing in a seemingly organized pattern."
    return "The panel lights are steady and motionless."


def _sauna(world: World, state: GameState) -> str:
    lines = [SAUNA_TEXTS[min(state.sauna_level, 3)]]
    lines.extend(melt_in_sauna(world, state))
    return "\n".join(lines)


def _red_room(world: World, state: GameState) -> str | None:
    if tables.TOWEL in state.contents():
        return None
    return "There is a hole in the floor here."


def _marine_life(world: World, state: GameState) -> str | None:
    if not state.black:
        return None
    return (
        "The room is lit by a black light, causing the fish, and some of\n"
        "your objects, to give off an eerie glow."
    )


def _fourth_vermont(world: World, state: GameState) -> str | None:
    if not state.hole_open:
        return None
    if state.in_bus:
        return die(
            world,
            state,
            "You drive the bus straight into the hole in the road.  The bus\n"
            "explodes in a huge ball of fire.",
        )
    state.current_room = tables.VERMONT_STATION
    return "You fall through the hole in the road!\n" + describe_room(world, state)


def _question_room(world: World, state: GameState) -> str:
    return question_text(world, state)


_SPECIAL_STEPS: dict[int, Callable] = {
    tables.COMPUTER_ROOM: _computer_room,
    tables.SAUNA: _sauna,
    tables.RED_ROOM: _red_room,
    tables.MARINE_LIFE: _marine_life,
    tables.FOURTH_VERMONT: _fourth_vermont,
    **dict.fromkeys(
        (tables.QUESTION_ROOM_1, tables.QUESTION_ROOM_2, tables.QUESTION_ROOM_3),
        _question_room,
    ),
}


def _object_lines(world: World, state: GameState) -> list[str]:
    lines = []
    for obj_id in state.contents():
        kind = object_kind(obj_id)
        if kind is ObjectKind.PORTABLE:
            lines.append(world.items[obj_id].room_line)
        elif kind is ObjectKind.FIXED:
            if obj_id == tables.BUS and state.in_bus:
                continue
            fixture = world.fixtures.get(obj_id)
            if fixture and fixture.room_line:
                lines.append(fixture.room_line)
    if tables.JAR in state.contents() and state.jar:
        lines.append("The jar contains:")
        lines.extend(f"     {world.items[obj].inventory_name}" for obj in state.jar)
    return lines


def describe_room(world: World, state: GameState, force_long: bool = False) -> str:
    """Describe the current room, running its special step if it has one."""
    if is_dark(world, state):
        return DARK_TEXT

    room = world.rooms[state.current_room]
    lines = [room.short_description]
    if force_long or state.verbose or room.number not in state.visited:
        lines.append(room.long_description)
    state.visited.add(room.number)

    step = _SPECIAL_STEPS.get(room.number)
    if step is not None and tables.SENTINEL in state.contents():
        text = step(world, state)
        if text:
            lines.append(text)
        if state.dead or state.current_room != room.number:
            return "\n".join(lines)

    lines.extend(_object_lines(world, state))
    if state.in_bus:
        lines.append("You are on the bus.")
    return "\n".join(lines)


def inventory_text(world: World, state: GameState) -> str:
    lines = ["You currently have:"]
    for obj_id in state.inventory:
        lines.append(world.items[obj_id].inventory_name)
        if obj_id == tables.JAR and state.jar:
            lines.append("The jar contains:")
            lines.extend(
                f"     {world.items[obj].inventory_name}" for obj in state.jar
            )
    return "\n".join(lines)
