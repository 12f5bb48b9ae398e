"""Dungeon-mode verb handlers.

DUNGEON_HANDLERS maps every Verb except save, restore and restart (which
replace the whole state and belong to the interpreter) to a handler
taking (world, state, args). All handlers mutate state in place and return
descriptive text.
"""

from collections.abc import Callable

from . import tables
from .describe import (
    SAUNA_TEXTS,
    describe_room,
    inventory_text,
    is_present,
    melt_in_sauna,
)
from .dos import boot
from .endgame import check_answer, current_score, die, regular_score, score_text
from .movement import go_to, move, swim_across
from .parser import first_word, meaningful
from .shell import enter_console
from .state import GameState
from .verbs import MOVEMENT, Verb, resolve_verb
from .world import Direction, ObjectKind, World, object_kind

PREPOSITIONS = ("in", "into", "on", "onto")

NO_OBJECT = "You must supply an object."
UNKNOWN_OBJECT = "I don't know what that is."
NOT_HERE = "I don't see that here."
NOT_HELD = "You don't have that."

HELP_TEXT = (
    "Welcome to dunnet (2.02), by Ron Schnell.\n"
    "Here is some useful information (read carefully because there are one\n"
    "or more clues in here):\n"
    "- If you have a key that can open a door, you do not need to explicitly\n"
    "  open it.  You may just use 'in' or walk in the direction of the door.\n"
    "- If you have a lamp, it is always lit.\n"
    "- You will not get any points until you manage to get treasures to a\n"
    "  certain place.  Simply finding the treasures is not good enough.\n"
    "  There is more than one way to get a treasure to the special place.\n"
    "  It is also important that the objects get to the special place\n"
    "  *unharmed* and *untarnished*.  You can tell if you have successfully\n"
    "  transported the object by looking at your score, as it changes\n"
    "  immediately.\n"
    "- Commands like 'take all' and 'drop all' are not supported.  Only\n"
    "  'take all' works.\n"
    "- Directions: n, s, e, w, ne, se, nw, sw, u, d, in, out.\n"
    "- Use 'save <name>' and 'restore <name>' to keep your progress.\n"
    "- If you run into trouble, you can always 'restart'."
)


def resolve_object(world: World, state: GameState, word: str | None) -> int | None:
    """Map a surface word to an object id; 'computer' means the PC near it."""
    if word is None:
        return None
    obj_id = world.object_names.get(word)
    if obj_id == tables.COMPUTER and state.current_room == tables.PC_AREA:
        return tables.PC
    return obj_id


def _carried_weight(world: World, state: GameState) -> int:
    held = sum(world.items[obj].weight for obj in state.inventory)
    return held + sum(world.items[obj].weight for obj in state.jar)


def _report_score(world: World, state: GameState, before: int) -> str:
    if current_score(world, state) == before:
        return ""
    return "\n" + score_text(world, state)


def _cmd_go(world: World, state: GameState, args: list[str]) -> str:
    if not args:
        return "You must supply a direction."
    verb = resolve_verb(args[0])
    if verb not in MOVEMENT:
        return "I don't understand that."
    return move(world, state, MOVEMENT[verb])


def _cmd_look(world: World, state: GameState, args: list[str]) -> str:
    """Describe the room in full, or examine one object."""
    word = first_word(args)
    if word is None:
        return describe_room(world, state, force_long=True)

    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return UNKNOWN_OBJECT
    visible = state.holds(obj_id) or is_present(state, obj_id)
    if not visible and not (obj_id in state.jar and state.holds(tables.JAR)):
        return NOT_HERE

    if obj_id == tables.BONE and state.black and state.current_room == tables.MARINE_LIFE:
        return (
            "In this light you can see some writing on the bone.  It says:\n"
            "For an explosive time, go to Fourth St. and Vermont."
        )
    if object_kind(obj_id) is ObjectKind.PORTABLE:
        text = world.items[obj_id].examine
    else:
        fixture = world.fixtures.get(obj_id)
        text = fixture.examine if fixture else None
    return text or "I see nothing special about that."


def _cmd_inventory(world: World, state: GameState, args: list[str]) -> str:
    return inventory_text(world, state)


def _cmd_score(world: World, state: GameState, args: list[str]) -> str:
    return score_text(world, state)


def _cmd_help(world: World, state: GameState, args: list[str]) -> str:
    return HELP_TEXT


def _cmd_quit(world: World, state: GameState, args: list[str]) -> str:
    return die(world, state, "")


def _take_from_room(world: World, state: GameState, obj_id: int) -> str:
    """Move one portable object from the room into inventory, if it fits."""
    item = world.items[obj_id]
    if _carried_weight(world, state) + item.weight > tables.CARRY_LIMIT:
        return "Your load would be too heavy."
    state.contents().remove(obj_id)
    state.inventory.append(obj_id)
    if obj_id == tables.TOWEL and state.current_room == tables.RED_ROOM:
        return "Taken.  Taking the towel reveals a hole in the floor."
    return "Taken."


def _take_all(world: World, state: GameState) -> str:
    if state.in_bus:
        return "You can't take anything while on the bus."
    portables = [
        obj for obj in state.contents()
        if object_kind(obj) is ObjectKind.PORTABLE
    ]
    if not portables:
        return "Nothing to take."
    return "\n".join(
        f"{world.items[obj].inventory_name}: {_take_from_room(world, state, obj)}"
        for obj in portables
    )


def _cmd_take(world: World, state: GameState, args: list[str]) -> str:
    """Handle TAKE/GET commands."""
    word = first_word(args)
    if word is None:
        return NO_OBJECT
    if word == "all":
        return _take_all(world, state)

    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return UNKNOWN_OBJECT
    if state.holds(obj_id):
        return NOT_HERE
    if obj_id in state.jar and state.holds(tables.JAR):
        state.jar.remove(obj_id)
        state.inventory.append(obj_id)
        return "Taken."
    if object_kind(obj_id) is not ObjectKind.PORTABLE:
        if is_present(state, obj_id):
            return "You cannot take that."
        return NOT_HERE
    if obj_id not in state.contents():
        return NOT_HERE
    if state.in_bus:
        return "You can't take anything while on the bus."
    return _take_from_room(world, state, obj_id)


def drop_object(world: World, state: GameState, obj_id: int) -> str:
    """Put a held object down here, running any drop-triggered puzzle."""
    state.inventory.remove(obj_id)
    here = state.contents()

    if obj_id == tables.JAR and tables.NITRIC in state.jar and tables.GLYCERINE in state.jar:
        state.jar.clear()
        text = "As the jar impacts the ground it explodes into many pieces."
        if state.current_room == tables.FOURTH_VERMONT:
            state.hole_open = True
            state.current_room = tables.VERMONT_STATION
            text += (
                "\nThe explosion causes a hole to open up in the ground, and you fall"
                " through it.\n" + describe_room(world, state)
            )
        return text

    if obj_id == tables.FOOD and state.current_room == tables.BEAR_HANGOUT and tables.BEAR in here:
        here.remove(tables.BEAR)
        here.append(tables.KEY)
        return (
            "The bear takes the food and runs away with it.  He left something\n"
            "behind."
        )

    before = current_score(world, state)
    here.append(obj_id)
    if obj_id == tables.WEIGHT and state.current_room == tables.MAZE_BUTTON_ROOM:
        return "A passageway opens."
    return "Done." + _report_score(world, state, before)


def _cmd_drop(world: World, state: GameState, args: list[str]) -> str:
    word = first_word(args)
    if word is None:
        return NO_OBJECT
    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return UNKNOWN_OBJECT
    if not state.holds(obj_id):
        return NOT_HELD
    if state.in_bus:
        return "You can't drop anything while on the bus."
    return drop_object(world, state, obj_id)


def _into_treasure_room(world: World, state: GameState, obj_id: int) -> str:
    before = regular_score(world, state)
    state.inventory.remove(obj_id)
    state.contents(tables.TREASURE_ROOM).append(obj_id)
    text = "You hear it slide down the chute and off into the distance."
    if regular_score(world, state) != before:
        text += "\n" + score_text(world, state)
    return text


def _put_computer(world: World, state: GameState, obj_id: int) -> str | None:
    if obj_id != tables.CPU or state.current_room != tables.COMPUTER_ROOM:
        return None
    state.inventory.remove(obj_id)
    state.computer_on = True
    return (
        "As you put the CPU board in the computer, it immediately springs to life.\n"
        "The lights start flashing, and the fans seem to startup."
    )


def _put_button(world: World, state: GameState, obj_id: int) -> str | None:
    if obj_id != tables.WEIGHT:
        return None
    return drop_object(world, state, obj_id)


def _put_mail_drop(world: World, state: GameState, obj_id: int) -> str:
    if state.nomail:
        return "The mail drop is locked."
    return _into_treasure_room(world, state, obj_id)


def _put_box(world: World, state: GameState, obj_id: int) -> str | None:
    if obj_id != tables.KEY:
        return None
    state.inventory.remove(obj_id)
    state.contents().remove(tables.BOX)
    state.contents(tables.COMPUTER_ROOM).append(tables.KEY)
    state.key_level += 1
    return (
        "As you drop the key, the box begins to shake.  Finally it explodes\n"
        "with a bang.  The key seems to have vanished!"
    )


def _put_pc(world: World, state: GameState, obj_id: int) -> str | None:
    if obj_id != tables.FLOPPY:
        return None
    state.inventory.remove(obj_id)
    state.floppy_inserted = True
    return "You put the floppy disk in the drive."


def _put_urinal(world: World, state: GameState, obj_id: int) -> str:
    state.inventory.remove(obj_id)
    state.contents(tables.URINAL_ROOM).append(obj_id)
    return "You hear it plop down in some water below."


_PUT_HANDLERS: dict[int, Callable] = {
    tables.COMPUTER: _put_computer,
    tables.BUTTON: _put_button,
    tables.CHUTE: _into_treasure_room,
    tables.DISPOSAL: _into_treasure_room,
    tables.MAIL_DROP: _put_mail_drop,
    tables.BOX: _put_box,
    tables.PC: _put_pc,
    tables.URINAL: _put_urinal,
}


def _put_in_jar(world: World, state: GameState, obj_id: int) -> str:
    if not (state.holds(tables.JAR) or tables.JAR in state.contents()):
        return NOT_HERE
    if obj_id not in tables.JAR_WHITELIST:
        return "That will not fit in the jar."
    state.inventory.remove(obj_id)
    state.jar.append(obj_id)
    return "Done."


def _cmd_put(world: World, state: GameState, args: list[str]) -> str:
    """Handle PUT <object> [in|on] <object>."""
    words = meaningful(args)
    if not words:
        return NO_OBJECT
    obj_id = resolve_object(world, state, words[0])
    if obj_id is None:
        return UNKNOWN_OBJECT
    rest = words[1:]
    if rest and rest[0] in PREPOSITIONS:
        rest = rest[1:]
    if not rest:
        return "You must supply an indirect object."
    target = resolve_object(world, state, rest[0])
    if target is None:
        return "I don't know what that indirect object is."
    if not state.holds(obj_id):
        return NOT_HELD

    if target == tables.JAR:
        return _put_in_jar(world, state, obj_id)
    if not is_present(state, target):
        return NOT_HERE
    handler = _PUT_HANDLERS.get(target)
    result = handler(world, state, obj_id) if handler else None
    return result or (
        "I don't know how to combine those objects.  Perhaps you should\n"
        "just try dropping it."
    )


def _cmd_dig(world: World, state: GameState, args: list[str]) -> str:
    if state.in_bus:
        return "You can't dig while on the bus."
    if not state.holds(tables.SHOVEL):
        return "You have nothing with which to dig."
    found = state.diggables.pop(state.current_room, [])
    if not found:
        return "Digging here reveals nothing."
    state.contents().extend(found)
    return "I think you found something."


def _cmd_climb(world: World, state: GameState, args: list[str]) -> str:
    obj_id = resolve_object(world, state, first_word(args))
    if obj_id is None:
        return NO_OBJECT if not args else UNKNOWN_OBJECT
    if not is_present(state, obj_id):
        return NOT_HERE
    if obj_id != tables.TREE:
        return "You can't climb that."
    return (
        "You manage to get about two feet up the tree and fall back down.  You\n"
        "notice that the tree is very unsteady."
    )


def _cmd_shake(world: World, state: GameState, args: list[str]) -> str:
    word = first_word(args)
    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return NO_OBJECT if word is None else UNKNOWN_OBJECT
    if state.holds(obj_id):
        return f"Shaking the {word} seems to have no effect."
    if not is_present(state, obj_id):
        return NOT_HERE
    if obj_id == tables.TREE:
        return die(
            world,
            state,
            "You begin to shake a tree, and notice a coconut begin to fall from the\n"
            "air.  As you try to get your hand up to block it, you feel the impact\n"
            "as it lands on your head.",
        )
    if obj_id == tables.BEAR:
        return die(
            world,
            state,
            "As you go up to the bear, it removes your head and places it on the\n"
            "ground.",
        )
    if object_kind(obj_id) is ObjectKind.PORTABLE:
        return NOT_HELD
    return "You can't shake that."


def _cmd_eat(world: World, state: GameState, args: list[str]) -> str:
    word = first_word(args)
    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return NO_OBJECT if word is None else UNKNOWN_OBJECT
    if not state.holds(obj_id):
        return NOT_HELD
    state.inventory.remove(obj_id)
    if obj_id == tables.FOOD:
        return "That tasted horrible."
    return die(
        world,
        state,
        f"You forcefully shove the {word} down your throat, and start choking.",
    )


def _cmd_press(world: World, state: GameState, args: list[str]) -> str:
    word = first_word(args)
    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return NO_OBJECT if word is None else UNKNOWN_OBJECT
    if not is_present(state, obj_id):
        return NOT_HERE
    if obj_id == tables.BUTTON:
        return (
            "As you press the button, you notice a passageway open up, but\n"
            "as you release it, the passageway closes."
        )
    if obj_id == tables.SWITCH:
        state.black = not state.black
        position = "on" if state.black else "off"
        return f"The button is now in the {position} position."
    return "You can't push that."


def _cmd_turn(world: World, state: GameState, args: list[str]) -> str:
    """Turn the sauna dial; the fourth notch is fatal."""
    words = meaningful(args)
    obj_id = resolve_object(world, state, words[0] if words else None)
    if obj_id is None:
        return NO_OBJECT if not words else UNKNOWN_OBJECT
    if not is_present(state, obj_id):
        return NOT_HERE
    if obj_id != tables.DIAL:
        return "You can't turn that."

    direction = words[1] if len(words) > 1 else None
    if direction in ("clockwise", "cw", "right"):
        state.sauna_level += 1
    elif direction in ("counterclockwise", "anticlockwise", "ccw", "left"):
        if state.sauna_level == 0:
            return "The dial will not turn further in that direction."
        state.sauna_level -= 1
    else:
        return "You must indicate clockwise or counterclockwise."

    if state.sauna_level >= 4:
        return die(
            world,
            state,
            "As the dial clicks into place the temperature soars, and you are\n"
            "burned to a crisp.",
        )
    lines = [SAUNA_TEXTS[state.sauna_level]]
    lines.extend(melt_in_sauna(world, state))
    return "\n".join(lines)


def _cmd_swim(world: World, state: GameState, args: list[str]) -> str:
    if state.current_room not in (tables.LAKE_NORTH, tables.LAKE_SOUTH):
        return "I don't see any water here."
    return swim_across(world, state)


def _cmd_sleep(world: World, state: GameState, args: list[str]) -> str:
    if state.current_room != tables.BEDROOM:
        return "You try to go to sleep while standing up, but can't seem to do it."
    state.need_to_pee = True
    return (
        "As soon as you start to doze off you begin dreaming.  You see images of\n"
        "workers digging caves, slaving in the humid heat.  Then you see yourself\n"
        "as one of these workers.  While no one is looking, you leave the group\n"
        "and walk down a long east/west passage.  At its west end, next to a\n"
        "hole in the ground, you dig until you hit a hard object.  You find a\n"
        "treasure, bury it back, and leave.\n"
        "You wake up, and feel the need to use the bathroom."
    )


def _cmd_piss(world: World, state: GameState, args: list[str]) -> str:
    if state.current_room != tables.BATHROOM:
        return "You can't do that here, don't even bother trying."
    if not state.need_to_pee:
        return "I'm afraid you don't have to go now."
    state.need_to_pee = False
    urinal = state.contents(tables.URINAL_ROOM)
    if tables.URINE not in urinal:
        urinal.append(tables.URINE)
    return "That was refreshing."


def _cmd_flush(world: World, state: GameState, args: list[str]) -> str:
    if state.current_room != tables.BATHROOM:
        return "I see nothing to flush."
    before = regular_score(world, state)
    urinal = state.contents(tables.URINAL_ROOM)
    state.contents(tables.TREASURE_ROOM).extend(urinal)
    urinal.clear()
    text = "Whoooosh!!"
    if regular_score(world, state) != before:
        text += "\n" + score_text(world, state)
    return text


def _break_cable(world: World, state: GameState) -> str:
    """Cut gamma's link: the player snaps back to pokey's console."""
    kept = [obj for obj in state.inventory if obj == tables.KEY]
    state.contents(tables.GAMMA_ROOM).extend(
        obj for obj in state.inventory if obj != tables.KEY
    )
    state.inventory = kept
    state.ethernet = False
    state.current_room = tables.COMPUTER_ROOM
    text = (
        "As you break the ethernet cable, everything starts to blur.  You collapse\n"
        "for a moment, then straighten yourself up.\n"
        "Connection closed."
    )
    console = enter_console(world, state)
    return text + ("\n" + console if console else "")


def _cmd_break(world: World, state: GameState, args: list[str]) -> str:
    """Swing the axe at something."""
    word = first_word(args)
    if word is None:
        return NO_OBJECT
    if not state.holds(tables.AXE):
        return "You have nothing you can use to break things."
    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return UNKNOWN_OBJECT
    if state.holds(obj_id):
        return die(
            world,
            state,
            "You take the object in your hand and swing the axe.  Unfortunately, you\n"
            "miss the object and slice off your hand.  You bleed to death.",
        )
    if obj_id == tables.CABLE and is_present(state, obj_id):
        return _break_cable(world, state)
    if obj_id in state.scenery_here() or (obj_id == tables.BUS and state.in_bus):
        state.inventory.remove(tables.AXE)
        return "Your axe shatters into a million pieces."
    if obj_id in state.contents():
        state.contents().remove(obj_id)
        if obj_id == tables.JAR:
            state.jar.clear()
        return f"You take the axe and break the {word} into tiny pieces."
    return NOT_HERE


def _cmd_drive(world: World, state: GameState, args: list[str]) -> str:
    if state.in_bus:
        return "To drive while you are in the bus, just give a direction."
    return "You cannot drive when you aren't in a vehicle."


def _cmd_feed(world: World, state: GameState, args: list[str]) -> str:
    word = first_word(args)
    obj_id = resolve_object(world, state, word)
    if obj_id is None:
        return NO_OBJECT if word is None else UNKNOWN_OBJECT
    if not is_present(state, obj_id):
        return NOT_HERE
    if obj_id != tables.BEAR:
        return "You can't feed that."
    if not state.holds(tables.FOOD):
        return "You have nothing with which to feed it."
    return drop_object(world, state, tables.FOOD)


def _cmd_answer(world: World, state: GameState, args: list[str]) -> str:
    """Answer the open endgame question and step through the question room."""
    if state.pending_question is None:
        return "I have not asked you a question."
    word = first_word(args)
    if word is None:
        return "You must give the answer on the same line."
    if not check_answer(state, word):
        return "That answer is incorrect."
    step = 1 if state.last_dir is Direction.N else -1
    return "Correct.\n" + go_to(world, state, state.current_room + step)


def _cmd_type(world: World, state: GameState, args: list[str]) -> str:
    if state.current_room != tables.COMPUTER_ROOM:
        return "There is nothing here on which you could type."
    if not state.computer_on:
        return "You type on the keyboard, but your characters do not even echo."
    return enter_console(world, state)


def _cmd_reset(world: World, state: GameState, args: list[str]) -> str:
    if state.current_room != tables.PC_AREA:
        return "There is nothing here to reset."
    if not state.floppy_inserted:
        return "Non-system disk or disk error."
    return boot(world, state)


def _cmd_verbose(world: World, state: GameState, args: list[str]) -> str:
    state.verbose = not state.verbose
    return "Verbose mode on." if state.verbose else "Verbose mode off."


def _walker(direction: Direction) -> Callable:
    """Return a handler that moves in a fixed direction."""
    def handler(world: World, state: GameState, args: list[str]) -> str:
        return move(world, state, direction)
    return handler


DUNGEON_HANDLERS: dict[Verb, Callable] = {
    **{verb: _walker(direction) for verb, direction in MOVEMENT.items()},
    Verb.GO: _cmd_go,
    Verb.LOOK: _cmd_look,
    Verb.INVENTORY: _cmd_inventory,
    Verb.TAKE: _cmd_take,
    Verb.DROP: _cmd_drop,
    Verb.PUT: _cmd_put,
    Verb.DIG: _cmd_dig,
    Verb.CLIMB: _cmd_climb,
    Verb.SHAKE: _cmd_shake,
    Verb.EAT: _cmd_eat,
    Verb.PRESS: _cmd_press,
    Verb.TURN: _cmd_turn,
    Verb.SWIM: _cmd_swim,
    Verb.SLEEP: _cmd_sleep,
    Verb.PISS: _cmd_piss,
    Verb.FLUSH: _cmd_flush,
    Verb.BREAK: _cmd_break,
    Verb.DRIVE: _cmd_drive,
    Verb.FEED: _cmd_feed,
    Verb.ANSWER: _cmd_answer,
    Verb.TYPE: _cmd_type,
    Verb.RESET: _cmd_reset,
    Verb.VERBOSE: _cmd_verbose,
    Verb.SCORE: _cmd_score,
    Verb.HELP: _cmd_help,
    Verb.QUIT: _cmd_quit,
}
