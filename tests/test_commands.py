"""Tests for dungeon verb handlers."""

from dunnet.engine import tables
from dunnet.engine.commands import (
    DUNGEON_HANDLERS,
    NOT_HERE,
    UNKNOWN_OBJECT,
    resolve_object,
)
from dunnet.engine.endgame import regular_score, score_text
from dunnet.engine.parser import tokenize
from dunnet.engine.state import GameState
from dunnet.engine.verbs import resolve_verb
from dunnet.engine.world import ObjectKind, World, object_kind


def _do(world: World, state: GameState, line: str) -> str:
    words = tokenize(line)
    return DUNGEON_HANDLERS[resolve_verb(words[0])](world, state, words[1:])


def test_look(world: World, state: GameState):
    """LOOK gives the full description even for a visited room."""
    state.visited.add(tables.START_ROOM)
    result = _do(world, state, "look")
    assert result.startswith("Dead end\nYou are at a dead end")
    assert "There is a shovel here." in result


def test_examine(world: World, state: GameState):
    """Examine describes objects here and rejects absent or unknown ones."""
    assert "$19.99" in _do(world, state, "examine shovel")
    assert _do(world, state, "x key") == NOT_HERE
    assert _do(world, state, "x xyzzy") == UNKNOWN_OBJECT


def test_take_shovel_twice(world: World, state: GameState):
    """A second take finds nothing left to pick up."""
    assert _do(world, state, "take shovel") == "Taken."
    assert state.inventory == [tables.LAMP, tables.SHOVEL]
    assert _do(world, state, "take shovel") == NOT_HERE
    assert state.inventory == [tables.LAMP, tables.SHOVEL]


def test_take_fixed_object(world: World, state: GameState):
    """Fixed objects stay where they are."""
    assert _do(world, state, "take tree") == "You cannot take that."


def test_take_too_heavy(world: World, state: GameState):
    """Taking refuses to go past the carry limit."""
    state.current_room = tables.WEIGHT_ROOM
    assert _do(world, state, "take weight") == "Taken."
    assert _do(world, state, "take preserver") == "Your load would be too heavy."
    assert tables.LIFE_PRESERVER in state.contents()
    assert tables.LIFE_PRESERVER not in state.inventory


def test_capacity_never_exceeded(world: World, state: GameState):
    """Taking every portable object in turn never breaks the carry limit."""
    words = {obj: word for word, obj in tables.OBJECT_NAMES.items()}
    portables = [obj for obj in world.items if obj != tables.LAMP]
    state.contents().extend(portables)

    def carried() -> int:
        return sum(world.items[obj].weight for obj in state.inventory + state.jar)

    for obj in portables:
        before = list(state.inventory)
        result = _do(world, state, f"take {words[obj]}")
        assert carried() <= tables.CARRY_LIMIT
        if result != "Taken.":
            assert state.inventory == before


def test_take_all(world: World, state: GameState):
    """Take all reports the outcome for each object."""
    state.current_room = tables.WEIGHT_ROOM
    result = _do(world, state, "take all")
    assert "A weight: Taken." in result
    assert "A life preserver: Your load would be too heavy." in result


def test_drop(world: World, state: GameState):
    """Dropped objects land in the current room."""
    _do(world, state, "take shovel")
    assert _do(world, state, "drop shovel") == "Done."
    assert tables.SHOVEL in state.contents()
    assert _do(world, state, "drop shovel") == "You don't have that."


def test_drop_treasure_scores(world: World, state: GameState):
    """Treasures dropped in the treasure room count toward the score."""
    state.current_room = tables.TREASURE_ROOM
    state.inventory.append(tables.GOLD)
    result = _do(world, state, "drop gold")
    assert result == "Done.\nYou have scored 10 out of a possible 90 points."


def test_put_in_chute(world: World, state: GameState):
    """Treasure put down the chute lands in the treasure room and scores."""
    state.current_room = tables.CAVE_ENTRANCE
    state.inventory.append(tables.GOLD)
    result = _do(world, state, "put gold in chute")
    assert result.startswith("You hear it slide down the chute")
    assert tables.GOLD in state.contents(tables.TREASURE_ROOM)
    assert regular_score(world, state) == 10


def test_score_is_pure(world: World, state: GameState):
    """Asking for the score twice gives the same answer."""
    state.contents(tables.TREASURE_ROOM).append(tables.RUBY)
    first = _do(world, state, "score")
    assert _do(world, state, "score") == first
    state.contents(tables.TREASURE_ROOM).append(tables.URINE)
    assert regular_score(world, state) == 0


def test_mail_drop(world: World, state: GameState):
    """The mail drop delivers treasures until it is locked."""
    state.current_room = tables.POST_OFFICE
    state.inventory.extend([tables.GOLD, tables.SILVER])
    _do(world, state, "put gold in mail")
    assert tables.GOLD in state.contents(tables.TREASURE_ROOM)
    state.nomail = True
    assert _do(world, state, "put silver in mail") == "The mail drop is locked."
    assert tables.SILVER in state.inventory


def test_jar(world: World, state: GameState):
    """The jar takes small objects, shows in the inventory and gives them back."""
    state.current_room = tables.MARINE_LIFE
    _do(world, state, "take jar")
    state.inventory.append(tables.COINS)
    assert _do(world, state, "put coins in jar") == "Done."
    assert state.jar == [tables.COINS]
    assert _do(world, state, "put lamp in jar") == "That will not fit in the jar."
    assert "The jar contains:\n     Some valuable coins" in _do(world, state, "i")
    assert _do(world, state, "take coins") == "Taken."
    assert state.jar == []


def test_combine_fallback(world: World, state: GameState):
    """Putting an object into something unrelated gets the generic reply."""
    _do(world, state, "take shovel")
    assert _do(world, state, "put shovel in tree").startswith(
        "I don't know how to combine those objects."
    )


def test_dig(world: World, state: GameState):
    """Digging needs the shovel and finds the buried CPU once."""
    state.current_room = tables.FORK
    assert _do(world, state, "dig") == "You have nothing with which to dig."
    state.inventory.append(tables.SHOVEL)
    assert _do(world, state, "dig") == "I think you found something."
    assert tables.CPU in state.contents()
    assert _do(world, state, "dig") == "Digging here reveals nothing."


def test_feed_bear(world: World, state: GameState):
    """Fed, the bear runs off and leaves the key."""
    state.current_room = tables.BEAR_HANGOUT
    state.inventory.append(tables.FOOD)
    result = _do(world, state, "feed bear")
    assert "runs away" in result
    assert tables.BEAR not in state.contents()
    assert tables.KEY in state.contents()


def test_computer_and_console(world: World, state: GameState):
    """The computer stays dead until the CPU goes in."""
    state.current_room = tables.COMPUTER_ROOM
    assert "do not even echo" in _do(world, state, "type")
    state.inventory.append(tables.CPU)
    assert "springs to life" in _do(world, state, "put cpu in computer")
    assert state.computer_on
    assert tables.CPU not in state.inventory


def test_key_box(world: World, state: GameState):
    """The key blows up the box and ends up in the computer room."""
    state.current_room = tables.STAIR_LANDING
    state.inventory.append(tables.KEY)
    assert "explodes" in _do(world, state, "put key in box")
    assert state.key_level == 1
    assert tables.KEY in state.contents(tables.COMPUTER_ROOM)
    assert tables.BOX not in state.contents()


def test_weight_on_button(world: World, state: GameState):
    """Dropping the weight on the button opens a passage."""
    state.current_room = tables.MAZE_BUTTON_ROOM
    state.inventory.append(tables.WEIGHT)
    assert _do(world, state, "drop weight") == "A passageway opens."


def test_sauna_dial_kills_on_fourth_turn(world: World, state: GameState):
    """The fourth turn of the dial burns the player."""
    state.current_room = tables.SAUNA
    for _ in range(3):
        _do(world, state, "turn dial clockwise")
        assert not state.dead
    result = _do(world, state, "turn dial clockwise")
    assert "burned to a crisp" in result
    assert state.dead


def test_sauna_melts_statuette(world: World, state: GameState):
    """Heat turns the statuette into a diamond and melts the floppy."""
    state.current_room = tables.SAUNA
    state.inventory.extend([tables.RMS, tables.FLOPPY])
    _do(world, state, "turn dial clockwise")
    _do(world, state, "turn dial clockwise")
    result = _do(world, state, "turn dial clockwise")
    assert "beautiful diamond" in result
    assert tables.DIAMOND in state.inventory
    assert tables.FLOPPY not in state.inventory
    assert state.floppy_melted


def test_dial_direction_required(world: World, state: GameState):
    """Turning the dial needs a direction."""
    state.current_room = tables.SAUNA
    assert _do(world, state, "turn dial") == (
        "You must indicate clockwise or counterclockwise."
    )
    assert state.sauna_level == 0


def test_black_light_bone(world: World, state: GameState):
    """With the black light on, the bone shows its message."""
    state.current_room = tables.MAINTENANCE_ROOM
    _do(world, state, "press switch")
    assert state.black
    state.current_room = tables.MARINE_LIFE
    state.inventory.append(tables.BONE)
    assert "Fourth St. and Vermont" in _do(world, state, "examine bone")


def test_sleep_piss_flush(world: World, state: GameState):
    """Urine flushed into the treasure room voids the score."""
    state.contents(tables.TREASURE_ROOM).append(tables.GOLD)
    state.current_room = tables.BATHROOM
    assert _do(world, state, "piss") == "I'm afraid you don't have to go now."
    state.current_room = tables.BEDROOM
    assert "dreaming" in _do(world, state, "sleep")
    state.current_room = tables.BATHROOM
    assert _do(world, state, "piss") == "That was refreshing."
    result = _do(world, state, "flush")
    assert result == "Whoooosh!!\n" + score_text(world, state)
    assert regular_score(world, state) == 0


def test_break(world: World, state: GameState):
    """Breaking scenery needs the axe, which shatters."""
    assert _do(world, state, "break tree") == (
        "You have nothing you can use to break things."
    )
    state.inventory.append(tables.AXE)
    assert _do(world, state, "break tree") == "Your axe shatters into a million pieces."
    assert tables.AXE not in state.inventory


def test_break_room_object(world: World, state: GameState):
    """An object lying in the room is destroyed by the axe."""
    state.current_room = 6
    state.inventory.append(tables.AXE)
    assert "tiny pieces" in _do(world, state, "break food")
    assert tables.FOOD not in state.contents()


def test_break_held_object(world: World, state: GameState):
    """Breaking a held object with the axe is fatal."""
    state.inventory.extend([tables.AXE, tables.SHOVEL])
    assert "bleed to death" in _do(world, state, "break shovel")
    assert state.dead


def test_eat(world: World, state: GameState):
    """Food goes down; the lamp does not."""
    state.inventory.append(tables.FOOD)
    assert _do(world, state, "eat food") == "That tasted horrible."
    assert tables.FOOD not in state.inventory
    _do(world, state, "eat lamp")
    assert state.dead


def test_shake_tree(world: World, state: GameState):
    """Shaking the tree drops a fatal coconut."""
    assert "coconut" in _do(world, state, "shake tree")
    assert state.dead


def test_climb_tree(world: World, state: GameState):
    """Climbing the tree gets nowhere but is safe."""
    assert "two feet" in _do(world, state, "climb tree")
    assert not state.dead


def test_jar_explodes_at_fourth_and_vermont(world: World, state: GameState):
    """The jar bursts when carried into Fourth & Vermont."""
    state.current_room = tables.FOURTH_VERMONT
    state.inventory.append(tables.JAR)
    state.jar.extend([tables.NITRIC, tables.GLYCERINE])
    result = _do(world, state, "drop jar")
    assert "explodes" in result
    assert state.hole_open
    assert state.current_room == tables.VERMONT_STATION
    assert tables.JAR not in state.inventory


def test_verbose_toggles(world: World, state: GameState):
    """Verbose mode switches on and off."""
    assert _do(world, state, "verbose") == "Verbose mode on."
    assert state.verbose
    assert _do(world, state, "long") == "Verbose mode off."


def test_quit(world: World, state: GameState):
    """Quitting kills the player."""
    assert "You are dead." in _do(world, state, "quit")
    assert state.dead


def test_answer_without_question(world: World, state: GameState):
    """Answering outside a question room is refused."""
    assert _do(world, state, "answer foo") == "I have not asked you a question."


def test_help(world: World, state: GameState):
    """Help credits the author."""
    assert "Ron Schnell" in _do(world, state, "help")


def test_computer_means_pc_in_pc_area(world: World, state: GameState):
    """The word computer means the PC while in the PC area."""
    assert resolve_object(world, state, "computer") == tables.COMPUTER
    state.current_room = tables.PC_AREA
    assert resolve_object(world, state, "computer") == tables.PC
    assert object_kind(tables.PC) is ObjectKind.FIXED
