"""Tests for movement, darkness and special transitions."""

import pytest

from dunnet.engine import tables
from dunnet.engine.describe import DARK_TEXT
from dunnet.engine.movement import GRUE_DEATH, NO_EXIT, enter_combination, move
from dunnet.engine.state import GameState, Pending, new_game_state
from dunnet.engine.world import Direction, ExitKind, World


def test_exit_table_is_followed(world: World):
    """Every concrete exit leads to its target room."""
    for room in world.rooms.values():
        for direction in Direction:
            exit_ = room.exit(direction)
            if exit_.kind is not ExitKind.ROOM:
                continue
            state = new_game_state(world)
            state.current_room = room.number
            move(world, state, direction)
            assert state.current_room == exit_.target, (room.number, direction)
            assert not state.dead


def test_blocked_exit(world: World, state: GameState):
    """Moving into a wall leaves the player in place."""
    assert move(world, state, Direction.N) == NO_EXIT
    assert state.current_room == tables.START_ROOM


def test_blocked_exit_keeps_last_direction(world: World, state: GameState):
    """A blocked move does not change the direction of travel."""
    state.last_dir = Direction.E
    move(world, state, Direction.N)
    assert state.last_dir is Direction.E


def test_move_describes_new_room(world: World, state: GameState):
    """Moving describes the room arrived in."""
    text = move(world, state, Direction.E)
    assert text.startswith("E/W Dirt road")
    assert state.current_room == tables.EW_DIRT_ROAD


def test_short_description_on_return(world: World, state: GameState):
    """Returning to a visited room gives the short description."""
    move(world, state, Direction.E)
    move(world, state, Direction.W)
    text = move(world, state, Direction.E)
    assert text == "E/W Dirt road"


@pytest.mark.parametrize("direction", list(Direction))
def test_darkness_kills(world: World, state: GameState, direction: Direction):
    """Moving in the dark is fatal whichever way you go."""
    state.current_room = tables.MAZE_FIRST
    state.inventory = []
    text = move(world, state, direction)
    assert GRUE_DEATH in text
    assert state.dead
    assert state.current_room == tables.MAZE_FIRST


def test_dropped_lamp_still_lights(world: World, state: GameState):
    """A lamp lying in the room still lights it."""
    state.current_room = tables.MAZE_FIRST
    state.inventory = []
    state.contents().append(tables.LAMP)
    move(world, state, Direction.N)
    assert not state.dead


def test_arriving_in_the_dark(world: World, state: GameState):
    """Entering an unlit room shows the darkness text."""
    state.current_room = tables.NORTHBOUND_HALL
    state.inventory = []
    assert move(world, state, Direction.N) == DARK_TEXT
    assert not state.dead


def test_building_door_needs_key(world: World, state: GameState):
    """The building door opens only with the key."""
    state.current_room = tables.BUILDING_FRONT
    assert "key" in move(world, state, Direction.NE)
    state.inventory.append(tables.KEY)
    move(world, state, Direction.IN)
    assert state.current_room == tables.OLD_HALLWAY


def test_bear_blocks_the_way(world: World, state: GameState):
    """Walking past the bear is fatal."""
    state.current_room = tables.BEAR_HANGOUT
    move(world, state, Direction.SE)
    assert state.dead


def test_swimming_without_preserver(world: World, state: GameState):
    """Swimming without the life preserver drowns the player."""
    state.current_room = tables.LAKE_NORTH
    move(world, state, Direction.S)
    assert state.dead


def test_swimming_with_preserver(world: World, state: GameState):
    """The life preserver carries the player across the lake."""
    state.current_room = tables.LAKE_NORTH
    state.inventory.append(tables.LIFE_PRESERVER)
    move(world, state, Direction.S)
    assert state.current_room == tables.LAKE_SOUTH


def test_cave_in(world: World, state: GameState):
    """The cave entrance seals behind the player."""
    state.current_room = tables.CAVE_ENTRANCE
    text = move(world, state, Direction.S)
    assert "seal the entrance" in text
    assert state.current_room == tables.MISTY_ROOM


def test_combination_door(world: World, state: GameState):
    """The right combination opens the door."""
    state.current_room = tables.NORTH_CAVE_PASSAGE
    move(world, state, Direction.W)
    assert state.pending is Pending.COMBINATION
    assert state.prompt == "Enter it here:"
    enter_combination(world, state, state.combination)
    assert state.pending is Pending.NONE
    assert state.current_room == tables.GAMMA_ROOM


def test_wrong_combination(world: World, state: GameState):
    """A wrong combination keeps the door shut."""
    state.current_room = tables.NORTH_CAVE_PASSAGE
    move(world, state, Direction.W)
    text = enter_combination(world, state, "000")
    assert text == "Sorry, that combination is incorrect."
    assert state.current_room == tables.NORTH_CAVE_PASSAGE


def test_maze_passage_needs_weight(world: World, state: GameState):
    """The maze passage stays shut without weight on the button."""
    state.current_room = tables.MAZE_BUTTON_ROOM
    assert move(world, state, Direction.NW) == NO_EXIT
    state.contents().append(tables.WEIGHT)
    move(world, state, Direction.NW)
    assert state.current_room == tables.MAZE_FIRST


def test_boarding_the_bus(world: World, state: GameState):
    """Boarding the bus needs a license and locks the mail drop."""
    state.current_room = tables.FIFTH_SYCAMORE
    assert "license" in move(world, state, Direction.IN)
    state.inventory.append(tables.LICENSE)
    move(world, state, Direction.IN)
    assert state.in_bus
    assert state.nomail


def test_bus_drives_along(world: World, state: GameState):
    """The bus moves with the player."""
    state.current_room = tables.FIFTH_SYCAMORE
    state.inventory.append(tables.LICENSE)
    move(world, state, Direction.IN)
    text = move(world, state, Direction.S)
    assert text.startswith("The bus lurches ahead")
    assert "You are on the bus." in text
    assert tables.BUS in state.contents()
    assert tables.BUS not in state.contents(tables.FIFTH_SYCAMORE)


def test_bus_stays_in_town(world: World, state: GameState):
    """The bus refuses to leave town."""
    state.current_room = tables.POST_OFFICE
    state.contents().append(tables.BUS)
    state.in_bus = True
    assert move(world, state, Direction.E) == "The bus cannot go this way."
    assert state.current_room == tables.POST_OFFICE


def test_gate_opens_for_the_bus(world: World, state: GameState):
    """The museum gate opens only for the bus."""
    state.current_room = tables.MAIN_MAPLE
    assert move(world, state, Direction.NW) == "The gate will not open."
    state.contents().append(tables.BUS)
    state.in_bus = True
    move(world, state, Direction.NW)
    assert state.current_room == tables.MUSEUM_ENTRANCE
    assert tables.BUS in state.contents()


def test_cliff(world: World, state: GameState):
    """Walking east off Fifth and Oak is fatal."""
    state.current_room = tables.FIFTH_OAK
    move(world, state, Direction.E)
    assert state.dead


def test_hole_under_fourth_and_vermont(world: World, state: GameState):
    """With the hole open, walking north drops into Vermont station."""
    state.current_room = 76
    state.hole_open = True
    text = move(world, state, Direction.N)
    assert "fall through the hole" in text
    assert state.current_room == tables.VERMONT_STATION


def test_subway(world: World, state: GameState):
    """The train runs from Vermont station to the museum."""
    state.current_room = tables.VERMONT_STATION
    move(world, state, Direction.IN)
    assert state.current_room == tables.MUSEUM_STATION
