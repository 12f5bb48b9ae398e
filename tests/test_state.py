"""Tests for game state creation."""

import random

from dunnet.engine import tables
from dunnet.engine.state import GameState, Mode, Pending, new_game_state
from dunnet.engine.world import World


def test_new_game_state(state: GameState):
    """A fresh game starts at the dead end holding only the lamp."""
    assert state.current_room == tables.START_ROOM
    assert state.inventory == [tables.LAMP]
    assert state.mode is Mode.DUNGEON
    assert state.pending is Pending.NONE
    assert not state.dead
    assert state.jar == []


def test_objects_placed(state: GameState):
    """Objects and scenery start where they belong."""
    assert tables.SHOVEL in state.contents(tables.START_ROOM)
    assert tables.BEAR in state.contents(tables.BEAR_HANGOUT)
    assert tables.COMPUTER in state.scenery[tables.COMPUTER_ROOM]


def test_egg_and_combination(state: GameState):
    """The egg sits on a town corner and the combination has three digits."""
    low, high = tables.EGG_ROOMS
    assert low <= state.egg_room <= high
    assert tables.EGG in state.contents(state.egg_room)
    assert len(state.combination) == 3
    assert 100 <= int(state.combination) <= 999


def test_seeded_games_match(world: World):
    """The same seed hides the egg and picks the combination the same way."""
    first = new_game_state(world, random.Random(42))
    second = new_game_state(world, random.Random(42))
    assert first.egg_room == second.egg_room
    assert first.combination == second.combination


def test_state_is_independent_of_world(world: World):
    """Mutating one game never leaks into the world or another game."""
    first = new_game_state(world, random.Random(1))
    second = new_game_state(world, random.Random(1))
    first.contents(tables.START_ROOM).remove(tables.SHOVEL)
    assert tables.SHOVEL in second.contents(tables.START_ROOM)
    assert tables.SHOVEL in world.initial_contents[tables.START_ROOM]


def test_prompt_follows_mode(state: GameState):
    """The prompt follows the mode and pending prompt."""
    assert state.prompt == ">"
    state.mode = Mode.SHELL
    assert state.prompt == "$"
    state.mode = Mode.DOS
    assert state.prompt == "A>"
    state.pending = Pending.FTP_COMMAND
    assert state.prompt == "ftp>"
