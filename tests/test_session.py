"""Tests for the database-backed session layer."""

import zlib

from sqlmodel import Session, select

from dunnet.engine import tables
from dunnet.engine.persistence import dump_state
from dunnet.engine.world import World
from dunnet.models import Player, SavedGame, SaveSlot
from dunnet.session import DunnetSession, SqlSaveStore


def test_new_session(db_session: Session, test_player: Player, world: World):
    """A new player starts in the dead end."""
    game = DunnetSession.load_or_create(db_session, test_player, world, seed=5)
    assert game.saved_game is None
    assert game.last_output.startswith("Dead end")
    assert game.prompt == ">"


def test_autosave_and_resume(db_session: Session, test_player: Player, world: World):
    """An autosaved game resumes where it left off."""
    game = DunnetSession.load_or_create(db_session, test_player, world, seed=5)
    reply = game.process_command("take shovel")
    assert reply.text == "Taken."
    game.save()

    resumed = DunnetSession.load_or_create(db_session, test_player, world, seed=5)
    assert resumed.state.inventory == [tables.LAMP, tables.SHOVEL]
    assert resumed.last_output == "Taken."
    assert resumed.saved_game.turns == 1


def test_save_records_score_and_death(
    db_session: Session, test_player: Player, world: World
):
    """The autosave row tracks score and death."""
    game = DunnetSession.load_or_create(db_session, test_player, world)
    game.state.contents(tables.TREASURE_ROOM).append(tables.GOLD)
    game.process_command("quit")
    game.save()
    row = db_session.exec(select(SavedGame)).one()
    assert row.score == 10
    assert row.is_finished


def test_unreadable_autosave_starts_over(
    db_session: Session, test_player: Player, world: World
):
    """An unreadable autosave is replaced by a new game."""
    db_session.add(SavedGame(player_id=test_player.id, state_blob=b"garbage"))
    db_session.commit()
    game = DunnetSession.load_or_create(db_session, test_player, world)
    assert game.state.current_room == tables.START_ROOM
    game.save()
    assert len(db_session.exec(select(SavedGame)).all()) == 1


def test_autosave_of_a_missing_class_starts_over(
    db_session: Session, test_player: Player, world: World
):
    """An autosave naming a missing class is replaced by a new game."""
    blob = zlib.compress(b"cno_such_module\nThing\n.")
    db_session.add(SavedGame(player_id=test_player.id, state_blob=blob))
    db_session.commit()
    game = DunnetSession.load_or_create(db_session, test_player, world)
    assert game.state.current_room == tables.START_ROOM
    assert game.prompt == ">"


def test_reset(db_session: Session, test_player: Player, world: World):
    """Reset drops the autosave row and starts a new game."""
    game = DunnetSession.load_or_create(db_session, test_player, world)
    game.process_command("take shovel")
    game.save()
    game.reset()
    assert game.saved_game is None
    assert game.state.inventory == [tables.LAMP]
    assert db_session.exec(select(SavedGame)).first() is None


def test_sql_save_store_upserts(db_session: Session, test_player: Player):
    """Writing a slot twice keeps one row."""
    store = SqlSaveStore(db_session, test_player.id)
    assert store.read("x") is None
    store.write("x", b"first")
    store.write("x", b"second")
    assert store.read("x") == b"second"
    assert len(db_session.exec(select(SaveSlot)).all()) == 1


def test_named_saves_survive_reset(
    db_session: Session, test_player: Player, world: World
):
    """Named saves outlive a reset."""
    game = DunnetSession.load_or_create(db_session, test_player, world)
    game.process_command("take shovel")
    assert game.process_command("save keep").text == "Done."
    game.reset()
    game.process_command("restore keep")
    assert game.state.inventory == [tables.LAMP, tables.SHOVEL]


def test_slots_are_per_player(db_session: Session, test_player: Player, state):
    """Players cannot read each other's slots."""
    other = Player(fingerprint="someone-else")
    db_session.add(other)
    db_session.commit()
    db_session.refresh(other)
    SqlSaveStore(db_session, test_player.id).write("x", dump_state(state))
    assert SqlSaveStore(db_session, other.id).read("x") is None
