"""Session layer bridging the interpreter and the database."""

import datetime as dt

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .engine.endgame import current_score
from .engine.interpreter import Interpreter, Reply
from .engine.persistence import PersistenceError, dump_state, load_state
from .engine.state import GameState
from .engine.world import World
from .logging import get_logger
from .models import Player, SavedGame, SaveSlot

logger = get_logger(__name__)


class SqlSaveStore:
    """Named save slots stored in the ``SaveSlot`` table."""

    def __init__(self, db_session: Session, player_id: int):
        self.db_session = db_session
        self.player_id = player_id

    def _slot(self, name: str) -> SaveSlot | None:
        statement = select(SaveSlot).where(
            SaveSlot.player_id == self.player_id, SaveSlot.name == name
        )
        return self.db_session.exec(statement).first()

    def write(self, name: str, blob: bytes) -> None:
        try:
            slot = self._slot(name)
            if slot is None:
                slot = SaveSlot(player_id=self.player_id, name=name, state_blob=blob)
            else:
                slot.state_blob = blob
                slot.saved_at = dt.datetime.now(dt.UTC)
            self.db_session.add(slot)
            self.db_session.commit()
        except SQLAlchemyError as exc:
            self.db_session.rollback()
            raise PersistenceError(f"could not write slot {name!r}") from exc

    def read(self, name: str) -> bytes | None:
        try:
            slot = self._slot(name)
        except SQLAlchemyError as exc:
            raise PersistenceError(f"could not read slot {name!r}") from exc
        return slot.state_blob if slot else None


class DunnetSession:
    """Wraps a Player, its autosave row and a live Interpreter."""

    def __init__(
        self,
        db_session: Session,
        player: Player,
        saved_game: SavedGame | None,
        interpreter: Interpreter,
        last_output: str = "",
    ):
        self.db_session = db_session
        self.player = player
        self.saved_game = saved_game
        self.interpreter = interpreter
        self.last_output = last_output

    @property
    def state(self) -> GameState:
        return self.interpreter.state

    @property
    def world(self) -> World:
        return self.interpreter.world

    @property
    def prompt(self) -> str:
        return self.state.prompt

    @classmethod
    def load_or_create(
        cls,
        db_session: Session,
        player: Player,
        world: World,
        seed: int | None = None,
    ) -> "DunnetSession":
        """Resume the player's autosave, or start a fresh game."""
        store = SqlSaveStore(db_session, player.id)
        saved_game = db_session.exec(
            select(SavedGame).where(SavedGame.player_id == player.id)
        ).first()

        if saved_game is not None:
            try:
                state = load_state(saved_game.state_blob)
            except PersistenceError as exc:
                logger.warning(
                    "autosave_unreadable",
                    fingerprint=player.fingerprint,
                    error=str(exc),
                )
            else:
                logger.debug(
                    "game_loaded",
                    fingerprint=player.fingerprint,
                    turns=saved_game.turns,
                )
                interpreter = Interpreter(world, store=store, state=state, seed=seed)
                return cls(db_session, player, saved_game, interpreter, saved_game.last_output)

        interpreter = Interpreter(world, store=store, seed=seed)
        opening = interpreter.start()
        logger.info("new_game_started", fingerprint=player.fingerprint)
        return cls(db_session, player, saved_game, interpreter, opening.text)

    def process_command(self, raw_input: str) -> Reply:
        """Feed one line to the interpreter and remember its output."""
        reply = self.interpreter.feed(raw_input)
        self.last_output = reply.text
        return reply

    def save(self) -> None:
        """Write the live state back to the autosave row."""
        now = dt.datetime.now(dt.UTC)
        blob = dump_state(self.state)
        score = current_score(self.world, self.state)

        if self.saved_game is None:
            self.saved_game = SavedGame(player_id=self.player.id, state_blob=blob, started_at=now)
        self.saved_game.state_blob = blob
        self.saved_game.last_output = self.last_output
        self.saved_game.turns = self.state.command_count
        self.saved_game.score = score
        self.saved_game.is_finished = self.state.dead
        self.saved_game.last_played = now

        self.db_session.add(self.saved_game)
        self.db_session.commit()
        logger.debug(
            "autosaved",
            fingerprint=self.player.fingerprint,
            turns=self.state.command_count,
            score=score,
        )

    def reset(self) -> None:
        """Throw away the live game; named save slots are kept."""
        self.last_output = self.interpreter.reset().text
        if self.saved_game is not None:
            self.db_session.delete(self.saved_game)
            self.db_session.commit()
            self.saved_game = None
        logger.info("game_reset", fingerprint=self.player.fingerprint)
