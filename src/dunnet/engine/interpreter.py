"""The line-in, lines-out interpreter that owns one game session."""

import random
from collections.abc import Callable
from dataclasses import dataclass

from ..logging import get_logger
from . import dos, shell
from .commands import DUNGEON_HANDLERS
from .describe import describe_room
from .dos import DOS_HANDLERS
from .movement import enter_combination
from .parser import first_word, tokenize
from .persistence import MemorySaveStore, PersistenceError, SaveStore, restore_game, save_game
from .shell import SHELL_HANDLERS
from .state import GameState, Mode, Pending, new_game_state
from .verbs import Verb, resolve_dos_verb, resolve_shell_verb, resolve_verb
from .world import World

logger = get_logger(__name__)

_PENDING_HANDLERS: dict[Pending, Callable] = {
    Pending.COMBINATION: enter_combination,
    Pending.LOGIN_USERNAME: shell.login_username,
    Pending.LOGIN_PASSWORD: shell.login_password,
    Pending.FTP_USERNAME: shell.ftp_username,
    Pending.FTP_PASSWORD: shell.ftp_password,
    Pending.FTP_COMMAND: shell.ftp_command,
    Pending.RLOGIN_PASSWORD: shell.rlogin_password,
    Pending.DOS_TIME: dos.set_time,
}

DEAD_TEXT = "You are dead.  You may 'restore <name>' a saved game or 'restart'."


@dataclass
class Reply:
    """Output of one input line: text lines plus the prompt to show next."""

    lines: list[str]
    prompt: str

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class Interpreter:
    """Owns the World, one GameState and a save store."""

    def __init__(
        self,
        world: World,
        store: SaveStore | None = None,
        state: GameState | None = None,
        seed: int | None = None,
    ):
        self.world = world
        self.store = store if store is not None else MemorySaveStore()
        self._seeds = random.Random(seed)
        self.state = state if state is not None else self._fresh_state()

    def _fresh_state(self) -> GameState:
        return new_game_state(self.world, random.Random(self._seeds.getrandbits(64)))

    def _reply(self, text: str) -> Reply:
        return Reply(text.split("\n") if text else [], self.state.prompt)

    def start(self) -> Reply:
        """Describe the starting room."""
        logger.info("session_started", room=self.state.current_room)
        return self._reply(describe_room(self.world, self.state))

    def feed(self, line: str) -> Reply:
        """Process one input line."""
        words = tokenize(line)
        if not words:
            return self._reply("")

        state = self.state
        if state.pending is not Pending.NONE:
            return self._reply(_PENDING_HANDLERS[state.pending](self.world, state, line))

        word = first_word(words)
        if word is None:
            return self._reply("")
        args = words[words.index(word) + 1:]

        if state.dead:
            return self._reply(self._while_dead(word, args))
        if state.mode is Mode.SHELL:
            return self._reply(self._shell(word, args))
        if state.mode is Mode.DOS:
            return self._reply(self._dos(word, args))
        return self._reply(self._dungeon(word, args))

    def _count(self, verb) -> None:
        self.state.command_count += 1
        logger.debug(
            "command_dispatched",
            mode=self.state.mode.value,
            verb=verb.value,
            count=self.state.command_count,
        )

    def _dungeon(self, word: str, args: list[str]) -> str:
        verb = resolve_verb(word)
        if verb is None:
            return "I don't understand that."
        self._count(verb)
        if verb is Verb.SAVE:
            return self._save(args)
        if verb is Verb.RESTORE:
            return self._restore(args)
        if verb is Verb.RESTART:
            return self._restart()
        return DUNGEON_HANDLERS[verb](self.world, self.state, args)

    def _shell(self, word: str, args: list[str]) -> str:
        verb = resolve_shell_verb(word)
        if verb is None:
            return f"{word}: not found."
        self._count(verb)
        return SHELL_HANDLERS[verb](self.world, self.state, args)

    def _dos(self, word: str, args: list[str]) -> str:
        verb = resolve_dos_verb(word)
        if verb is None:
            return "Bad command or file name"
        self._count(verb)
        return DOS_HANDLERS[verb](self.world, self.state, args)

    def _while_dead(self, word: str, args: list[str]) -> str:
        verb = resolve_verb(word)
        if verb is Verb.RESTORE:
            return self._restore(args)
        if verb is Verb.RESTART:
            return self._restart()
        return DEAD_TEXT

    @staticmethod
    def _slot_name(args: list[str]) -> str | None:
        word = first_word(args)
        if word is None:
            return None
        return word.strip("\"'") or None

    def _save(self, args: list[str]) -> str:
        name = self._slot_name(args)
        if name is None:
            return "You must supply a name to save under."
        try:
            save_game(self.store, name, self.state)
        except PersistenceError as exc:
            logger.warning("save_failed", slot=name, error=str(exc))
            return "Unable to save the game."
        logger.info(
            "game_saved",
            slot=name,
            room=self.state.current_room,
            saves=self.state.save_count,
        )
        return "Done."

    def _restore(self, args: list[str]) -> str:
        """Replace the whole state with a saved one; failures change nothing."""
        name = self._slot_name(args)
        if name is None:
            return "You must supply the name of a saved game."
        try:
            restored = restore_game(self.store, name)
        except PersistenceError as exc:
            logger.warning("restore_failed", slot=name, error=str(exc))
            return "Unable to restore that game."
        self.state = restored
        logger.info("game_restored", slot=name, room=restored.current_room)
        if restored.mode is Mode.DUNGEON and restored.pending is Pending.NONE:
            return "Done.\n" + describe_room(self.world, restored)
        return "Done."

    def _restart(self) -> str:
        self.state = self._fresh_state()
        logger.info("session_started", room=self.state.current_room, restart=True)
        return describe_room(self.world, self.state)

    def reset(self) -> Reply:
        """Discard the current game and start a fresh one."""
        return self._reply(self._restart())
