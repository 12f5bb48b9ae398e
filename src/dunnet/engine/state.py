"""Mutable per-player game state.

Holds no World references, only ints, strings and containers (plus the
session's random source), so the whole thing can be pickled for saves.
"""

import enum
import random
from dataclasses import dataclass, field

from . import tables
from .world import Direction, World


class Mode(enum.Enum):
    DUNGEON = "dungeon"
    SHELL = "shell"
    DOS = "dos"


class Pending(enum.Enum):
    """A sub-state that captures the next raw input line."""

    NONE = "none"
    COMBINATION = "combination"
    LOGIN_USERNAME = "login_username"
    LOGIN_PASSWORD = "login_password"
    FTP_USERNAME = "ftp_username"
    FTP_PASSWORD = "ftp_password"
    FTP_COMMAND = "ftp_command"
    RLOGIN_PASSWORD = "rlogin_password"
    DOS_TIME = "dos_time"


MODE_PROMPTS = {
    Mode.DUNGEON: ">",
    Mode.SHELL: "$",
    Mode.DOS: "A>",
}

PENDING_PROMPTS = {
    Pending.COMBINATION: "Enter it here:",
    Pending.LOGIN_USERNAME: "login:",
    Pending.LOGIN_PASSWORD: "password:",
    Pending.FTP_USERNAME: "Username:",
    Pending.FTP_PASSWORD: "Password:",
    Pending.FTP_COMMAND: "ftp>",
    Pending.RLOGIN_PASSWORD: "Password:",
    Pending.DOS_TIME: "Enter new time:",
}

HOME_DIR = "/usr/toukmond"

# Maximum failed console logins before the player is pushed back
MAX_LOGIN_TRIES = 3


@dataclass
class GameState:
    """All mutable per-player state."""

    current_room: int = tables.START_ROOM
    last_dir: Direction = Direction.N
    visited: set[int] = field(default_factory=set)
    inventory: list[int] = field(default_factory=list)
    jar: list[int] = field(default_factory=list)
    # room -> ordered object ids (portable, fixed and sentinels)
    room_contents: dict[int, list[int]] = field(default_factory=dict)
    # room -> built-in scenery ids; never listed
    scenery: dict[int, list[int]] = field(default_factory=dict)
    diggables: dict[int, list[int]] = field(default_factory=dict)

    mode: Mode = Mode.DUNGEON
    pending: Pending = Pending.NONE
    dead: bool = False
    verbose: bool = False

    # Puzzle flags
    in_bus: bool = False
    nomail: bool = False
    black: bool = False
    in_endgame: bool = False
    sauna_level: int = 0
    computer_on: bool = False
    floppy_inserted: bool = False
    floppy_melted: bool = False
    key_level: int = 0
    hole_open: bool = False
    ethernet: bool = True
    need_to_pee: bool = False
    egg_room: int = 0
    combination: str = ""

    # Endgame questions
    question_pool: list[int] = field(default_factory=list)
    pending_question: str | None = None
    pending_answers: tuple[str, ...] = ()

    # Shell
    logged_in: bool = False
    login_user: str = ""
    login_tries: int = 0
    cwd: str = HOME_DIR
    paper_compressed: bool = True
    removed_files: set[str] = field(default_factory=set)
    ftp_binary: bool = False
    ftp_password: str | None = None

    command_count: int = 0
    save_count: int = 0

    rng: random.Random = field(default_factory=random.Random)

    @property
    def prompt(self) -> str:
        """The prompt the next input line will be read against."""
        if self.pending is not Pending.NONE:
            return PENDING_PROMPTS[self.pending]
        return MODE_PROMPTS[self.mode]

    def contents(self, room: int | None = None) -> list[int]:
        """Mutable content list for a room (current room by default)."""
        if room is None:
            room = self.current_room
        return self.room_contents.setdefault(room, [])

    def scenery_here(self) -> list[int]:
        return self.scenery.get(self.current_room, [])

    def holds(self, obj_id: int) -> bool:
        return obj_id in self.inventory


def new_game_state(world: World, rng: random.Random | None = None) -> GameState:
    """Create a fresh game state with objects in their starting positions."""
    rng = rng if rng is not None else random.Random()
    state = GameState(rng=rng)
    state.inventory = list(tables.STARTING_INVENTORY)
    state.room_contents = {
        room: list(objects) for room, objects in world.initial_contents.items()
    }
    state.scenery = {room: list(objects) for room, objects in world.scenery.items()}
    state.diggables = {room: list(objects) for room, objects in world.diggables.items()}

    low, high = tables.EGG_ROOMS
    state.egg_room = rng.randint(low, high)
    state.contents(state.egg_room).append(tables.EGG)
    state.combination = str(rng.randint(100, 999))

    state.question_pool = list(range(len(world.questions)))
    return state
