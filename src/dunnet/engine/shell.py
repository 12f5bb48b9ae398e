"""The simulated UNIX shell on pokey, plus its ftp and rlogin clients.

The filesystem is a read-mostly projection of game state:

    /                   usr, rooms
    /usr/toukmond       command files, paper.o.Z, one .o file per held object
    /rooms/<room>       one directory per visited room: description + .o files
"""

from collections.abc import Callable

from ..logging import get_logger
from . import tables
from .describe import describe_room
from .endgame import regular_score, start_endgame
from .parser import tokenize
from .state import HOME_DIR, MAX_LOGIN_TRIES, GameState, Mode, Pending
from .verbs import ShellVerb
from .world import World

logger = get_logger(__name__)

BANNER = "UNIX System V, Release 2.2 (pokey)"

WELCOME = (
    "Welcome to Unix\n"
    "\n"
    "Please clean up your directories.  The filesystem is getting full.\n"
    "Our tcp/ip link to gamma is a little flaky, but seems to work.\n"
    "The current version of ftp can only send files from your home\n"
    "directory, and deletes them after they are sent!  Be careful.\n"
    "\n"
    "Note: Restricted bourne shell in use."
)

ROOMS_DIR = "/rooms"

_DIR_LINE = "drwxr-xr-x 3 root staff 2048 Jan 1 1970 {}"
_HOME_LINE = "-rwxr-xr-x 1 toukmond restricted {} Jan 1 1970 {}"


# Console login


def enter_console(world: World, state: GameState) -> str:
    """Sit down at pokey's console: straight to the shell, or the login prompt."""
    if state.logged_in:
        state.mode = Mode.SHELL
        return ""
    state.login_tries = 0
    state.pending = Pending.LOGIN_USERNAME
    return BANNER


def login_username(world: World, state: GameState, line: str) -> str:
    state.login_user = line.strip().lower()
    state.pending = Pending.LOGIN_PASSWORD
    return ""


def login_password(world: World, state: GameState, line: str) -> str:
    """Check the console credentials; three misses push the player away."""
    if state.login_user == tables.SHELL_USER and line.strip().lower() == tables.SHELL_PASSWORD:
        state.logged_in = True
        state.mode = Mode.SHELL
        state.pending = Pending.NONE
        logger.info("shell_login", host="pokey", user=state.login_user)
        return WELCOME

    state.login_tries += 1
    if state.login_tries >= MAX_LOGIN_TRIES:
        state.pending = Pending.NONE
        return "login incorrect\nYou give up and step back from the console."
    state.pending = Pending.LOGIN_USERNAME
    return "login incorrect"


# Filesystem projection


def _room_for_slug(world: World, state: GameState, slug: str) -> int | None:
    for room in sorted(state.visited):
        if world.rooms[room].slug == slug:
            return room
    return None


def _is_dir(world: World, state: GameState, path: str) -> bool:
    if path in ("/", "/usr", HOME_DIR, ROOMS_DIR):
        return True
    prefix = ROOMS_DIR + "/"
    if path.startswith(prefix):
        return _room_for_slug(world, state, path[len(prefix):]) is not None
    return False


def resolve_path(world: World, state: GameState, path: str) -> str | None:
    """Normalize a path against the cwd; None unless it names a directory."""
    parts = [] if path.startswith("/") else [p for p in state.cwd.split("/") if p]
    for piece in path.split("/"):
        if piece in ("", "."):
            continue
        if piece == "..":
            if parts:
                parts.pop()
            continue
        parts.append(piece)
    candidate = "/" + "/".join(parts)
    return candidate if _is_dir(world, state, candidate) else None


def _room_of_dir(world: World, state: GameState, path: str) -> int | None:
    prefix = ROOMS_DIR + "/"
    if not path.startswith(prefix):
        return None
    return _room_for_slug(world, state, path[len(prefix):])


def _home_files(world: World, state: GameState) -> list[str]:
    files = [name for name in tables.SHELL_COMMAND_FILES if name not in state.removed_files]
    if state.paper_compressed:
        files.append("paper.o.Z")
    files.extend(world.items[obj].file_name for obj in state.inventory)
    return files


def _listing(world: World, state: GameState, path: str) -> str:
    if path == "/":
        return "\n".join(
            [
                "total 4",
                "drwxr-xr-x 3 root staff 512 Jan 1 1970 .",
                _DIR_LINE.format(".."),
                _DIR_LINE.format("usr"),
                _DIR_LINE.format("rooms"),
            ]
        )
    if path == "/usr":
        return "\n".join(
            [
                "total 4",
                "drwxr-xr-x 3 root staff 512 Jan 1 1970 .",
                _DIR_LINE.format(".."),
                "drwxr-xr-x 3 toukmond restricted 512 Jan 1 1970 toukmond",
            ]
        )
    if path == ROOMS_DIR:
        lines = [
            "total 16",
            "drwxr-xr-x 3 root staff 512 Jan 1 1970 .",
            _DIR_LINE.format(".."),
        ]
        lines.extend(
            f"drwxr-xr-x 3 root staff 512 Jan 1 1970 {world.rooms[room].slug}"
            for room in sorted(state.visited)
        )
        return "\n".join(lines)
    if path == HOME_DIR:
        lines = [
            "total 467",
            "drwxr-xr-x 3 toukmond restricted 512 Jan 1 1970 .",
            _DIR_LINE.format(".."),
        ]
        for name in _home_files(world, state):
            size = 10423 if name in tables.SHELL_COMMAND_FILES else 0
            lines.append(_HOME_LINE.format(size, name))
        return "\n".join(lines)

    room = _room_of_dir(world, state, path)
    lines = [
        "total 4",
        "drwxr-xr-x 3 root staff 512 Jan 1 1970 .",
        _DIR_LINE.format(".."),
        "-rwxr-xr-x 3 root staff 2048 Jan 1 1970 description",
    ]
    lines.extend(
        _HOME_LINE.format(0, world.items[obj].file_name)
        for obj in state.contents(room)
        if obj in world.items
    )
    return "\n".join(lines)


# Shell commands


def _cmd_ls(world: World, state: GameState, args: list[str]) -> str:
    path = resolve_path(world, state, args[0]) if args else state.cwd
    if path is None:
        return "No such directory."
    return _listing(world, state, path)


def _cmd_cd(world: World, state: GameState, args: list[str]) -> str:
    if not args:
        return "Usage: cd <path>"
    path = resolve_path(world, state, args[0])
    if path is None:
        return "No such directory."
    state.cwd = path
    return ""


def _cmd_pwd(world: World, state: GameState, args: list[str]) -> str:
    return state.cwd


def _cmd_cat(world: World, state: GameState, args: list[str]) -> str:
    """Print a file from the current directory; only text files are readable."""
    if not args:
        return "Usage: cat <ascii-file-name>"
    name = args[0]
    if "/" in name:
        return "cat: only files in current directory allowed."

    room = _room_of_dir(world, state, state.cwd)
    if room is not None:
        if name == "description":
            return world.rooms[room].long_description
        files = {world.items[obj].file_name for obj in state.contents(room) if obj in world.items}
        if name in files:
            return "Ascii files only."
        return "File not found."

    if state.cwd == HOME_DIR:
        paper_file = world.items[tables.PAPER].file_name
        if name == paper_file and state.holds(tables.PAPER):
            return world.items[tables.PAPER].examine
        if name in {f.lower() for f in _home_files(world, state)}:
            return "Ascii files only."
    return "File not found."


def _cmd_echo(world: World, state: GameState, args: list[str]) -> str:
    # Shell variables are not supported and expand to nothing
    return " ".join("" if word.startswith("$") else word for word in args)


def _cmd_uncompress(world: World, state: GameState, args: list[str]) -> str:
    """Uncompress paper.o.Z in the home directory, once."""
    if not args:
        return "Usage: uncompress <filename>"
    name = args[0]
    if name.endswith(".z"):
        name = name[:-2]
    if state.cwd != HOME_DIR or name != "paper.o" or not state.paper_compressed:
        return "Uncompress command failed."
    state.paper_compressed = False
    state.inventory.append(tables.PAPER)
    return ""


def _cmd_ftp(world: World, state: GameState, args: list[str]) -> str:
    if not args:
        return "ftp: hostname required on command line."
    host = args[0]
    if host == "gamma":
        if not state.ethernet:
            return "ftp: host not responding."
        state.pending = Pending.FTP_USERNAME
        return "Connected to gamma. FTP ver 0.9 00:00:00 01/01/70"
    if host == "pokey":
        return "ftp: Can't ftp to localhost."
    if host == "endgame":
        return "ftp: connection refused."
    return "ftp: Unknown host."


def _cmd_rlogin(world: World, state: GameState, args: list[str]) -> str:
    if not args:
        return "rlogin: hostname required on command line."
    host = args[0]
    if host == "pokey":
        return "Can't rlogin back to localhost"
    if host == "gamma":
        if not state.ethernet:
            return "Host not responding."
        state.pending = Pending.RLOGIN_PASSWORD
        return ""
    if host == "endgame":
        if regular_score(world, state) < tables.REGULAR_MAX_SCORE:
            return "You have not achieved enough points to connect to endgame."
        start_endgame(world, state)
        return (
            "Welcome to the endgame.  You are a truly noble adventurer.\n"
            + describe_room(world, state)
        )
    return "Unknown host."


def _cmd_exit(world: World, state: GameState, args: list[str]) -> str:
    state.mode = Mode.DUNGEON
    return "You step back from the console.\n" + describe_room(world, state)


SHELL_HANDLERS: dict[ShellVerb, Callable] = {
    ShellVerb.LS: _cmd_ls,
    ShellVerb.CD: _cmd_cd,
    ShellVerb.PWD: _cmd_pwd,
    ShellVerb.CAT: _cmd_cat,
    ShellVerb.ECHO: _cmd_echo,
    ShellVerb.UNCOMPRESS: _cmd_uncompress,
    ShellVerb.FTP: _cmd_ftp,
    ShellVerb.RLOGIN: _cmd_rlogin,
    ShellVerb.EXIT: _cmd_exit,
}


# Network sub-states


def rlogin_password(world: World, state: GameState, line: str) -> str:
    """Finish an rlogin to gamma; the player arrives without their things."""
    state.pending = Pending.NONE
    if tokenize(line)[:1] != [tables.GAMMA_PASSWORD]:
        return "login incorrect"

    kept = [obj for obj in state.inventory if obj == tables.KEY]
    state.contents(tables.COMPUTER_ROOM).extend(
        obj for obj in state.inventory if obj != tables.KEY
    )
    state.inventory = kept
    state.current_room = tables.RECEIVING_ROOM
    state.mode = Mode.DUNGEON
    logger.info("shell_login", host="gamma", user=tables.SHELL_USER)
    return (
        "You begin to feel strange for a moment, and you lose your items.\n"
        + describe_room(world, state)
    )


def ftp_username(world: World, state: GameState, line: str) -> str:
    user = line.strip().lower()
    if user == tables.SHELL_USER:
        state.pending = Pending.NONE
        return "toukmond ftp access not allowed."
    if user in ("anonymous", "ftp"):
        state.pending = Pending.FTP_PASSWORD
        return "Guest login okay, send your user ident as password."
    state.pending = Pending.NONE
    return "Login failed."


def ftp_password(world: World, state: GameState, line: str) -> str:
    """Accept any ident; it becomes the answer to the ftp endgame question."""
    words = tokenize(line)
    state.ftp_password = words[0] if words else None
    state.ftp_binary = False
    state.pending = Pending.FTP_COMMAND
    return "Guest login okay, user access restrictions apply."


def _ftp_send(world: World, state: GameState, name: str) -> str:
    kind = "binary" if state.ftp_binary else "ascii"
    if name in tables.SHELL_COMMAND_FILES and name not in state.removed_files:
        state.removed_files.add(name)
        return f"Sending {kind} file for {name}\nTransfer complete."

    item = world.item_by_file(name)
    if item is None or not state.holds(item.number):
        return "No such file or directory."
    state.inventory.remove(item.number)
    receiving = state.contents(tables.RECEIVING_ROOM)
    if state.ftp_binary:
        receiving.append(item.number)
    elif tables.PROTOPLASM not in receiving:
        receiving.append(tables.PROTOPLASM)
    return f"Sending {kind} file for {name}\nTransfer complete."


def ftp_command(world: World, state: GameState, line: str) -> str:
    """One line typed at the ftp> prompt."""
    words = tokenize(line)
    if not words:
        return ""
    command, args = words[0], words[1:]
    if command == "type":
        if args and args[0] in ("binary", "bin", "ascii"):
            return ftp_command(world, state, args[0])
        return "Type must be one of 'binary' or 'ascii'."
    if command in ("binary", "bin"):
        state.ftp_binary = True
        return "Type set to binary."
    if command == "ascii":
        state.ftp_binary = False
        return "Type set to ascii."
    if command in ("send", "put"):
        if not args:
            return "Usage: send <filename>"
        return _ftp_send(world, state, args[0])
    if command == "help":
        return "Possible commands are:\nsend    quit    type   ascii  binary   help"
    if command in ("quit", "bye"):
        state.pending = Pending.NONE
        return ""
    return "No such command.  Try help."
