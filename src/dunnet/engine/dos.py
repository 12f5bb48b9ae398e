"""The simulated DOS prompt on the PC in the PC area."""

from collections.abc import Callable

from .describe import describe_room
from .state import GameState, Mode, Pending
from .verbs import DosVerb
from .world import World

_VOLUME_HEADER = (
    " Volume in drive A is FOO\n"
    " Volume Serial Number is 1A16-08C9\n"
    " Directory of A:\\\n"
)

_LISTING = (
    "COMMAND  COM     47845 04-09-91   2:00a\n"
    "FOO      TXT        40 01-20-93   1:01a\n"
    "        2 file(s)      47845 bytes\n"
    "                     1065280 bytes free"
)


def boot(world: World, state: GameState) -> str:
    """Boot from the floppy; the clock prompt comes first."""
    state.pending = Pending.DOS_TIME
    return (
        "Boot sector read from floppy disk.\n"
        "Current time is 12:00:00"
    )


def set_time(world: World, state: GameState, line: str) -> str:
    state.pending = Pending.NONE
    state.mode = Mode.DOS
    return ""


def _cmd_dir(world: World, state: GameState, args: list[str]) -> str:
    if not args or args[0] == "\\":
        return _VOLUME_HEADER + "\n" + _LISTING
    return _VOLUME_HEADER + "\nFile not found"


def _cmd_type(world: World, state: GameState, args: list[str]) -> str:
    if not args:
        return "Must supply file name"
    name = args[0]
    if name == "foo.txt":
        return f"The combination is {state.combination}."
    if name == "command.com":
        return "Cannot type binary files"
    return f"File not found - {name.upper()}"


def _cmd_command(world: World, state: GameState, args: list[str]) -> str:
    return "Cannot spawn subshell"


def _cmd_drive(world: World, state: GameState, args: list[str]) -> str:
    return "Invalid drive specification"


def _cmd_exit(world: World, state: GameState, args: list[str]) -> str:
    state.mode = Mode.DUNGEON
    return "You power down the machine and step back.\n" + describe_room(world, state)


DOS_HANDLERS: dict[DosVerb, Callable] = {
    DosVerb.DIR: _cmd_dir,
    DosVerb.TYPE: _cmd_type,
    DosVerb.COMMAND: _cmd_command,
    DosVerb.DRIVE: _cmd_drive,
    DosVerb.EXIT: _cmd_exit,
}
