"""Verb enumerations and surface-word alias tables for each mode."""

import enum

from .world import Direction


class Verb(enum.Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    SOUTHEAST = "southeast"
    NORTHWEST = "northwest"
    SOUTHWEST = "southwest"
    UP = "up"
    DOWN = "down"
    IN = "in"
    OUT = "out"
    GO = "go"
    LOOK = "look"
    INVENTORY = "inventory"
    TAKE = "take"
    DROP = "drop"
    PUT = "put"
    DIG = "dig"
    CLIMB = "climb"
    SHAKE = "shake"
    EAT = "eat"
    PRESS = "press"
    TURN = "turn"
    SWIM = "swim"
    SLEEP = "sleep"
    PISS = "piss"
    FLUSH = "flush"
    BREAK = "break"
    DRIVE = "drive"
    FEED = "feed"
    ANSWER = "answer"
    TYPE = "type"
    RESET = "reset"
    VERBOSE = "verbose"
    SCORE = "score"
    HELP = "help"
    QUIT = "quit"
    SAVE = "save"
    RESTORE = "restore"
    RESTART = "restart"


class ShellVerb(enum.Enum):
    LS = "ls"
    CD = "cd"
    PWD = "pwd"
    CAT = "cat"
    ECHO = "echo"
    UNCOMPRESS = "uncompress"
    FTP = "ftp"
    RLOGIN = "rlogin"
    EXIT = "exit"


class DosVerb(enum.Enum):
    DIR = "dir"
    TYPE = "type"
    COMMAND = "command"
    DRIVE = "drive"
    EXIT = "exit"


MOVEMENT: dict[Verb, Direction] = {
    Verb.NORTH: Direction.N,
    Verb.SOUTH: Direction.S,
    Verb.EAST: Direction.E,
    Verb.WEST: Direction.W,
    Verb.NORTHEAST: Direction.NE,
    Verb.SOUTHEAST: Direction.SE,
    Verb.NORTHWEST: Direction.NW,
    Verb.SOUTHWEST: Direction.SW,
    Verb.UP: Direction.UP,
    Verb.DOWN: Direction.DOWN,
    Verb.IN: Direction.IN,
    Verb.OUT: Direction.OUT,
}

DUNGEON_ALIASES: dict[str, Verb] = {
    **dict.fromkeys(("n", "north"), Verb.NORTH),
    **dict.fromkeys(("s", "south"), Verb.SOUTH),
    **dict.fromkeys(("e", "east"), Verb.EAST),
    **dict.fromkeys(("w", "west"), Verb.WEST),
    **dict.fromkeys(("ne", "northeast"), Verb.NORTHEAST),
    **dict.fromkeys(("se", "southeast"), Verb.SOUTHEAST),
    **dict.fromkeys(("nw", "northwest"), Verb.NORTHWEST),
    **dict.fromkeys(("sw", "southwest"), Verb.SOUTHWEST),
    **dict.fromkeys(("u", "up"), Verb.UP),
    **dict.fromkeys(("d", "down"), Verb.DOWN),
    **dict.fromkeys(("in", "enter", "board", "on"), Verb.IN),
    **dict.fromkeys(("out", "leave", "exit", "off"), Verb.OUT),
    "go": Verb.GO,
    **dict.fromkeys(("look", "l", "examine", "x", "describe"), Verb.LOOK),
    **dict.fromkeys(("i", "inventory"), Verb.INVENTORY),
    **dict.fromkeys(("take", "get"), Verb.TAKE),
    **dict.fromkeys(("drop", "throw"), Verb.DROP),
    **dict.fromkeys(("put", "insert"), Verb.PUT),
    "dig": Verb.DIG,
    "climb": Verb.CLIMB,
    **dict.fromkeys(("shake", "wave"), Verb.SHAKE),
    "eat": Verb.EAT,
    **dict.fromkeys(("press", "push"), Verb.PRESS),
    "turn": Verb.TURN,
    "swim": Verb.SWIM,
    **dict.fromkeys(("sleep", "lie"), Verb.SLEEP),
    **dict.fromkeys(("piss", "urinate"), Verb.PISS),
    "flush": Verb.FLUSH,
    **dict.fromkeys(("break", "chop", "cut"), Verb.BREAK),
    "drive": Verb.DRIVE,
    "feed": Verb.FEED,
    "answer": Verb.ANSWER,
    "type": Verb.TYPE,
    "reset": Verb.RESET,
    **dict.fromkeys(("long", "verbose"), Verb.VERBOSE),
    "score": Verb.SCORE,
    "help": Verb.HELP,
    "quit": Verb.QUIT,
    "save": Verb.SAVE,
    "restore": Verb.RESTORE,
    "restart": Verb.RESTART,
}

SHELL_ALIASES: dict[str, ShellVerb] = {
    "ls": ShellVerb.LS,
    "cd": ShellVerb.CD,
    "pwd": ShellVerb.PWD,
    "cat": ShellVerb.CAT,
    "echo": ShellVerb.ECHO,
    "uncompress": ShellVerb.UNCOMPRESS,
    "ftp": ShellVerb.FTP,
    **dict.fromkeys(("rlogin", "ssh"), ShellVerb.RLOGIN),
    "exit": ShellVerb.EXIT,
}

# Drive letters arrive without their colon, the tokenizer splits on it
DOS_ALIASES: dict[str, DosVerb] = {
    "dir": DosVerb.DIR,
    "type": DosVerb.TYPE,
    "command": DosVerb.COMMAND,
    **dict.fromkeys(("a", "b", "c"), DosVerb.DRIVE),
    "exit": DosVerb.EXIT,
}


def resolve_verb(word: str) -> Verb | None:
    return DUNGEON_ALIASES.get(word)


def resolve_shell_verb(word: str) -> ShellVerb | None:
    return SHELL_ALIASES.get(word)


def resolve_dos_verb(word: str) -> DosVerb | None:
    return DOS_ALIASES.get(word)
