"""Named save slots: whole-state snapshots behind a small store interface.

A snapshot is the zlib-compressed pickle of a GameState. Stores only move
opaque bytes; they never see a partially written state.
"""

import pickle
import zlib
from typing import Protocol

from .state import GameState


class PersistenceError(Exception):
    """A save slot could not be written, read or decoded."""


class SaveStore(Protocol):
    def write(self, name: str, blob: bytes) -> None: ...

    def read(self, name: str) -> bytes | None: ...


class MemorySaveStore:
    """Save slots held in a dict, for tests and embedding."""

    def __init__(self) -> None:
        self.slots: dict[str, bytes] = {}

    def write(self, name: str, blob: bytes) -> None:
        self.slots[name] = blob

    def read(self, name: str) -> bytes | None:
        return self.slots.get(name)


def dump_state(state: GameState) -> bytes:
    return zlib.compress(pickle.dumps(state))


def load_state(blob: bytes) -> GameState:
    """Decode a snapshot, raising PersistenceError on anything unreadable."""
    try:
        state = pickle.loads(zlib.decompress(blob))
    except (
        zlib.error,
        pickle.UnpicklingError,
        EOFError,
        AttributeError,
        ImportError,
        TypeError,
        ValueError,
    ) as exc:
        raise PersistenceError("corrupt save data") from exc
    if not isinstance(state, GameState):
        raise PersistenceError("save data does not hold a game")
    return state


def save_game(store: SaveStore, name: str, state: GameState) -> None:
    """Write a complete snapshot to a slot; the counter only moves on success."""
    state.save_count += 1
    try:
        store.write(name, dump_state(state))
    except PersistenceError:
        state.save_count -= 1
        raise
    except (OSError, ValueError) as exc:
        state.save_count -= 1
        raise PersistenceError(f"could not write slot {name!r}") from exc


def restore_game(store: SaveStore, name: str) -> GameState:
    blob = store.read(name)
    if blob is None:
        raise PersistenceError(f"no saved game named {name!r}")
    return load_state(blob)
