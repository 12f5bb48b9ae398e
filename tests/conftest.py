"""Shared test fixtures for dunnet."""

import random
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

from dunnet.app import create_app
from dunnet.config import Config
from dunnet.engine.interpreter import Interpreter
from dunnet.engine.state import GameState, new_game_state
from dunnet.engine.world import World, build_world
from dunnet.models import Player


@pytest.fixture
def world() -> World:
    return build_world()


@pytest.fixture
def state(world: World) -> GameState:
    return new_game_state(world, random.Random(7))


@pytest.fixture
def game(world: World) -> Interpreter:
    interpreter = Interpreter(world, seed=7)
    interpreter.start()
    return interpreter


@pytest.fixture
def db_engine(tmp_path: Path):
    engine = create_engine(f"sqlite:///{tmp_path}/test.db")
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    with Session(db_engine) as session:
        yield session


@pytest.fixture
def test_player(db_session: Session) -> Player:
    player = Player(fingerprint="test-fingerprint-abc123")
    db_session.add(player)
    db_session.commit()
    db_session.refresh(player)
    return player


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    return Config(database_url=f"sqlite:///{tmp_path}/test.db", seed=7)


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
