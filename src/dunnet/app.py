"""Xitzin application factory for dunnet."""

from pathlib import Path

from sqlmodel import SQLModel, create_engine
from xitzin import Xitzin

from .config import Config
from .engine.world import build_world
from .logging import get_logger

logger = get_logger(__name__)


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application."""
    config = config or Config.from_env()

    app = Xitzin(
        title="dunnet",
        version="0.1.0",
        templates_dir=Path(__file__).parent / "templates",
    )

    engine = create_engine(config.database_url)
    app.state.engine = engine
    app.state.config = config
    app.state.world = build_world()

    @app.on_startup
    async def startup():
        """Create tables and report the world."""
        SQLModel.metadata.create_all(engine)
        logger.debug("database_setup_complete")
        world = app.state.world
        logger.info(
            "world_built",
            rooms=world.room_count,
            items=len(world.items),
            fixtures=len(world.fixtures),
        )

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app
