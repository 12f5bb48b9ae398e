"""Gameplay routes."""

from contextlib import contextmanager

from sqlmodel import Session
from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..logging import bind_player, clear_player
from ..session import DunnetSession
from ..users import get_or_create_player


@contextmanager
def _game_session(request: Request):
    """Load the player's game session with auto-close."""
    identity = get_identity(request)
    bind_player(identity.fingerprint)
    db_session = Session(request.app.state.engine)
    try:
        player = get_or_create_player(db_session, identity.fingerprint)
        yield DunnetSession.load_or_create(
            db_session,
            player,
            request.app.state.world,
            seed=request.app.state.config.seed,
        )
    finally:
        db_session.close()
        clear_player()


def _render_play(app: Xitzin, game: DunnetSession):
    """Render the transcript of the last exchange and the next prompt."""
    return app.template(
        "play.gmi",
        output=game.last_output,
        prompt=game.prompt,
        turns=game.state.command_count,
        is_dead=game.state.dead,
    )


def _run(app: Xitzin, request: Request, line: str):
    with _game_session(request) as game:
        game.process_command(line)
        game.save()
        return _render_play(app, game)


def _register_action_routes(app: Xitzin) -> None:
    """Register the play view and command entry."""

    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        with _game_session(request) as game:
            game.save()
            return _render_play(app, game)

    @app.input("/cmd", prompt="What do you want to do?", name="cmd")
    @require_certificate
    def cmd(request: Request, query: str):
        """Freeform command entry."""
        return _run(app, request, query)

    @app.gemini("/look", name="look")
    @require_certificate
    def look(request: Request):
        return _run(app, request, "look")

    @app.gemini("/inventory", name="inventory")
    @require_certificate
    def inventory(request: Request):
        return _run(app, request, "inventory")

    @app.gemini("/score", name="score")
    @require_certificate
    def score(request: Request):
        return _run(app, request, "score")


def _register_game_routes(app: Xitzin) -> None:
    """Register game management routes."""

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        if query.strip().upper() != "YES":
            return Redirect("/play")
        with _game_session(request) as game:
            game.reset()
            game.save()
            return _render_play(app, game)


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""
    _register_action_routes(app)
    _register_game_routes(app)
