"""Home, help, and about routes."""

from xitzin import Request, Xitzin

from ..engine.commands import HELP_TEXT


def register_routes(app: Xitzin) -> None:
    """Register the static pages."""

    @app.gemini("/", name="home")
    def home(request: Request):
        return app.template("home.gmi")

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template("help.gmi", help_text=HELP_TEXT)

    @app.gemini("/about", name="about")
    def about(request: Request):
        return app.template("about.gmi")
