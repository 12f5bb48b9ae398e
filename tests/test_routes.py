"""Integration tests for routes."""


def test_home_page(client):
    """Home page is accessible without certificate."""
    response = client.get("/")
    assert response.is_success
    assert "dunnet" in response.body


def test_help_page(client):
    """/help is public and credits the author."""
    response = client.get("/help")
    assert response.is_success
    assert "Ron Schnell" in response.body


def test_about_page(client):
    """/about renders."""
    assert client.get("/about").is_success


def test_play_requires_cert(client):
    """Play page requires a client certificate."""
    response = client.get("/play")
    assert response.is_certificate_required


def test_play_with_cert(auth_client):
    """A first visit shows the starting room."""
    response = auth_client.get("/play")
    assert response.is_success
    assert "Dead end" in response.body


def test_cmd_input_prompt(auth_client):
    """The /cmd route prompts for input when no query."""
    response = auth_client.get("/cmd")
    assert response.is_input_required


def test_cmd_with_input(auth_client):
    """/cmd runs the command and shows the reply."""
    response = auth_client.get_input("/cmd", "take shovel")
    assert response.is_success
    assert "Taken." in response.body


def test_game_persists_between_requests(auth_client):
    """The game carries over from one request to the next."""
    auth_client.get_input("/cmd", "take shovel")
    response = auth_client.get("/inventory")
    assert "A shovel" in response.body


def test_score_route(auth_client):
    """/score reports the score."""
    response = auth_client.get("/score")
    assert response.is_success
    assert "You have scored 0 out of a possible 90 points." in response.body


def test_look_route(auth_client):
    """/look describes the room."""
    response = auth_client.get("/look")
    assert "Dead end" in response.body


def test_new_game(auth_client):
    """/new asks for confirmation and starts over on YES."""
    auth_client.get_input("/cmd", "take shovel")
    assert auth_client.get("/new").is_input_required
    response = auth_client.get_input("/new", "YES")
    assert response.is_success
    inventory = auth_client.get("/inventory")
    assert "A shovel" not in inventory.body


def test_new_game_declined(auth_client):
    """Anything but YES keeps the game."""
    auth_client.get_input("/cmd", "take shovel")
    auth_client.get_input("/new", "no")
    inventory = auth_client.get("/inventory")
    assert "A shovel" in inventory.body
