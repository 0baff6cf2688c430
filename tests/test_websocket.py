from wordle import create_app
from wordle.config import TestingConfig
from wordle.services.auth_service import get_auth_service
from wordle.services.session_service import get_session_service
from wordle.websocket.handlers import disconnect_idle_sessions

from conftest import EPOCH


def outputs(client):
    return [event["args"][0] for event in client.get_received() if event["name"] == "output"]


def test_connect_without_username_is_refused(app, socketio):
    client = socketio.test_client(app, auth={})

    assert not client.is_connected()


def test_connect_shows_the_board(app, socketio):
    client = socketio.test_client(app, auth={"username": "alice"})

    assert client.is_connected()
    [reply] = outputs(client)
    assert reply["finished"] is False
    assert "Wordle" in reply["text"]


def test_play_a_game_to_the_end(app, socketio):
    client = socketio.test_client(app, auth={"username": "alice"})
    client.get_received()

    client.emit("guess", {"word": "cheese"})
    [rejected] = outputs(client)
    assert "word must be 5 letters" in rejected["text"]
    assert rejected["finished"] is False

    client.emit("guess", {"word": "teeth"})
    client.emit("guess", {"word": "water"})
    replies = outputs(client)

    assert replies[-1]["finished"] is True
    assert "Winner!" in replies[-1]["text"]
    assert "played..................1" in replies[-1]["text"]


def test_reconnect_after_winning_shows_statistics(app, socketio):
    first = socketio.test_client(app, auth={"username": "alice"})
    first.emit("guess", {"word": "water"})
    first.disconnect()

    second = socketio.test_client(app, auth={"username": "alice"})
    [reply] = outputs(second)

    assert reply["finished"] is True
    assert "played..................1" in reply["text"]


def test_players_have_separate_games(app, socketio):
    alice = socketio.test_client(app, auth={"username": "alice"})
    alice.emit("guess", {"word": "water"})

    bob = socketio.test_client(app, auth={"username": "bob"})
    [reply] = outputs(bob)

    assert reply["finished"] is False


def test_guess_without_session_reports_error(app, socketio):
    client = socketio.test_client(app, auth={"username": "alice"})
    service = get_session_service()
    for sid in list(service._sessions):
        service.close(sid)
    client.get_received()

    client.emit("guess", {"word": "water"})
    events = client.get_received()

    assert [event["name"] for event in events] == ["error"]


def test_token_authentication(repository, word_book):
    class TokenConfig(TestingConfig):
        JWT_SECRET = "test-secret"

    app, socketio = create_app(TokenConfig, repository=repository, word_book=word_book,
                               today=lambda: EPOCH)

    refused = socketio.test_client(app, auth={"username": "alice"})
    assert not refused.is_connected()

    forged = socketio.test_client(app, auth={"token": "not-a-token"})
    assert not forged.is_connected()

    token = get_auth_service().issue_token("alice")
    client = socketio.test_client(app, auth={"token": token})
    assert client.is_connected()
    assert len(outputs(client)) == 1


def test_token_lifetime_comes_from_the_config(repository, word_book):
    class ShortTokenConfig(TestingConfig):
        JWT_SECRET = "test-secret"
        JWT_EXPIRATION_DAYS = -1

    app, socketio = create_app(ShortTokenConfig, repository=repository, word_book=word_book,
                               today=lambda: EPOCH)
    assert get_auth_service().token_expiration_days == -1

    expired = socketio.test_client(app, auth={"token": get_auth_service().issue_token("alice")})
    assert not expired.is_connected()


def test_two_tabs_cannot_replay_a_finished_game(app, socketio, repository):
    first = socketio.test_client(app, auth={"username": "alice"})
    second = socketio.test_client(app, auth={"username": "alice"})
    first.emit("guess", {"word": "teeth"})
    first.emit("guess", {"word": "water"})
    second.get_received()

    second.emit("guess", {"word": "salad"})
    [reply] = outputs(second)

    assert reply["finished"] is True
    [stored] = repository.list_games()
    assert stored.won
    assert stored.guesses == ["teeth", "water"]


def test_idle_sessions_are_disconnected(app, socketio):
    client = socketio.test_client(app, auth={"username": "alice"})
    service = get_session_service()

    assert disconnect_idle_sessions(socketio, 3600) == []
    assert client.is_connected()

    expired = disconnect_idle_sessions(socketio, 0)

    assert len(expired) == 1
    assert not client.is_connected()
    assert service.active_count() == 0
