import pytest

from wordle.services.auth_service import AuthService, get_auth_service, initialize_auth_service


def test_plain_username_when_no_secret():
    auth = AuthService()

    assert auth.authenticate({"username": "  Alice "}) == {"success": True, "user": {"username": "alice"}}
    assert auth.authenticate({})["success"] is False
    assert auth.authenticate(None)["success"] is False
    assert auth.authenticate({"username": "a|b"})["success"] is False
    assert auth.authenticate({"username": "x" * 33})["success"] is False


def test_issue_token_requires_a_secret():
    with pytest.raises(RuntimeError):
        AuthService().issue_token("alice")


def test_token_round_trip():
    auth = AuthService("secret")

    result = auth.authenticate({"token": auth.issue_token("Alice")})

    assert result == {"success": True, "user": {"username": "alice"}}


def test_username_is_ignored_when_tokens_are_required():
    result = AuthService("secret").authenticate({"username": "alice"})

    assert result == {"success": False, "error": "Token is required"}


def test_token_signed_with_another_secret():
    token = AuthService("other").issue_token("alice")

    assert AuthService("secret").verify_token(token) == {"success": False, "error": "Invalid token"}


def test_expired_token():
    token = AuthService("secret", token_expiration_days=-1).issue_token("alice")

    assert AuthService("secret").verify_token(token) == {"success": False, "error": "Token has expired"}


def test_initialize_passes_the_token_lifetime():
    auth = initialize_auth_service("secret", token_expiration_days=-1)

    assert get_auth_service() is auth
    assert auth.verify_token(auth.issue_token("alice")) == {"success": False, "error": "Token has expired"}
