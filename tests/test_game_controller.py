from wordle.services.game_engine import new_game, submit_guess

REMOTE = {"REMOTE_ADDR": "10.0.0.7"}


def test_health(app):
    response = app.test_client().get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["success"] is True


def test_today_does_not_reveal_the_answer(app):
    response = app.test_client().get("/api/today")

    data = response.get_json()
    assert response.status_code == 200
    assert data["puzzle_number"] == 0
    assert data["word_length"] == 5
    assert data["max_guesses"] == 6
    assert "water" not in response.get_data(as_text=True)


def test_stats_require_a_player(app):
    response = app.test_client().get("/api/stats")

    assert response.status_code == 401
    assert response.get_json()["success"] is False


def test_stats_for_a_new_player(app):
    response = app.test_client().get("/api/stats?username=carol", environ_base=REMOTE)

    assert response.status_code == 200
    assert response.get_json()["stats"] == {
        "played": 0,
        "win_percent": 0,
        "current_streak": 0,
        "max_streak": 0,
        "guess_distribution": [0, 0, 0, 0, 0, 0],
    }


def test_stats_for_a_returning_player(app, repository):
    game = new_game("water")
    submit_guess(game, "teeth")
    submit_guess(game, "water")
    repository.save_game("bob|10.0.0.7", game)

    response = app.test_client().get("/api/stats?username=BOB", environ_base=REMOTE)

    stats = response.get_json()["stats"]
    assert stats["played"] == 1
    assert stats["win_percent"] == 100
    assert stats["guess_distribution"] == [0, 1, 0, 0, 0, 0]
