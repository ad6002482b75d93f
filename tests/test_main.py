"""
Tests for the startup path in main.py.
"""

import pytest

import main


@pytest.mark.parametrize("argv", [
    ["main.py", "APPLE PEAR"],
    ["main.py", "APPLES"],
    ["main.py", "AP1LE"],
    ["main.py", "straß mango"],
])
def test_malformed_secret_is_fatal(argv, capsys, monkeypatch):
    monkeypatch.setattr(main.Config, 'SECRET_SENTENCE', None)

    with pytest.raises(SystemExit) as exc_info:
        main.main(argv)

    assert exc_info.value.code == 1
    assert capsys.readouterr().out.strip()


def test_missing_secret_prints_usage(capsys, monkeypatch):
    monkeypatch.setattr(main.Config, 'SECRET_SENTENCE', None)

    with pytest.raises(SystemExit) as exc_info:
        main.main(["main.py"])

    assert exc_info.value.code == 1
    assert "Usage" in capsys.readouterr().out


def test_valid_secret_starts_server(monkeypatch):
    served = {}

    def fake_run(self, app, **kwargs):
        served['words'] = app.game_service.get_state().words
        served['port'] = kwargs['port']

    monkeypatch.setattr('flask_socketio.SocketIO.run', fake_run)

    main.main(["main.py", "apple", "mango"])

    assert served['words'] == ["APPLE", "MANGO"]
    assert served['port'] == main.Config.PORT
