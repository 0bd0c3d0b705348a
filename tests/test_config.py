import pathlib

from framers.config import Settings


def test_defaults():
    settings = Settings.from_env({})

    assert settings.port == 8000
    assert settings.history_limit == 50
    assert settings.history_path == pathlib.Path("~/.framers/history.json").expanduser()


def test_environment_overrides(tmp_path):
    settings = Settings.from_env(
        {
            "FRAMERS_HOST": "127.0.0.1",
            "FRAMERS_PORT": "9000",
            "FRAMERS_HISTORY_PATH": str(tmp_path / "h.json"),
            "FRAMERS_HISTORY_LIMIT": "10",
            "FRAMERS_LOG_LEVEL": "DEBUG",
        }
    )

    assert settings == Settings(
        host="127.0.0.1",
        port=9000,
        history_path=tmp_path / "h.json",
        history_limit=10,
        log_level="debug",
    )
