from announce.config import get_settings


def test_message_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ANNOUNCE_MESSAGE_CATEGORIES", '["info", "error"]')
    monkeypatch.setenv("ANNOUNCE_MESSAGE_SESSION_KEY", "flash")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.message_categories == ["info", "error"]
        assert settings.message_session_key == "flash"
    finally:
        get_settings.cache_clear()


def test_default_message_settings(monkeypatch) -> None:
    monkeypatch.delenv("ANNOUNCE_MESSAGE_CATEGORIES", raising=False)
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.message_categories[0] == "message"
        assert settings.message_session_key == "user_message_store"
    finally:
        get_settings.cache_clear()
