from sqlalchemy.orm import Session

from app.core import get_settings
from app.database import SessionLocal


def test_settings_defaults():
    settings = get_settings()
    assert settings.OWNER_STATES == ["PA", "OH", "WV"]
    assert "info" in settings.OWNER_EMAIL_TLDS


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_session_factory():
    with SessionLocal() as db:
        assert isinstance(db, Session)
