import logging

import pytest
from fastapi import Depends, FastAPI, HTTPException
from fastapi.testclient import TestClient

from app.security import CONTENT_KEY_HEADER, get_settings, require_content_key
from app.settings import Settings


def test_require_content_key_accepts_matching_key():
    settings = Settings(CONTENT_API_KEY="secret")

    assert require_content_key("secret", current_settings=settings) == "secret"


def test_require_content_key_rejects_wrong_key(caplog):
    settings = Settings(CONTENT_API_KEY="secret")

    with caplog.at_level(logging.WARNING, logger="app.security"):
        with pytest.raises(HTTPException) as exc:
            require_content_key("wrong", current_settings=settings)

    assert exc.value.status_code == 403
    assert "key mismatch" in caplog.text


def test_require_content_key_rejects_missing_header_even_when_unconfigured(caplog):
    settings = Settings(CONTENT_API_KEY="")

    with caplog.at_level(logging.WARNING, logger="app.security"):
        with pytest.raises(HTTPException):
            require_content_key(None, current_settings=settings)

    assert "missing key header" in caplog.text


def _secure_app(settings: Settings) -> FastAPI:
    app = FastAPI()
    app.dependency_overrides[get_settings] = lambda: settings

    @app.get("/secure")
    async def secure(key=Depends(require_content_key)):
        return {"ok": True}

    return app


def test_route_accepts_matching_header():
    client = TestClient(_secure_app(Settings(CONTENT_API_KEY="secret")))

    res = client.get("/secure", headers={CONTENT_KEY_HEADER: "secret"})
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_route_rejects_wrong_header():
    client = TestClient(_secure_app(Settings(CONTENT_API_KEY="secret")))

    res = client.get("/secure", headers={CONTENT_KEY_HEADER: "wrong"})
    assert res.status_code == 403
    assert res.json()["detail"] == "Invalid content key"
