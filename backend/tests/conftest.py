"""Shared fixtures: a fresh app per test, backed by a temporary client directory."""

import pytest
from httpx import AsyncClient, ASGITransport

from showcase.config import Settings
from showcase.main import create_app

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def client_dir(tmp_path):
    root = tmp_path / "client"
    root.mkdir()
    (root / "index.html").write_text("<h1>Home</h1>", encoding="utf-8")
    (root / "admin.html").write_text("<h1>Admin</h1>", encoding="utf-8")
    (root / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    (root / "app.js").write_text("console.log('hi');", encoding="utf-8")
    (root / "data.json").write_text('{"ok": true}', encoding="utf-8")
    (root / "logo.png").write_bytes(PNG_BYTES)
    (root / "photo.JPG").write_bytes(b"jpeg-bytes")
    (root / "icon.svg").write_text("<svg/>", encoding="utf-8")
    (root / "LICENSE").write_text("MIT", encoding="utf-8")
    (root / "docs").mkdir()
    (root / "docs" / "guide.html").write_text("<p>Guide</p>", encoding="utf-8")
    # Outside the client root; must never be served
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    return root


@pytest.fixture
def app(client_dir):
    return create_app(Settings(CLIENT_DIR=str(client_dir)))


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
