"""Client page and static asset serving."""

import pytest

from showcase.static import content_type_for, resolve_client_path, serve_static


class TestPages:
    @pytest.mark.asyncio
    async def test_root_and_index_match(self, client):
        root = await client.get("/")
        index = await client.get("/index.html")
        assert root.status_code == index.status_code == 200
        assert root.content == index.content == b"<h1>Home</h1>"
        assert root.headers["content-type"] == index.headers["content-type"]
        assert root.headers["content-type"] == "text/html"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/admin", "/admin.html"])
    async def test_admin(self, client, path):
        r = await client.get(path)
        assert r.status_code == 200
        assert r.text == "<h1>Admin</h1>"
        assert r.headers["content-type"] == "text/html"

    @pytest.mark.asyncio
    async def test_any_method_serves_index(self, client):
        r = await client.delete("/")
        assert r.status_code == 200
        assert r.text == "<h1>Home</h1>"

    @pytest.mark.asyncio
    async def test_missing_index(self, client, client_dir):
        (client_dir / "index.html").unlink()
        r = await client.get("/")
        assert r.status_code == 404
        assert r.text == "Not found"


class TestAssets:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path,content_type",
        [
            ("/styles.css", "text/css"),
            ("/app.js", "application/javascript"),
            ("/data.json", "application/json"),
            ("/logo.png", "image/png"),
            ("/photo.JPG", "image/jpeg"),
            ("/icon.svg", "image/svg+xml"),
            ("/LICENSE", "application/octet-stream"),
            ("/docs/guide.html", "text/html"),
        ],
    )
    async def test_content_types(self, client, path, content_type):
        r = await client.get(path)
        assert r.status_code == 200
        assert r.headers["content-type"] == content_type

    @pytest.mark.asyncio
    async def test_bytes_served_verbatim(self, client, client_dir):
        r = await client.get("/logo.png")
        assert r.content == (client_dir / "logo.png").read_bytes()

    @pytest.mark.asyncio
    async def test_file_response_headers(self, client, client_dir):
        r = await client.get("/styles.css")
        size = (client_dir / "styles.css").stat().st_size
        assert r.headers["content-length"] == str(size)
        assert "etag" in r.headers
        assert "last-modified" in r.headers

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path", ["/nonexistent.file", "/unknown/path/prefix", "/docs", "/api", "/docs/"]
    )
    async def test_not_found(self, client, path):
        r = await client.get(path)
        assert r.status_code == 404
        assert r.text == "Not found"
        assert r.headers["content-type"] == "text/plain"

    @pytest.mark.asyncio
    async def test_framework_doc_routes_are_not_exposed(self, client):
        for path in ("/docs", "/redoc", "/openapi.json"):
            assert (await client.get(path)).status_code == 404


class TestContentTypeFor:
    def test_known_extensions(self):
        assert content_type_for("index.html") == "text/html"
        assert content_type_for("a/b/c.jpeg") == "image/jpeg"

    def test_case_insensitive(self):
        assert content_type_for("LOGO.PNG") == "image/png"

    def test_unknown_or_missing(self):
        assert content_type_for("archive.tar.gz") == "application/octet-stream"
        assert content_type_for("Makefile") == "application/octet-stream"


class TestPathResolution:
    def test_resolves_under_root(self, client_dir):
        path = resolve_client_path(client_dir, "/docs/guide.html")
        assert path == (client_dir / "docs" / "guide.html").resolve()

    @pytest.mark.parametrize(
        "name",
        ["../secret.txt", "/../secret.txt", "docs/../../secret.txt", "..\\secret.txt", "/a/../.."],
    )
    def test_rejects_parent_segments(self, client_dir, name):
        assert resolve_client_path(client_dir, name) is None

    @pytest.mark.asyncio
    async def test_traversal_is_not_served(self, client_dir):
        r = await serve_static(client_dir, "/../secret.txt")
        assert r.status_code == 404
        assert r.body == b"Not found"

    @pytest.mark.asyncio
    async def test_encoded_traversal_over_http(self, client):
        r = await client.get("/%2e%2e/secret.txt")
        assert r.status_code == 404
        assert "top secret" not in r.text
