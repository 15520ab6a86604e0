"""
Tests: Landing server — isti HTML za svaki zahtjev.
"""
import pytest
from fastapi.testclient import TestClient

HTML = "<!DOCTYPE html><html><body><h1>Plexus 2026 — test</h1></body></html>"


@pytest.fixture
def client(tmp_path):
    from plexus_portal.core.config import LandingConfig
    from plexus_portal.landing import create_app
    page = tmp_path / "index.html"
    page.write_text(HTML, encoding="utf-8")
    return TestClient(create_app(LandingConfig(html_path=page)))


class TestLanding:
    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.text == HTML
        assert r.headers["content-type"].startswith("text/html")
        assert "utf-8" in r.headers["content-type"]

    def test_any_path(self, client):
        for path in ("/registracija", "/a/b/c.html", "/favicon.ico?v=2"):
            r = client.get(path)
            assert r.status_code == 200
            assert r.text == HTML

    def test_any_method(self, client):
        assert client.post("/api/whatever", json={"x": 1}).text == HTML
        assert client.put("/").text == HTML
        assert client.delete("/x").text == HTML

    def test_document_read_once(self, tmp_path):
        from plexus_portal.core.config import LandingConfig
        from plexus_portal.landing import create_app
        page = tmp_path / "index.html"
        page.write_text(HTML, encoding="utf-8")
        c = TestClient(create_app(LandingConfig(html_path=page)))
        page.write_text("<p>changed</p>", encoding="utf-8")
        assert c.get("/").text == HTML

    def test_bundled_page(self):
        from plexus_portal.core.config import LandingConfig
        from plexus_portal.landing import create_app
        r = TestClient(create_app(LandingConfig())).get("/")
        assert r.status_code == 200
        assert "Plexus 2026" in r.text
