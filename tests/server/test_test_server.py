"""
Test Server Tests - scormchat

- Health endpoint contents
- Index and hint pages
- Static file serving and path containment

Run with: pytest tests/server/test_test_server.py -v
"""

import pytest
from fastapi.testclient import TestClient

from scormchat.server import ScormTestServer, create_server


@pytest.fixture
def server(builder_settings):
    return ScormTestServer(builder_settings)


@pytest.fixture
def client(server):
    return TestClient(server.app)


class TestHealthEndpoint:
    """Test /health"""

    def test_empty_workspace(self, client, builder_settings):
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "OK"
        assert "timestamp" in data
        assert data["availablePackages"] == []
        assert data["testContent"] is False
        assert data["directories"] == {
            "output": str(builder_settings.output_dir),
            "testOutput": str(builder_settings.test_output_dir),
        }

    def test_lists_packages_and_content(self, client, builder_settings, make_package):
        make_package(builder_settings.output_dir / "topicA.zip", {"index.html": "A"})
        make_package(builder_settings.output_dir / "topicB.zip", {"index.html": "B"})
        builder_settings.test_output_dir.mkdir()
        (builder_settings.test_output_dir / "index.html").write_text("<h1>B</h1>")

        data = client.get("/health").json()

        assert data["availablePackages"] == ["topicA", "topicB"]
        assert data["testContent"] is True

    def test_cors_header(self, client):
        response = client.get("/health", headers={"Origin": "http://lms.test"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestIndexPage:
    """Test / and static files"""

    def test_no_test_directory(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "No Test Package Found" in response.text

    def test_directory_without_index(self, client, builder_settings):
        builder_settings.test_output_dir.mkdir()

        response = client.get("/")
        assert "No Content Extracted" in response.text
        assert "scormchat test-topic" in response.text

    def test_serves_extracted_index(self, client, builder_settings):
        builder_settings.test_output_dir.mkdir()
        (builder_settings.test_output_dir / "index.html").write_text("<h1>Course</h1>")

        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "<h1>Course</h1>"

    def test_serves_nested_files(self, client, builder_settings):
        assets = builder_settings.test_output_dir / "assets"
        assets.mkdir(parents=True)
        (assets / "app.js").write_text("console.log('ok')")

        response = client.get("/assets/app.js")
        assert response.status_code == 200
        assert response.text == "console.log('ok')"

    def test_missing_file(self, client, builder_settings):
        builder_settings.test_output_dir.mkdir()
        assert client.get("/missing.js").status_code == 404

    def test_paths_outside_test_directory_are_refused(self, client, builder_settings):
        builder_settings.test_output_dir.mkdir()
        (builder_settings.root_dir / "secret.txt").write_text("nope")

        assert client.get("/..%2Fsecret.txt").status_code == 404


class TestCreateServer:
    """Test the factory"""

    def test_reads_settings_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SCORM_BUILDER_ROOT", str(tmp_path))
        monkeypatch.setenv("SCORM_TEST_PORT", "9001")

        server = create_server(enable_request_logging=False)

        assert server.settings.root_dir == tmp_path
        assert server.settings.port == 9001
