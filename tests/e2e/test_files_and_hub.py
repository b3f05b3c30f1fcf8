"""End-to-end tests for attachment uploads and the realtime hub."""

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from board.adapter.realtime import RECEIVE_COMMENT_EVENT
from board.interface.api.app import create_app
from board.util.di.container import setup_di
from tests.di import build_test_container


def _client(unmock=None) -> TestClient:
    app_instance = create_app()
    setup_di(app_instance, build_test_container(unmock=unmock))
    return TestClient(app_instance)


@pytest.fixture
def client():
    """Create test client with every component mocked."""
    with _client() as test_client:
        yield test_client


@pytest.fixture
def hub_client():
    """Create test client that broadcasts over the real WebSocket hub."""
    with _client(unmock={"realtime"}) as test_client:
        yield test_client


def _png(size: tuple[int, int]) -> bytes:
    output = io.BytesIO()
    Image.new("RGB", size).save(output, format="PNG")
    return output.getvalue()


class TestFileUploads:
    """POST /file/image and POST /file/text."""

    def test_upload_image(self, client):
        response = client.post(
            "/file/image", files={"file": ("cat.png", _png((800, 600)), "image/png")}
        )

        assert response.status_code == 200
        assert response.json()["url"].startswith("/uploads/")

    def test_upload_image_wrong_type(self, client):
        response = client.post(
            "/file/image", files={"file": ("cat.bmp", b"BM....", "image/bmp")}
        )

        assert response.status_code == 400
        assert "JPG, GIF and PNG" in response.json()["detail"]

    def test_upload_text(self, client):
        response = client.post(
            "/file/text", files={"file": ("notes.txt", b"some notes", "text/plain")}
        )

        assert response.status_code == 200
        assert response.json()["url"].endswith(".txt")

    def test_upload_text_too_large(self, client):
        response = client.post(
            "/file/text",
            files={"file": ("big.txt", b"a" * (100 * 1024 + 1), "text/plain")},
        )

        assert response.status_code == 400

    def test_uploaded_urls_attach_to_comment(self, client):
        """Upload URLs are echoed back on the created comment."""
        image_url = client.post(
            "/file/image", files={"file": ("cat.png", _png((10, 10)), "image/png")}
        ).json()["url"]
        text_url = client.post(
            "/file/text", files={"file": ("n.txt", b"n", "text/plain")}
        ).json()["url"]
        challenge = client.get("/captcha").json()
        client.post("/captcha/validate", json=challenge)

        response = client.post(
            "/comments",
            json={
                "userName": "alice",
                "email": "alice@example.com",
                "text": "with files",
                "captchaToken": challenge["token"],
                "imagePath": image_url,
                "textFilePath": text_url,
            },
        )

        assert response.status_code == 201
        assert response.json()["imageUrl"] == image_url
        assert response.json()["textFileUrl"] == text_url


class TestCommentHub:
    """WebSocket /hubs/comments."""

    def test_new_comment_is_pushed_to_subscribers(self, hub_client):
        """Subscribers receive a ReceiveComment message for each new comment."""
        # Arrange
        challenge = hub_client.get("/captcha").json()
        hub_client.post("/captcha/validate", json=challenge)

        with hub_client.websocket_connect("/hubs/comments") as websocket:
            # Act
            created = hub_client.post(
                "/comments",
                json={
                    "userName": "alice",
                    "email": "alice@example.com",
                    "text": "live",
                    "captchaToken": challenge["token"],
                },
            )
            message = websocket.receive_json()

        # Assert
        assert created.status_code == 201
        assert message["event"] == RECEIVE_COMMENT_EVENT
        assert message["data"]["id"] == created.json()["id"]
        assert message["data"]["text"] == "live"
