from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from bgeraser.api.app import create_app
from bgeraser.config.settings import Settings
from bgeraser.processor.processor import UploadOrchestrator


@pytest.fixture
def client(test_settings: Settings, orchestrator: UploadOrchestrator) -> TestClient:
    return TestClient(create_app(test_settings, orchestrator=orchestrator))


@pytest.mark.integration
class TestRemoveBackgroundEndpoint:
    def test_upload_then_download_both_images(
        self,
        client: TestClient,
        removal_service,
        png_bytes: bytes,
        processed_png_bytes: bytes,
    ) -> None:
        removal_service.result_response = httpx.Response(
            200, content=processed_png_bytes, headers={"Content-Type": "image/png"}
        )

        response = client.post(
            "/api/remove-background",
            files={"image": ("photo.png", png_bytes, "image/png")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["statusMessage"] == "Image processed successfully!"
        assert client.get(body["originalArtifact"]["locator"]).content == png_bytes
        assert client.get(body["processedArtifact"]["locator"]).content == processed_png_bytes

    def test_rejected_type(self, client: TestClient, storage_root: Path) -> None:
        response = client.post(
            "/api/remove-background",
            files={"image": ("doc.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 415
        assert response.json()["errorKind"] == "unsupported_type"
        assert list((storage_root / "images-input").iterdir()) == []

    def test_missing_image(self, client: TestClient) -> None:
        response = client.post("/api/remove-background")

        assert response.status_code == 400
        assert response.json()["errorDetail"] == "No image file provided."

    def test_remote_failure_still_serves_original(
        self,
        client: TestClient,
        removal_service,
        png_bytes: bytes,
    ) -> None:
        removal_service.submit_response = httpx.Response(500, text="boom")

        response = client.post(
            "/api/remove-background",
            files={"image": ("photo.png", png_bytes, "image/png")},
        )

        assert response.status_code == 502
        body = response.json()
        assert body["errorKind"] == "remote_status_error"
        assert body["processedArtifact"] is None
        assert client.get(body["originalArtifact"]["locator"]).content == png_bytes

    def test_foreign_filename_suffix_is_served_as_image(
        self,
        client: TestClient,
        removal_service,
        png_bytes: bytes,
    ) -> None:
        removal_service.result_response = httpx.Response(
            200, content=b"cutout", headers={"Content-Type": "image/png"}
        )

        response = client.post(
            "/api/remove-background",
            files={"image": ("x.html", png_bytes, "image/png")},
        )

        locator = response.json()["originalArtifact"]["locator"]
        assert locator.endswith(".png")
        served = client.get(locator)
        assert served.headers["content-type"] == "image/png"
        assert served.content == png_bytes
