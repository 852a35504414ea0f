from pathlib import Path

import httpx
import pytest

from bgeraser.config.settings import Settings
from bgeraser.processor.processor import UploadOrchestrator, build_orchestrator
from bgeraser.removal.remote_service_adapter import RemoteServiceRemover

REMOVAL_ENDPOINT = "http://removal.test/api/remove"


class FakeRemovalService:
    """Scriptable stand-in for the external removal service."""

    def __init__(self) -> None:
        self.submit_response = httpx.Response(200, json={"data": {"url": "http://x/y.png"}})
        self.result_response: httpx.Response | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            return self._fresh(self.submit_response)
        if self.result_response is None:
            raise httpx.ConnectError("no result configured", request=request)
        return self._fresh(self.result_response)

    @staticmethod
    def _fresh(response: httpx.Response) -> httpx.Response:
        return httpx.Response(
            response.status_code, headers=response.headers, content=response.content
        )


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    return tmp_path / "public"


@pytest.fixture
def test_settings(storage_root: Path) -> Settings:
    return Settings(
        storage_root=storage_root,
        removal_strategy="remote_service",
        removal_endpoint=REMOVAL_ENDPOINT,
    )


@pytest.fixture
def removal_service() -> FakeRemovalService:
    return FakeRemovalService()


@pytest.fixture
def orchestrator(
    test_settings: Settings,
    removal_service: FakeRemovalService,
) -> UploadOrchestrator:
    remover = RemoteServiceRemover(
        endpoint=REMOVAL_ENDPOINT,
        timeout_seconds=test_settings.removal_timeout_seconds,
        transport=httpx.MockTransport(removal_service),
    )
    return build_orchestrator(test_settings, remover=remover)

