import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("ENV", "test")

from presign_api.api.deps import get_presign_service
from presign_api.core.config import Settings
from presign_api.main import create_app
from presign_api.services.presign import PresignService
from presign_api.services.storage import S3UrlSigner


class RecordingSigner(S3UrlSigner):
    def __init__(self) -> None:  # type: ignore[super-init-not-called]
        self.calls: list[tuple[str, str, str, str | None, int]] = []

    def sign(self, method, bucket, key, content_type, expires_in):  # type: ignore[override]
        self.calls.append((method, bucket, key, content_type, expires_in))
        return f"https://storage.example.com/{bucket}/{key}?X-Amz-Expires={expires_in}"


class FailingSigner(RecordingSigner):
    def sign(self, method, bucket, key, content_type, expires_in):  # type: ignore[override]
        self.calls.append((method, bucket, key, content_type, expires_in))
        raise RuntimeError("secret-credential-detail: region misconfigured")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ENV="test",
        PORT=3000,
        S3_ACCESS_KEY="AKIDEXAMPLE",
        S3_SECRET_KEY="wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY",
        S3_REGION="us-east-1",
        S3_ENDPOINT_URL="https://objectstore.example.net",
        S3_FORCE_PATH_STYLE=True,
    )


@pytest.fixture
def app_instance(settings):
    return create_app(settings)


@pytest.fixture
def signer() -> RecordingSigner:
    return RecordingSigner()


@pytest.fixture
def failing_signer() -> FailingSigner:
    return FailingSigner()


def _client_for(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://testserver")


@pytest_asyncio.fixture
async def client(app_instance, signer):
    app_instance.dependency_overrides[get_presign_service] = lambda: PresignService(signer)
    async with _client_for(app_instance) as client:
        yield client
    app_instance.dependency_overrides.clear()


@pytest_asyncio.fixture
async def failing_client(app_instance, failing_signer):
    app_instance.dependency_overrides[get_presign_service] = lambda: PresignService(failing_signer)
    async with _client_for(app_instance) as client:
        yield client
    app_instance.dependency_overrides.clear()


@pytest_asyncio.fixture
async def s3_client(app_instance):
    """Client against the real boto3 signer; signing needs no network."""
    async with _client_for(app_instance) as client:
        yield client
