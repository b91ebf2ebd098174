import logging
from datetime import datetime, timezone
from typing import Final, Union

from pydantic import BaseModel

from presign_api.schemas import PRESIGN_EXPIRES_IN, PresignedUrlResult, UploadRequest
from presign_api.services.storage import S3UrlSigner

logger = logging.getLogger(__name__)

MISSING_PARAMETERS_MESSAGE: Final[str] = "Missing required parameters"
SIGNING_FAILED_MESSAGE: Final[str] = "Failed to generate presigned URL"

REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "file_name",
    "destination_path",
    "content_type",
    "bucket",
)


class InvalidRequest(BaseModel):
    """The upload intent is missing one or more required fields."""

    missing: list[str]
    message: str = MISSING_PARAMETERS_MESSAGE


class SigningFailure(BaseModel):
    """The signer raised; ``reason`` is for server logs only."""

    reason: str
    message: str = SIGNING_FAILED_MESSAGE


PresignOutcome = Union[PresignedUrlResult, InvalidRequest, SigningFailure]


class PresignService:
    def __init__(self, signer: S3UrlSigner) -> None:
        self.signer = signer

    def create_presigned_upload_url(self, payload: UploadRequest) -> PresignOutcome:
        missing = [name for name in REQUIRED_FIELDS if not getattr(payload, name)]
        if missing:
            return InvalidRequest(missing=missing)

        try:
            url = self.signer.sign(
                "PUT",
                payload.bucket,
                payload.destination_path,
                payload.content_type,
                PRESIGN_EXPIRES_IN,
            )
        except Exception as exc:
            logger.exception(
                "Error generating presigned URL for %s/%s",
                payload.bucket,
                payload.destination_path,
            )
            return SigningFailure(reason=f"{type(exc).__name__}: {exc}")

        logger.debug(
            "Presigned PUT for %s/%s (file %s)",
            payload.bucket,
            payload.destination_path,
            payload.file_name,
        )
        return PresignedUrlResult(
            presigned_url=url,
            bucket=payload.bucket,
            key=payload.destination_path,
            expires_in=PRESIGN_EXPIRES_IN,
        )


def health_check() -> dict[str, str]:
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {"status": "OK", "timestamp": timestamp.replace("+00:00", "Z")}
