from presign_api.schemas.presign import (
    PRESIGN_EXPIRES_IN,
    ErrorResponse,
    HealthResponse,
    PresignedUrlResult,
    UploadRequest,
)

__all__ = [
    "PRESIGN_EXPIRES_IN",
    "UploadRequest",
    "PresignedUrlResult",
    "ErrorResponse",
    "HealthResponse",
]
