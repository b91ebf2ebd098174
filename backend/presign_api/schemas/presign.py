from pydantic import BaseModel, ConfigDict, Field

PRESIGN_EXPIRES_IN = 3600


class UploadRequest(BaseModel):
    """Upload intent sent by the client.

    Every field is optional at the schema level so that a missing field is
    reported by the service with the fixed error body instead of a
    framework validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    file_name: str | None = Field(default=None, alias="fileName")
    destination_path: str | None = Field(default=None, alias="destinationPath")
    content_type: str | None = Field(default=None, alias="contentType")
    bucket: str | None = None


class PresignedUrlResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    presigned_url: str = Field(..., alias="presignedUrl")
    bucket: str
    key: str
    expires_in: int = Field(default=PRESIGN_EXPIRES_IN, alias="expiresIn")


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
