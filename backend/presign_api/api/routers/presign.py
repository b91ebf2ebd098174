import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from presign_api.api.deps import get_presign_service
from presign_api.schemas import ErrorResponse, PresignedUrlResult, UploadRequest
from presign_api.services.presign import InvalidRequest, PresignService, SigningFailure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["uploads"])


@router.post(
    "/presigned-url",
    response_model=PresignedUrlResult,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def create_presigned_url(
    payload: UploadRequest,
    service: PresignService = Depends(get_presign_service),
):
    outcome = service.create_presigned_upload_url(payload)

    if isinstance(outcome, InvalidRequest):
        logger.warning("Rejected presign request, missing %s", ", ".join(outcome.missing))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=outcome.message).model_dump(),
        )
    if isinstance(outcome, SigningFailure):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=outcome.message).model_dump(),
        )
    return outcome
