from fastapi import APIRouter

from presign_api.schemas import HealthResponse
from presign_api.services.presign import health_check

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(**health_check())
