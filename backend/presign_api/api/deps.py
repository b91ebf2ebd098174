from fastapi import Request

from presign_api.services.presign import PresignService


def get_presign_service(request: Request) -> PresignService:
    return request.app.state.presign_service
