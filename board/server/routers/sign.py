"""Sign-up / sign-in endpoints.

엔드포인트:
- POST /api/sign-up: 회원 가입 (기본 USER 권한 부여)
- POST /api/sign-in: 로그인 후 access token 발급
"""
import logging

from fastapi import APIRouter, Depends, status

from board.server.deps import get_sign_service
from board.server.schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    SignUpRequest,
    SignUpResponse,
)
from board.services.sign_service import SignService

router = APIRouter(prefix="/api", tags=["sign"])
logger = logging.getLogger(__name__)


@router.post(
    "/sign-up",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def sign_up(
    request: SignUpRequest,
    sign_service: SignService = Depends(get_sign_service),
) -> SignUpResponse:
    """회원 가입.

    Returns:
        성공 여부 (응답 본문에 회원 정보는 포함하지 않음)
    """
    await sign_service.sign_up(request)
    return SignUpResponse()


@router.post(
    "/sign-in",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def sign_in(
    request: LoginRequest,
    sign_service: SignService = Depends(get_sign_service),
) -> LoginResponse:
    """로그인 후 access token을 발급합니다."""
    return await sign_service.login(request)
