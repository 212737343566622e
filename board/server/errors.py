"""Maps board exceptions to HTTP responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from board.exceptions import (
    BoardError,
    DuplicateEmailError,
    DuplicateUsernameError,
    LoginFailureError,
    MemberNotFoundError,
    RoleNotFoundError,
)

logger = logging.getLogger(__name__)

# Map exceptions to HTTP status codes
EXCEPTION_STATUS_MAP = {
    DuplicateUsernameError: status.HTTP_409_CONFLICT,
    DuplicateEmailError: status.HTTP_409_CONFLICT,
    MemberNotFoundError: status.HTTP_404_NOT_FOUND,
    LoginFailureError: status.HTTP_401_UNAUTHORIZED,
    RoleNotFoundError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def board_error_handler(request: Request, exc: BoardError) -> JSONResponse:
    """BoardError를 상태 코드 + 구조화된 오류 본문으로 변환합니다."""
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BoardError, board_error_handler)
