"""Exceptions raised by the member sign-up / login flow.

Exception Hierarchy:
    BoardError (base)
    ├── MemberError
    │   ├── DuplicateUsernameError
    │   ├── DuplicateEmailError
    │   └── MemberNotFoundError
    ├── RoleNotFoundError
    └── LoginFailureError

모든 예외는 감지된 지점에서 발생시키고, 요청 경계
(board.server.errors)에서 HTTP 상태 코드로 변환합니다. 재시도는 하지 않습니다.
"""
from typing import Optional


class BoardError(Exception):
    """Base exception for all board errors.

    Attributes:
        message: 사용자에게 보여줄 오류 메시지
        details: API 응답에 포함할 추가 정보
    """

    default_message = "요청을 처리할 수 없습니다."

    def __init__(self, message: Optional[str] = None, details: Optional[dict] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Member
# =============================================================================

class MemberError(BoardError):
    """Base class for member-related errors."""


class DuplicateUsernameError(MemberError):
    """Raised when the username is already registered."""

    default_message = "해당 아이디는 이미 등록된 아이디입니다."


class DuplicateEmailError(MemberError):
    """Raised when the email is already registered."""

    default_message = "해당 이메일은 이미 등록된 이메일입니다."


class MemberNotFoundError(MemberError):
    """Raised when no member matches the lookup."""

    default_message = "요청한 회원은 존재하지 않습니다."


# =============================================================================
# Role / Auth
# =============================================================================

class RoleNotFoundError(BoardError):
    """Raised when a role type is missing from the role store.

    시드 데이터 누락을 의미하므로 사용자 오류가 아닌 서버 오류로 처리합니다.
    """

    default_message = "해당 권한을 찾을 수 없습니다."


class LoginFailureError(BoardError):
    """Raised on bad credentials or when no token could be issued."""

    default_message = "로그인에 실패하였습니다."
