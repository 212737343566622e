"""Pydantic schemas for request/response models.

이 파일은 FastAPI 엔드포인트의 요청/응답 모델을 정의합니다.
요청 모델의 길이 제약(3~50자)은 도메인 객체를 만들기 전에 경계에서 검증됩니다.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from board.models.member import Member


# ============================================================================
# Sign 관련 스키마
# ============================================================================

class SignUpRequest(BaseModel):
    """회원 가입 요청.

    Attributes:
        username: 아이디 (3~50자, 유일)
        password: 평문 비밀번호 (저장 전 해시)
        nickname: 닉네임 (3~50자)
        email: 이메일 (3~50자, 유일)
    """
    username: str = Field(..., min_length=3, max_length=50, description="아이디")
    password: str = Field(..., min_length=3, max_length=50, description="비밀번호")
    nickname: str = Field(..., min_length=3, max_length=50, description="닉네임")
    email: str = Field(..., min_length=3, max_length=50, description="이메일")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "Pw12345!",
                "nickname": "Ally",
                "email": "a@x.com",
            }
        }
    )


class SignUpResponse(BaseModel):
    success: bool = True


class LoginRequest(BaseModel):
    """로그인 요청.

    길이 제약은 가입 시에만 적용합니다. 로그인에서는 빈 값만 거부하고
    나머지 판단(회원 없음, 자격 증명 실패)은 SignService가 합니다.
    """
    username: str = Field(..., min_length=1, description="아이디")
    password: str = Field(..., min_length=1, description="비밀번호")


class LoginResponse(BaseModel):
    """로그인 응답. 발급된 access token을 담습니다."""
    token: str

    @classmethod
    def to_dto(cls, token: str) -> "LoginResponse":
        return cls(token=token)


# ============================================================================
# Member 관련 스키마
# ============================================================================

class MemberResponse(BaseModel):
    """회원 조회 응답.

    password는 객체 생성 시 채울 수 있지만(메모리상 접근 가능),
    직렬화(JSON 응답, model_dump)에서는 항상 제외됩니다.
    """
    username: str = Field(..., min_length=3, max_length=50)
    password: Optional[str] = Field(default=None, exclude=True)
    nickname: str = Field(..., min_length=3, max_length=50)
    email: str = Field(..., min_length=3, max_length=50)

    @classmethod
    def from_member(cls, member: "Member") -> "MemberResponse":
        return cls(
            username=member.username,
            password=member.password,
            email=member.email,
            nickname=member.nickname,
        )


class ErrorResponse(BaseModel):
    """BoardError.to_dict() 응답 형식."""
    error_type: str
    message: str
    details: dict = Field(default_factory=dict)
