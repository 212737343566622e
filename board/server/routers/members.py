"""Member read endpoints."""
from fastapi import APIRouter, Depends

from board.models.member import Member
from board.server.deps import get_current_member, get_member_service
from board.server.schemas import ErrorResponse, MemberResponse
from board.services.member_service import MemberService

router = APIRouter(prefix="/api/members", tags=["members"])


@router.get("/me", response_model=MemberResponse)
async def read_me(member: Member = Depends(get_current_member)) -> MemberResponse:
    """Bearer 토큰 주체의 회원 정보를 반환합니다."""
    return MemberResponse.from_member(member)


@router.get("/{member_id}", response_model=MemberResponse, responses={404: {"model": ErrorResponse}})
async def read_member(
    member_id: int,
    member_service: MemberService = Depends(get_member_service),
) -> MemberResponse:
    """회원 조회 (비밀번호는 응답에서 제외)."""
    return await member_service.read(member_id)
