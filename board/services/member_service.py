"""Member lookups for read endpoints."""
from __future__ import annotations

from board.exceptions import MemberNotFoundError
from board.repositories.member_repo import MemberRepository
from board.server.schemas import MemberResponse


class MemberService:
    def __init__(self, member_repo: MemberRepository) -> None:
        self.member_repo = member_repo

    async def read(self, member_id: int) -> MemberResponse:
        member = await self.member_repo.find_by_id(member_id)
        if member is None:
            raise MemberNotFoundError()
        return MemberResponse.from_member(member)
