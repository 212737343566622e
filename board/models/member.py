"""Member model and the member ↔ role join entity.

회원(Member)은 username, email이 각각 전역적으로 유일합니다.
비밀번호는 해시된 값만 저장하며, 외부 응답으로 직렬화되지 않습니다
(응답 변환은 board.server.schemas.MemberResponse 참고).
"""
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from board.models.role import Role
from board.server.db import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Member(Base):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    # 저장된 순서(id 순) 그대로 유지: 토큰 claim의 roleTypes 순서와 동일
    roles: Mapped[List["MemberRole"]] = relationship(
        back_populates="member",
        cascade="all, delete-orphan",
        order_by="MemberRole.id",
        lazy="selectin",
    )

    def __init__(
        self,
        username: str,
        password: str,
        nickname: str,
        email: str,
        roles: Sequence[Role] = (),
    ) -> None:
        super().__init__(username=username, password=password, nickname=nickname, email=email)
        self.roles = [MemberRole(role=role) for role in roles]

    @property
    def role_types(self) -> List[str]:
        """회원의 권한 이름 목록 (연관 순서 유지, 정렬하지 않음)."""
        return [member_role.role.role_type.value for member_role in self.roles]

    def __repr__(self) -> str:
        return f"<Member {self.username}>"


class MemberRole(Base):
    __tablename__ = "member_roles"
    __table_args__ = (UniqueConstraint("member_id", "role_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(ForeignKey("members.id", ondelete="CASCADE"), nullable=False)
    role_id: Mapped[int] = mapped_column(ForeignKey("roles.id"), nullable=False)

    member: Mapped[Optional[Member]] = relationship(back_populates="roles")
    role: Mapped[Role] = relationship(lazy="selectin")
