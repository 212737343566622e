"""Role model.

권한(Role)은 RoleType 별로 하나의 행만 존재하며, 회원 가입 전에 DB에 시드되어
있어야 합니다. 존재하지 않는 RoleType을 조회하는 것은 설정 오류입니다.
"""
import enum

from sqlalchemy import Enum, Integer
from sqlalchemy.orm import Mapped, mapped_column

from board.server.db import Base


class RoleType(str, enum.Enum):
    """권한 종류."""
    USER = "USER"
    ADMIN = "ADMIN"


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    role_type: Mapped[RoleType] = mapped_column(
        Enum(RoleType, native_enum=False, length=20),
        unique=True,
        nullable=False,
    )

    def __init__(self, role_type: RoleType) -> None:
        super().__init__(role_type=role_type)

    def __repr__(self) -> str:
        return f"<Role {self.role_type.value}>"
