"""ORM models for members and roles."""
from board.models.member import Member, MemberRole
from board.models.role import Role, RoleType

__all__ = ["Member", "MemberRole", "Role", "RoleType"]
