"""Role and permission models.

Roles and their permissions are managed by the authorization subsystem;
the auth core only reads them to build the ``resource:action`` permission
list returned with the current user.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from claimdesk.infrastructure.persistence.base import BaseModel


class RoleModel(BaseModel):
    """Named role (e.g. ``admin``, ``agent``, ``employee``, ``client``).

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        name: Unique role name
    """

    __tablename__ = "roles"

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Role name (unique)",
    )

    permissions: Mapped[list["RolePermissionModel"]] = relationship(
        back_populates="role",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class RolePermissionModel(BaseModel):
    """Permission granted to a role: ``action`` on ``resource``.

    Fields:
        role_id: Owning role
        resource: Resource name (e.g. ``claims``)
        action: Action name (e.g. ``read``)
    """

    __tablename__ = "role_permissions"

    role_id: Mapped[UUID] = mapped_column(
        ForeignKey("roles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Role this permission belongs to",
    )
    resource: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Resource name",
    )
    action: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Allowed action on the resource",
    )

    role: Mapped[RoleModel] = relationship(back_populates="permissions")

    __table_args__ = (
        UniqueConstraint("role_id", "resource", "action", name="uq_role_permission"),
    )

    @property
    def scope(self) -> str:
        """Permission as ``resource:action``."""
        return f"{self.resource}:{self.action}"
