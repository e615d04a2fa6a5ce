"""SQLAlchemy models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from claimdesk.infrastructure.persistence.models.audit_log import AuditLogModel
from claimdesk.infrastructure.persistence.models.password_reset_token import (
    PasswordResetTokenModel,
)
from claimdesk.infrastructure.persistence.models.role import (
    RoleModel,
    RolePermissionModel,
)
from claimdesk.infrastructure.persistence.models.session import SessionModel
from claimdesk.infrastructure.persistence.models.user import UserModel

__all__ = [
    "AuditLogModel",
    "PasswordResetTokenModel",
    "RoleModel",
    "RolePermissionModel",
    "SessionModel",
    "UserModel",
]
