"""Security adapters: password hashing and opaque tokens."""

from claimdesk.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from claimdesk.infrastructure.security.opaque_token_service import (
    OpaqueTokenService,
)

__all__ = ["BcryptPasswordService", "OpaqueTokenService"]
