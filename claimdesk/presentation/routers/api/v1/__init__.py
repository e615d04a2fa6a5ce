"""API v1 routers.

Resources:
    /api/v1/auth - Sessions, current user, password reset

The assembled router lives in ``claimdesk.presentation.routers.api.v1.router``.
"""
