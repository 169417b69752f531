"""
Service layer: one service per collection, plus avatar mirroring.
"""
from auth_adapter.services.avatar_service import AvatarService, AvatarIngestResult
from auth_adapter.services.user_service import UserService
from auth_adapter.services.account_service import AccountService
from auth_adapter.services.session_service import SessionService
from auth_adapter.services.verification_token_service import VerificationTokenService

__all__ = [
    "AvatarService",
    "AvatarIngestResult",
    "UserService",
    "AccountService",
    "SessionService",
    "VerificationTokenService",
]
