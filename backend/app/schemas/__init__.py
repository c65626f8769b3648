from app.schemas.user import (
    ApiResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserEnvelope,
    UserProfile,
    UserPublic,
)

__all__ = [
    "ApiResponse",
    "LoginRequest",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "UserEnvelope",
    "UserProfile",
    "UserPublic",
]
