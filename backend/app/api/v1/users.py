"""
User API endpoints.

Registration, cookie-based login/logout and profile updates.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import ValidationError as PydanticValidationError

from app.api.deps import (
    clear_session_cookie,
    get_current_user_id,
    get_user_service,
    read_upload,
    set_session_cookie,
)
from app.core.errors import ValidationError, first_error_message
from app.schemas import (
    ApiResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    UserEnvelope,
    UserPublic,
)
from app.services import UserService

router = APIRouter()


@router.post("/register", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
def register(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    service: UserService = Depends(get_user_service),
):
    """
    Register a new user.

    Multipart form with the account fields and a profile photo in ``file``.
    """
    try:
        req = RegisterRequest(
            fullname=fullname,
            email=email,
            phone_number=phone_number,
            password=password,
            role=role,
        )
    except PydanticValidationError as e:
        raise ValidationError(first_error_message(e.errors())) from e

    service.register(req, read_upload(file))
    return ApiResponse(message="Account created successfully")


@router.post("/login", response_model=UserEnvelope)
def login(
    req: LoginRequest,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """
    Log in and receive the session cookie.

    The signed token is set as an HTTP-only ``token`` cookie valid for one day.
    """
    result = service.login(req)
    set_session_cookie(response, result.token)

    user = UserPublic.model_validate(result.user)
    return UserEnvelope(message=f"Welcome back {user.fullname}", user=user)


@router.post("/logout", response_model=ApiResponse)
def logout(response: Response):
    """Clear the session cookie. Safe to call without a session."""
    clear_session_cookie(response)
    return ApiResponse(message="Logged out successfully.")


@router.post("/profile/update", response_model=UserEnvelope)
def update_profile(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service),
):
    """
    Update the current user's profile.

    Only the supplied fields change. An optional ``file`` is stored as the
    resume. An unknown user is reported before any form problem.
    """
    user = service.require_user(user_id)

    try:
        req = ProfileUpdateRequest(
            fullname=fullname,
            email=email,
            phone_number=phone_number,
            bio=bio,
            skills=skills,
        )
    except PydanticValidationError as e:
        raise ValidationError(first_error_message(e.errors())) from e

    user = service.update_profile(user, req, read_upload(file))
    return UserEnvelope(
        message="Profile updated successfully.",
        user=UserPublic.model_validate(user),
    )
