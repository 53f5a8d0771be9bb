"""
Authentication Handler

    POST /auth/register  JSON UserCreate                    → 201 AuthResponse, 409 on taken email
    POST /auth/login     JSON {"email", "password"}         → AuthResponse
    POST /auth/token     form username=<email>&password=... → {"access_token", "token_type"}
    GET  /auth/me        bearer token                       → UserResponse

/auth/token is the OAuth2 password flow endpoint the interactive docs'
"Authorize" button posts to.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from src.api.dependencies.auth import CurrentUser
from src.api.dependencies.services import AuthServiceDep
from src.shared.schemas.user import AuthResponse, TokenResponse, UserCreate, UserLogin, UserResponse
from src.shared.services.auth_service import Login


router = APIRouter()


def _auth_response(login: Login) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.model_validate(login.user),
        access_token=login.access_token,
        expires_in=login.expires_in,
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, auth_service: AuthServiceDep):
    login = await auth_service.register(
        email=user_data.email,
        password=user_data.password,
        full_name=user_data.full_name,
    )
    return _auth_response(login)


@router.post("/login", response_model=AuthResponse)
async def login(credentials: UserLogin, auth_service: AuthServiceDep):
    return _auth_response(await auth_service.login(credentials.email, credentials.password))


@router.post("/token", response_model=TokenResponse)
async def issue_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    auth_service: AuthServiceDep,
):
    login = await auth_service.login(form_data.username, form_data.password)
    return TokenResponse(access_token=login.access_token)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser):
    return current_user
