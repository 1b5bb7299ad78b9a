from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_current_user, get_profile_repository
from app.core.exceptions import PersistenceFailure
from app.api.errors import to_http_exception
from app.models.profile import Profile
from app.repositories.profile_repository import ProfileRepository
from app.services.auth_service import auth_service
from app.schemas.auth import UserLogin, UserRegister, AuthResponse, ProfileRead

router = APIRouter()


def _issue_token(user: Profile) -> AuthResponse:
    access_token = auth_service.create_access_token(data={"sub": str(user.id)})
    return AuthResponse(access_token=access_token, token_type="bearer")


@router.post("/login", response_model=AuthResponse)
async def login(user: UserLogin, repo: ProfileRepository = Depends(get_profile_repository)):
    """Аутентификация пользователя и выдача JWT токена"""
    try:
        authenticated_user = await auth_service.authenticate_user(repo, user)
    except PersistenceFailure as e:
        raise to_http_exception(e)

    if not authenticated_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Неверный email или пароль",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _issue_token(authenticated_user)


@router.post("/register", response_model=AuthResponse)
async def register(user: UserRegister, repo: ProfileRepository = Depends(get_profile_repository)):
    """Регистрация нового пользователя и выдача JWT токена"""
    try:
        new_user = await auth_service.register_user(repo, user)
    except PersistenceFailure as e:
        raise to_http_exception(e)

    return _issue_token(new_user)


@router.get("/me", response_model=ProfileRead)
async def me(current_user: Profile = Depends(get_current_user)):
    return current_user
