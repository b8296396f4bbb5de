from fastapi import Depends

from ..core.config import get_settings
from ..core.security import BcryptEncrypter, JwtTokenGenerator
from ..services.auth_usecase import AuthUseCase
from ..services.database import get_users_collection
from ..services.email_validator import EmailValidator
from ..services.users import LoadUserByEmailRepository, UpdateAccessTokenRepository
from .login_router import LoginRouter


def build_login_router(user_model) -> LoginRouter:
    """Wire the production collaborators around a users collection."""
    settings = get_settings()
    auth_use_case = AuthUseCase(
        load_user_by_email_repository=LoadUserByEmailRepository(user_model),
        update_access_token_repository=UpdateAccessTokenRepository(user_model),
        encrypter=BcryptEncrypter(rounds=settings.bcrypt_rounds),
        token_generator=JwtTokenGenerator(settings.token_secret),
    )
    return LoginRouter(auth_use_case=auth_use_case, email_validator=EmailValidator())


def get_login_router(user_model=Depends(get_users_collection)) -> LoginRouter:
    return build_login_router(user_model)
