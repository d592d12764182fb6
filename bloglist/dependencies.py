"""Application dependencies."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.auth import AuthorizationPolicy
from bloglist.configs import API_PREFIX, settings
from bloglist.db import get_session
from bloglist.errors import UnauthenticatedError
from bloglist.managers import TokenManager
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository

# auto_error=False: the policy, not the security scheme, decides what a
# missing credential means for each action
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{API_PREFIX}/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]
CredentialDep = Annotated[str | None, Depends(oauth2_scheme)]


@lru_cache
def get_token_manager() -> TokenManager:
    """Token manager built once from settings."""
    return TokenManager.from_settings(settings)


TokenManagerDep = Annotated[TokenManager, Depends(get_token_manager)]


def get_authorization_policy(token_manager: TokenManagerDep) -> AuthorizationPolicy:
    """Authorization policy bound to the configured secret and update rule."""
    return AuthorizationPolicy(
        token_manager,
        require_owner_on_update=settings.REQUIRE_OWNER_ON_UPDATE,
    )


PolicyDep = Annotated[AuthorizationPolicy, Depends(get_authorization_policy)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """Resolve the `BlogRepository` dependency."""
    return BlogRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    """Resolve the `UserRepository` dependency."""
    return UserRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


async def get_current_user(
    token: CredentialDep,
    policy: PolicyDep,
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get the user named by the bearer credential.

    Raises:
        UnauthenticatedError: If the credential is missing or invalid, or its
            subject no longer exists
    """
    user_id = policy.authorize_create(token)
    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise UnauthenticatedError("user not found")
    return user


CurrentUserDep = Annotated[UserDB, Depends(get_current_user)]
