"""Unit tests for ResolveSessionUseCase."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from worldnews.application.usecase.auth import (
    ResolveSessionRequest,
    ResolveSessionUseCase,
)
from worldnews.config import AuthSettings
from worldnews.domain.model import Session
from worldnews.domain.repository import UserRepository
from worldnews.domain.service import JWTService
from worldnews.util.jwt import create_token
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def resolve(unit_env, token: str | None) -> Session | None:
    use_case = await unit_env.get(ResolveSessionUseCase)
    return (await use_case.execute(ResolveSessionRequest(token=token))).session


@pytest.mark.asyncio
async def test_no_token(unit_env):
    assert await resolve(unit_env, None) is None


@pytest.mark.asyncio
async def test_garbage_token(unit_env):
    assert await resolve(unit_env, "not.a.jwt") is None


@pytest.mark.asyncio
async def test_expired_token(unit_env):
    """Expired tokens resolve as signed out."""
    settings = await unit_env.get(AuthSettings)
    token = jwt.encode(
        {
            "user_id": None,
            "username": "guest_explorer",
            "is_guest": True,
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )

    assert await resolve(unit_env, token) is None


@pytest.mark.asyncio
async def test_token_signed_with_other_secret(unit_env):
    settings = await unit_env.get(AuthSettings)
    other = settings.model_copy(
        update={"jwt_secret": "another-signing-key-0123456789abcdef"}
    )
    forged = create_token(
        user_id=None, username="guest_explorer", settings=other, is_guest=True
    )

    assert await resolve(unit_env, forged) is None


@pytest.mark.asyncio
async def test_guest_token(unit_env):
    jwt_service = await unit_env.get(JWTService)
    token = jwt_service.create_session_token(Session.guest())

    session = await resolve(unit_env, token)

    assert session == Session.guest()


@pytest.mark.asyncio
async def test_member_token_reads_current_user(unit_env):
    """Role changes apply without a new token."""
    jwt_service = await unit_env.get(JWTService)
    user_repo = await unit_env.get(UserRepository)
    user = await user_repo.save(make_user("alice"))
    token = jwt_service.create_session_token(Session.for_user(user))
    await user_repo.save(user.model_copy(update={"is_admin": True}))

    session = await resolve(unit_env, token)

    assert session.user_id == user.id
    assert session.is_admin is True


@pytest.mark.asyncio
async def test_deactivated_user_token(unit_env):
    """A deactivated account's existing token no longer works."""
    jwt_service = await unit_env.get(JWTService)
    user_repo = await unit_env.get(UserRepository)
    user = await user_repo.save(make_user("alice"))
    token = jwt_service.create_session_token(Session.for_user(user))
    await user_repo.set_active(user.id, False)

    assert await resolve(unit_env, token) is None


@pytest.mark.asyncio
async def test_deleted_user_token(unit_env):
    jwt_service = await unit_env.get(JWTService)
    user_repo = await unit_env.get(UserRepository)
    user = await user_repo.save(make_user("alice"))
    token = jwt_service.create_session_token(Session.for_user(user))
    await user_repo.delete(user.id)

    assert await resolve(unit_env, token) is None


@pytest.mark.asyncio
async def test_malformed_user_id(unit_env):
    settings = await unit_env.get(AuthSettings)
    token = create_token(user_id="not-a-uuid", username="alice", settings=settings)

    assert await resolve(unit_env, token) is None
