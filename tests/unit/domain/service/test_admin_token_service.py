"""Unit tests for AdminTokenService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from stance.config import AdminSettings
from stance.domain.service import AdminTokenService
from stance.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SECRET = "test-secret-long-enough-for-hs256-signing"


@pytest.fixture
def settings() -> AdminSettings:
    return AdminSettings(token_secret=SECRET)


class TestAdminTokens:
    """Tests for issuing and checking admin tokens."""

    def test_issued_token_verifies(self, settings):
        service = AdminTokenService(settings)

        payload = service.verify_token(service.issue_token("ops"))

        assert payload.sub == "ops"
        assert payload.scope == "admin"
        assert payload.exp > datetime.now(timezone.utc)

    def test_wrong_secret_is_rejected(self, settings):
        token = AdminTokenService(settings).issue_token("ops")
        other = AdminTokenService(
            AdminSettings(token_secret="another-secret-long-enough-for-hs256")
        )

        with pytest.raises(JWTError, match="Invalid token"):
            other.verify_token(token)

    def test_expired_token_is_rejected(self, settings):
        token = jwt.encode(
            {
                "sub": "ops",
                "scope": "admin",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            AdminTokenService(settings).verify_token(token)

    def test_token_without_admin_scope_is_rejected(self, settings):
        token = jwt.encode(
            {
                "sub": "ops",
                "scope": "viewer",
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="scope"):
            AdminTokenService(settings).verify_token(token)

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_is_admin_is_false_for_bad_tokens(self, settings, token):
        assert AdminTokenService(settings).is_admin(token) is False

    def test_is_admin_for_valid_token(self, settings):
        service = AdminTokenService(settings)

        assert service.is_admin(service.issue_token("ops")) is True

    @pytest.mark.asyncio
    async def test_service_is_provided_by_container(self, unit_env):
        service = await unit_env.get(AdminTokenService)

        assert service.is_admin(service.issue_token("ops"))
