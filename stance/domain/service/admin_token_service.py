"""Admin capability token domain service."""

import logfire

from stance.config import AdminSettings
from stance.util.jwt import AdminTokenPayload, create_admin_token, verify_admin_token

from .base import Service


class AdminTokenService(Service):
    """Issues and checks the signed tokens that unlock admin endpoints."""

    def __init__(self, admin_settings: AdminSettings) -> None:
        """Initialize admin token service.

        Args:
            admin_settings: Admin settings
        """
        self.admin_settings = admin_settings

    def issue_token(self, subject: str) -> str:
        """Issue an admin token for an operator.

        Args:
            subject: Operator name

        Returns:
            JWT token string
        """
        with logfire.span("admin_token_service.issue_token", subject=subject):
            token = create_admin_token(subject, self.admin_settings)
            logfire.info("Admin token issued", subject=subject)
            return token

    def verify_token(self, token: str) -> AdminTokenPayload:
        """Verify an admin token and extract its payload.

        Raises:
            JWTError: If the token is invalid, expired or out of scope
        """
        with logfire.span("admin_token_service.verify_token"):
            try:
                payload = verify_admin_token(token, self.admin_settings)
                logfire.info("Admin token verified", subject=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("Admin token verification failed", error=str(e))
                raise

    def is_admin(self, token: str | None) -> bool:
        """Check a token without raising, for request guards."""
        if not token:
            return False

        try:
            self.verify_token(token)
            return True
        except Exception as e:
            logfire.debug("Treating request as non-admin", error=str(e))
            return False
