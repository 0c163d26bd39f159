"""Visitor identity resolution."""

from collections.abc import Mapping

import logfire

from stance.config import IdentitySettings
from stance.domain.value import VisitorIdentity
from stance.domain.value.types import IDENTITY_MAX_LENGTH

from .base import Service


class IdentityResolver(Service):
    """Derives the weak per-visitor identity from request metadata.

    Resolution order:
    1. First entry of the forwarded-for chain
    2. Direct-connection peer address
    3. Real-IP header
    4. Fixed loopback sentinel

    Blank or oversized candidates are skipped, so resolution never fails.
    This is a best-effort anti-duplicate signal, not authentication.
    """

    def __init__(self, identity_settings: IdentitySettings) -> None:
        """Initialize identity resolver.

        Args:
            identity_settings: Header names and fallback identity
        """
        self.identity_settings = identity_settings

    def resolve(
        self, headers: Mapping[str, str], client_host: str | None = None
    ) -> VisitorIdentity:
        """Resolve the identity for one request.

        Args:
            headers: Request headers (looked up case-insensitively)
            client_host: Address of the direct peer, if known

        Returns:
            The visitor identity
        """
        lowered = {key.lower(): value for key, value in headers.items()}

        forwarded = lowered.get(self.identity_settings.forwarded_for_header.lower())
        candidates = [
            forwarded.split(",")[0] if forwarded else None,
            client_host,
            lowered.get(self.identity_settings.real_ip_header.lower()),
        ]
        for candidate in candidates:
            usable = self._usable(candidate)
            if usable:
                return VisitorIdentity(usable)

        return VisitorIdentity(self.identity_settings.fallback_identity)

    @staticmethod
    def _usable(candidate: str | None) -> str | None:
        """Trimmed candidate, or None if it cannot be a visitor identity."""
        if not candidate:
            return None
        candidate = candidate.strip()
        if not 1 <= len(candidate) <= IDENTITY_MAX_LENGTH:
            if candidate:
                logfire.warn(
                    "Ignoring oversized identity candidate", length=len(candidate)
                )
            return None
        return candidate
