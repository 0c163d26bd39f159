"""Unit tests for IdentityResolver."""

import pytest

from stance.config import IdentitySettings
from stance.domain.service import IdentityResolver
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def resolver() -> IdentityResolver:
    return IdentityResolver(IdentitySettings())


class TestResolve:
    """Tests for identity resolution order."""

    def test_first_forwarded_for_entry_wins(self, resolver):
        identity = resolver.resolve(
            {"X-Forwarded-For": "203.0.113.7, 10.0.0.1", "X-Real-IP": "10.9.9.9"},
            client_host="172.16.0.1",
        )

        assert identity.root == "203.0.113.7"

    def test_peer_address_when_no_forwarded_for(self, resolver):
        identity = resolver.resolve({"x-real-ip": "10.9.9.9"}, client_host="172.16.0.1")

        assert identity.root == "172.16.0.1"

    def test_real_ip_when_no_peer(self, resolver):
        identity = resolver.resolve({"x-real-ip": "10.9.9.9"}, client_host=None)

        assert identity.root == "10.9.9.9"

    def test_loopback_sentinel_as_last_resort(self, resolver):
        identity = resolver.resolve({}, client_host=None)

        assert identity.root == "127.0.0.1"

    def test_blank_forwarded_for_is_ignored(self, resolver):
        identity = resolver.resolve({"x-forwarded-for": " , 10.0.0.1"}, client_host="1.2.3.4")

        assert identity.root == "1.2.3.4"

    def test_header_names_are_configurable(self):
        resolver = IdentityResolver(
            IdentitySettings(forwarded_for_header="CF-Connecting-IP")
        )

        identity = resolver.resolve({"cf-connecting-ip": "198.51.100.4"})

        assert identity.root == "198.51.100.4"

    @pytest.mark.asyncio
    async def test_resolver_is_provided_by_container(self, unit_env):
        resolver = await unit_env.get(IdentityResolver)

        assert resolver.resolve({}, client_host="8.8.8.8").root == "8.8.8.8"


class TestOversizedCandidates:
    """Header values too long to be an identity are skipped, never fatal."""

    def test_oversized_forwarded_for_falls_through_to_peer(self, resolver):
        identity = resolver.resolve({"x-forwarded-for": "a" * 300}, client_host="1.2.3.4")

        assert identity.root == "1.2.3.4"

    def test_every_source_oversized_gives_sentinel(self, resolver):
        identity = resolver.resolve(
            {"x-forwarded-for": "a" * 300, "x-real-ip": "b" * 256},
            client_host="c" * 256,
        )

        assert identity.root == "127.0.0.1"

    def test_longest_allowed_candidate_is_kept(self, resolver):
        identity = resolver.resolve({"x-forwarded-for": "a" * 255})

        assert identity.root == "a" * 255
