#!/usr/bin/env python3
"""Mint an admin capability token.

Usage:
    python scripts/issue_admin_token.py <operator-name>

The token is signed with ADMIN__TOKEN_SECRET and is accepted by the admin
endpoints as an ``admin_token`` cookie or an ``Authorization: Bearer`` header.
"""

import sys

from stance.config import Settings
from stance.domain.service import AdminTokenService


def main() -> int:
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    service = AdminTokenService(admin_settings=settings.admin)
    print(service.issue_token(sys.argv[1]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
