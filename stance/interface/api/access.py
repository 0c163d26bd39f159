"""Request-level access helpers shared by the routers."""

from fastapi import HTTPException, Request, status

from stance.domain.service import AdminTokenService, IdentityResolver

ADMIN_TOKEN_COOKIE = "admin_token"


def resolve_identity(request: Request, identity_resolver: IdentityResolver) -> str:
    """Derive the caller's visitor identity from the request."""
    client_host = request.client.host if request.client else None
    return identity_resolver.resolve(request.headers, client_host).root


def require_admin(request: Request, admin_token_service: AdminTokenService) -> None:
    """Reject the request unless it carries a valid admin token.

    The token is read from the ``admin_token`` cookie, or from an
    ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    token = request.cookies.get(ADMIN_TOKEN_COOKIE)
    if not token:
        scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token = credentials.strip()

    if not admin_token_service.is_admin(token):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin authentication required",
        )
