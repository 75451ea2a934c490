"""JWT request gate

Attaches the caller's identity to ``request.state.principal`` for every
non-public request. A missing, malformed, expired or forged token leaves the
principal unset; the route guards in ``dependencies`` decide what that means.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from ..core.config import settings
from ..core.security import TokenInvalid, TokenService
from ..domain.enums import UserRole


logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Always public, any method, relative to the API prefix
PUBLIC_PREFIXES = ("/auth/", "/uploads/")

# Always public, absolute
PUBLIC_PATHS = ("/", "/health", "/docs", "/redoc", "/openapi.json")


@dataclass(frozen=True)
class Principal:
    username: str
    role: UserRole


def _under(path: str, root: str) -> bool:
    return path == root or path.startswith(root + "/")


def is_public(method: str, path: str, api_prefix: Optional[str] = None) -> bool:
    """Whether ``method path`` skips token evaluation"""
    if path in PUBLIC_PATHS or path.startswith("/docs/"):
        return True

    api_prefix = settings.API_PREFIX if api_prefix is None else api_prefix
    if api_prefix and not _under(path, api_prefix):
        return False
    relative = path[len(api_prefix):] if api_prefix else path

    if relative.startswith(PUBLIC_PREFIXES):
        return True
    if method == "GET" and (_under(relative, "/products") or _under(relative, "/orders")):
        return True
    if method == "POST" and relative.rstrip("/") == "/orders":
        return True
    return False


def bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization")
    if header and header.startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX):].strip() or None
    return None


def resolve_principal(token: str, token_service: TokenService) -> Optional[Principal]:
    try:
        username = token_service.get_username(token)
        if not token_service.validate(token, username):
            logger.debug("Rejected expired token for %s", username)
            return None
        return Principal(username=username, role=UserRole(token_service.get_role(token)))
    except (TokenInvalid, ValueError) as e:
        logger.debug("Rejected bearer token: %s", e)
        return None


async def jwt_gate(request: Request, call_next):
    request.state.principal = None
    if not is_public(request.method, request.url.path):
        token = bearer_token(request)
        if token:
            request.state.principal = resolve_principal(token, request.app.state.token_service)
    return await call_next(request)
