"""
Authentication module for MediaHub listings

Vendor-independent JWT token validation using JWKS (JSON Web Key Set).
Supports any OIDC-compliant provider: Google, Azure AD, Auth0, Okta, etc.

Listings are public: a token is optional. When one is sent it must be
valid, and its subject becomes the requester id the engine uses for
ownership-aware fields (isOwner).

Configuration (environment variables):
- JWKS_URL: URL to provider's JWKS endpoint (e.g., https://www.googleapis.com/oauth2/v3/certs)
- ISSUER: Expected token issuer (e.g., https://accounts.google.com)
- AUDIENCE: Expected audience (client ID)
"""

import os
import logging
from typing import Optional
from fastapi import HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
import jwt
from jwt import PyJWKClient
from jwt.exceptions import InvalidTokenError, ExpiredSignatureError

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI (no auto 403 - anonymous listing is allowed)
security = HTTPBearer(
    scheme_name="HTTPBearer",
    description="JWT token from OIDC provider (Google, Azure AD, Auth0, etc.)",
    auto_error=False,
)

# Load config from environment
JWKS_URL = os.getenv("JWKS_URL", "https://www.googleapis.com/oauth2/v3/certs")  # Google default
ISSUER = os.getenv("ISSUER", "https://accounts.google.com")  # Google default
AUDIENCE = os.getenv("AUDIENCE", "")  # Client ID


class AuthError(HTTPException):
    """Custom exception for authentication errors"""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def verify_jwt_token(token: str) -> dict:
    """
    Verify JWT token using JWKS (vendor-independent)

    Args:
        token: JWT token from Authorization header

    Returns:
        dict with user claims: {"sub": "user_id", "email": "user@example.com", ...}

    Raises:
        AuthError: If token is invalid, expired, or signature verification fails
    """
    try:
        jwks_client = PyJWKClient(JWKS_URL)
        signing_key = jwks_client.get_signing_key_from_jwt(token)

        data = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            audience=AUDIENCE,
            issuer=ISSUER,
            options={
                "verify_signature": True,
                "verify_exp": True,
                "verify_aud": True,
                "verify_iss": True,
            }
        )

        return {
            "sub": data.get("sub"),
            "email": data.get("email"),
            "name": data.get("name"),
        }

    except ExpiredSignatureError:
        raise AuthError("Token has expired")
    except InvalidTokenError as e:
        raise AuthError(f"Invalid token: {str(e)}")
    except Exception as e:
        raise AuthError(f"Token verification failed: {str(e)}")


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[str]:
    """
    FastAPI dependency: requester id from an optional bearer token

    Usage:
        @app.get("/v1/videos")
        async def list_videos(requester_id: Optional[str] = Depends(get_current_user_optional)):
            ...

    Returns:
        The token's subject claim, or None when no token was sent

    Raises:
        AuthError: 401 if a token was sent but is invalid
    """
    if not credentials:
        return None

    user_info = verify_jwt_token(credentials.credentials)
    if not user_info["sub"]:
        raise AuthError("Token has no subject claim")

    logger.debug(f"Authenticated requester: sub={user_info['sub']}")
    return user_info["sub"]
