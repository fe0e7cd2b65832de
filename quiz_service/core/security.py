"""
Security utilities for bearer credentials.

Extracts the caller identity from the claims segment of a Supabase access
token. The identity provider validated the credential when it issued it;
by default the claims are decoded without verifying the signature. When
the project JWT secret is configured, ``verify_token_signature`` checks
the signature locally before the claims are trusted.
"""

import binascii
import json
from typing import Any, Dict, Optional

import jwt
from jwt.exceptions import InvalidTokenError
from jwt.utils import base64url_decode

from ..domain.exceptions import DomainException, ErrorCode
from ..logging_config import get_logger

logger = get_logger(__name__)

BEARER_SCHEME = "bearer"
SUPABASE_AUDIENCE = "authenticated"


def strip_bearer_prefix(value: Optional[str]) -> str:
    """
    Remove a leading ``Bearer `` scheme from an Authorization header value.

    Args:
        value: Raw header value, possibly None

    Returns:
        The bare credential, or an empty string
    """
    if not value:
        return ""

    parts = value.split(None, 1)
    if not parts:
        return ""
    if parts[0].lower() == BEARER_SCHEME:
        return parts[1].strip() if len(parts) > 1 else ""
    return value.strip()


def decode_token_claims(token: str) -> Dict[str, Any]:
    """
    Decode the claims segment of a three-part bearer credential.

    Args:
        token: Credential already stripped of its scheme prefix

    Returns:
        The claims mapping

    Raises:
        DomainException: INVALID_TOKEN if the credential is malformed
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise DomainException(ErrorCode.INVALID_TOKEN, "invalid token format")

    try:
        payload = base64url_decode(parts[1])
    except (binascii.Error, ValueError):
        raise DomainException(ErrorCode.INVALID_TOKEN, "failed to decode token claims")

    try:
        claims = json.loads(payload)
    except (UnicodeDecodeError, ValueError, RecursionError):
        raise DomainException(ErrorCode.INVALID_TOKEN, "failed to parse token claims")

    if not isinstance(claims, dict):
        raise DomainException(ErrorCode.INVALID_TOKEN, "token claims must be an object")

    return claims


def extract_user_id_from_token(token: str) -> str:
    """
    Resolve the caller's user identifier from a bearer credential.

    Args:
        token: Credential already stripped of its scheme prefix

    Returns:
        The ``sub`` claim

    Raises:
        DomainException: INVALID_TOKEN if the credential is malformed or
            carries no subject
    """
    claims = decode_token_claims(token)

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        raise DomainException(ErrorCode.INVALID_TOKEN, "user id not found in token")

    return subject


def verify_token_signature(token: str, secret: str) -> Dict[str, Any]:
    """
    Verify a Supabase access token against the project JWT secret.

    Args:
        token: Credential already stripped of its scheme prefix
        secret: Project JWT secret (HS256)

    Returns:
        Verified claims

    Raises:
        DomainException: INVALID_TOKEN if the signature, expiry or
            audience check fails
    """
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=["HS256"],
            audience=SUPABASE_AUDIENCE,
        )
    except InvalidTokenError as e:
        logger.warning(f"Bearer credential rejected: {e}")
        raise DomainException(ErrorCode.INVALID_TOKEN, "invalid or expired token")
