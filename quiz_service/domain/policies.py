"""
Access policies for owned resources.

A single ownership rule is shared by every resource type that records its
creator: only the creator may mutate or delete it.
"""

from enum import Enum

from .exceptions import DomainException, ErrorCode


class AccessDecision(str, Enum):
    """Outcome of an authorization check."""

    ALLOW = "allow"
    FORBID = "forbid"


def authorize(resource_owner_id: str, caller_id: str) -> AccessDecision:
    """
    Decide whether a caller may mutate a resource.

    Args:
        resource_owner_id: Identifier recorded as the resource's creator
        caller_id: Identifier resolved from the caller's credential

    Returns:
        ALLOW when both identifiers are present and equal, FORBID otherwise
    """
    if resource_owner_id and caller_id and resource_owner_id == caller_id:
        return AccessDecision.ALLOW
    return AccessDecision.FORBID


def ensure_owner(resource_owner_id: str, caller_id: str, action: str) -> None:
    """
    Raise FORBIDDEN unless the caller owns the resource.

    Args:
        resource_owner_id: Identifier recorded as the resource's creator
        caller_id: Identifier resolved from the caller's credential
        action: Short description used in the error message ("update this question")
    """
    if authorize(resource_owner_id, caller_id) is AccessDecision.FORBID:
        raise DomainException(ErrorCode.FORBIDDEN, f"not permitted to {action}")
