"""
Shared test utilities and factories.

Re-exports all factory functions for convenient imports:
    from rethinking_econ.testing import create_profile, create_publication, get_auth_headers
"""

from rethinking_econ.testing.factories import (
    create_admin,
    create_category,
    create_event,
    create_membership,
    create_membership_type,
    create_policy,
    create_profile,
    create_publication,
    create_tag,
    get_admin_headers,
    get_auth_headers,
    get_auth_token,
    tag_publication,
)

__all__ = [
    "create_admin",
    "create_category",
    "create_event",
    "create_membership",
    "create_membership_type",
    "create_policy",
    "create_profile",
    "create_publication",
    "create_tag",
    "get_admin_headers",
    "get_auth_headers",
    "get_auth_token",
    "tag_publication",
]
