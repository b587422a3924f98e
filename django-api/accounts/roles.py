"""Role-based authorization rules.

Every rule matches the role exhaustively so adding a role fails type
checking until each rule decides what the new role may do.
"""

from typing import assert_never

from accounts.models import Role


def can_purchase(role: Role) -> bool:
    match role:
        case Role.BUYER:
            return True
        case Role.PROMOTER:
            return False
        case _:
            assert_never(role)


def can_manage_events(role: Role) -> bool:
    match role:
        case Role.BUYER:
            return False
        case Role.PROMOTER:
            return True
        case _:
            assert_never(role)


def role_of(user) -> Role:
    """Return the Role of a user record, rejecting unknown values."""
    return Role(user.role)
