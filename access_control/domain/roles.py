"""
Role Hierarchy

Total order over company roles: owner > admin > supervisor > operator.
ROLE_RANK is the only rank table; every "at least this privileged" check
goes through dominates().
"""

from typing import Optional

from access_control.domain.entities.enums import UserRole

ROLE_RANK = {
    UserRole.owner: 4,
    UserRole.admin: 3,
    UserRole.supervisor: 2,
    UserRole.operator: 1,
}

# Ownership is created at signup only, never handed out afterwards
ASSIGNABLE_ROLES = (UserRole.admin, UserRole.supervisor, UserRole.operator)


def dominates(have: UserRole, need: UserRole) -> bool:
    """True iff a holder of `have` satisfies a requirement of `need`"""
    return ROLE_RANK[have] >= ROLE_RANK[need]


def parse_role(value) -> Optional[UserRole]:
    """Map an external role tag to a UserRole, or None if it is unknown"""
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(value)
    except ValueError:
        return None


def is_assignable(role: UserRole) -> bool:
    return role in ASSIGNABLE_ROLES


def role_choices() -> str:
    return ", ".join(role.value for role in ASSIGNABLE_ROLES)
