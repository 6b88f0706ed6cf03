from typing import Optional

from staff_api.core.exceptions import ConflictError, ValidationError
from staff_api.db.staff_store import StaffStore
from staff_api.services.role_directory import RoleDirectory, RoleInfo


def fetch_role_limit(directory: RoleDirectory, role_id: str) -> RoleInfo:
    role = directory.fetch_role(role_id)
    if role is None:
        raise ValidationError("Invalid role ID!", error_code="INVALID_ROLE")
    return role


def check_role_limit(
    store: StaffStore,
    directory: RoleDirectory,
    role_id: str,
    exclude_id: Optional[str] = None,
) -> RoleInfo:
    """Reject the assignment when the role is already at capacity.

    Not atomic with the write that follows: two concurrent requests may both
    pass and push the role over its limit.
    """
    role = fetch_role_limit(directory, role_id)
    occupants = store.count(role=role_id, exclude_id=exclude_id)
    if occupants >= role.limit:
        raise ConflictError(
            f'Limit Reached! Cannot assign more staff to the "{role.name}" role.',
            error_code="ROLE_LIMIT_REACHED",
        )
    return role
