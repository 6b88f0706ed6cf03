from typing import Any, Dict

from staff_api.core.exceptions import ConflictError
from staff_api.db.staff_store import StaffStore
from staff_api.models.staff import Staff

UNIQUE_FIELDS = ("email", "phone", "cnic")


def ensure_unique_on_create(store: StaffStore, email: str, phone: str, cnic: str) -> None:
    if store.find_any(email=email, phone=phone, cnic=cnic):
        raise ConflictError("Staff already exists!", error_code="STAFF_EXISTS")


def ensure_unique_on_update(store: StaffStore, current: Staff, changes: Dict[str, Any]) -> None:
    for field in UNIQUE_FIELDS:
        value = changes.get(field)
        if value is None or value == getattr(current, field):
            continue
        if store.find_any(exclude_id=current.id, **{field: value}):
            raise ConflictError(f"{field} already exists!", error_code="DUPLICATE_FIELD")
