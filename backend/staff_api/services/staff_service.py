from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from staff_api.core.exceptions import AuthenticationError, NotFoundError, ValidationError
from staff_api.core.security import hash_password, verify_password
from staff_api.db.staff_store import StaffStore
from staff_api.models.staff import Staff
from staff_api.services.role_directory import RoleDirectory
from staff_api.services.role_limits import check_role_limit
from staff_api.services.uniqueness import ensure_unique_on_create, ensure_unique_on_update
from staff_api.services.validation import validate_create, validate_update

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login; the caller binds it to the session."""
    staff_id: str


class StaffService:
    def __init__(self, db: Session, roles: RoleDirectory, bcrypt_rounds: Optional[int] = None):
        self.store = StaffStore(db)
        self.roles = roles
        self.bcrypt_rounds = bcrypt_rounds

    def login(self, email: Any, password: Any) -> LoginResult:
        if not email or not password:
            raise ValidationError("Email and password are required!", error_code="CREDENTIALS_REQUIRED")

        staff = self.store.find_one(email=str(email).lower())
        # unknown email and wrong password must look the same to the caller
        if not staff or not verify_password(str(password), staff.password):
            logger.warning("Failed login attempt")
            raise AuthenticationError()

        logger.info("Staff %s logged in", staff.id)
        return LoginResult(staff_id=staff.id)

    def create(self, data: Any) -> Staff:
        body = validate_create(data)

        check_role_limit(self.store, self.roles, body.role)
        ensure_unique_on_create(self.store, body.email, body.phone, body.cnic)

        staff = self.store.insert(
            username=body.username,
            email=body.email,
            phone=body.phone,
            cnic=body.cnic,
            password=hash_password(body.password, self.bcrypt_rounds),
            role=body.role,
        )
        logger.info("Created staff %s with role %s", staff.id, staff.role)
        return staff

    def list(self) -> List[Staff]:
        return self.store.list_all()

    def get(self, staff_id: str) -> Staff:
        staff = self.store.find_by_id(staff_id)
        if not staff:
            raise NotFoundError()
        return staff

    def update(self, staff_id: str, data: Any) -> Staff:
        changes: Dict[str, Any] = validate_update(data)
        if "password" in changes:
            changes["password"] = hash_password(changes["password"], self.bcrypt_rounds)

        current = self.get(staff_id)

        ensure_unique_on_update(self.store, current, changes)
        if "role" in changes and changes["role"] != current.role:
            check_role_limit(self.store, self.roles, changes["role"], exclude_id=current.id)

        staff = self.store.update(staff_id, changes)
        if not staff:
            raise NotFoundError()
        logger.info("Updated staff %s fields=%s", staff_id, sorted(changes))
        return staff

    def delete(self, staff_id: str) -> None:
        if not self.store.delete(staff_id):
            raise NotFoundError()
        logger.info("Deleted staff %s", staff_id)
