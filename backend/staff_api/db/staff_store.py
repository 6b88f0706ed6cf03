from typing import Any, Dict, List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from staff_api.models.staff import Staff


class StaffStore:
    """Persistence boundary for staff records.

    Every write commits immediately; callers never hold a transaction open
    across a store call.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, staff_id: str) -> Optional[Staff]:
        return self.db.get(Staff, staff_id)

    def find_one(self, **filters: Any) -> Optional[Staff]:
        stmt = select(Staff).filter_by(**filters).limit(1)
        return self.db.scalar(stmt)

    def find_any(self, exclude_id: Optional[str] = None, **values: Any) -> Optional[Staff]:
        """First record matching ANY of ``values`` (field=value pairs)."""
        clauses = [getattr(Staff, field) == value for field, value in values.items()]
        if not clauses:
            return None
        stmt = select(Staff).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(Staff.id != exclude_id)
        return self.db.scalar(stmt.limit(1))

    def count(self, exclude_id: Optional[str] = None, **filters: Any) -> int:
        stmt = select(func.count()).select_from(Staff).filter_by(**filters)
        if exclude_id is not None:
            stmt = stmt.where(Staff.id != exclude_id)
        return self.db.scalar(stmt) or 0

    def list_all(self) -> List[Staff]:
        return list(self.db.scalars(select(Staff).order_by(Staff.created_at)).all())

    def insert(self, **fields: Any) -> Staff:
        staff = Staff(**fields)
        self.db.add(staff)
        self.db.commit()
        self.db.refresh(staff)
        return staff

    def update(self, staff_id: str, fields: Dict[str, Any]) -> Optional[Staff]:
        staff = self.find_by_id(staff_id)
        if not staff:
            return None
        for field, value in fields.items():
            setattr(staff, field, value)
        self.db.commit()
        self.db.refresh(staff)
        return staff

    def delete(self, staff_id: str) -> bool:
        staff = self.find_by_id(staff_id)
        if not staff:
            return False
        self.db.delete(staff)
        self.db.commit()
        return True
