from fastapi import Depends, Request
from sqlalchemy.orm import Session

from staff_api.core.config import Settings
from staff_api.db.session import get_db
from staff_api.services.role_directory import HttpRoleDirectory, RoleDirectory
from staff_api.services.staff_service import StaffService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_role_directory(settings: Settings = Depends(get_app_settings)) -> RoleDirectory:
    return HttpRoleDirectory(settings.ROLE_SERVICE_URL, timeout=settings.ROLE_SERVICE_TIMEOUT)


def get_staff_service(
    db: Session = Depends(get_db),
    roles: RoleDirectory = Depends(get_role_directory),
    settings: Settings = Depends(get_app_settings),
) -> StaffService:
    return StaffService(db, roles, bcrypt_rounds=settings.BCRYPT_ROUNDS)
