from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, status

from staff_api.core.deps import get_staff_service
from staff_api.schemas.staff import LoginIn, LoginOut, MessageOut, StaffOut, StaffUpdateOut
from staff_api.services.staff_service import StaffService

router = APIRouter(prefix="/staff", tags=["Staff"])


@router.post("/login", response_model=LoginOut)
def login_staff(
    request: Request,
    body: LoginIn,
    service: StaffService = Depends(get_staff_service),
):
    result = service.login(body.email, body.password)
    request.session["staff_id"] = result.staff_id
    return {"message": "Login successful!", "staffId": result.staff_id}


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
def create_staff(
    body: Any = Body(...),
    service: StaffService = Depends(get_staff_service),
):
    service.create(body)
    return {"message": "Staff created successfully!"}


@router.get("", response_model=List[StaffOut])
def list_staff(service: StaffService = Depends(get_staff_service)):
    return service.list()


@router.get("/{staff_id}", response_model=StaffOut)
def read_staff(staff_id: str, service: StaffService = Depends(get_staff_service)):
    return service.get(staff_id)


@router.api_route("/{staff_id}", methods=["PATCH", "PUT"], response_model=StaffUpdateOut)
def update_staff(
    staff_id: str,
    body: Any = Body(...),
    service: StaffService = Depends(get_staff_service),
):
    staff = service.update(staff_id, body)
    return {"message": "Staff updated successfully!", "staff": StaffOut.model_validate(staff)}


@router.delete("/{staff_id}", response_model=MessageOut)
def delete_staff(staff_id: str, service: StaffService = Depends(get_staff_service)):
    service.delete(staff_id)
    return {"message": "Staff deleted successfully!"}
