import logging
from typing import Annotated, List
from fastapi import APIRouter, HTTPException, Depends, Path, Query, Response, status

from app.core.deps import get_employee_service
from app.schemas.employee import (
    EmployeeCreateRequest,
    EmployeeDeleteResponse,
    EmployeeResponse,
    EmployeeUpdateRequest,
)
from app.services.employee_service import EmployeeNotFoundError, EmployeeService

router = APIRouter(prefix="/employees", tags=["Employees"])
logger = logging.getLogger(__name__)

# Range of the database's 64-bit integer primary key
MIN_EMPLOYEE_ID = -(2**63)
MAX_EMPLOYEE_ID = 2**63 - 1

EmployeeId = Annotated[int, Path(ge=MIN_EMPLOYEE_ID, le=MAX_EMPLOYEE_ID, description="Employee ID")]


def _list_or_no_content(employees: list):
    """Filtered lookups answer 204 with an empty body when nothing matches."""
    if not employees:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return employees


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmployeeResponse)
def create_employee(
    request: EmployeeCreateRequest,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Create a new employee.

    The ID is assigned by the database; an `id` in the body is ignored.
    """
    return service.save_employee(request)


@router.get("", response_model=List[EmployeeResponse])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """
    List all employees.

    Returns an empty list (200) when there are none.
    """
    return service.get_all_employees()


@router.get(
    "/lastName/{last_name}",
    response_model=List[EmployeeResponse],
    responses={204: {"description": "No employees with this last name"}},
)
def get_employees_by_last_name(
    last_name: str,
    service: EmployeeService = Depends(get_employee_service)
):
    """Employees with exactly this last name (case-sensitive)."""
    return _list_or_no_content(service.get_employees_by_last_name(last_name))


@router.get(
    "/position/{position}",
    response_model=List[EmployeeResponse],
    responses={204: {"description": "No employees with this position"}},
)
def get_employees_by_position(
    position: str,
    service: EmployeeService = Depends(get_employee_service)
):
    """Employees with exactly this position (case-sensitive)."""
    return _list_or_no_content(service.get_employees_by_position(position))


@router.get(
    "/email",
    response_model=List[EmployeeResponse],
    responses={204: {"description": "No email addresses contain this text"}},
)
def get_employees_by_email_containing(
    contains: str = Query(..., description="Text to search for in email addresses"),
    service: EmployeeService = Depends(get_employee_service)
):
    """Employees whose email address contains the given text."""
    return _list_or_no_content(service.get_employees_by_email_containing(contains))


@router.get(
    "/salary",
    response_model=List[EmployeeResponse],
    responses={204: {"description": "No employees earn at least this amount"}},
)
def get_employees_by_minimum_salary(
    min_salary: float = Query(..., alias="minSalary", description="Minimum salary, inclusive"),
    service: EmployeeService = Depends(get_employee_service)
):
    """Employees whose salary is greater than or equal to `minSalary`."""
    return _list_or_no_content(service.get_employees_by_minimum_salary(min_salary))


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: EmployeeId, service: EmployeeService = Depends(get_employee_service)):
    """
    Retrieve an employee by ID.
    """
    employee = service.get_employee_by_id(employee_id)

    if not employee:
        raise HTTPException(status_code=404, detail=f"Employee not found with id: {employee_id}")

    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: EmployeeId,
    request: EmployeeUpdateRequest,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Replace an employee's details.

    Every field except `id` is overwritten; fields missing from the body are
    cleared. Returns 404 if the employee does not exist.
    """
    try:
        return service.update_employee(employee_id, request)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{employee_id}", response_model=EmployeeDeleteResponse)
def delete_employee(employee_id: EmployeeId, service: EmployeeService = Depends(get_employee_service)):
    """
    Delete an employee by ID.

    Returns `{"deleted": true}`, or 404 if the employee does not exist
    (including when it was already deleted).
    """
    try:
        service.delete_employee(employee_id)
    except EmployeeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return EmployeeDeleteResponse(deleted=True)
