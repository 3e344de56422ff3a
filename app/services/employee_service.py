"""
Employee application service.

Thin orchestration over the employee repository. Lookups that match nothing
return None or an empty list; only update and delete treat a missing employee
as an error, raising EmployeeNotFoundError.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud import employee as employee_crud
from app.models.employee import Employee
from app.schemas.employee import EmployeeBase

logger = logging.getLogger(__name__)


class EmployeeNotFoundError(Exception):
    """Raised when an update or delete targets an employee that does not exist."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee not found with id: {employee_id}")


class EmployeeService:
    """
    Employee operations bound to one database session.

    Constructed per request by ``app.core.deps.get_employee_service``.
    """

    def __init__(self, db: Session):
        self.db = db

    def save_employee(self, employee_data: EmployeeBase) -> Employee:
        employee = employee_crud.create(self.db, employee_data)
        logger.info(f"Created employee {employee.id}: {employee.first_name} {employee.last_name}",
                    extra={"employee_id": employee.id})
        return employee

    def get_all_employees(self) -> List[Employee]:
        return employee_crud.get_all(self.db)

    def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return employee_crud.get_by_id(self.db, employee_id)

    def get_employees_by_last_name(self, last_name: str) -> List[Employee]:
        return employee_crud.get_by_last_name(self.db, last_name)

    def get_employees_by_position(self, position: str) -> List[Employee]:
        return employee_crud.get_by_position(self.db, position)

    def get_employees_by_email_containing(self, fragment: str) -> List[Employee]:
        return employee_crud.get_by_email_containing(self.db, fragment)

    def get_employees_by_minimum_salary(self, min_salary: float) -> List[Employee]:
        return employee_crud.get_by_min_salary(self.db, min_salary)

    def update_employee(self, employee_id: int, employee_data: EmployeeBase) -> Employee:
        """
        Overwrite every field of an existing employee except its ID.

        Raises:
            EmployeeNotFoundError: If no employee has this ID
        """
        employee = employee_crud.update(self.db, employee_id, employee_data)
        if employee is None:
            logger.warning(f"Update rejected, employee {employee_id} not found", extra={"employee_id": employee_id})
            raise EmployeeNotFoundError(employee_id)

        logger.info(f"Updated employee {employee_id}", extra={"employee_id": employee_id})
        return employee

    def delete_employee(self, employee_id: int) -> None:
        """
        Remove an existing employee.

        Raises:
            EmployeeNotFoundError: If no employee has this ID
        """
        if not employee_crud.delete_by_id(self.db, employee_id):
            logger.warning(f"Delete rejected, employee {employee_id} not found", extra={"employee_id": employee_id})
            raise EmployeeNotFoundError(employee_id)

        logger.info(f"Deleted employee {employee_id}", extra={"employee_id": employee_id})

    def employee_exists(self, employee_id: int) -> bool:
        return employee_crud.exists(self.db, employee_id)
