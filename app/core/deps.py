"""
FastAPI dependencies that wire services onto the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.employee_service import EmployeeService


def get_employee_service(db: Session = Depends(get_db)) -> EmployeeService:
    """
    Build an EmployeeService bound to the current request's session.

    Overriding ``get_db`` (as the tests do) is enough to point the service
    at another database.
    """
    return EmployeeService(db)
