"""
Sample employees loaded at application startup.

Enabled by the SEED_SAMPLE_DATA setting. Loading replaces whatever the
employees table held before, so the API always starts from the same five
records.
"""

import logging
from datetime import date
from typing import List
from sqlalchemy.orm import Session

from app.crud import employee as employee_crud
from app.models.employee import Employee

logger = logging.getLogger(__name__)


SAMPLE_EMPLOYEES = [
    {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john.doe@example.com",
        "phone_number": "123-456-7890",
        "position": "Software Engineer",
        "salary": 85000.0,
        "hire_date": date(2020, 3, 15),
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "email": "jane.smith@example.com",
        "phone_number": "987-654-3210",
        "position": "Product Manager",
        "salary": 95000.0,
        "hire_date": date(2019, 6, 10),
    },
    {
        "first_name": "Robert",
        "last_name": "Johnson",
        "email": "robert.johnson@example.com",
        "phone_number": "555-123-4567",
        "position": "QA Engineer",
        "salary": 75000.0,
        "hire_date": date(2021, 1, 5),
    },
    {
        "first_name": "Emily",
        "last_name": "Davis",
        "email": "emily.davis@example.com",
        "phone_number": "444-333-2222",
        "position": "UX Designer",
        "salary": 82000.0,
        "hire_date": date(2022, 2, 20),
    },
    {
        "first_name": "Michael",
        "last_name": "Brown",
        "email": "michael.brown@example.com",
        "phone_number": "777-888-9999",
        "position": "DevOps Engineer",
        "salary": 92000.0,
        "hire_date": date(2018, 11, 12),
    },
]


def seed_sample_employees(db: Session) -> List[Employee]:
    """
    Replace the contents of the employees table with the sample employees.

    Args:
        db: Database session

    Returns:
        The inserted Employee instances
    """
    removed = employee_crud.delete_all(db)
    if removed:
        logger.info(f"Removed {removed} existing employees before loading sample data")

    employees = employee_crud.save_all(db, [Employee(**data) for data in SAMPLE_EMPLOYEES])

    logger.info("Sample data initialized with employees:")
    for employee in employees:
        logger.info(f"  {employee!r}")

    return employees
