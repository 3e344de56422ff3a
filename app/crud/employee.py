"""
CRUD operations for Employee model.

Implements the Repository pattern to encapsulate all database operations
for employees, providing a clean interface for the service layer.

Write operations commit their own transaction and roll the session back
before re-raising if the database rejects the statement.
"""

from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from app.models.employee import Employee
from app.schemas.employee import EmployeeBase

# Columns a client may write; the primary key is assigned by the database.
WRITABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "position",
    "salary",
    "hire_date",
)


def save(db: Session, employee: Employee) -> Employee:
    """
    Persist an employee.

    Inserts when the employee has no id, otherwise replaces the stored
    record with the same id.

    Args:
        db: Database session
        employee: Employee instance, transient or detached

    Returns:
        Persisted Employee instance with id populated
    """
    try:
        if employee.id is None:
            db.add(employee)
        else:
            employee = db.merge(employee)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(employee)
    return employee


def save_all(db: Session, employees: Iterable[Employee]) -> List[Employee]:
    """
    Insert several employees in a single transaction.

    Args:
        db: Database session
        employees: New Employee instances

    Returns:
        The persisted Employee instances, ids populated
    """
    employees = list(employees)
    try:
        db.add_all(employees)
        db.commit()
    except Exception:
        db.rollback()
        raise

    for employee in employees:
        db.refresh(employee)
    return employees


def create(db: Session, employee_data: EmployeeBase) -> Employee:
    """
    Create a new employee in the database.

    Args:
        db: Database session
        employee_data: Parsed employee payload

    Returns:
        Created Employee instance with id
    """
    db_employee = Employee(**employee_data.model_dump(include=set(WRITABLE_FIELDS)))
    return save(db, db_employee)


def get_all(db: Session) -> List[Employee]:
    """Retrieve every employee in insertion order."""
    return db.query(Employee).order_by(Employee.id).all()


def get_by_id(db: Session, employee_id: int) -> Optional[Employee]:
    """
    Retrieve an employee by its ID.

    Args:
        db: Database session
        employee_id: Employee ID to retrieve

    Returns:
        Employee instance if found, None otherwise
    """
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_by_last_name(db: Session, last_name: str) -> List[Employee]:
    """Employees whose last name equals ``last_name`` exactly."""
    return db.query(Employee).filter(Employee.last_name == last_name).order_by(Employee.id).all()


def get_by_position(db: Session, position: str) -> List[Employee]:
    """Employees whose position equals ``position`` exactly."""
    return db.query(Employee).filter(Employee.position == position).order_by(Employee.id).all()


def get_by_email_containing(db: Session, fragment: str) -> List[Employee]:
    """
    Employees whose email contains ``fragment``.

    ``%`` and ``_`` in the fragment match literally. Case sensitivity follows
    the database's LIKE semantics.
    """
    return (
        db.query(Employee)
        .filter(Employee.email.contains(fragment, autoescape=True))
        .order_by(Employee.id)
        .all()
    )


def get_by_min_salary(db: Session, min_salary: float) -> List[Employee]:
    """Employees earning ``min_salary`` or more (inclusive)."""
    return db.query(Employee).filter(Employee.salary >= min_salary).order_by(Employee.id).all()


def exists(db: Session, employee_id: int) -> bool:
    """Return True if an employee with this ID is stored."""
    return bool(db.query(db.query(Employee).filter(Employee.id == employee_id).exists()).scalar())


def update(db: Session, employee_id: int, employee_data: EmployeeBase) -> Optional[Employee]:
    """
    Replace every field of an employee except its ID.

    The row is loaded with ``SELECT ... FOR UPDATE`` (where the dialect
    supports it) and written in the same transaction, so the existence
    check and the write cannot interleave with another request's delete.

    Args:
        db: Database session
        employee_id: Employee ID to update
        employee_data: Full replacement payload; unset fields become null

    Returns:
        Updated Employee instance if found, None otherwise
    """
    try:
        employee = (
            db.query(Employee)
            .filter(Employee.id == employee_id)
            .with_for_update()
            .first()
        )
        if employee is None:
            db.rollback()
            return None

        values = employee_data.model_dump(include=set(WRITABLE_FIELDS))
        for field in WRITABLE_FIELDS:
            setattr(employee, field, values.get(field))

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(employee)
    return employee


def delete(db: Session, employee: Employee) -> None:
    """
    Delete a loaded employee. Deleting an already removed record is a no-op.

    Args:
        db: Database session
        employee: Employee instance to delete
    """
    delete_by_id(db, employee.id)


def delete_by_id(db: Session, employee_id: int) -> bool:
    """
    Delete an employee by ID in a single statement.

    Args:
        db: Database session
        employee_id: Employee ID to delete

    Returns:
        True if deleted, False if not found
    """
    try:
        deleted = (
            db.query(Employee)
            .filter(Employee.id == employee_id)
            .delete(synchronize_session="fetch")
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    return deleted > 0


def delete_all(db: Session) -> int:
    """
    Remove every employee.

    Returns:
        Number of deleted rows
    """
    try:
        deleted = db.query(Employee).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise

    # Drop any instances the session still holds for the removed rows
    db.expunge_all()
    return deleted


def count(db: Session) -> int:
    """Count stored employees."""
    return db.query(Employee).count()
