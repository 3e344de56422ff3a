from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import date


class EmployeeBase(BaseModel):
    """
    Fields shared by every employee payload.

    JSON uses camelCase (firstName, hireDate, ...); snake_case is accepted
    on input as well. Nothing is validated beyond the field types.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[float] = None
    hire_date: Optional[date] = None


class EmployeeCreateRequest(EmployeeBase):
    """Schema for creating an employee. Any client-supplied id is ignored."""
    pass


class EmployeeUpdateRequest(EmployeeBase):
    """
    Schema for replacing an employee.

    This is a full replacement: fields left out of the body overwrite the
    stored value with null.
    """
    pass


class EmployeeResponse(EmployeeBase):
    """Schema for employee response"""
    model_config = ConfigDict(from_attributes=True)  # Allows conversion from SQLAlchemy models

    id: int


class EmployeeDeleteResponse(BaseModel):
    """Schema for employee deletion response"""
    deleted: bool = Field(True, description="True once the employee has been removed")
