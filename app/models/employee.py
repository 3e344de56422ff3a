from sqlalchemy import Column, Integer, String, Float, Date
from app.core.database import Base


class Employee(Base):
    """
    Employee record.

    Only the primary key is managed by the database; every other column is
    stored exactly as the client sent it, without validation.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True, index=True)
    email = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)
    position = Column(String, nullable=True, index=True)
    salary = Column(Float, nullable=True)
    hire_date = Column(Date, nullable=True)

    def __repr__(self):
        return f"<Employee(id={self.id}, name='{self.first_name} {self.last_name}', position='{self.position}')>"
