"""
Conversion between the persisted Employee row and EmployeeDto.

Fields are copied one by one; both shapes carry id, name, email and salary.
The created_at bookkeeping column stays on the row.
"""

from .database import Employee
from .schema import EmployeeDto


class EmployeeMapper:
    """Explicit field copier between Employee and EmployeeDto."""

    def to_dto(self, employee: Employee) -> EmployeeDto:
        return EmployeeDto(
            id=employee.id,
            name=employee.name,
            email=employee.email,
            salary=employee.salary,
        )

    def to_entity(self, dto: EmployeeDto) -> Employee:
        """
        Build a new, unsaved Employee from a transfer object.

        The transfer object's id is not copied: identifiers are assigned by
        the datastore on insert.
        """
        return Employee(
            name=dto.name,
            email=dto.email,
            salary=dto.salary,
        )
