"""
Employee service layer.

Mediates between EmployeeDto and persisted Employee rows: one read, create,
update or delete per call, no state kept between calls. Lookups of unknown
identifiers raise EmployeeNotFoundError; every other failure comes from the
repository or mapper and propagates unchanged.
"""

import functools
from typing import Callable

from .database import Employee
from .logger import get_logger
from .mapping import EmployeeMapper
from .repository import EmployeeRepository
from .schema import EmployeeDto


class EmployeeNotFoundError(LookupError):
    """Raised when no employee has the requested identifier."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee not found with id: {employee_id}")


def _tracked(operation: str) -> Callable:
    """Count calls to a service operation and log its failures."""
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            logger.record_operation(operation)
            try:
                return func(*args, **kwargs)
            except EmployeeNotFoundError as e:
                logger.record_not_found(operation)
                logger.warning(str(e), operation=operation, employee_id=e.employee_id)
                raise
            except Exception as e:
                logger.record_failure(operation, type(e).__name__)
                logger.error(f"{operation} failed: {e}", operation=operation, error=type(e).__name__)
                raise
        return wrapper
    return decorator


class EmployeeService:
    """CRUD operations on employees."""

    def __init__(self, repository: EmployeeRepository, mapper: EmployeeMapper):
        self._repository = repository
        self._mapper = mapper

    @property
    def repository(self) -> EmployeeRepository:
        return self._repository

    @property
    def mapper(self) -> EmployeeMapper:
        return self._mapper

    def _require(self, employee_id: int, for_update: bool = False) -> Employee:
        employee = self._repository.find_by_id(employee_id, for_update=for_update)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    @_tracked("get")
    def get_employee_by_id(self, employee_id: int) -> EmployeeDto:
        get_logger().debug("Looking up employee", employee_id=employee_id)
        return self._mapper.to_dto(self._require(employee_id))

    @_tracked("create")
    def create_new_employee(self, dto: EmployeeDto) -> EmployeeDto:
        """
        Persist a new employee.

        Any id on the incoming transfer object is ignored; the datastore
        assigns one. Calling twice with the same fields creates two rows.
        """
        saved = self._repository.save(self._mapper.to_entity(dto))
        get_logger().info("Employee created", employee_id=saved.id)
        return self._mapper.to_dto(saved)

    @_tracked("update")
    def update_employee(self, employee_id: int, dto: EmployeeDto) -> EmployeeDto:
        """
        Overwrite name, email and salary of an existing employee.

        The result keeps the stored identifier; dto.id is not consulted.
        """
        existing = self._require(employee_id)

        existing.name = dto.name
        existing.email = dto.email
        existing.salary = dto.salary

        updated = self._repository.save(existing)
        get_logger().info("Employee updated", employee_id=updated.id)
        return self._mapper.to_dto(updated)

    @_tracked("delete")
    def delete_employee(self, employee_id: int) -> None:
        """
        Remove an employee.

        The existence check and the removal share one transaction; if the
        removal fails the transaction is rolled back and the row remains.
        A row removed by another session after the check counts as not
        found, so at most one concurrent delete of an id succeeds.
        """
        with self._repository.transaction():
            employee = self._require(employee_id, for_update=True)
            if not self._repository.delete(employee):
                raise EmployeeNotFoundError(employee_id)
        get_logger().info("Employee deleted", employee_id=employee_id)
