"""
Employees Repository.

Responsibilities:
- Lookup, save and delete of rows in the employees table.
- Transaction-safe writes.

Non-Responsibilities:
- No business logic.
- No mapping to transfer objects.
- No error translation: datastore exceptions propagate unchanged.

Invariant:
Repositories must not encode domain decisions.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from .database import Employee


class EmployeeRepository:
    """Data access for Employee rows over a single SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session
        self._depth = 0

    @property
    def in_transaction(self) -> bool:
        return self._depth > 0

    @contextmanager
    def transaction(self) -> Iterator["EmployeeRepository"]:
        """
        Run the enclosed block as one unit of work.

        Commits on normal exit of the outermost block, rolls back and
        re-raises on any exception. Nested blocks join the outer one.
        """
        outermost = self._depth == 0
        self._depth += 1
        try:
            yield self
            if outermost:
                self.session.commit()
        except Exception:
            if outermost:
                self.session.rollback()
            raise
        finally:
            self._depth -= 1

    def find_by_id(self, employee_id: int, for_update: bool = False) -> Optional[Employee]:
        """
        Look up an employee by primary key.

        Always reads the row from the database, so rows changed or removed
        by other sessions are seen even if this session already holds them.

        Args:
            employee_id: Identifier assigned on insert
            for_update: Lock the row for the rest of the transaction
                (SELECT ... FOR UPDATE; ignored by SQLite)

        Returns:
            The Employee row, or None if no row has that identifier
        """
        if not for_update:
            return self.session.get(Employee, employee_id, populate_existing=True)
        stmt = (
            select(Employee)
            .where(Employee.id == employee_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def save(self, employee: Employee) -> Employee:
        """Insert or update an employee and return the persisted row."""
        with self.transaction():
            self.session.add(employee)
            self.session.flush()
        self.session.refresh(employee)
        return employee

    def delete(self, employee: Employee) -> bool:
        """
        Delete an employee row by its identifier.

        Returns:
            True if a row was removed, False if no row matched (already
            removed by another session since it was loaded)
        """
        stmt = delete(Employee).where(Employee.id == employee.id)
        with self.transaction():
            result = self.session.execute(stmt)
        return result.rowcount > 0

    def count(self) -> int:
        return self.session.query(Employee).count()
