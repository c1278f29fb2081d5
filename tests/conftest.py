"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path

from employees.database import init_database, get_session
from employees.logger import get_logger, reset_logger
from employees.mapping import EmployeeMapper
from employees.repository import EmployeeRepository
from employees.schema import EmployeeDto
from employees.service import EmployeeService


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh global logger per test, with no console or file output."""
    reset_logger()
    logger = get_logger(enable_console=False, enable_file=False)
    yield logger
    reset_logger()


@pytest.fixture
def db_path(tmp_path) -> Path:
    """Initialized temporary SQLite database."""
    path = tmp_path / "employees.db"
    init_database(path)
    return path


@pytest.fixture
def db_session(db_path):
    session = get_session(db_path)
    yield session
    session.close()


@pytest.fixture
def repository(db_session) -> EmployeeRepository:
    return EmployeeRepository(db_session)


@pytest.fixture
def service(repository) -> EmployeeService:
    return EmployeeService(repository, EmployeeMapper())


@pytest.fixture
def ada() -> EmployeeDto:
    """Transfer object for a new employee (no id)."""
    return EmployeeDto(name="Ada", email="ada@example.com", salary=1000)
