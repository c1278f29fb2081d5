import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from . import __version__
from .database import init_database, get_session
from .env import load_env, load_settings
from .mapping import EmployeeMapper
from .repository import EmployeeRepository
from .schema import EmployeeDto, validate_employee
from .service import EmployeeService, EmployeeNotFoundError


def build_service(db_path: Path) -> EmployeeService:
    init_database(db_path)
    repository = EmployeeRepository(get_session(db_path))
    return EmployeeService(repository, EmployeeMapper())


def read_employee_input(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect employee fields from --input JSON and/or --name/--email/--salary."""
    data: Dict[str, Any] = {}
    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            raise SystemExit(f"Input file not found: {input_path}")
        with input_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    for field in ("name", "email", "salary"):
        value = getattr(args, field)
        if value is not None:
            data[field] = value
    return data


def _validated_dto(args: argparse.Namespace) -> EmployeeDto:
    data = read_employee_input(args)
    errors = validate_employee(data)
    if errors:
        print("Invalid:", file=sys.stderr)
        for e in errors:
            print(f" - {e}", file=sys.stderr)
        raise SystemExit(2)
    return EmployeeDto.from_dict(data)


def _print_employee(dto: EmployeeDto) -> None:
    print(json.dumps(dto.to_dict(), indent=2, ensure_ascii=False))


def cmd_init(args: argparse.Namespace) -> None:
    init_database(Path(args.db))
    print(f"Database ready: {args.db}")


def cmd_get(args: argparse.Namespace) -> None:
    service = build_service(Path(args.db))
    try:
        _print_employee(service.get_employee_by_id(args.id))
    finally:
        service.repository.session.close()


def cmd_create(args: argparse.Namespace) -> None:
    dto = _validated_dto(args)
    service = build_service(Path(args.db))
    try:
        _print_employee(service.create_new_employee(dto))
    finally:
        service.repository.session.close()


def cmd_update(args: argparse.Namespace) -> None:
    dto = _validated_dto(args)
    service = build_service(Path(args.db))
    try:
        _print_employee(service.update_employee(args.id, dto))
    finally:
        service.repository.session.close()


def cmd_delete(args: argparse.Namespace) -> None:
    service = build_service(Path(args.db))
    try:
        service.delete_employee(args.id)
    finally:
        service.repository.session.close()
    print(f"Deleted employee {args.id}")


def cmd_count(args: argparse.Namespace) -> None:
    service = build_service(Path(args.db))
    try:
        print(service.repository.count())
    finally:
        service.repository.session.close()


def _add_employee_fields(p: argparse.ArgumentParser) -> None:
    p.add_argument("--input", help="Path to employee JSON (name, email, salary)")
    p.add_argument("--name", help="Employee name (overrides --input)")
    p.add_argument("--email", help="Employee email (overrides --input)")
    p.add_argument("--salary", type=float, help="Employee salary (overrides --input)")


def main(argv: Optional[Sequence[str]] = None):
    # Load .env if present (EMPLOYEES_DB, EMPLOYEES_LOG_LEVEL, ...)
    load_env()
    settings = load_settings()

    parser = argparse.ArgumentParser(prog="employees", description="Employee records CLI")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--db", default=str(settings.db_path), help=f"Path to SQLite database (default: {settings.db_path})")

    subparsers = parser.add_subparsers(dest="command")
    ini = subparsers.add_parser("init", help="Create the employees database")
    ini.set_defaults(func=cmd_init)

    get = subparsers.add_parser("get", help="Show one employee as JSON")
    get.add_argument("--id", type=int, required=True, help="Employee id")
    get.set_defaults(func=cmd_get)

    crt = subparsers.add_parser("create", help="Create an employee")
    _add_employee_fields(crt)
    crt.set_defaults(func=cmd_create)

    upd = subparsers.add_parser("update", help="Replace name, email and salary of an employee")
    upd.add_argument("--id", type=int, required=True, help="Employee id")
    _add_employee_fields(upd)
    upd.set_defaults(func=cmd_update)

    dlt = subparsers.add_parser("delete", help="Delete an employee")
    dlt.add_argument("--id", type=int, required=True, help="Employee id")
    dlt.set_defaults(func=cmd_delete)

    cnt = subparsers.add_parser("count", help="Number of stored employees")
    cnt.set_defaults(func=cmd_count)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        except EmployeeNotFoundError as e:
            raise SystemExit(str(e))
        return

    parser.print_help()


if __name__ == "__main__":
    main()
