from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

REQUIRED_STR_FIELDS = ["name", "email"]
REQUIRED_NUMBER_FIELDS = ["salary"]


@dataclass
class EmployeeDto:
    """Employee as exchanged across the service boundary."""

    name: str
    email: str
    salary: float
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmployeeDto":
        return cls(
            id=data.get("id"),
            name=data["name"],
            email=data["email"],
            salary=data["salary"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def validate_employee(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Presence checks only; formats and ranges are not enforced here.
    """
    errors: List[str] = []

    for f in REQUIRED_STR_FIELDS:
        if f not in data or data[f] is None:
            errors.append(f"Missing required field: {f}")
        elif not _is_non_empty_str(data[f]):
            errors.append(f"Field '{f}' must be a non-empty string")

    for f in REQUIRED_NUMBER_FIELDS:
        if f not in data or data[f] is None:
            errors.append(f"Missing required field: {f}")
        elif not _is_number(data[f]):
            errors.append(f"Field '{f}' must be a number")

    return errors
