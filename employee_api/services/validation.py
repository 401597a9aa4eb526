"""Declarative validation rules for employee create and update requests.

Each request shape has its own rule set; the two are deliberately
independent (an update never requires names, a create never requires
``Address1``). ``validate`` evaluates every rule and collects all failing
messages per field, keyed by the field's wire name.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from employee_api.models.requests import CreateEmployeeRequest, UpdateEmployeeRequest

_SSN_PATTERN = re.compile(r"^\d{3}-\d{2}-\d{4}$")


@dataclass(frozen=True)
class Rule:
    attribute: str
    check: Callable[[Any], bool]
    message: str


@dataclass
class ValidationResult:
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _not_empty(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _ssn_format(value: Any) -> bool:
    return value is None or bool(_SSN_PATTERN.match(value))


CREATE_EMPLOYEE_RULES: tuple[Rule, ...] = (
    Rule("first_name", _not_empty, "First name is required."),
    Rule("last_name", _not_empty, "Last name is required."),
    Rule(
        "social_security_number",
        _ssn_format,
        "Social security number must be in the format ###-##-####.",
    ),
)

UPDATE_EMPLOYEE_RULES: tuple[Rule, ...] = (
    Rule("address1", _not_empty, "Address1 is required."),
)


def _wire_name(request: BaseModel, attribute: str) -> str:
    info = type(request).model_fields[attribute]
    return info.alias or attribute


def validate(request: BaseModel, rules: Sequence[Rule]) -> ValidationResult:
    result = ValidationResult()
    for rule in rules:
        if rule.check(getattr(request, rule.attribute)):
            continue
        result.errors.setdefault(_wire_name(request, rule.attribute), []).append(rule.message)
    return result


def validate_create_employee(request: CreateEmployeeRequest) -> ValidationResult:
    return validate(request, CREATE_EMPLOYEE_RULES)


def validate_update_employee(request: UpdateEmployeeRequest) -> ValidationResult:
    return validate(request, UPDATE_EMPLOYEE_RULES)
