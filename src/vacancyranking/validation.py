"""Upstream validation of vacancy criteria.

The ranking core tolerates malformed criteria (it skips them or treats them
as non-matching). These checks reject such input before it is stored.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .core.fields import FieldResolver, FieldSpec
from .errors import CriterionValidationError, FieldError
from .schemas import Criterion, CriterionDetails, CriterionType, Vacancy

_TYPE_NAMES = ", ".join(t.value for t in CriterionType)


def validate_criterion(
    criterion: Criterion,
    *,
    resolver: FieldResolver | None = None,
) -> list[FieldError]:
    resolver = resolver or FieldResolver()
    errors: list[FieldError] = []

    name = criterion.name
    spec = None
    if not name or not name.strip():
        errors.append(FieldError("name", "must not be blank"))
    else:
        spec = resolver.field_spec(name)
        if spec is None:
            known = ", ".join(sorted(resolver.known_fields()))
            errors.append(FieldError("name", f"must be one of: {known}"))

    if criterion.weight <= 0:
        errors.append(FieldError("weight", "must be positive"))

    if criterion.details is None:
        errors.append(FieldError("details", "must not be null"))
    else:
        error = _validate_details(criterion.details, spec)
        if error is not None:
            errors.append(error)

    return errors


def validate_vacancy(vacancy: Vacancy, *, resolver: FieldResolver | None = None) -> None:
    resolver = resolver or FieldResolver()
    errors: list[FieldError] = []
    if not vacancy.name or not vacancy.name.strip():
        errors.append(FieldError("name", "must not be blank"))
    for index, criterion in enumerate(vacancy.criteria):
        for error in validate_criterion(criterion, resolver=resolver):
            errors.append(FieldError(f"criteria[{index}].{error.field}", error.message))
    if errors:
        raise CriterionValidationError(errors)


def _validate_details(
    details: CriterionDetails,
    spec: FieldSpec | None,
) -> FieldError | None:
    if details.type is None:
        return FieldError("details.type", "must not be null")

    criterion_type = details.criterion_type
    if criterion_type is None:
        return FieldError("details.type", f"must be one of: {_TYPE_NAMES}")

    if criterion_type is CriterionType.ANY:
        return None

    if criterion_type is CriterionType.ENUMERATION:
        if not details.options:
            return FieldError(
                "details.options",
                "options must not be null or empty for ENUMERATION type",
            )
        if spec is not None and spec.choices is not None:
            legal = {choice.lower() for choice in spec.choices}
            for option in sorted(details.options):
                if option.lower() not in legal:
                    return FieldError(
                        "details.options",
                        f"option '{option}' is not a valid value for {spec.name}",
                    )
        elif spec is not None and spec.numeric:
            for option in sorted(details.options):
                try:
                    Decimal(option)
                except InvalidOperation:
                    return FieldError(
                        "details.options",
                        f"option '{option}' is not a valid number",
                    )
        return None

    if details.min_value is None and details.max_value is None:
        return FieldError(
            "details.min_value/max_value",
            "at least one of min_value or max_value must be specified for RANGE type",
        )
    if (
        details.min_value is not None
        and details.max_value is not None
        and details.min_value > details.max_value
    ):
        return FieldError(
            "details.min_value/max_value",
            "min_value must be less than or equal to max_value",
        )
    return None
