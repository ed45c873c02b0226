"""Translate pydantic validation failures into the API's ValidationError."""

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validate_input(schema: type[SchemaT], payload: dict[str, Any]) -> SchemaT:
    """
    Validate a raw payload against a pydantic schema.

    Only keys present in ``payload`` count as set, so update schemas can
    tell an omitted field from an explicit null.

    Raises:
        ValidationError: with the first offending field and every error in details
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        first = errors[0] if errors else {"field": None, "message": "Invalid input"}
        raise ValidationError(
            f"Invalid {schema.__name__}: {first['field']}: {first['message']}",
            field=first["field"],
            details={"errors": errors},
        ) from e


def require_identifier(value: str | None, field: str = "id") -> str:
    """Reject a missing or blank identifier before it reaches the database."""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field)
    return value
