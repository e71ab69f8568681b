"""
Workout parameter validation.

Turns a raw request body into WorkoutParameters, collecting every violated
constraint instead of stopping at the first one.
"""

from typing import Any, Dict, List

from pydantic import ValidationError

from models.workout import WorkoutParameters


class WorkoutValidationError(Exception):
    """Raised when a workout request body fails validation."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Single-line summary of all violations."""
        details = "; ".join(
            f"{e['message']} at \"{e['field']}\"" if e["field"] else e["message"]
            for e in self.errors
        )
        return f"Validation error: {details}"


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def _error_message(error: Dict[str, Any]) -> str:
    # Custom validators raise ValueError; report their text without pydantic's prefix
    if error.get("type") == "value_error":
        ctx_error = error.get("ctx", {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
    return error.get("msg", "Invalid value")


def validate_workout_parameters(raw: Any) -> WorkoutParameters:
    """
    Validate a raw request body.

    Args:
        raw: Decoded JSON body (normally a dict with camelCase keys)

    Returns:
        WorkoutParameters instance

    Raises:
        WorkoutValidationError: With one entry per violated constraint
    """
    if not isinstance(raw, dict):
        raise WorkoutValidationError(
            [{"field": "", "message": "Request body must be a JSON object"}]
        )

    try:
        return WorkoutParameters.model_validate(raw)
    except ValidationError as e:
        errors = [
            {"field": _field_name(err["loc"]), "message": _error_message(err)}
            for err in e.errors()
        ]
        raise WorkoutValidationError(errors) from e
