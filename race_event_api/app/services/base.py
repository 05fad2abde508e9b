"""Helpers shared by the service classes."""

from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ValidationError, format_validation_errors


ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model: Type[ModelT], data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    """Return ``data`` as an instance of ``model``.

    Raw mappings are validated (camelCase or snake_case keys); a
    failure becomes a ``ValidationError`` naming every bad field.
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from exc


def apply_update(record: ModelT, changes: Mapping[str, Any]) -> ModelT:
    """Merge ``changes`` into ``record`` and validate the result.

    Used before writing a partial update so that a PATCH cannot leave a
    record that its own schema would reject (a required field set to
    null, an overdrawn race pack ...).
    """
    try:
        return type(record).model_validate({**record.model_dump(), **changes})
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from exc
