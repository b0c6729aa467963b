"""Input validation for catalog forms."""
import logging
from typing import Any, Dict, List, Mapping, Type

from pydantic import BaseModel, ValidationError

from catalog.exceptions import ValidationFailed
from catalog.schemas.product import ProductForm

logger = logging.getLogger(__name__)

# Human readable messages keyed by pydantic error type
MESSAGES = {
    "missing": "The {attribute} field is required.",
    "string_too_short": "The {attribute} field is required.",
    "string_type": "The {attribute} field must be a string.",
    "string_too_long": "The {attribute} field must not be greater than {max_length} characters.",
    "decimal_parsing": "The {attribute} field must be a number.",
    "decimal_type": "The {attribute} field must be a number.",
    "finite_number": "The {attribute} field must be a number.",
    "greater_than_equal": "The {attribute} field must be at least {ge}.",
    "decimal_max_places": "The {attribute} field must not have more than {decimal_places} decimal places.",
    "decimal_max_digits": "The {attribute} field must not have more than {max_digits} digits.",
    "decimal_whole_digits": "The {attribute} field must not have more than {whole_digits} digits before the decimal point.",
}


def _message(error: Dict[str, Any], attribute: str) -> str:
    template = MESSAGES.get(error["type"])
    if template is None:
        return error["msg"]
    try:
        return template.format(attribute=attribute, **(error.get("ctx") or {}))
    except KeyError:
        return error["msg"]


def _collect_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        attribute = field.replace("_", " ")
        errors.setdefault(field, []).append(_message(error, attribute))
    return errors


def validate(schema: Type[BaseModel], data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate submitted input against a form schema.

    Only fields declared on the schema are considered. Empty strings count as
    null, and a null required field counts as missing.

    Args:
        schema: Pydantic model describing the form
        data: Raw request input

    Returns:
        Validated values for the fields that were supplied

    Raises:
        ValidationFailed: With a field name to messages mapping
    """
    payload = {}
    for field, info in schema.model_fields.items():
        if field not in data:
            continue
        value = data[field]
        if value == "":
            value = None
        if value is None and info.is_required():
            continue
        payload[field] = value

    try:
        form = schema.model_validate(payload)
    except ValidationError as exc:
        errors = _collect_errors(exc)
        logger.info(f"Validation failed for {schema.__name__}: {sorted(errors)}")
        raise ValidationFailed(errors) from exc

    return form.model_dump(exclude_unset=True)


def validate_product(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate a product create/update submission."""
    return validate(ProductForm, data)
