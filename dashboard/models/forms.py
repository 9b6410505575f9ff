# dashboard/models/forms.py

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

FormModel = TypeVar("FormModel", bound=BaseModel)


class FormState(BaseModel):
    """
    What a form action hands back to the page when it does not redirect.

    `errors` maps a form field name to its messages and is only set when
    validation failed; persistence failures carry just `message`.
    """

    errors: Optional[Dict[str, List[str]]] = None
    message: Optional[str] = None


def parse_form(model: Type[FormModel], form: Mapping[str, Any]) -> FormModel:
    """
    Validate the fields `model` declares, read from `form` by their form name.

    A field the browser did not submit is passed in as None, so each model
    reports its own "required" message instead of a generic one.
    """
    raw = {
        (field.alias or name): form.get(field.alias or name)
        for name, field in model.model_fields.items()
    }
    return model.model_validate(raw)


def flatten_errors(exc: ValidationError) -> Dict[str, List[str]]:
    field_errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        if not error["loc"]:
            continue
        field = str(error["loc"][0])
        field_errors.setdefault(field, []).append(error["msg"])
    return field_errors
