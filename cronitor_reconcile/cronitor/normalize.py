from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from cronitor_reconcile.cronitor.models import Unordered
from cronitor_reconcile.utils.ordering import (
    reorder_keys_to_match,
    reorder_to_match,
)


def is_unordered(field: FieldInfo) -> bool:
    return any(isinstance(m, Unordered) for m in field.metadata)


def _normalize_value(field: FieldInfo, declared: Any, observed: Any) -> Any:
    if is_unordered(field):
        if isinstance(observed, dict) or isinstance(declared, dict):
            return reorder_keys_to_match(declared, observed)
        return reorder_to_match(declared, observed)
    if (
        isinstance(declared, BaseModel)
        and isinstance(observed, BaseModel)
        and type(declared) is type(observed)
    ):
        return normalize(declared, observed)
    return observed


def normalize[M: BaseModel](declared: M, observed: M) -> M:
    """Present observed in a form the diff engine can compare to declared.

    Walks the model and applies reorder_to_match to every field annotated as
    Unordered, recursing into nested models of the same type (e.g. the HTTP
    check of a monitor). All other fields are taken from observed untouched.
    """
    update = {}
    for name, field in type(observed).model_fields.items():
        observed_value = getattr(observed, name)
        value = _normalize_value(field, getattr(declared, name), observed_value)
        if value is not observed_value:
            update[name] = value
    if not update:
        return observed
    return observed.model_copy(update=update)
