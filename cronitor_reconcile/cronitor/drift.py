from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from cronitor_reconcile.cronitor.models import ResourceState
from cronitor_reconcile.utils.differ import DiffResult, diff_mappings

# computed by the service or derived locally, never part of a declaration
COMPUTED_FIELDS: Mapping[str, Any] = {
    "key": True,
    "variant": {"telemetry_url": True},
}


def _comparable(spec: BaseModel) -> dict[str, Any]:
    exclude = {k: v for k, v in COMPUTED_FIELDS.items() if k in type(spec).model_fields}
    return spec.model_dump(exclude=exclude)


def drift(declared: BaseModel, observed: BaseModel) -> DiffResult:
    """Field by field difference between a declared and a normalized observed spec."""
    return diff_mappings(observed=_comparable(observed), declared=_comparable(declared))


def state_of(declared: BaseModel, observed: BaseModel | None) -> ResourceState:
    if observed is None:
        return ResourceState.UNMANAGED
    if drift(declared, observed).is_empty():
        return ResourceState.SYNCED
    return ResourceState.DRIFTED
