from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DiffPair:
    observed: Any
    declared: Any


@dataclass(frozen=True)
class DiffResult:
    """Fields that keep an observed resource from matching its declaration.

    add holds fields only declared, delete fields only observed and change
    the fields present on both sides with different values.
    """

    add: dict[str, Any]
    delete: dict[str, Any]
    change: dict[str, DiffPair]

    def is_empty(self) -> bool:
        return not (self.add or self.delete or self.change)

    @property
    def fields(self) -> set[str]:
        return set(self.add) | set(self.delete) | set(self.change)


def diff_mappings(
    observed: Mapping[str, Any], declared: Mapping[str, Any]
) -> DiffResult:
    """Compare two dumped resources field by field.

    Example:
        >>> diff_mappings({"name": "api", "tags": ["a"]}, {"name": "api", "tags": ["b"]})
        DiffResult(add={}, delete={}, change={'tags': DiffPair(observed=['a'], declared=['b'])})
    """
    result = DiffResult(add={}, delete={}, change={})
    for name in observed.keys() | declared.keys():
        if name not in observed:
            result.add[name] = declared[name]
        elif name not in declared:
            result.delete[name] = observed[name]
        elif observed[name] != declared[name]:
            result.change[name] = DiffPair(observed[name], declared[name])
    return result
