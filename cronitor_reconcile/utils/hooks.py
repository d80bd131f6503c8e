import contextlib
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Hooks[T]:
    """Callables run around an API call.

    pre_hooks run before the call, post_hooks always run afterwards and
    error_hooks run only when the call raised.
    """

    pre_hooks: list[Callable[[T], None]] = field(default_factory=list)
    post_hooks: list[Callable[[T], None]] = field(default_factory=list)
    error_hooks: list[Callable[[T], None]] = field(default_factory=list)

    def merge(self, other: "Hooks[T] | None") -> "Hooks[T]":
        """Return a new Hooks instance with other's hooks appended to ours."""
        if other is None:
            return self
        return Hooks(
            pre_hooks=[*self.pre_hooks, *other.pre_hooks],
            post_hooks=[*self.post_hooks, *other.post_hooks],
            error_hooks=[*self.error_hooks, *other.error_hooks],
        )


@contextlib.contextmanager
def invoke_with_hooks[T](context: T, hooks: Hooks[T]) -> Generator[None, Any, None]:
    for hook in hooks.pre_hooks:
        hook(context)
    try:
        yield
    except Exception:
        for hook in hooks.error_hooks:
            hook(context)
        raise
    finally:
        for hook in hooks.post_hooks:
            hook(context)
