"""Explicit parameter naming and the named parameter bundle.

`Param` is attached to a parameter annotation with `typing.Annotated`:

    def find(self, name: Annotated[str, Param("userName")]) -> list[User]: ...

The resolver reads the marker through `explicit_param_name()`. Named bundles
handed to the query engine are `ParamMap` instances, which report unknown
names with a `BindingError` instead of a bare `KeyError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Optional, get_args, get_origin

from .session_types import strip_optional
from .types import NamedParams


class BindingError(LookupError):
    """Raised when a mapper parameter cannot be bound or looked up."""


@dataclass(frozen=True)
class Param:
    """Explicit logical name for one mapper parameter."""

    value: str


class ParamMap(NamedParams):
    """Name -> value bundle that fails loudly on unknown parameter names."""

    def __missing__(self, key: str) -> Any:
        raise BindingError(
            f"Parameter '{key}' not found. Available parameters are {list(self.keys())}"
        )


def explicit_param_name(annotation: Any) -> Optional[str]:
    """Return the `Param` value carried by an annotation, or `None`.

    The outermost `Annotated[...]` is inspected, also when it is wrapped in
    `Optional[...]` or `X | None`. The first `Param` in its metadata wins. An
    empty string is returned as-is and still counts as an explicit name.
    """

    annotation = strip_optional(annotation)
    if get_origin(annotation) is not Annotated:
        return None
    for extra in get_args(annotation)[1:]:
        if isinstance(extra, Param):
            return extra.value
    return None
