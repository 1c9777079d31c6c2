"""Control objects a mapper method may accept next to its data parameters."""

from __future__ import annotations

import sys
import types
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    ClassVar,
    Generic,
    Optional,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

T = TypeVar("T")

NO_ROW_OFFSET = 0
NO_ROW_LIMIT = sys.maxsize


@dataclass(frozen=True)
class RowBounds:
    """Offset/limit window applied to a statement's result rows."""

    offset: int = NO_ROW_OFFSET
    limit: int = NO_ROW_LIMIT

    DEFAULT: ClassVar[RowBounds]

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"RowBounds offset must be >= 0, got {self.offset}.")
        if self.limit < 0:
            raise ValueError(f"RowBounds limit must be >= 0, got {self.limit}.")


RowBounds.DEFAULT = RowBounds()


@dataclass(frozen=True)
class ResultContext(Generic[T]):
    """State passed to a `ResultHandler` for each streamed row."""

    result_object: T
    result_count: int
    stopped: bool = False


class ResultHandler(ABC, Generic[T]):
    """Callback that consumes result rows one at a time."""

    @abstractmethod
    def handle_result(self, context: ResultContext[T]) -> None:
        """Consume one mapped row."""


SPECIAL_PARAMETER_TYPES = (RowBounds, ResultHandler)


def strip_optional(annotation: Any) -> Any:
    """Return `X` for `Optional[X]` or `X | None`, otherwise the annotation."""

    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def declared_type(annotation: Any) -> Any:
    """Strip `Annotated[...]` and `Optional[...]` wrappers from an annotation."""

    if get_origin(annotation) is Annotated:
        return declared_type(get_args(annotation)[0])
    unwrapped = strip_optional(annotation)
    if unwrapped is not annotation:
        return declared_type(unwrapped)
    return annotation


def special_parameter_type(annotation: Any) -> Optional[type]:
    """Return the control type an annotation is assignable to, if any."""

    target = declared_type(annotation)
    origin = get_origin(target)
    if origin is not None:
        # ResultHandler[User] and similar parameterized generics.
        target = origin
    if not isinstance(target, type):
        return None
    for special in SPECIAL_PARAMETER_TYPES:
        if issubclass(target, special):
            return special
    return None


def is_special_parameter(annotation: Any) -> bool:
    """Return whether a parameter with this annotation is a control object."""

    return special_parameter_type(annotation) is not None
