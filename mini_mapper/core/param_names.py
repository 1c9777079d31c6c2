"""Declared parameter names read from callable signature metadata."""

from __future__ import annotations

import inspect
from typing import Any, List, Type

from .types import MapperCallable


def get_param_names(executable: MapperCallable) -> List[str]:
    """Return declared parameter names of a function, method, or class.

    Names are returned in declaration order, one per declared parameter,
    without any filtering. Bound methods and classes do not list their
    receiver. `ValueError` from `inspect.signature` (no signature metadata)
    propagates unchanged.
    """

    return list(inspect.signature(executable).parameters)


def get_param_names_for_constructor(cls: Type[Any]) -> List[str]:
    """Return declared constructor parameter names for `cls`."""

    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {type(cls).__name__}.")
    return get_param_names(cls)
