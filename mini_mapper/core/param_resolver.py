"""Logical parameter names for mapper callables and their invocation bundles.

A resolver is built once per callable. Each non-control parameter gets one
logical name, chosen in priority order:

- the `Param` marker on its annotation,
- its declared Python name (when `use_actual_param_name` is on),
- its ordinal among non-control parameters (`"0"`, `"1"`, ...).

Examples with `use_actual_param_name=False`:

- `f(a: Annotated[int, Param("M")], b: Annotated[int, Param("N")])` -> `{0: "M", 1: "N"}`
- `f(a: int, b: int)` -> `{0: "0", 1: "1"}`
- `f(a: int, rb: RowBounds, b: int)` -> `{0: "0", 2: "1"}`
"""

from __future__ import annotations

import inspect
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .param_names import get_param_names
from .params import ParamMap, explicit_param_name
from .session_types import is_special_parameter
from .types import ArgumentValues, MapperCallable, NameTable

if TYPE_CHECKING:
    from .config import Configuration

logger = logging.getLogger(__name__)

GENERIC_NAME_PREFIX = "param"

_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class ParamNameResolver:
    """Resolves logical parameter names of one callable."""

    def __init__(
        self,
        method: MapperCallable,
        *,
        use_actual_param_name: bool = True,
    ):
        """Build the name table for `method`.

        Args:
            method: Function, bound method, or class (constructor).
            use_actual_param_name: Fall back to declared Python names before
                positional names.

        Raises:
            TypeError: If `method` declares `*args` or `**kwargs`.
            NameError: If a string annotation cannot be evaluated.
        """

        self._signature = inspect.signature(method, eval_str=True)
        self._use_actual_param_name = use_actual_param_name

        table: Dict[int, str] = {}
        has_param_annotation = False
        actual_names: Optional[List[str]] = None

        for index, parameter in enumerate(self._signature.parameters.values()):
            if parameter.kind in _VARIADIC_KINDS:
                raise TypeError(
                    f"{_callable_name(method)} declares variadic parameter "
                    f"{parameter.name!r}; mapper parameters need fixed positions."
                )
            if is_special_parameter(parameter.annotation):
                continue

            name = explicit_param_name(parameter.annotation)
            if name is not None:
                has_param_annotation = True
            else:
                if use_actual_param_name:
                    if actual_names is None:
                        actual_names = get_param_names(method)
                    name = actual_names[index] or None
                if name is None:
                    # Counts non-control parameters only.
                    name = str(len(table))
            table[index] = name

        self._names: NameTable = MappingProxyType(table)
        self._has_param_annotation = has_param_annotation
        self._declared_names = frozenset(table.values())
        logger.debug(
            "Resolved parameter names for %s: %s", _callable_name(method), table
        )

    @classmethod
    def from_config(
        cls, config: Configuration, method: MapperCallable
    ) -> ParamNameResolver:
        """Build a resolver using the flags of `config`."""

        return cls(method, use_actual_param_name=config.use_actual_param_name)

    @property
    def names(self) -> NameTable:
        """Read-only position -> logical name table."""

        return self._names

    @property
    def has_param_annotation(self) -> bool:
        """Whether any parameter carries an explicit `Param` name."""

        return self._has_param_annotation

    @property
    def use_actual_param_name(self) -> bool:
        """Whether declared Python names were used before ordinal names."""

        return self._use_actual_param_name

    def get_names(self) -> List[str]:
        """Return logical names in position order (used by SQL providers)."""

        return list(self._names.values())

    def get_named_params(self, args: ArgumentValues) -> Any:
        """Build the parameter object handed to the query engine.

        Args:
            args: Argument values in full declared order, control objects
                included.

        Returns:
            `None` when there is nothing to bind, the raw value of a lone
            unnamed parameter, or a `ParamMap` of logical names plus generic
            `param1`, `param2`, ... aliases. An alias is skipped when it
            equals a declared name.
        """

        param_count = len(self._names)
        if args is None or param_count == 0:
            return None

        if not self._has_param_annotation and param_count == 1:
            (position,) = self._names
            return args[position]

        params = ParamMap()
        for ordinal, (position, name) in enumerate(self._names.items(), start=1):
            value = args[position]
            params[name] = value
            generic_name = f"{GENERIC_NAME_PREFIX}{ordinal}"
            if generic_name not in self._declared_names:
                params[generic_name] = value
        return params

    def bind_call(self, *args: Any, **kwargs: Any) -> List[Any]:
        """Return argument values of a Python call in full declared order.

        Keyword arguments are placed at their declared positions and omitted
        parameters take their defaults. `TypeError` from `Signature.bind`
        propagates for calls the signature does not accept.
        """

        bound = self._signature.bind(*args, **kwargs)
        bound.apply_defaults()
        return list(bound.arguments.values())

    def get_named_params_for_call(self, *args: Any, **kwargs: Any) -> Any:
        """Shortcut for `get_named_params(bind_call(*args, **kwargs))`."""

        return self.get_named_params(self.bind_call(*args, **kwargs))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(names={dict(self._names)!r}, "
            f"has_param_annotation={self._has_param_annotation!r})"
        )


def _callable_name(method: MapperCallable) -> str:
    return getattr(method, "__qualname__", None) or repr(method)
