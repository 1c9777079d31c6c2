"""Mapper method binding: control-object positions and the statement parameter."""

from __future__ import annotations

import inspect
from collections.abc import Collection, Mapping
from typing import Any, Optional, get_origin

from .config import Configuration
from .param_resolver import ParamNameResolver
from .params import BindingError, ParamMap
from .session_types import ResultHandler, RowBounds, declared_type, special_parameter_type
from .types import ArgumentValues, MapperCallable


class MethodSignature:
    """Binding facts for one mapper method, computed once."""

    def __init__(self, config: Configuration, method: MapperCallable):
        signature = inspect.signature(method, eval_str=True)
        self._resolver = config.param_name_resolver(method)
        self.row_bounds_index = _unique_index(signature, method, RowBounds)
        self.result_handler_index = _unique_index(signature, method, ResultHandler)

        return_type = declared_type(signature.return_annotation)
        self.returns_void = return_type is None or return_type is type(None)
        self.returns_many = _is_many_result(return_type)

    @property
    def resolver(self) -> ParamNameResolver:
        return self._resolver

    def has_row_bounds(self) -> bool:
        return self.row_bounds_index is not None

    def has_result_handler(self) -> bool:
        return self.result_handler_index is not None

    def extract_row_bounds(self, args: ArgumentValues) -> Optional[RowBounds]:
        if args is None or self.row_bounds_index is None:
            return None
        return args[self.row_bounds_index]

    def extract_result_handler(self, args: ArgumentValues) -> Optional[ResultHandler[Any]]:
        if args is None or self.result_handler_index is None:
            return None
        return args[self.result_handler_index]

    def convert_args_to_sql_command_param(self, args: ArgumentValues) -> Any:
        """Return the parameter object for the mapped statement."""

        return self._resolver.get_named_params(args)


def wrap_collection(obj: Any) -> Any:
    """Expose a lone collection argument under its conventional names.

    Lists become `{"collection": obj, "list": obj}`, tuples `{"array": obj}`
    and other collections `{"collection": obj}`. Strings, bytes, mappings
    and scalars are returned unchanged.
    """

    if isinstance(obj, (str, bytes, bytearray, Mapping)):
        return obj
    if isinstance(obj, tuple):
        return ParamMap(array=obj)
    if isinstance(obj, list):
        return ParamMap(collection=obj, list=obj)
    if isinstance(obj, Collection):
        return ParamMap(collection=obj)
    return obj


def _is_many_result(return_type: Any) -> bool:
    origin = get_origin(return_type) or return_type
    if not isinstance(origin, type):
        return False
    if issubclass(origin, (str, bytes, bytearray, Mapping)):
        return False
    return issubclass(origin, Collection)


def _unique_index(
    signature: inspect.Signature,
    method: MapperCallable,
    special: type,
) -> Optional[int]:
    index: Optional[int] = None
    for position, parameter in enumerate(signature.parameters.values()):
        if special_parameter_type(parameter.annotation) is not special:
            continue
        if index is not None:
            raise BindingError(
                f"{getattr(method, '__qualname__', method)} cannot have multiple "
                f"{special.__name__} parameters"
            )
        index = position
    return index
