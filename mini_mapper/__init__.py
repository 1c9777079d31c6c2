"""mini_mapper: parameter naming and binding for SQL mapper methods."""

from .core import (
    BindingError,
    Configuration,
    MethodSignature,
    Param,
    ParamMap,
    ParamNameResolver,
    ResultContext,
    ResultHandler,
    RowBounds,
    get_param_names,
    wrap_collection,
)

__all__ = [
    "BindingError",
    "Configuration",
    "MethodSignature",
    "Param",
    "ParamMap",
    "ParamNameResolver",
    "ResultContext",
    "ResultHandler",
    "RowBounds",
    "get_param_names",
    "wrap_collection",
]
