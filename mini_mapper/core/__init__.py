"""Public core API for mapper parameter naming and binding."""

from .config import Configuration
from .method_signature import MethodSignature, wrap_collection
from .param_names import get_param_names, get_param_names_for_constructor
from .param_resolver import GENERIC_NAME_PREFIX, ParamNameResolver
from .params import BindingError, Param, ParamMap, explicit_param_name
from .session_types import (
    NO_ROW_LIMIT,
    NO_ROW_OFFSET,
    ResultContext,
    ResultHandler,
    RowBounds,
    is_special_parameter,
)

__all__ = [
    "BindingError",
    "Configuration",
    "GENERIC_NAME_PREFIX",
    "MethodSignature",
    "NO_ROW_LIMIT",
    "NO_ROW_OFFSET",
    "Param",
    "ParamMap",
    "ParamNameResolver",
    "ResultContext",
    "ResultHandler",
    "RowBounds",
    "explicit_param_name",
    "get_param_names",
    "get_param_names_for_constructor",
    "is_special_parameter",
    "wrap_collection",
]
