"""Shared core type aliases used by the resolver, method binding, and config."""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Sequence

ParameterPosition = int
LogicalName = str

NameTable = Mapping[ParameterPosition, LogicalName]
NamedParams = Dict[LogicalName, Any]
ArgumentValues = Optional[Sequence[Any]]

MapperCallable = Callable[..., Any]
