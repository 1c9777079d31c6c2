"""Mapper configuration and per-callable resolver reuse."""

from __future__ import annotations

import inspect
import logging
import threading
from typing import Any, Dict, Tuple

from .param_resolver import ParamNameResolver
from .types import MapperCallable

logger = logging.getLogger(__name__)


class Configuration:
    """Settings shared by the mapper methods of one session factory."""

    def __init__(self, *, use_actual_param_name: bool = True):
        """Create configuration.

        Args:
            use_actual_param_name: Name unannotated parameters after their
                declared Python names instead of their ordinals.
        """

        self._use_actual_param_name = use_actual_param_name
        self._resolvers: Dict[Tuple[Any, bool], ParamNameResolver] = {}
        self._lock = threading.Lock()

    @property
    def use_actual_param_name(self) -> bool:
        return self._use_actual_param_name

    def param_name_resolver(self, method: MapperCallable) -> ParamNameResolver:
        """Return the resolver for `method`, building it on first use.

        Bound methods share one resolver per underlying function, so the
        cache never holds on to mapper instances.
        """

        key = _cache_key(method)
        with self._lock:
            resolver = self._resolvers.get(key)
            if resolver is None:
                logger.debug(
                    "Building parameter name resolver for %s",
                    getattr(method, "__qualname__", type(method).__name__),
                )
                resolver = ParamNameResolver.from_config(self, method)
                self._resolvers[key] = resolver
            return resolver

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"use_actual_param_name={self._use_actual_param_name!r})"
        )


def _cache_key(method: MapperCallable) -> Tuple[Any, bool]:
    # Bound and unbound forms differ by the receiver position.
    return getattr(method, "__func__", method), inspect.ismethod(method)
