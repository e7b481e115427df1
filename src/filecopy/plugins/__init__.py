from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec

from .plugin_manager import (
    FileCopyPluginManager,
    hook_implementation,
    hook_specification,
)
from .plugin_response import PluginMetadata, PluginResponse

P = ParamSpec("P")


def plugin(name: str) -> Callable[[Callable[P, Any]], Callable[P, Any]]:
    def wrapper(func: Callable[P, Any]) -> Callable[P, Any]:
        @wraps(func)
        def inner(*args: P.args, **kwargs: P.kwargs) -> Any:
            res = func(*args, **kwargs)
            if func.__name__ == "installable_copy_strategies" and res is not None:
                return PluginResponse(
                    res,
                    PluginMetadata(name, func.__name__),
                )
            return res

        return hook_implementation(inner, specname=func.__name__)

    return wrapper


__all__ = [
    "FileCopyPluginManager",
    "PluginMetadata",
    "PluginResponse",
    "hook_implementation",
    "hook_specification",
    "plugin",
]
