from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import pluggy

from filecopy.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from filecopy.engine import CopyStrategy

    from .plugin_response import PluginResponse

logger = logging.getLogger(__name__)

_PLUGIN_NAMESPACE = "filecopy"

hook_implementation = pluggy.HookimplMarker(_PLUGIN_NAMESPACE)
hook_specification = pluggy.HookspecMarker(_PLUGIN_NAMESPACE)


class FileCopyPluginManager(pluggy.PluginManager):
    def __init__(self, plugins: Sequence[object] | None = None) -> None:
        super().__init__(_PLUGIN_NAMESPACE)

        import filecopy.plugins.hook_implementations  # noqa
        import filecopy.plugins.hook_specifications  # noqa

        self.add_hookspecs(filecopy.plugins.hook_specifications)
        if plugins is None:
            self.register(filecopy.plugins.hook_implementations)
            self.load_setuptools_entrypoints(_PLUGIN_NAMESPACE)
        else:
            for plugin in plugins:
                self.register(plugin)
        logger.debug(str(self))

    def __str__(self) -> str:
        self_str = "filecopy plugin manager:\n"
        for plugin in self.get_plugins():
            self_str += "\t" + str(self.get_name(plugin)) + "\n"
            callers = self.get_hookcallers(plugin)
            if callers is not None:
                for hook_caller in callers:
                    self_str += "\t\t" + str(hook_caller) + "\n"
        return self_str

    @property
    def copy_strategies(self) -> dict[str, type[CopyStrategy]]:
        responses: list[PluginResponse[list[type[CopyStrategy]]]] = (
            self.hook.installable_copy_strategies()
        )
        strategies: dict[str, type[CopyStrategy]] = {}
        owners: dict[str, str] = {}
        for response in responses:
            plugin_name = response.plugin_metadata.plugin_name
            for strategy in response.data:
                name = strategy.name.lower()
                if name in strategies:
                    raise RuntimeError(
                        f"Duplicate copy strategy {name} when parsing plugin "
                        f"{plugin_name}, it is already registered by "
                        f"{owners[name]}."
                    )
                strategies[name] = strategy
                owners[name] = plugin_name
        return strategies

    def get_copy_strategy(self, name: str) -> type[CopyStrategy]:
        strategies = self.copy_strategies
        try:
            return strategies[name.lower()]
        except KeyError:
            raise ConfigValidationError(
                f"Unknown copy strategy {name!r}, "
                f"available strategies: {', '.join(sorted(strategies))}"
            ) from None
