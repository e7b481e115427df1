from __future__ import annotations

from typing import TYPE_CHECKING

from filecopy.plugins.plugin_manager import hook_specification

if TYPE_CHECKING:
    from filecopy.engine import CopyStrategy
    from filecopy.plugins.plugin_response import PluginResponse


@hook_specification
def installable_copy_strategies() -> PluginResponse[list[type[CopyStrategy]]]:  # type: ignore
    """
    :return: List of copy strategy classes, selectable by their name
    """
