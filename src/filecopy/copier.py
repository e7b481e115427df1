from __future__ import annotations

import logging
import os
import stat

from .config import CopyConfig
from .engine import CopyStrategy, SourceFile, io_operation
from .exceptions import SameFileError, SourceNotRegularFileError
from .plugins import FileCopyPluginManager
from .resolver import resolve_target

logger = logging.getLogger(__name__)


def _close_after_failure(*fds: int) -> None:
    for fd in fds:
        try:
            os.close(fd)
        except OSError as err:
            logger.debug(f"Could not close descriptor {fd} after failure: {err}")


class FileCopier:
    """Copies regular files with the strategy chosen at construction.

    The strategy is looked up by ``config.strategy`` among the strategies
    installed through the plugin manager.
    """

    def __init__(
        self,
        config: CopyConfig | None = None,
        plugin_manager: FileCopyPluginManager | None = None,
    ) -> None:
        self.config = config or CopyConfig()
        plugin_manager = plugin_manager or FileCopyPluginManager()
        strategy_class = plugin_manager.get_copy_strategy(self.config.strategy)
        self.strategy: CopyStrategy = strategy_class(self.config)
        logger.debug(f"Using copy strategy {self.strategy!r}")

    def copy(self, source: str, target: str) -> str:
        """Copy source to target and return the path that was written."""
        try:
            source_stat = os.stat(source)
        except OSError as err:
            raise SourceNotRegularFileError(err) from err
        except ValueError as err:
            # Embedded null byte
            raise SourceNotRegularFileError() from err
        if not stat.S_ISREG(source_stat.st_mode):
            raise SourceNotRegularFileError()

        target_path = resolve_target(source, target, path_max=self.config.path_max)

        try:
            target_stat: os.stat_result | None = os.stat(target_path)
        except OSError:
            # Nothing to compare against, the target is created when opened
            target_stat = None
        if target_stat is not None and os.path.samestat(source_stat, target_stat):
            raise SameFileError()

        with io_operation("source open error"):
            source_fd = os.open(source, os.O_RDONLY)
        try:
            with io_operation("target open error"):
                target_fd = os.open(
                    target_path,
                    os.O_RDWR | os.O_CREAT | os.O_TRUNC,
                    stat.S_IMODE(source_stat.st_mode),
                )
        except BaseException:
            _close_after_failure(source_fd)
            raise

        try:
            copied = self.strategy.copy(
                SourceFile.from_stat(source_fd, source_stat), target_fd
            )
        except BaseException:
            # The partially written target is left in place
            _close_after_failure(source_fd, target_fd)
            raise

        try:
            with io_operation("source close error"):
                os.close(source_fd)
        except BaseException:
            _close_after_failure(target_fd)
            raise
        with io_operation("target close error"):
            os.close(target_fd)

        logger.info(f"Copied {copied} bytes from {source!r} to {target_path!r}")
        return target_path


def copy_file(
    source: str,
    target: str,
    config: CopyConfig | None = None,
    plugin_manager: FileCopyPluginManager | None = None,
) -> str:
    return FileCopier(config, plugin_manager).copy(source, target)
