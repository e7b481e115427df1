from __future__ import annotations

import errno
import logging
import os
import stat

from .config import platform_path_max
from .exceptions import InvalidTargetError, ResourceExhaustionError, TargetRejection

logger = logging.getLogger(__name__)


def _reject(reason: TargetRejection, target: str) -> InvalidTargetError:
    logger.debug(f"Rejected target {target!r}: {reason.value}")
    return InvalidTargetError(reason)


def _basename(path: str) -> str:
    # basename(3) ignores trailing separators
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def resolve_target(source: str, target: str, path_max: int | None = None) -> str:
    """Determine the path the source should be copied to.

    If target is an existing directory, the returned path is the target
    joined with the file name of source. If target does not exist, or is
    an existing regular file, it is returned as is. Any other target
    raises InvalidTargetError.
    """
    assert source is not None
    assert target is not None

    if not target:
        raise _reject(TargetRejection.EMPTY, target)

    if path_max is None:
        path_max = platform_path_max()

    try:
        target_stat = os.stat(target)
    except ValueError as err:
        raise _reject(TargetRejection.STATUS_FAILED, target) from err
    except OSError as err:
        # A missing target will be created when it is opened
        if err.errno == errno.ENOENT:
            logger.debug(f"Target {target!r} does not exist, it will be created")
            return target
        raise _reject(TargetRejection.STATUS_FAILED, target) from err

    if stat.S_ISDIR(target_stat.st_mode):
        try:
            source_name = _basename(source)
            if target.endswith(os.sep):
                target_path = f"{target}{source_name}"
            else:
                target_path = f"{target}{os.sep}{source_name}"
        except MemoryError as err:
            raise ResourceExhaustionError("Not enough memory for target name") from err

        if len(os.fsencode(target_path)) > path_max:
            raise _reject(TargetRejection.NAME_TOO_LONG, target)
        logger.debug(f"Target {target!r} is a directory, copying to {target_path!r}")
        return target_path

    if stat.S_ISREG(target_stat.st_mode):
        logger.debug(f"Target {target!r} is a regular file, it will be truncated")
        return target

    raise _reject(TargetRejection.UNSUPPORTED_TYPE, target)
