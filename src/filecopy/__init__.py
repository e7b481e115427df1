"""
filecopy - copy a regular file to a file or into a directory.
"""

from .config import CopyConfig
from .copier import FileCopier, copy_file
from .engine import BufferedCopy, CopyStrategy, MmapCopy, SourceFile
from .exceptions import FileCopyError
from .plugins import FileCopyPluginManager, plugin
from .resolver import resolve_target

__all__ = [
    "BufferedCopy",
    "CopyConfig",
    "CopyStrategy",
    "FileCopier",
    "FileCopyError",
    "FileCopyPluginManager",
    "MmapCopy",
    "SourceFile",
    "copy_file",
    "plugin",
    "resolve_target",
]
