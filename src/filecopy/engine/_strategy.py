from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import ClassVar

from filecopy.config import CopyConfig
from filecopy.exceptions import CopyIOError


@dataclass(frozen=True)
class SourceFile:
    """An open, read-only source together with the status captured
    before it was opened. The size is not re-queried while copying."""

    fd: int
    size: int
    block_size: int
    mode: int
    device: int
    inode: int

    @classmethod
    def from_stat(cls, fd: int, source_stat: os.stat_result) -> SourceFile:
        return cls(
            fd=fd,
            size=source_stat.st_size,
            block_size=getattr(source_stat, "st_blksize", 0),
            mode=source_stat.st_mode,
            device=source_stat.st_dev,
            inode=source_stat.st_ino,
        )


@contextmanager
def io_operation(operation: str) -> Iterator[None]:
    """Turn any failure of the wrapped system call into a CopyIOError
    naming the operation."""
    try:
        yield
    except OSError as err:
        raise CopyIOError(operation, err) from err
    except ValueError as err:
        # mmap reports ranges outside the file as ValueError
        raise CopyIOError(operation, detail=str(err)) from err


class CopyStrategy(ABC):
    name: ClassVar[str]

    def __init__(self, config: CopyConfig | None = None) -> None:
        self.config = config or CopyConfig()

    @abstractmethod
    def copy(self, source: SourceFile, target_fd: int) -> int:
        """Copy all bytes of source to target_fd.

        :return: The number of bytes copied
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
