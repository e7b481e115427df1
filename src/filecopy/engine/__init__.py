from ._buffered import BufferedCopy
from ._mmap import MmapCopy
from ._strategy import CopyStrategy, SourceFile, io_operation

__all__ = [
    "BufferedCopy",
    "CopyStrategy",
    "MmapCopy",
    "SourceFile",
    "io_operation",
]
