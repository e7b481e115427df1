from __future__ import annotations

import logging
import mmap
import os

from ._strategy import CopyStrategy, SourceFile, io_operation

logger = logging.getLogger(__name__)


class MmapCopy(CopyStrategy):
    """Resizes the target to the source size up front, then copies one
    page at a time through a pair of memory maps.

    Only one pair of maps exists at a time; both are unmapped before the
    next chunk is mapped.
    """

    name = "mmap"

    @property
    def chunk_size(self) -> int:
        return mmap.PAGESIZE

    def copy(self, source: SourceFile, target_fd: int) -> int:
        size = source.size
        with io_operation("target resize error"):
            os.ftruncate(target_fd, size)

        chunk_size = self.chunk_size
        logger.debug(
            f"Copying {size} bytes in {-(-size // chunk_size)} chunks "
            f"of {chunk_size} bytes"
        )

        # Empty files are never mapped
        written = 0
        while written < size:
            to_write = min(chunk_size, size - written)

            with io_operation("source mmap error"):
                source_map = mmap.mmap(
                    source.fd,
                    to_write,
                    flags=mmap.MAP_SHARED,
                    prot=mmap.PROT_READ,
                    offset=written,
                )
            try:
                with io_operation("target mmap error"):
                    target_map = mmap.mmap(
                        target_fd,
                        to_write,
                        flags=mmap.MAP_SHARED,
                        prot=mmap.PROT_READ | mmap.PROT_WRITE,
                        offset=written,
                    )
            except BaseException:
                source_map.close()
                raise

            try:
                target_map[:] = source_map[:]
            except BaseException:
                source_map.close()
                target_map.close()
                raise

            try:
                with io_operation("source munmap error"):
                    source_map.close()
            except BaseException:
                target_map.close()
                raise
            with io_operation("target munmap error"):
                target_map.close()

            written += to_write
        return written
