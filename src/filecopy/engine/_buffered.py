from __future__ import annotations

import logging
import os

from filecopy.exceptions import CopyIOError, ResourceExhaustionError

from ._strategy import CopyStrategy, SourceFile, io_operation

logger = logging.getLogger(__name__)


class BufferedCopy(CopyStrategy):
    """Streams the source through one reusable buffer, sized from the
    source block size hint and clamped to the configured bounds."""

    name = "buffer"

    def buffer_size(self, source: SourceFile) -> int:
        return self.config.clamp_buffer_size(source.block_size)

    def copy(self, source: SourceFile, target_fd: int) -> int:
        buffer_size = self.buffer_size(source)
        logger.debug(
            f"Copying with a {buffer_size} byte buffer "
            f"(block size hint {source.block_size})"
        )
        try:
            buffer = memoryview(bytearray(buffer_size))
        except MemoryError as err:
            raise ResourceExhaustionError(
                f"Not enough memory for a {buffer_size} byte copy buffer"
            ) from err

        copied = 0
        while True:
            with io_operation("read error"):
                n_read = os.readv(source.fd, [buffer])
            if n_read == 0:
                break
            with io_operation("write error"):
                n_written = os.write(target_fd, buffer[:n_read])
            if n_written != n_read:
                raise CopyIOError(
                    "write error",
                    detail=f"short write ({n_written} of {n_read} bytes)",
                )
            copied += n_written
        return copied
