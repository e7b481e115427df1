import logging
import pathlib
from types import TracebackType

LOGGING_CONFIG = pathlib.Path(__file__).parent.resolve() / "logger.conf"

logger = logging.getLogger("filecopy")


class TerminalFormatter(logging.Formatter):
    """Formats diagnostics the way err(3) does: ``program: message``

    Tracebacks are never written to the terminal.

    """

    def __init__(self) -> None:
        super().__init__("%(message)s")

    @staticmethod
    def formatMessage(record: logging.LogRecord) -> str:
        program_name = getattr(record, "program_name", record.name.split(".")[0])
        return f"{program_name}: {record.message}"

    @staticmethod
    def formatException(
        _: tuple[type[BaseException], BaseException, TracebackType | None]
        | tuple[None, None, None],
    ) -> str:
        return ""


def report_error(program_name: str, error: BaseException) -> None:
    """Write a one-line diagnostic for error on behalf of program_name"""
    logger.error(str(error), extra={"program_name": program_name})
