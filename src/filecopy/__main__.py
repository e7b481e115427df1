from __future__ import annotations

import logging
import logging.config
import os
import sys
from argparse import ArgumentParser
from collections.abc import Sequence

import yaml

from filecopy.config import DEFAULT_PROGRAM_NAME, DEFAULT_STRATEGY, CopyConfig
from filecopy.copier import FileCopier
from filecopy.exceptions import FileCopyError, UsageError
from filecopy.logging import LOGGING_CONFIG, report_error

logger = logging.getLogger(__name__)


def filecopy_parser(prog: str) -> ArgumentParser:
    """Parser describing the command line, used to print usage.

    Arguments are never parsed as options, so paths starting with a dash,
    and a lone ``--``, are taken as they are.
    """
    parser = ArgumentParser(
        prog=prog,
        usage="%(prog)s source target",
        description="Copy a regular file to a file or into a directory.",
        add_help=False,
    )
    parser.add_argument("source", help="Regular file to copy")
    parser.add_argument(
        "target",
        help=(
            "File to create or overwrite, or an existing directory "
            "to copy the source into"
        ),
    )
    return parser


def parse_arguments(argv: Sequence[str]) -> tuple[str, str]:
    if len(argv) != 3:
        raise UsageError(f"expected 2 arguments, got {max(len(argv) - 1, 0)}")
    return argv[1], argv[2]


def program_name_from(argv: Sequence[str]) -> str:
    if not argv:
        return DEFAULT_PROGRAM_NAME
    name = os.path.basename(argv[0])
    return name if name.strip() else DEFAULT_PROGRAM_NAME


def _setup_logging() -> None:
    with open(LOGGING_CONFIG, encoding="utf-8") as conf_file:
        logging.config.dictConfig(yaml.safe_load(conf_file))


def main(argv: Sequence[str] | None = None, strategy: str = DEFAULT_STRATEGY) -> None:
    if argv is None:
        argv = sys.argv
    program_name = program_name_from(argv)

    _setup_logging()

    try:
        source, target = parse_arguments(argv)
    except UsageError as err:
        logger.debug(f"Invalid arguments: {err}")
        filecopy_parser(program_name).print_usage(sys.stderr)
        sys.exit(1)

    try:
        config = CopyConfig(program_name=program_name, strategy=strategy)
    except FileCopyError as err:
        report_error(program_name, err)
        sys.exit(1)

    try:
        target_path = FileCopier(config).copy(source, target)
    except FileCopyError as err:
        logger.debug(f"{type(err).__name__}: {err!r}")
        report_error(config.program_name, err)
        sys.exit(1)
    logger.debug(f"{config.program_name} wrote {target_path}")


def main_mmap(argv: Sequence[str] | None = None) -> None:
    main(argv, strategy="mmap")


if __name__ == "__main__":
    main()
