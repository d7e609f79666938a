"""CLI for sorting keys and normalizing the layout of TOML files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from colorama import Fore, Style, just_fix_windows_console
from tomlkit.exceptions import ParseError

from scripts.tomlsort import CONFIG_FILE, ConfigError, FileStatus, SortConfig, find_config, load_config, process_file
from scripts.tomlsort.logger import Logger

EXIT_USAGE = 1
EXIT_CHECK_FAILED = 2
EXIT_READ_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toml-sort",
        description=(
            "Sort keys of TOML files without crossing blank-line separated sections, "
            f"using priority keys from the nearest {CONFIG_FILE}."
        ),
    )
    parser.add_argument("files", metavar="FILE", nargs="*", type=Path, help="List of .toml files to format.")
    parser.add_argument(
        "-c",
        "--check",
        action="store_true",
        help="Only check the formatting, fails if a file is not formatted. Otherwise files are overwritten.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information.")
    return parser


def colored(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"


def resolve_sort_config(logger: logging.Logger, start: Path | None = None) -> SortConfig:
    path = find_config(start)
    if path is None:
        print(colored(f"No '{CONFIG_FILE}' in this directory and its parents, using default config.\n", Fore.YELLOW))
        return SortConfig()
    try:
        file_config = load_config(path)
    except ConfigError as exc:
        logger.warning(f"{exc}, using default config")
        return SortConfig()
    logger.debug(f"Loaded config from {path}")
    return file_config.to_sort_config()


def main(argv: Sequence[str] | None = None) -> int:
    just_fix_windows_console()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = Logger(config={"level": logging.DEBUG if args.verbose else logging.WARNING}).logger

    config = resolve_sort_config(logger)

    if not args.files:
        parser.print_help()
        print()
        return EXIT_USAGE

    for path in args.files:
        absolute_path = path.resolve()
        try:
            status = process_file(path, config, check=args.check, verbose=args.verbose)
        except (OSError, UnicodeDecodeError) as exc:
            print(colored(f'Error while reading file "{absolute_path}" : {exc}', Fore.RED), file=sys.stderr)
            return EXIT_READ_ERROR
        except ParseError as exc:
            print(colored(f'Invalid TOML in "{absolute_path}" : {exc}', Fore.RED), file=sys.stderr)
            return EXIT_USAGE

        if status is FileStatus.CHECK_FAILED:
            print(colored(f"Check fails : {absolute_path}", Fore.RED), file=sys.stderr)
            return EXIT_CHECK_FAILED
        if status is FileStatus.CHECK_PASSED:
            print(f"Check succeed: {colored(str(absolute_path), Fore.GREEN)}")
        elif status is FileStatus.OVERWRITTEN:
            print(f"Overwritten: {colored(str(absolute_path), Fore.BLUE)}")
        else:
            print(f"Unchanged: {colored(str(absolute_path), Fore.GREEN)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
