"""
Command line configuration for bound.

Validates the raw argument list and turns it into a BoundConfig. Every
problem is reported through FatalConfigError before any scanning starts.
"""

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from .bounds import BoundingRectangle, InvalidRectangle
from .logger import LOG_LEVELS

# Plain ASCII decimal notation only: no whitespace, inf, nan, underscores or hex
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class FatalConfigError(Exception):
    """A user input error that stops the run before scanning."""


@dataclass(frozen=True)
class BoundConfig:
    source_dir: Path
    dest_dir: Path
    bounds: BoundingRectangle
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    show_progress: bool = False
    dry_run: bool = False


def parse_arguments(argv: Sequence[str]) -> BoundConfig:
    """
    Validate command line arguments.

    Args:
        argv: Arguments without the program name

    Returns:
        Validated configuration

    Raises:
        FatalConfigError: On the first invalid or missing argument
    """
    options, positional = _split_options(argv)

    if len(positional) < 1:
        raise FatalConfigError("no source path provided")
    if not _is_valid_directory(positional[0]):
        raise FatalConfigError("provided source path was invalid")

    if len(positional) < 2:
        raise FatalConfigError("no destination path provided")
    if not _is_valid_directory(positional[1]):
        raise FatalConfigError("provided destination path was invalid")

    if len(positional) < 6:
        raise FatalConfigError("some bounding coords are missing")
    if len(positional) > 6:
        raise FatalConfigError("too many arguments provided")

    coords = []
    for index, raw in enumerate(positional[2:6]):
        value = parse_decimal(raw)
        # Arguments alternate latitude, longitude
        if index % 2 == 0 and not -90 <= value <= 90:
            raise FatalConfigError("latitude parameter out of range")
        if index % 2 == 1 and not -180 <= value <= 180:
            raise FatalConfigError("longitude parameter out of range")
        coords.append(value)

    try:
        bounds = BoundingRectangle(*coords)
    except InvalidRectangle:
        raise FatalConfigError("deformed bounding rectangle defined") from None

    return BoundConfig(
        source_dir=Path(positional[0]),
        dest_dir=Path(positional[1]),
        bounds=bounds,
        **options,
    )


def parse_decimal(raw: str) -> float:
    """
    Parse a coordinate argument strictly.

    Raises:
        FatalConfigError: If the text is not a finite decimal number
    """
    if not _DECIMAL.fullmatch(raw):
        raise FatalConfigError("invalid floating point parameter")
    value = float(raw)
    if not math.isfinite(value):
        raise FatalConfigError("invalid floating point parameter")
    # A non-zero mantissa that comes out as zero has underflowed
    if value == 0 and re.search(r"[1-9]", re.split(r"[eE]", raw)[0]):
        raise FatalConfigError("invalid floating point parameter")
    return value


def _split_options(argv: Sequence[str]):
    options = {}
    positional: List[str] = []

    for arg in argv:
        # Negative coordinates start with a single dash, so only "--" marks an option
        if not arg.startswith("--"):
            positional.append(arg)
            continue

        name, has_value, value = arg.partition("=")
        if name == "--log-level" and has_value:
            if value.upper() not in LOG_LEVELS:
                raise FatalConfigError(f"invalid log level: {value}")
            options["log_level"] = value.upper()
        elif name == "--log-file" and has_value and value:
            options["log_file"] = value
        elif name == "--progress" and not has_value:
            options["show_progress"] = True
        elif name == "--dry-run" and not has_value:
            options["dry_run"] = True
        else:
            raise FatalConfigError(f"unknown option: {arg}")

    return options, positional


def _is_valid_directory(path: str) -> bool:
    """An existing directory given without a trailing separator."""
    if not path or path.endswith(os.sep) or path.endswith("/"):
        return False
    return os.path.isdir(path)
