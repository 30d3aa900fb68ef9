"""
Directory binding module.

Scans a source directory and copies every image whose GPS position lies
inside a bounding rectangle into a destination directory.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .bounds import BoundingRectangle
from .file_copier import CopyOutcome, FileCopier
from .locator import GPSLocator
from .logger import Logger


def display_name(path: Path) -> str:
    """
    File name of path in a form stdout can always encode.

    Bytes that are not valid UTF-8 and characters the stream encoding lacks
    are replaced rather than raising.
    """
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    name = os.fsencode(path.name).decode("utf-8", errors="replace")
    return name.encode(encoding, errors="replace").decode(encoding)


@dataclass
class BindReport:
    """Per-run record of what happened to each scanned file."""

    scanned: List[Path] = field(default_factory=list)
    located: List[Path] = field(default_factory=list)
    matched: List[Path] = field(default_factory=list)
    copied: List[CopyOutcome] = field(default_factory=list)
    failed: List[CopyOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class DirectoryBinder:
    """
    Copies the images of a directory that fall inside a bounding rectangle.

    Files are handled one at a time, in name order: locate, test bounds,
    copy. A failed copy is recorded and the scan carries on.
    """

    def __init__(self, locator: Optional[GPSLocator] = None, copier: Optional[FileCopier] = None,
                 logger: Optional[Logger] = None):
        self.log = logging.getLogger(__name__)
        self.locator = locator if locator is not None else GPSLocator()
        self.copier = copier if copier is not None else FileCopier()
        self.logger = logger

    def bind(self, source_dir: Union[str, Path], dest_dir: Union[str, Path],
             rect: BoundingRectangle, dry_run: bool = False) -> BindReport:
        """
        Copy the files of source_dir located inside rect into dest_dir.

        Prints one confirmation line per copied file to stdout.

        Args:
            source_dir: Directory to scan, not recursed into
            dest_dir: Existing destination directory
            rect: Bounding rectangle
            dry_run: Report matches without copying

        Returns:
            BindReport for the run
        """
        report = BindReport()
        self.log.info(f"Scanning directory: {source_dir}")
        self.log.info(f"Bounds: {rect}")

        files = self.copier.scan_directory(source_dir)
        progress_bar = self.logger.create_progress_bar(len(files)) if self.logger else None

        for file_path in files:
            report.scanned.append(file_path)
            self._process_file(file_path, Path(dest_dir), rect, dry_run, report)
            if progress_bar:
                progress_bar.update(1)

        if progress_bar:
            progress_bar.close()

        if self.logger:
            self.logger.log_operation_summary(
                len(report.scanned), len(report.located), len(report.matched),
                len(report.copied), len(report.failed)
            )
        return report

    def _process_file(self, file_path: Path, dest_dir: Path, rect: BoundingRectangle,
                      dry_run: bool, report: BindReport):
        coordinate = self.locator.locate(file_path)
        if coordinate is None:
            return
        report.located.append(file_path)

        if not rect.contains(coordinate):
            self.log.debug(f"Outside bounds: {file_path.name} at {coordinate}")
            return
        report.matched.append(file_path)

        if dry_run:
            print(f"would copy: {display_name(file_path)}")
            return

        outcome = self.copier.copy_file(file_path, dest_dir)
        if outcome.success:
            report.copied.append(outcome)
            print(f"copied: {display_name(file_path)}")
        else:
            report.failed.append(outcome)
