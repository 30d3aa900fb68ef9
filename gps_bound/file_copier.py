"""
File operations module.

This module lists the regular files of a directory and copies single files
into a destination directory. Copies go through direct file-system calls,
never through a shell.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union


@dataclass(frozen=True)
class CopyOutcome:
    source: Path
    destination: Path
    success: bool
    error: Optional[str] = None


class FileCopier:
    """
    Handles directory scanning and file copying.
    """

    def __init__(self):
        """Initialize the file copier."""
        self.logger = logging.getLogger(__name__)

    def scan_directory(self, source_dir: Union[str, Path]) -> List[Path]:
        """
        List the regular files directly inside a directory.

        Directories, symbolic links and special files are skipped and
        subdirectories are not descended into. Files are returned sorted by
        name so output order does not depend on the file system.

        Args:
            source_dir: Directory to scan

        Returns:
            List of regular file paths
        """
        files = []
        with os.scandir(source_dir) as entries:
            for entry in entries:
                if entry.is_file(follow_symlinks=False):
                    files.append(Path(entry.path))
                else:
                    self.logger.debug(f"Skipping non-regular entry: {entry.path}")

        files.sort(key=lambda p: p.name)
        self.logger.info(f"Found {len(files)} files in {source_dir}")
        return files

    def copy_file(self, source_path: Union[str, Path], destination_dir: Union[str, Path]) -> CopyOutcome:
        """
        Copy a file into a directory under its original name.

        An existing regular file with the same name is overwritten; an
        existing directory with that name makes the copy fail.

        Args:
            source_path: Source file path
            destination_dir: Destination directory path

        Returns:
            CopyOutcome describing the result
        """
        source_file = Path(source_path)
        dest_file = Path(destination_dir) / source_file.name

        try:
            if dest_file.is_dir():
                raise IsADirectoryError(f"Destination is a directory: {dest_file}")

            shutil.copyfile(source_file, dest_file, follow_symlinks=False)
            shutil.copystat(source_file, dest_file, follow_symlinks=False)
            self.logger.debug(f"Copied: {source_file} -> {dest_file}")
            return CopyOutcome(source_file, dest_file, True)

        except OSError as e:
            self.logger.error(f"Failed to copy {source_file}: {e}")
            return CopyOutcome(source_file, dest_file, False, str(e))
