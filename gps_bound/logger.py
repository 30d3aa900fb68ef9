"""
Logging module for the bound application.

This module provides centralized logging functionality with configurable
log levels and output formats. Log records go to stderr so that stdout only
carries the per-file confirmation lines and fatal diagnostics.
"""

import logging
import sys
from typing import Optional

from tqdm import tqdm

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Logger:
    """
    Centralized logging configuration for the bound application.

    Provides consistent logging across all modules with configurable
    log levels and output formats.
    """

    def __init__(self, log_level: str = "WARNING", log_file: Optional[str] = None,
                 show_progress: bool = False):
        """
        Initialize the logger.

        Args:
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional log file path
            show_progress: Whether create_progress_bar returns a progress bar
        """
        self.log_level = getattr(logging, log_level.upper(), logging.WARNING)
        self.log_file = log_file
        self.show_progress = show_progress
        self._setup_logging()

    def _setup_logging(self):
        """Set up logging configuration."""
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if self.log_file:
            try:
                file_handler = logging.FileHandler(self.log_file, mode='w')
                file_handler.setLevel(self.log_level)
                file_handler.setFormatter(formatter)
                root_logger.addHandler(file_handler)
                logging.info(f"Logging to file: {self.log_file}")
            except OSError as e:
                logging.error(f"Failed to set up file logging: {e}")

        # Files without EXIF are expected; keep the readers quiet about them
        logging.getLogger('PIL').setLevel(logging.WARNING)
        logging.getLogger('exifread').setLevel(logging.ERROR)

        logging.debug("Logging system initialized")

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get a logger instance for a specific module.

        Args:
            name: Logger name (usually __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)

    def log_operation_summary(self, total_files: int, located_files: int, matched_files: int,
                              copied_files: int, failed_files: int):
        """
        Log a summary of a directory scan.

        Args:
            total_files: Number of regular files scanned
            located_files: Number of files with usable GPS data
            matched_files: Number of files inside the bounding rectangle
            copied_files: Number of files copied
            failed_files: Number of copies that failed
        """
        logger = logging.getLogger(__name__)

        logger.info("=" * 50)
        logger.info("OPERATION SUMMARY")
        logger.info("=" * 50)
        logger.info(f"Files scanned: {total_files}")
        logger.info(f"Files with GPS data: {located_files}")
        logger.info(f"Files inside bounds: {matched_files}")
        logger.info(f"Files copied: {copied_files}")
        logger.info(f"Failed copies: {failed_files}")
        logger.info("=" * 50)

    def create_progress_bar(self, total: int, desc: str = "Scanning") -> Optional[tqdm]:
        """
        Create a progress bar for tracking the scan.

        Args:
            total: Total number of items to process
            desc: Description for the progress bar

        Returns:
            tqdm progress bar instance, or None when progress display is off
        """
        if self.show_progress and total > 0:
            return tqdm(total=total, desc=desc, unit="files", ncols=80, file=sys.stderr)
        return None
