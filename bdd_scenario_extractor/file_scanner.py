"""Find test files under a directory."""

import logging
import os
import re
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

TEST_FILE_SUFFIXES = (".spec.ts", ".test.ts", ".spec.js", ".test.js")

SKIP_DIRECTORIES = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        "coverage",
        "playwright-report",
        "test-results",
        ".nyc_output",
        "screenshots",
    }
)


class ScannerError(Exception):
    """Error scanning a directory for test files."""

    def __init__(self, message: str, phase: str = "discovery"):
        super().__init__(message)
        self.phase = phase


@dataclass
class FileStats:
    """Statistics over a list of scanned files."""

    total_files: int
    by_extension: dict[str, int] = field(default_factory=dict)
    by_directory: dict[str, int] = field(default_factory=dict)
    average_path_length: float = 0.0


class FileScanner:
    """Scan directories for Playwright test files."""

    def scan_test_files(self, directory: str | Path, recursive: bool = True) -> list[str]:
        """List test files under a directory.

        Args:
            directory: Directory to scan
            recursive: Whether to descend into subdirectories

        Returns:
            Sorted file paths

        Raises:
            ScannerError: If the directory does not exist
        """
        root = Path(directory)
        if not root.is_dir():
            raise ScannerError(f"Directory does not exist: {directory}")

        test_files: list[str] = []
        self._scan_directory(root, test_files, recursive)
        test_files.sort()
        logger.info(f"Found {len(test_files)} test files in {directory}")
        return test_files

    def is_test_file(self, file_path: str | Path) -> bool:
        return Path(file_path).name.endswith(TEST_FILE_SUFFIXES)

    def get_file_stats(self, test_files: list[str]) -> FileStats:
        if not test_files:
            return FileStats(total_files=0)

        by_extension = Counter(Path(f).suffix for f in test_files)
        by_directory = Counter(Path(f).parent.name for f in test_files)
        return FileStats(
            total_files=len(test_files),
            by_extension=dict(by_extension),
            by_directory=dict(by_directory),
            average_path_length=sum(len(f) for f in test_files) / len(test_files),
        )

    def filter_by_pattern(self, test_files: list[str], pattern: str | re.Pattern) -> list[str]:
        """Keep files matching a regex; string patterns are case-insensitive."""
        regex = re.compile(pattern, re.IGNORECASE) if isinstance(pattern, str) else pattern
        return [f for f in test_files if regex.search(f)]

    def should_skip_directory(self, name: str) -> bool:
        return name in SKIP_DIRECTORIES or name.startswith(".")

    def _scan_directory(self, directory: Path, test_files: list[str], recursive: bool):
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError as e:
            logger.warning(f"Could not scan directory {directory}: {e}")
            return

        for entry in entries:
            if entry.is_dir():
                if recursive and not self.should_skip_directory(entry.name):
                    self._scan_directory(Path(entry.path), test_files, recursive)
            elif entry.is_file() and self.is_test_file(entry.name):
                test_files.append(entry.path)
