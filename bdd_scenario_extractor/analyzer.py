"""Main analyzer that orchestrates scenario extraction over a test directory."""

import asyncio
import logging
from datetime import UTC, datetime

from bdd_scenario_extractor.file_scanner import FileScanner, ScannerError
from bdd_scenario_extractor.hybrid_extractor import HybridScenarioExtractor
from bdd_scenario_extractor.models import (
    DocumentationConfig,
    ExtractionError,
    ExtractionResult,
    Scenario,
)
from bdd_scenario_extractor.source_parser import SourceParseError

logger = logging.getLogger(__name__)


async def analyze_directory(
    test_directory: str,
    config: DocumentationConfig | None = None,
    recursive: bool = True,
    pattern: str | None = None,
) -> ExtractionResult:
    """Extract BDD scenarios from every test file in a directory.

    A file that cannot be read or parsed is logged, recorded as an error
    and contributes no scenarios; the other files are still processed.

    Args:
        test_directory: Directory holding the test files
        config: Output options; only checked here for logging
        recursive: Whether to scan subdirectories
        pattern: Optional regex the file paths must match

    Returns:
        ExtractionResult with all scenarios and any errors
    """
    config = config or DocumentationConfig.create_default()
    logger.info(f"Starting extraction in {test_directory} (format: {config.output_format})")
    analyzed_at = datetime.now(UTC).isoformat()
    errors: list[ExtractionError] = []
    scenarios: list[Scenario] = []

    scanner = FileScanner()
    extractor = HybridScenarioExtractor()

    try:
        test_files = scanner.scan_test_files(test_directory, recursive=recursive)
    except ScannerError as e:
        logger.error(f"Scan error: {e}")
        errors.append(ExtractionError(file_path=test_directory, error=str(e), phase=e.phase))
        return ExtractionResult(
            test_directory=test_directory,
            analyzed_at=analyzed_at,
            scenarios=[],
            errors=errors,
        )

    if pattern:
        test_files = scanner.filter_by_pattern(test_files, pattern)
    test_files = [f for f in test_files if extractor.can_process(f)]
    logger.info(f"Processing {len(test_files)} test files")

    outcomes = await asyncio.gather(
        *(asyncio.to_thread(extractor.extract_file, f) for f in test_files),
        return_exceptions=True,
    )

    for file_path, outcome in zip(test_files, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            phase = _error_phase(outcome)
            logger.warning(f"Error extracting scenarios from {file_path}: {outcome}")
            errors.append(ExtractionError(file_path=file_path, error=str(outcome), phase=phase))
            continue
        scenarios.extend(outcome)

    result = ExtractionResult(
        test_directory=test_directory,
        analyzed_at=analyzed_at,
        scenarios=scenarios,
        errors=errors,
        files_processed=len(test_files),
    )
    logger.info(f"Extracted {len(scenarios)} scenarios from {len(test_files)} files")
    return result


def _error_phase(error: BaseException) -> str:
    if isinstance(error, SourceParseError):
        return error.phase
    if isinstance(error, (OSError, UnicodeDecodeError)):
        return "reading"
    return "extraction"
