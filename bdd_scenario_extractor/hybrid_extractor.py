"""Combine code analysis with the comment-driven fallback."""

import logging
from pathlib import Path

from bdd_scenario_extractor.code_analysis import extract_scenarios
from bdd_scenario_extractor.comment_extractor import extract_comment_scenarios
from bdd_scenario_extractor.models import Scenario

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".spec.ts", ".test.ts")


class HybridScenarioExtractor:
    """Extract scenarios by code analysis, falling back to step comments.

    Code analysis wins whenever it finds at least one test. Read and parse
    errors propagate to the caller.
    """

    def can_process(self, file_path: str | Path) -> bool:
        return str(file_path).endswith(SUPPORTED_SUFFIXES)

    def extract_source(self, file_path: str | Path, source_text: str) -> list[Scenario]:
        """Extract scenarios from already-read source text."""
        path = str(file_path)
        scenarios = extract_scenarios(path, source_text)
        if scenarios:
            logger.info(
                f"Code analysis: {len(scenarios)} scenarios from {Path(path).name}"
            )
            return scenarios

        logger.info(f"No tests found by code analysis in {Path(path).name}, using comments")
        return extract_comment_scenarios(path, source_text)

    def extract_file(self, file_path: str | Path) -> list[Scenario]:
        """Read a test file and extract its scenarios.

        Raises:
            OSError: If the file cannot be read
            SourceParseError: If the file cannot be parsed
        """
        source_text = Path(file_path).read_text(encoding="utf-8")
        return self.extract_source(file_path, source_text)
