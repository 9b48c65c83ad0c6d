"""Extract BDD scenarios from a test file by analyzing its code."""

import logging
from collections.abc import Iterable
from pathlib import Path

from bdd_scenario_extractor.code_analysis.assembler import assemble
from bdd_scenario_extractor.code_analysis.call_classifier import (
    DEFAULT_TEST_FUNCTIONS,
    find_test_cases,
)
from bdd_scenario_extractor.models import Scenario
from bdd_scenario_extractor.source_parser import parse_source

logger = logging.getLogger(__name__)


def extract_scenarios(
    file_path: str | Path,
    source_text: str,
    test_functions: Iterable[str] = DEFAULT_TEST_FUNCTIONS,
) -> list[Scenario]:
    """Extract one scenario per test declaration in a source file.

    Args:
        file_path: Path of the test file (drives feature name and test type)
        source_text: Contents of the file
        test_functions: Bare identifiers that declare a test

    Returns:
        Scenarios in source order; empty when the file declares no tests

    Raises:
        SourceParseError: If the source cannot be parsed
    """
    path = str(file_path)
    tree = parse_source(source_text, path)
    scenarios = [assemble(test_case, path) for test_case in find_test_cases(tree, test_functions)]
    logger.info(f"Extracted {len(scenarios)} scenarios from {path}")
    return scenarios
