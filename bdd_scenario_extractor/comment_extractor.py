"""Extract BDD scenarios from Given/When/Then comments in test files.

This is the fallback strategy for files where code analysis finds no test
declarations. It scans the file line by line:

- ``test("title", ...)`` starts a new scenario
- JSDoc lines such as ``* Dado que ...`` or ``* Then ...`` add a step with
  the keyword removed
- ``//`` comments mentioning a step keyword add the comment text as-is

Tests without step comments get basic steps derived from the test type.
"""

import logging
import re
from dataclasses import dataclass, field

from bdd_scenario_extractor.code_analysis.assembler import UNNAMED_TEST, file_stem
from bdd_scenario_extractor.models import Scenario

logger = logging.getLogger(__name__)

_TEST_DECLARATION = re.compile(r"""^\s*test\s*\(\s*["'`]""")
_TEST_TITLE = re.compile(r"""test\s*\(\s*["'`]([^"'`]+)["'`]""")
_DESCRIBE_TITLE = re.compile(r"""test\.describe(?:\.parallel)?\(["'`]([^"'`]+)["'`]""")
_LEADING_STARS = re.compile(r"^\s*\*+\s*")
_STEP_KEYWORD = re.compile(r"(Dado que|Given|Cuando|When|Entonces|Then)\s*")
_LINE_COMMENT = re.compile(r"^//\s*")

# (bucket, JSDoc markers, line-comment keywords)
_STEP_MARKERS = (
    ("given", ("* Dado que", "* Given"), ("Dado que", "Given")),
    ("when", ("* Cuando", "* When"), ("Cuando", "When")),
    ("then", ("* Entonces", "* Then"), ("Entonces", "Then")),
)

RULES_THEN = "debe cumplirse la regla de negocio especificada"


@dataclass
class _PendingTest:
    title: str
    line_number: int
    given: list[str] = field(default_factory=list)
    when: list[str] = field(default_factory=list)
    then: list[str] = field(default_factory=list)

    def has_steps(self) -> bool:
        return bool(self.given or self.when or self.then)


def extract_comment_scenarios(file_path: str, source_text: str) -> list[Scenario]:
    """Extract one scenario per ``test(...)`` line using step comments.

    Args:
        file_path: Path of the test file
        source_text: Contents of the file

    Returns:
        All scenarios found, including incomplete ones
    """
    path = str(file_path)
    test_type = comment_test_type(path)
    feature = extract_feature(source_text, path)

    pending: list[_PendingTest] = []
    for index, raw_line in enumerate(source_text.split("\n")):
        line = raw_line.strip()
        if _TEST_DECLARATION.match(line):
            match = _TEST_TITLE.search(line)
            pending.append(
                _PendingTest(
                    title=match.group(1) if match else UNNAMED_TEST,
                    line_number=index + 1,
                )
            )
        if pending:
            _collect_step(line, pending[-1])

    scenarios = [_to_scenario(test, feature, path, test_type) for test in pending]
    logger.info(f"Extracted {len(scenarios)} scenarios from comments in {path}")
    return scenarios


def comment_test_type(file_path: str) -> str:
    """Test type from the directory the file sits in."""
    path = "/" + file_path.replace("\\", "/")
    for test_type in ("validation", "rules", "e2e"):
        if f"/{test_type}/" in path:
            return test_type
    return "validation"


def extract_feature(source_text: str, file_path: str) -> str:
    """Title of the first ``test.describe`` block, else the title-cased file name."""
    match = _DESCRIBE_TITLE.search(source_text)
    if match:
        return match.group(1)
    name = file_stem(file_path).replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), name)


def clean_comment_text(line: str) -> str:
    """Strip JSDoc stars and the first step keyword from a comment line."""
    text = _LEADING_STARS.sub("", line)
    return _STEP_KEYWORD.sub("", text, count=1).strip()


def _collect_step(line: str, test: _PendingTest):
    for bucket, jsdoc_markers, _ in _STEP_MARKERS:
        if any(marker in line for marker in jsdoc_markers):
            step = clean_comment_text(line)
            if step:
                getattr(test, bucket).append(step)
            break

    if line.startswith("//"):
        for bucket, _, keywords in _STEP_MARKERS:
            if any(keyword in line for keyword in keywords):
                step = _LINE_COMMENT.sub("", line).strip()
                if step:
                    getattr(test, bucket).append(step)
                break


def basic_steps(title: str, test_type: str) -> tuple[list[str], list[str], list[str]]:
    """Placeholder steps for a test without step comments."""
    lower = title.lower()

    if test_type == "validation":
        return (
            ["el usuario está en la aplicación"],
            ["navega a la página correspondiente"],
            ["debe ver todos los elementos de la interfaz correctamente"],
        )

    if test_type == "rules":
        if "login" in lower or "sesión" in lower:
            return (
                ["el usuario está en la página de login"],
                ["interactúa con los elementos de login"],
                [RULES_THEN],
            )
        if "register" in lower or "registro" in lower:
            return (
                ["el usuario está en la página de registro"],
                ["interactúa con los elementos de registro"],
                [RULES_THEN],
            )
        return (
            ["el usuario está en la aplicación"],
            ["ejecuta la acción correspondiente"],
            [RULES_THEN],
        )

    return (
        ["el usuario inicia el flujo end-to-end"],
        ["ejecuta las acciones del flujo completo"],
        ["debe completar el flujo exitosamente"],
    )


def _to_scenario(
    test: _PendingTest, feature: str, file_path: str, test_type: str
) -> Scenario:
    explicit = test.has_steps()
    if explicit:
        given, when, then = test.given, test.when, test.then
    else:
        given, when, then = basic_steps(test.title, test_type)

    return Scenario(
        test_name=test.title,
        description=test.title,
        feature=feature,
        scenario_name=test.title,
        given=tuple(given),
        when=tuple(when),
        then=tuple(then),
        file_path=file_path,
        line_number=test.line_number,
        test_type=test_type,
        metadata={
            "generated_from_code": False,
            "generated_steps": not explicit,
            "has_explicit_bdd": explicit,
        },
    )
