"""Assemble Given/When/Then scenarios from analyzed test cases."""

import logging
from pathlib import PurePath

from bdd_scenario_extractor.code_analysis.context_rules import GENERIC_BEHAVIOUR
from bdd_scenario_extractor.code_analysis.expectation_rules import UNSPECIFIED_RESULT
from bdd_scenario_extractor.code_analysis.models import ClassifiedCall, TestCase
from bdd_scenario_extractor.code_analysis.synthesizer import (
    infer_contextual_expectation,
)
from bdd_scenario_extractor.models import TEST_TYPES, Scenario

logger = logging.getLogger(__name__)

DEFAULT_GIVEN = "el usuario se encuentra en la aplicación"
DEFAULT_WHEN = "el usuario ejecuta la acción correspondiente"
UNNAMED_TEST = "Test sin nombre"

# Fragments of a call name that make it a precondition
PRECONDITION_MARKERS = ("setup", "navigate")

TEST_FILE_SUFFIXES = (".spec.ts", ".test.ts", ".spec.js", ".test.js")

FEATURE_NAMES = (
    ("login", "Funcionalidad de Login"),
    ("register", "Funcionalidad de Registro"),
    ("home", "Página de Inicio"),
    ("validation", "Validación de Elementos"),
    ("rules", "Reglas de Negocio"),
)


def is_precondition(call: ClassifiedCall) -> bool:
    return any(marker in call.qualified_name for marker in PRECONDITION_MARKERS)


def assemble(test_case: TestCase, file_path: str) -> Scenario:
    """Build the scenario for one test case.

    Args:
        test_case: The analyzed test declaration
        file_path: Path of the file the test came from

    Returns:
        A Scenario whose given, when and then steps are all non-empty
    """
    generated = False

    precondition = next((a for a in test_case.actions if is_precondition(a)), None)
    if precondition is not None:
        given = [precondition.description]
    else:
        given = [DEFAULT_GIVEN]
        generated = True

    when = [a.description for a in test_case.actions if not is_precondition(a)]
    if not when:
        when = [DEFAULT_WHEN]
        generated = True

    then = [e.description for e in test_case.expectations if e.description]
    contextual = infer_contextual_expectation(
        test_case.title, (a.qualified_name for a in test_case.actions)
    )
    if not then:
        then = [contextual]
        generated = True
    elif UNSPECIFIED_RESULT in then and contextual != GENERIC_BEHAVIOUR:
        then.insert(0, contextual)
        generated = True

    title = test_case.title if test_case.title.strip() else UNNAMED_TEST
    scenario = Scenario(
        test_name=title,
        description=title,
        feature=derive_feature_name(file_path),
        scenario_name=title,
        given=tuple(given),
        when=tuple(when),
        then=tuple(then),
        file_path=file_path,
        line_number=test_case.line_number,
        test_type=derive_test_type(file_path),
        tags=frozenset(),
        metadata={
            "generated_from_code": True,
            "generated_steps": generated,
            "has_explicit_bdd": False,
        },
    )
    logger.debug(
        f"Assembled '{title}': {len(given)} given, {len(when)} when, {len(then)} then"
    )
    return scenario


def file_stem(file_path: str) -> str:
    """File name without its test suffix (or plain extension)."""
    name = PurePath(file_path).name
    for suffix in TEST_FILE_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return PurePath(name).stem


def derive_feature_name(file_path: str) -> str:
    """Feature title for a test file, e.g. "login-rules" -> "Funcionalidad de Login"."""
    stem = file_stem(file_path)
    for keyword, feature in FEATURE_NAMES:
        if keyword in stem:
            return feature

    first_segment = stem.split("-")[0]
    return f"Funcionalidad de {first_segment.title() or 'Test'}"


def derive_test_type(file_path: str) -> str:
    """Classify a test file as validation, rules or e2e by its path."""
    path = file_path.replace("\\", "/")
    for test_type in TEST_TYPES:
        if test_type in path:
            return test_type
    return "validation"
