"""Code analysis pipeline: classify test calls and synthesize BDD steps."""

from bdd_scenario_extractor.code_analysis.assembler import (
    assemble,
    derive_feature_name,
    derive_test_type,
)
from bdd_scenario_extractor.code_analysis.call_classifier import (
    classify_call,
    find_call_sites,
    find_test_cases,
    is_expectation,
    resolve_qualified_name,
)
from bdd_scenario_extractor.code_analysis.extractor import extract_scenarios
from bdd_scenario_extractor.code_analysis.models import (
    CallKind,
    CallSite,
    ClassifiedCall,
    NumberLiteral,
    RawSourceText,
    StringLiteral,
    TestCase,
)
from bdd_scenario_extractor.code_analysis.synthesizer import (
    infer_contextual_expectation,
    synthesize_action,
    synthesize_expectation,
)

__all__ = [
    # Models
    "CallKind",
    "CallSite",
    "ClassifiedCall",
    "NumberLiteral",
    "RawSourceText",
    "StringLiteral",
    "TestCase",
    # Classification
    "classify_call",
    "find_call_sites",
    "find_test_cases",
    "is_expectation",
    "resolve_qualified_name",
    # Synthesis
    "infer_contextual_expectation",
    "synthesize_action",
    "synthesize_expectation",
    # Assembly
    "assemble",
    "derive_feature_name",
    "derive_test_type",
    "extract_scenarios",
]
