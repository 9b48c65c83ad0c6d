"""Synthesize natural-language BDD steps from classified calls.

Every function here is pure: the same name and arguments always give the same
sentence, and the rule tables they read are never modified.
"""

import logging
import re
from collections.abc import Iterable, Sequence

from bdd_scenario_extractor.code_analysis.action_rules import (
    ACTION_RULES,
    COMMON_METHODS,
    WORD_TRANSLATIONS,
    strip_namespace,
)
from bdd_scenario_extractor.code_analysis.context_rules import (
    CONTEXT_RULES,
    GENERIC_BEHAVIOUR,
    VALIDATIONS_RUN,
)
from bdd_scenario_extractor.code_analysis.expectation_rules import (
    EXPECTATION_RULES,
    GENERIC_RESULT,
    TOOLING_KEYWORDS,
)
from bdd_scenario_extractor.code_analysis.rules import (
    first_match,
    resolve_context,
    strip_quotes,
)

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"([A-Z])")


def synthesize_action(qualified_name: str, argument_texts: Sequence[str] = ()) -> str:
    """Describe an action call as a "Cuando" sentence.

    Args:
        qualified_name: Dotted callee name, e.g. "loginPage.fillCredentialsPhone"
        argument_texts: Literal values or raw source text of the arguments

    Returns:
        A non-empty Spanish sentence
    """
    rule = first_match(ACTION_RULES, qualified_name.lower(), argument_texts)
    if rule is not None:
        logger.debug(f"Action '{qualified_name}' matched rule '{rule.name}'")
        return rule.render(argument_texts)
    return _describe_unmapped_action(qualified_name, argument_texts)


def synthesize_expectation(
    qualified_name: str,
    argument_texts: Sequence[str] = (),
    receiver_text: str = "",
) -> str:
    """Describe an expectation call as an "Entonces" sentence.

    Returns an empty string for assertions about the documentation tooling
    itself, whether named in the call chain or in the asserted receiver
    (``expect(extractor.canProcess(...))``); callers drop those steps.
    """
    subject = qualified_name.lower()
    receiver = receiver_text.lower()
    if "expect" in subject and any(word in receiver for word in TOOLING_KEYWORDS):
        logger.debug(f"Expectation '{qualified_name}' asserts on tooling, dropped")
        return ""
    rule = first_match(EXPECTATION_RULES, subject, argument_texts)
    if rule is not None:
        logger.debug(f"Expectation '{qualified_name}' matched rule '{rule.name}'")
        return rule.render(argument_texts)
    return GENERIC_RESULT


def infer_contextual_expectation(title: str, action_names: Iterable[str] = ()) -> str:
    """Guess the expected outcome of a test from its title.

    Args:
        title: The test title
        action_names: Qualified names of the test's action calls

    Returns:
        A non-empty Spanish sentence
    """
    sentence = resolve_context(CONTEXT_RULES, title.lower())
    if sentence is not None:
        return sentence

    if any("validate" in name or "verify" in name for name in action_names):
        return VALIDATIONS_RUN
    return GENERIC_BEHAVIOUR


def split_identifier(identifier: str) -> list[str]:
    """Split a camelCase identifier into lower-case words."""
    return _CAMEL_BOUNDARY.sub(r" \1", identifier).lower().split()


def _describe_unmapped_action(qualified_name: str, argument_texts: Sequence[str]) -> str:
    method = strip_namespace(qualified_name)
    if method in COMMON_METHODS:
        return f"el usuario {COMMON_METHODS[method]}"

    words = [WORD_TRANSLATIONS.get(word, word) for word in split_identifier(method)]
    phrase = " ".join(words) or "ejecuta una acción"

    if argument_texts and argument_texts[0] != "":
        return f'el usuario {phrase} con "{strip_quotes(argument_texts[0])}"'
    return f"el usuario {phrase}"
