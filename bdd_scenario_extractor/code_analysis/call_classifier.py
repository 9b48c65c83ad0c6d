"""Find test declarations and classify the calls inside their bodies."""

import logging
from collections.abc import Iterable, Iterator

from tree_sitter import Node, Tree

from bdd_scenario_extractor.code_analysis.models import (
    Argument,
    CallKind,
    CallSite,
    ClassifiedCall,
    NumberLiteral,
    RawSourceText,
    StringLiteral,
    TestCase,
)
from bdd_scenario_extractor.code_analysis.synthesizer import (
    synthesize_action,
    synthesize_expectation,
)
from bdd_scenario_extractor.source_parser import iter_nodes, line_number, node_text

logger = logging.getLogger(__name__)

# Case-sensitive name fragments that mark a call as an assertion
EXPECTATION_MARKERS = (
    "expect",
    "toHave",
    "toBe",
    "Visible",
    "Disabled",
    "Enabled",
    "Error",
    "Message",
)

DEFAULT_TEST_FUNCTIONS = ("test",)

# Receivers that terminate a callee chain like a bare identifier
_NAMED_RECEIVERS = {"identifier", "this", "super"}
_FUNCTION_LITERALS = {"arrow_function", "function_expression", "function"}
_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


def is_expectation(qualified_name: str) -> bool:
    """Whether a call name looks like an assertion."""
    return any(marker in qualified_name for marker in EXPECTATION_MARKERS)


def classify_call(call_site: CallSite) -> ClassifiedCall:
    """Tag a call site as action or expectation and describe it."""
    if is_expectation(call_site.qualified_name):
        kind = CallKind.EXPECTATION
        description = synthesize_expectation(
            call_site.qualified_name, call_site.argument_texts, call_site.receiver_text
        )
    else:
        kind = CallKind.ACTION
        description = synthesize_action(
            call_site.qualified_name, call_site.argument_texts
        )
    return ClassifiedCall(call=call_site, kind=kind, description=description)


def find_test_cases(
    tree: Tree, test_functions: Iterable[str] = DEFAULT_TEST_FUNCTIONS
) -> list[TestCase]:
    """Find every test declaration in a parsed file.

    A declaration is a call to one of ``test_functions`` whose first argument
    is a string literal (the title) and whose second is a function literal.
    Calls of any other shape are skipped.

    Args:
        tree: Parsed source file
        test_functions: Bare identifiers that declare a test

    Returns:
        TestCase objects in source order
    """
    names = frozenset(test_functions)
    test_cases = []

    for node in iter_nodes(tree.root_node, kinds=("call_expression",)):
        callee = node.child_by_field_name("function")
        if callee is None or callee.type != "identifier" or node_text(callee) not in names:
            continue

        arguments = _argument_nodes(node)
        if len(arguments) < 2:
            continue
        title_node, body_node = arguments[0], arguments[1]
        if title_node.type != "string" or body_node.type not in _FUNCTION_LITERALS:
            continue

        body = body_node.child_by_field_name("body")
        test_case = _build_test_case(
            title=_string_value(title_node),
            line=line_number(node),
            body=body if body is not None else body_node,
        )
        test_cases.append(test_case)
        logger.debug(
            f"Found test '{test_case.title}' at line {test_case.line_number}: "
            f"{len(test_case.actions)} actions, {len(test_case.expectations)} expectations"
        )

    logger.info(f"Found {len(test_cases)} test declarations")
    return test_cases


def find_call_sites(body: Node) -> Iterator[CallSite]:
    """Yield every resolvable call under a node, in source order.

    A call that is the receiver of another call's member chain, such as the
    ``expect(x)`` in ``expect(x).toBeVisible()``, is folded into the outer
    name as ``expect()`` and not reported on its own. Its argument text is
    kept in ``receiver_text``.
    """
    folded: set[int] = set()

    for node in iter_nodes(body, kinds=("call_expression",)):
        if node.id in folded:
            continue

        callee = node.child_by_field_name("function")
        qualified_name = resolve_qualified_name(callee) if callee is not None else None
        if not qualified_name:
            logger.debug(f"Skipping unresolvable call at line {line_number(node)}")
            continue

        receivers = list(_receiver_calls(callee))
        folded.update(receiver.id for receiver in receivers)
        yield CallSite(
            qualified_name=qualified_name,
            arguments=tuple(extract_arguments(node)),
            line_number=line_number(node),
            receiver_text=" ".join(_arguments_text(receiver) for receiver in receivers),
        )


def resolve_qualified_name(callee: Node) -> str | None:
    """Build the dotted name of a callee, or None if it is not a plain chain.

    Walks left through member accesses until a bare identifier. A receiver
    that is itself a resolvable call is kept as ``name()``, without its
    arguments.
    """
    parts = []
    current = callee

    while current.type == "member_expression":
        prop = current.child_by_field_name("property")
        obj = current.child_by_field_name("object")
        if prop is None or obj is None:
            return None
        parts.append(node_text(prop))
        current = obj

    if current.type in _NAMED_RECEIVERS:
        parts.append(node_text(current))
    elif current.type == "call_expression":
        inner = current.child_by_field_name("function")
        inner_name = resolve_qualified_name(inner) if inner is not None else None
        if not inner_name:
            return None
        parts.append(inner_name + "()")
    else:
        return None

    parts.reverse()
    return ".".join(parts)


def extract_arguments(call: Node) -> list[Argument]:
    """Normalize a call's arguments into literal or raw-text variants."""
    result: list[Argument] = []
    for argument in _argument_nodes(call):
        if argument.type == "string":
            result.append(StringLiteral(_string_value(argument)))
        elif argument.type == "number":
            result.append(NumberLiteral(node_text(argument)))
        else:
            result.append(RawSourceText(node_text(argument)))
    return result


def _build_test_case(title: str, line: int, body: Node) -> TestCase:
    actions = []
    expectations = []
    for call_site in find_call_sites(body):
        classified = classify_call(call_site)
        if classified.kind is CallKind.EXPECTATION:
            expectations.append(classified)
        else:
            actions.append(classified)
    return TestCase(
        title=title,
        line_number=line,
        actions=tuple(actions),
        expectations=tuple(expectations),
    )


def _receiver_calls(callee: Node) -> Iterator[Node]:
    if callee.type != "member_expression":
        return
    current = callee
    while current is not None and current.type == "member_expression":
        current = current.child_by_field_name("object")
    if current is not None and current.type == "call_expression":
        yield current
        inner = current.child_by_field_name("function")
        if inner is not None:
            yield from _receiver_calls(inner)


def _arguments_text(call: Node) -> str:
    arguments = call.child_by_field_name("arguments")
    return node_text(arguments) if arguments is not None else ""


def _argument_nodes(call: Node) -> list[Node]:
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return []
    return [child for child in arguments.named_children if child.type != "comment"]


def _string_value(node: Node) -> str:
    """Decoded value of a string literal node."""
    pieces = []
    for child in node.named_children:
        text = node_text(child)
        if child.type == "escape_sequence":
            pieces.append(_decode_escape(text))
        else:
            pieces.append(text)
    return "".join(pieces)


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body[:1] in ("u", "x"):
        try:
            return chr(int(body[1:].strip("{}"), 16))
        except ValueError:
            return body
    if body[:1] in ("\n", "\r"):
        return ""  # line continuation
    return body
