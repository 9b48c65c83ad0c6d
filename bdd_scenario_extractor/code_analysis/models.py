"""Data models for call-site analysis of Playwright test files."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class StringLiteral:
    """A string literal argument, with escapes resolved."""

    text: str


@dataclass(frozen=True)
class NumberLiteral:
    """A numeric literal argument, as written in the source."""

    text: str


@dataclass(frozen=True)
class RawSourceText:
    """Any other argument kind, kept as verbatim source text."""

    text: str


Argument = StringLiteral | NumberLiteral | RawSourceText


class CallKind(Enum):
    """Whether a call performs a step or asserts an outcome."""

    ACTION = "action"
    EXPECTATION = "expectation"


@dataclass(frozen=True)
class CallSite:
    """A resolved call inside a test body."""

    qualified_name: str  # e.g. "loginPage.fillCredentialsPhone"
    arguments: tuple[Argument, ...]
    line_number: int
    # Argument text of folded receiver calls, e.g. "(button)" for expect(button)
    receiver_text: str = ""

    @property
    def argument_texts(self) -> list[str]:
        return [argument.text for argument in self.arguments]


@dataclass(frozen=True)
class ClassifiedCall:
    """A call site tagged as action or expectation, with its sentence."""

    call: CallSite
    kind: CallKind
    description: str

    @property
    def qualified_name(self) -> str:
        return self.call.qualified_name

    @property
    def argument_texts(self) -> list[str]:
        return self.call.argument_texts


@dataclass(frozen=True)
class TestCase:
    """A single test declaration and the calls found in its body."""

    __test__ = False  # not a pytest class

    title: str
    line_number: int
    actions: tuple[ClassifiedCall, ...] = ()
    expectations: tuple[ClassifiedCall, ...] = ()
