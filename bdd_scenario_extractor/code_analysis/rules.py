"""Rule types for the description cascades.

A cascade is an ordered tuple of rules. Rules are evaluated top to bottom
against a lower-cased subject (a qualified call name or a test title) and the
first one that matches produces the sentence.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

Template = str | Callable[[Sequence[str]], str]


def strip_quotes(value: str) -> str:
    """Remove every single and double quote from an argument text."""
    return value.replace('"', "").replace("'", "")


def first_argument(arguments: Sequence[str], default: str = "") -> str:
    """First argument with quotes removed, or the default when missing/empty."""
    if not arguments:
        return default
    return strip_quotes(arguments[0]) or default


@dataclass(frozen=True)
class DescriptionRule:
    """Match a subject by keywords and render a sentence.

    ``any_of`` needs at least one keyword present (ignored when empty);
    ``all_of`` needs every keyword present. Keywords are lower-case and are
    compared against the lower-cased subject.
    """

    name: str
    template: Template
    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()
    when: Callable[[Sequence[str]], bool] | None = None

    def matches(self, subject: str, arguments: Sequence[str] = ()) -> bool:
        if self.any_of and not any(keyword in subject for keyword in self.any_of):
            return False
        if not all(keyword in subject for keyword in self.all_of):
            return False
        if self.when is not None and not self.when(arguments):
            return False
        return True

    def render(self, arguments: Sequence[str] = ()) -> str:
        if callable(self.template):
            return self.template(arguments)
        return self.template


@dataclass(frozen=True)
class ContextRule:
    """A title rule with optional refinements.

    When the rule matches, the first matching refinement supplies the
    sentence. If no refinement matches, ``sentence`` is used; a rule without
    a sentence lets the cascade continue.
    """

    name: str
    sentence: str | None
    any_of: tuple[str, ...] = ()
    all_of: tuple[str, ...] = ()
    refinements: tuple["ContextRule", ...] = ()

    def matches(self, subject: str) -> bool:
        if self.any_of and not any(keyword in subject for keyword in self.any_of):
            return False
        return all(keyword in subject for keyword in self.all_of)

    def resolve(self, subject: str) -> str | None:
        for refinement in self.refinements:
            if refinement.matches(subject):
                resolved = refinement.resolve(subject)
                if resolved is not None:
                    return resolved
        return self.sentence


def first_match(
    rules: Sequence[DescriptionRule], subject: str, arguments: Sequence[str] = ()
) -> DescriptionRule | None:
    """Return the first rule in the cascade matching the subject."""
    for rule in rules:
        if rule.matches(subject, arguments):
            return rule
    return None


def resolve_context(rules: Sequence[ContextRule], subject: str) -> str | None:
    """Walk a title cascade; the first rule yielding a sentence wins."""
    for rule in rules:
        if rule.matches(subject):
            sentence = rule.resolve(subject)
            if sentence is not None:
                return sentence
    return None
