"""Data models for extracted scenarios and extraction output."""

import json
from collections import Counter
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Any

TEST_TYPES = ("validation", "rules", "e2e")


@dataclass(frozen=True)
class ScenarioSummary:
    """Compact projection of a scenario for listings."""

    test_name: str
    scenario_name: str
    steps_count: int
    test_type: str
    file_path: str


@dataclass(frozen=True)
class Scenario:
    """A Given/When/Then scenario extracted from one test."""

    test_name: str
    description: str
    feature: str
    scenario_name: str
    given: tuple[str, ...]
    when: tuple[str, ...]
    then: tuple[str, ...]
    file_path: str
    line_number: int
    test_type: str  # "validation", "rules" or "e2e"
    tags: frozenset[str] = frozenset()
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Read-only copy so the frozen scenario stays immutable
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_gherkin_text(self) -> str:
        """Render the scenario as Gherkin.

        The first step of each bucket uses its keyword and the rest use
        "And". Lines are joined with newlines, without a trailing one.
        """
        lines = []
        if self.feature:
            lines.append(f"Feature: {self.feature}")
            lines.append("")
        if self.scenario_name:
            lines.append(f"  Scenario: {self.scenario_name}")

        for keyword, steps in (
            ("Given", self.given),
            ("When", self.when),
            ("Then", self.then),
        ):
            for index, step in enumerate(steps):
                prefix = keyword if index == 0 else "And"
                lines.append(f"    {prefix} {' '.join(step.split())}")

        return "\n".join(lines)

    def is_complete(self) -> bool:
        """Every bucket has a step and the scenario is named."""
        return (
            len(self.given) > 0
            and len(self.when) > 0
            and len(self.then) > 0
            and self.scenario_name.strip() != ""
        )

    def has_explicit_bdd(self) -> bool:
        return self.metadata.get("has_explicit_bdd") is True

    def has_generated_steps(self) -> bool:
        return self.metadata.get("generated_steps") is True

    def get_summary(self) -> ScenarioSummary:
        return ScenarioSummary(
            test_name=self.test_name,
            scenario_name=self.scenario_name,
            steps_count=len(self.given) + len(self.when) + len(self.then),
            test_type=self.test_type,
            file_path=self.file_path,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "test_name": self.test_name,
            "description": self.description,
            "feature": self.feature,
            "scenario": self.scenario_name,
            "given": list(self.given),
            "when": list(self.when),
            "then": list(self.then),
            "file_path": self.file_path,
            "line_number": self.line_number,
            "test_type": self.test_type,
            "tags": sorted(self.tags),
            "metadata": dict(self.metadata),
            "complete": self.is_complete(),
        }


@dataclass(frozen=True)
class DocumentationConfig:
    """Options controlling how much the documentation output includes."""

    include_timestamp: bool = True
    include_test_metadata: bool = True
    include_code_snippets: bool = False
    output_format: str = "markdown"  # "markdown", "html" or "both"
    template_path: str | None = None
    custom_sections: tuple[str, ...] = ()

    @classmethod
    def create_default(cls) -> "DocumentationConfig":
        return cls()

    @classmethod
    def create_complete(cls) -> "DocumentationConfig":
        """Configuration with every option enabled."""
        return cls(
            include_timestamp=True,
            include_test_metadata=True,
            include_code_snippets=True,
            output_format="both",
            custom_sections=("Test Coverage", "Performance Notes", "Known Issues"),
        )


@dataclass
class ExtractionError:
    """A non-fatal error encountered while processing one file."""

    file_path: str
    error: str
    phase: str  # "discovery", "reading", "parsing", "extraction"


@dataclass
class SuiteStats:
    """Counts over a set of scenarios."""

    total_tests: int
    total_scenarios: int  # complete ones
    tests_by_type: dict[str, int]


@dataclass
class ExtractionResult:
    """Complete result of extracting scenarios from a test directory."""

    test_directory: str
    analyzed_at: str
    scenarios: list[Scenario]
    errors: list[ExtractionError]
    files_processed: int = 0

    def group_by_test_type(self) -> dict[str, list[Scenario]]:
        """Scenarios per test type, only for types that have any."""
        groups: dict[str, list[Scenario]] = {}
        for test_type in TEST_TYPES:
            matching = [s for s in self.scenarios if s.test_type == test_type]
            if matching:
                groups[test_type] = matching
        return groups

    def stats(self) -> SuiteStats:
        return SuiteStats(
            total_tests=len(self.scenarios),
            total_scenarios=sum(1 for s in self.scenarios if s.is_complete()),
            tests_by_type=dict(Counter(s.test_type for s in self.scenarios)),
        )

    def to_dict(self, config: DocumentationConfig | None = None) -> dict:
        """Convert to dictionary for JSON serialization."""
        config = config or DocumentationConfig.create_default()
        result = {
            "test_directory": self.test_directory,
            "errors": [asdict(e) for e in self.errors],
            "scenarios": [s.to_dict() for s in self.scenarios],
        }
        if config.include_timestamp:
            result["analyzed_at"] = self.analyzed_at
        if config.include_test_metadata:
            result["files_processed"] = self.files_processed
            result["stats"] = asdict(self.stats())
        return result

    def to_json(
        self, config: DocumentationConfig | None = None, indent: int = 2
    ) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(config), indent=indent, ensure_ascii=False)
