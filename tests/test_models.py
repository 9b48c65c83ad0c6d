"""Tests for data models."""

import json

import pytest

from bdd_scenario_extractor.models import (
    DocumentationConfig,
    ExtractionError,
    ExtractionResult,
    Scenario,
)


def make_scenario(**overrides):
    fields = dict(
        test_name="Iniciar sesión",
        description="Iniciar sesión",
        feature="Funcionalidad de Login",
        scenario_name="Iniciar sesión",
        given=("g1", "g2"),
        when=("w1",),
        then=("t1", "t2", "t3"),
        file_path="tests/rules/login-rules.spec.ts",
        line_number=12,
        test_type="rules",
    )
    fields.update(overrides)
    return Scenario(**fields)


class TestScenario:
    def given_scenario(self, **overrides):
        self.scenario = make_scenario(**overrides)

    def when_rendered(self):
        self.lines = self.scenario.to_gherkin_text().split("\n")

    def then_keywords_are(self, *keywords):
        steps = [line.split()[0] for line in self.lines if line.startswith("    ")]
        assert steps == list(keywords)

    def test_gherkin_uses_and_for_following_steps(self):
        """The first step of each bucket uses its keyword, the rest use And."""
        self.given_scenario()
        self.when_rendered()
        self.then_keywords_are("Given", "And", "When", "Then", "And", "And")

    def test_gherkin_header(self):
        self.given_scenario()
        self.when_rendered()
        assert self.lines[:3] == [
            "Feature: Funcionalidad de Login",
            "",
            "  Scenario: Iniciar sesión",
        ]
        assert not self.scenario.to_gherkin_text().endswith("\n")

    def test_gherkin_collapses_whitespace_in_steps(self):
        self.given_scenario(given=("el  usuario\n  entra",))
        self.when_rendered()
        assert "    Given el usuario entra" in self.lines

    def test_incomplete_without_then(self):
        self.given_scenario(then=())
        assert not self.scenario.is_complete()

    def test_summary_counts_steps(self):
        self.given_scenario()
        summary = self.scenario.get_summary()
        assert summary.steps_count == 6
        assert summary.test_type == "rules"

    def test_metadata_flags(self):
        self.given_scenario(metadata={"has_explicit_bdd": True, "generated_steps": False})
        assert self.scenario.has_explicit_bdd()
        assert not self.scenario.has_generated_steps()

    def test_metadata_is_read_only(self):
        """The frozen scenario cannot be changed through its metadata."""
        source = {"generated_steps": True}
        self.given_scenario(metadata=source)
        source["generated_steps"] = False
        assert self.scenario.has_generated_steps()
        with pytest.raises(TypeError):
            self.scenario.metadata["generated_steps"] = False

    def test_scenario_is_hashable(self):
        self.given_scenario(metadata={"generated_steps": True})
        assert hash(self.scenario) == hash(self.scenario)
        assert len({self.scenario, self.scenario}) == 1


class TestExtractionResult:
    def given_result(self, scenarios, errors=()):
        self.result = ExtractionResult(
            test_directory="tests",
            analyzed_at="2026-01-01T10:00:00+00:00",
            scenarios=list(scenarios),
            errors=list(errors),
            files_processed=2,
        )

    def when_serialized_to_json(self, config=None):
        self.parsed = json.loads(self.result.to_json(config))

    def test_serializes_scenarios_and_errors(self):
        """to_json() keeps non-ASCII text and records errors with their phase."""
        self.given_result(
            [make_scenario()],
            [ExtractionError(file_path="tests/x.spec.ts", error="boom", phase="parsing")],
        )
        self.when_serialized_to_json()
        assert self.parsed["scenarios"][0]["scenario"] == "Iniciar sesión"
        assert self.parsed["errors"] == [
            {"file_path": "tests/x.spec.ts", "error": "boom", "phase": "parsing"}
        ]
        assert self.parsed["stats"]["total_tests"] == 1
        assert "Iniciar sesión" in self.result.to_json()

    def test_config_controls_optional_fields(self):
        self.given_result([])
        self.when_serialized_to_json(
            DocumentationConfig(include_timestamp=False, include_test_metadata=False)
        )
        assert "analyzed_at" not in self.parsed
        assert "stats" not in self.parsed

    def test_groups_by_test_type(self):
        self.given_result(
            [
                make_scenario(test_type="rules"),
                make_scenario(test_type="e2e"),
                make_scenario(test_type="rules", then=()),
            ]
        )
        groups = self.result.group_by_test_type()
        assert list(groups) == ["rules", "e2e"]
        stats = self.result.stats()
        assert stats.total_tests == 3
        assert stats.total_scenarios == 2
        assert stats.tests_by_type == {"rules": 2, "e2e": 1}


def test_complete_config_enables_everything():
    config = DocumentationConfig.create_complete()
    assert config.include_code_snippets
    assert config.output_format == "both"
