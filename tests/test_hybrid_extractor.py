"""Tests for the hybrid extraction strategy."""

from pathlib import Path

import pytest

from bdd_scenario_extractor.hybrid_extractor import HybridScenarioExtractor
from bdd_scenario_extractor.source_parser import SourceParseError


@pytest.fixture
def fixtures_path():
    return Path(__file__).parent / "fixtures" / "sample_specs"


class TestHybridScenarioExtractor:
    def given_extractor(self):
        self.extractor = HybridScenarioExtractor()

    def when_file_extracted(self, path):
        self.scenarios = self.extractor.extract_file(path)

    def test_prefers_code_analysis(self, fixtures_path):
        """Files with test declarations are analyzed from code."""
        self.given_extractor()
        self.when_file_extracted(fixtures_path / "rules" / "login-rules.spec.ts")
        assert len(self.scenarios) == 5
        assert all(s.metadata.get("generated_from_code") for s in self.scenarios)

    def test_falls_back_to_comments(self, fixtures_path):
        """Files with no declarations found by code analysis use step comments."""
        self.given_extractor()
        self.when_file_extracted(fixtures_path / "e2e" / "checkout-flow.spec.ts")
        assert [s.test_name for s in self.scenarios] == [
            "Completar una compra como invitado",
            "Cancelar una compra",
        ]
        assert self.scenarios[0].has_explicit_bdd()

    def test_parse_errors_propagate(self, tmp_path):
        self.given_extractor()
        broken = tmp_path / "broken.spec.ts"
        broken.write_text('test("x", () => {\n', encoding="utf-8")
        with pytest.raises(SourceParseError):
            self.when_file_extracted(broken)

    def test_missing_file_raises(self, tmp_path):
        self.given_extractor()
        with pytest.raises(OSError):
            self.when_file_extracted(tmp_path / "missing.spec.ts")

    def test_can_process_spec_and_test_files(self):
        self.given_extractor()
        assert self.extractor.can_process("a.spec.ts")
        assert self.extractor.can_process(Path("dir/a.test.ts"))
        assert not self.extractor.can_process("a.spec.js")
        assert not self.extractor.can_process("a.ts")
