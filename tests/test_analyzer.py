"""Tests for the directory analyzer."""

from pathlib import Path

import pytest

from bdd_scenario_extractor.analyzer import analyze_directory


@pytest.fixture
def fixtures_path():
    return Path(__file__).parent / "fixtures" / "sample_specs"


class TestAnalyzer:
    async def when_directory_analyzed(self, directory, **kwargs):
        self.result = await analyze_directory(str(directory), **kwargs)

    def then_no_errors(self):
        assert self.result.errors == []

    def then_error_phase_is(self, phase):
        assert [e.phase for e in self.result.errors] == [phase]

    @pytest.mark.asyncio
    async def test_extracts_every_fixture_file(self, fixtures_path):
        """All eligible files contribute scenarios."""
        await self.when_directory_analyzed(fixtures_path)
        self.then_no_errors()
        assert self.result.files_processed == 5
        assert len(self.result.scenarios) == 11
        assert self.result.analyzed_at

    @pytest.mark.asyncio
    async def test_groups_by_type(self, fixtures_path):
        await self.when_directory_analyzed(fixtures_path)
        groups = self.result.group_by_test_type()
        assert len(groups["rules"]) == 7
        assert len(groups["e2e"]) == 2

    @pytest.mark.asyncio
    async def test_pattern_filters_files(self, fixtures_path):
        await self.when_directory_analyzed(fixtures_path, pattern="LOGIN")
        assert self.result.files_processed == 1
        assert len(self.result.scenarios) == 5

    @pytest.mark.asyncio
    async def test_records_parse_errors_and_continues(self, tmp_path):
        """A malformed file is recorded and the others are still processed."""
        (tmp_path / "good.spec.ts").write_text(
            'test("bueno", async () => { await page.click("#a"); });\n',
            encoding="utf-8",
        )
        (tmp_path / "bad.spec.ts").write_text('test("malo", () => {\n', encoding="utf-8")
        await self.when_directory_analyzed(tmp_path)
        self.then_error_phase_is("parsing")
        assert self.result.errors[0].file_path.endswith("bad.spec.ts")
        assert [s.test_name for s in self.result.scenarios] == ["bueno"]

    @pytest.mark.asyncio
    async def test_records_reading_errors(self, tmp_path):
        (tmp_path / "latin.spec.ts").write_bytes(b'test("\xf1", () => {});\n')
        await self.when_directory_analyzed(tmp_path)
        self.then_error_phase_is("reading")

    @pytest.mark.asyncio
    async def test_missing_directory_is_a_discovery_error(self, tmp_path):
        await self.when_directory_analyzed(tmp_path / "missing")
        self.then_error_phase_is("discovery")
        assert self.result.scenarios == []
