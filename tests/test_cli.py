"""Tests for CLI interface."""

import json
from pathlib import Path

import pytest

from bdd_scenario_extractor.cli import parse_args, run_cli


@pytest.fixture
def fixtures_path():
    return Path(__file__).parent / "fixtures" / "sample_specs"


class TestCLI:
    def given_args(self, *args):
        self.args = [str(a) for a in args]

    async def when_cli_is_run(self, capsys):
        self.exit_code = await run_cli(self.args)
        self.captured = capsys.readouterr()

    def then_exit_code_is(self, expected):
        assert self.exit_code == expected

    def then_stdout_is_json_with_scenarios(self, count):
        output = json.loads(self.captured.out)
        assert len(output["scenarios"]) == count

    def then_stderr_has_summary(self, scenarios, files):
        assert f"Extracted {scenarios} scenarios from {files} files" in self.captured.err

    @pytest.mark.asyncio
    async def test_bare_directory_means_extract(self, fixtures_path, capsys):
        """A bare path without a subcommand extracts to JSON on stdout."""
        self.given_args(fixtures_path)
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(0)
        self.then_stdout_is_json_with_scenarios(11)
        self.then_stderr_has_summary(11, 5)

    @pytest.mark.asyncio
    async def test_gherkin_output(self, fixtures_path, capsys):
        self.given_args("extract", fixtures_path, "--format", "gherkin", "--pattern", "home")
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(0)
        assert self.captured.out.startswith("Feature: Página de Inicio\n")
        assert "    Given el usuario navega a la página de inicio" in self.captured.out

    @pytest.mark.asyncio
    async def test_writes_files_per_type(self, fixtures_path, tmp_path, capsys):
        out = tmp_path / "docs"
        self.given_args("extract", fixtures_path, "--output-dir", out, "--complete")
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(0)
        assert sorted(p.name for p in out.iterdir()) == [
            "all-scenarios.json",
            "e2e-scenarios.json",
            "rules-scenarios.json",
            "validation-scenarios.json",
        ]
        rules = json.loads((out / "rules-scenarios.json").read_text(encoding="utf-8"))
        assert len(rules["scenarios"]) == 7
        assert self.captured.out == ""

    @pytest.mark.asyncio
    async def test_partial_results_still_succeed(self, tmp_path, capsys):
        """Per-file errors are reported but do not change the exit code."""
        (tmp_path / "bad.spec.ts").write_text('test("x", () => {\n', encoding="utf-8")
        self.given_args(tmp_path)
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(0)
        assert "bad.spec.ts" in self.captured.err
        self.then_stderr_has_summary(0, 1)

    @pytest.mark.asyncio
    async def test_missing_directory_fails(self, tmp_path, capsys):
        self.given_args(tmp_path / "missing")
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(1)

    @pytest.mark.asyncio
    async def test_scan_lists_files(self, fixtures_path, capsys):
        self.given_args("scan", fixtures_path)
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(0)
        assert len(self.captured.out.splitlines()) == 5
        assert '"total_files": 5' in self.captured.err

    @pytest.mark.asyncio
    async def test_no_args_shows_usage(self, capsys):
        self.given_args()
        await self.when_cli_is_run(capsys)
        self.then_exit_code_is(1)
        assert "usage" in self.captured.err.lower()


class TestParseArgs:
    def test_defaults(self):
        parsed = parse_args(["extract", "tests"])
        assert parsed.format == "json"
        assert parsed.output_dir is None
        assert not parsed.no_recursive
        assert not parsed.complete
