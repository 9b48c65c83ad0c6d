"""Command-line interface for bdd-scenario-extractor."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, replace
from pathlib import Path

from bdd_scenario_extractor.analyzer import analyze_directory
from bdd_scenario_extractor.file_scanner import FileScanner, ScannerError
from bdd_scenario_extractor.models import (
    DocumentationConfig,
    ExtractionResult,
    Scenario,
)

logger = logging.getLogger(__name__)

COMMANDS = ("extract", "scan")
EXTENSIONS = {"json": "json", "gherkin": "feature"}


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="bdd-scenarios",
        description="Extract BDD scenarios from Playwright test files",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # extract subcommand
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract Given/When/Then scenarios (default)",
    )
    extract_parser.add_argument(
        "tests_dir",
        help="Directory containing .spec.ts / .test.ts files",
    )
    extract_parser.add_argument(
        "--format",
        "-f",
        choices=sorted(EXTENSIONS),
        default="json",
        help="Output format (default: json)",
    )
    extract_parser.add_argument(
        "--output-dir",
        "-o",
        default=None,
        help="Write one file per test type plus all-scenarios into this directory",
    )
    extract_parser.add_argument(
        "--pattern",
        "-p",
        default=None,
        help="Only process files whose path matches this regex (case-insensitive)",
    )
    extract_parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Do not scan subdirectories",
    )
    extract_parser.add_argument(
        "--complete",
        action="store_true",
        help="Include every optional section in the output",
    )
    extract_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr",
    )

    # scan subcommand
    scan_parser = subparsers.add_parser(
        "scan",
        help="List the test files that would be processed",
    )
    scan_parser.add_argument(
        "tests_dir",
        help="Directory to scan",
    )
    scan_parser.add_argument(
        "--no-recursive",
        action="store_true",
        help="Do not scan subdirectories",
    )

    return parser


def parse_args(args: list[str]) -> argparse.Namespace:
    """Parse command-line arguments with backwards compatibility."""
    parser = create_parser()

    # Handle backwards compatibility: bare directory without subcommand
    if args and not args[0].startswith("-") and args[0] not in COMMANDS:
        args = ["extract"] + args

    return parser.parse_args(args)


def render_gherkin(scenarios: list[Scenario]) -> str:
    """Gherkin blocks separated by blank lines."""
    return "\n\n".join(s.to_gherkin_text() for s in scenarios) + "\n"


def render(
    result: ExtractionResult, output_format: str, config: DocumentationConfig
) -> str:
    if output_format == "gherkin":
        return render_gherkin(result.scenarios)
    return result.to_json(config) + "\n"


def write_outputs(
    result: ExtractionResult,
    output_dir: Path,
    output_format: str,
    config: DocumentationConfig,
) -> list[Path]:
    """Write per-type files and the combined file.

    Returns:
        Paths written, combined file last
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    extension = EXTENSIONS[output_format]
    written = []

    for test_type, scenarios in result.group_by_test_type().items():
        subset = replace(result, scenarios=scenarios)
        path = output_dir / f"{test_type}-scenarios.{extension}"
        path.write_text(render(subset, output_format, config), encoding="utf-8")
        written.append(path)

    path = output_dir / f"all-scenarios.{extension}"
    path.write_text(render(result, output_format, config), encoding="utf-8")
    written.append(path)

    logger.info(f"Wrote {len(written)} files to {output_dir}")
    return written


async def run_extract(
    tests_dir: str,
    output_format: str = "json",
    output_dir: str | None = None,
    pattern: str | None = None,
    recursive: bool = True,
    complete: bool = False,
) -> int:
    """Run the extract command.

    Returns:
        Exit code (0 for success, 1 if the directory is missing)
    """
    config = (
        DocumentationConfig.create_complete()
        if complete
        else DocumentationConfig.create_default()
    )
    logger.info(f"Extracting scenarios from {tests_dir}")
    result = await analyze_directory(
        tests_dir, config=config, recursive=recursive, pattern=pattern
    )

    if any(e.phase == "discovery" for e in result.errors):
        print(f"Error: directory not found: {tests_dir}", file=sys.stderr)
        return 1

    if output_dir:
        written = write_outputs(result, Path(output_dir), output_format, config)
        for path in written:
            print(f"Wrote {path}", file=sys.stderr)
    else:
        sys.stdout.write(render(result, output_format, config))

    for error in result.errors:
        print(f"Warning: {error.file_path}: {error.error}", file=sys.stderr)
    print(
        f"Extracted {len(result.scenarios)} scenarios from {result.files_processed} files",
        file=sys.stderr,
    )
    return 0


def run_scan(tests_dir: str, recursive: bool = True) -> int:
    """Run the scan command."""
    scanner = FileScanner()
    try:
        test_files = scanner.scan_test_files(tests_dir, recursive=recursive)
    except ScannerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for path in test_files:
        print(path)
    stats = scanner.get_file_stats(test_files)
    print(json.dumps(asdict(stats), indent=2), file=sys.stderr)
    return 0


async def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for fatal errors)
    """
    try:
        parsed = parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 1

    setup_logging(verbose=getattr(parsed, "verbose", False))

    if parsed.command is None:
        # No command and no args - show help
        create_parser().print_help(sys.stderr)
        return 1

    if parsed.command == "extract":
        return await run_extract(
            parsed.tests_dir,
            output_format=parsed.format,
            output_dir=parsed.output_dir,
            pattern=parsed.pattern,
            recursive=not parsed.no_recursive,
            complete=parsed.complete,
        )
    elif parsed.command == "scan":
        return run_scan(parsed.tests_dir, recursive=not parsed.no_recursive)

    return 1


def main():
    """Entry point for the CLI."""
    exit_code = asyncio.run(run_cli(sys.argv[1:]))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
