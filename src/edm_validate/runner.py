from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional

import typer

from .config import (
    EXAMPLES_GLOB,
    EXIT_INVALID,
    EXIT_OK,
    SCHEMA_LABEL,
    SCHEMA_PATH,
)
from .models import FileResult, RunReport
from .schema import collect_violations, compile_validator, format_violations, load_json

logger = logging.getLogger(__name__)

Echo = Callable[..., None]


def discover_examples(pattern: str = EXAMPLES_GLOB, base_dir: Optional[Path] = None) -> List[Path]:
    """
    Files matching `pattern` under `base_dir`, in the order the glob yields them.
    Hidden entries (any path segment starting with ".") are skipped.
    """
    base = Path.cwd() if base_dir is None else Path(base_dir)
    return [
        p for p in base.glob(pattern)
        if p.is_file() and not any(part.startswith(".") for part in p.relative_to(base).parts)
    ]


def _display_path(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def run_examples(
    schema_path: Path = SCHEMA_PATH,
    pattern: str = EXAMPLES_GLOB,
    base_dir: Optional[Path] = None,
    label: str = SCHEMA_LABEL,
    echo: Echo = typer.echo,
) -> RunReport:
    """
    Validate every example matching `pattern` against the schema at `schema_path`.

    The schema is loaded and compiled once; each candidate is read, parsed and
    validated in turn. Schema-invalid candidates are counted and reported; any
    other error (missing or malformed schema, malformed candidate JSON) is not
    caught here and aborts the run.
    """
    base = Path.cwd() if base_dir is None else Path(base_dir)

    schema_file = base / schema_path
    if not schema_file.is_file():
        raise FileNotFoundError(f"schema not found: {schema_file} (paths resolve against {base})")
    schema = load_json(schema_file)
    logger.info("loaded schema %s", schema_file)
    validator = compile_validator(schema)

    files = discover_examples(pattern, base)
    report = RunReport()
    if not files:
        echo(f"ℹ️  No example files found in {pattern}")
        report.exit_code = EXIT_OK
        return report

    logger.info("validating %d example file(s)", len(files))
    for f in files:
        shown = _display_path(f, base)
        data = load_json(f)
        result = FileResult(path=shown, violations=collect_violations(validator, data))
        report.files.append(result)
        if result.valid:
            echo(f"✅ Valid: {shown}")
        else:
            logger.debug("%s: %d violation(s)", shown, len(result.violations))
            echo(f"❌ Invalid: {shown}")
            echo(format_violations(result.violations))

    if report.failures > 0:
        echo(f"\n✖ {report.failures} file(s) failed validation.", err=True)
        report.exit_code = EXIT_INVALID
    else:
        echo(f"\n All example files are valid against {label}.")
        report.exit_code = EXIT_OK
    return report
