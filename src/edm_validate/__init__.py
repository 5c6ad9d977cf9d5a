from edm_validate.models import FileResult, RunReport, Violation
from edm_validate.runner import discover_examples, run_examples
from edm_validate.schema import (
    SchemaCompileError,
    StrictSchemaError,
    collect_violations,
    compile_validator,
    format_violations,
    load_json,
)

__version__ = "0.4.0"

__all__ = [
    "FileResult",
    "RunReport",
    "SchemaCompileError",
    "StrictSchemaError",
    "Violation",
    "collect_violations",
    "compile_validator",
    "discover_examples",
    "format_violations",
    "load_json",
    "run_examples",
    "__version__",
]
