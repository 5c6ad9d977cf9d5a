from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator, List, Sequence, Tuple, Type

from jsonschema import Draft202012Validator, FormatChecker
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from .config import ERROR_SEPARATOR
from .models import Violation, json_pointer

logger = logging.getLogger(__name__)


class SchemaCompileError(Exception):
    """Raised when the schema cannot be turned into a validator."""


class StrictSchemaError(SchemaCompileError):
    """Raised when the schema uses keywords or formats the validator does not know."""


# Keywords that carry no assertion but are legal anywhere a schema may appear.
ANNOTATION_KEYWORDS = frozenset({
    "$schema", "$id", "$anchor", "$dynamicAnchor", "$recursiveAnchor", "$vocabulary",
    "$comment", "$defs", "definitions", "title", "description", "default", "examples",
    "deprecated", "readOnly", "writeOnly", "then", "else",
    "contentEncoding", "contentMediaType", "contentSchema",
})

_SCHEMA_MAPS = ("properties", "patternProperties", "$defs", "definitions", "dependentSchemas", "dependencies")
_SCHEMA_LISTS = ("allOf", "anyOf", "oneOf", "prefixItems")
_SCHEMA_SINGLE = (
    "not", "if", "then", "else", "items", "additionalItems", "additionalProperties",
    "contains", "propertyNames", "unevaluatedItems", "unevaluatedProperties", "contentSchema",
)


def load_json(path: Path) -> Any:
    # utf-8-sig strips BOM if present
    return json.loads(Path(path).read_text(encoding="utf-8-sig"))


def validator_class_for(schema: Any) -> Type[Validator]:
    """Draft named by `$schema`, 2020-12 when the schema does not say."""
    return validator_for(schema, default=Draft202012Validator)


def _subschemas(schema: Any, parts: Tuple[Any, ...] = ()) -> Iterator[Tuple[Tuple[Any, ...], dict]]:
    """Yield (location, subschema) for every object schema, depth first."""
    if not isinstance(schema, dict):
        return
    yield parts, schema

    for kw in _SCHEMA_MAPS:
        children = schema.get(kw)
        if isinstance(children, dict):
            for name, child in children.items():
                # draft-07 "dependencies" mixes schemas and property lists
                yield from _subschemas(child, parts + (kw, name))
    for kw in _SCHEMA_LISTS:
        children = schema.get(kw)
        if isinstance(children, list):
            for i, child in enumerate(children):
                yield from _subschemas(child, parts + (kw, i))
    for kw in _SCHEMA_SINGLE:
        child = schema.get(kw)
        if isinstance(child, list):
            for i, item in enumerate(child):
                yield from _subschemas(item, parts + (kw, i))
        else:
            yield from _subschemas(child, parts + (kw,))


def check_strict(schema: Any, cls: Type[Validator], format_checker: FormatChecker) -> List[str]:
    """
    Strict-mode checks on top of the meta-schema: every keyword must be one the
    draft knows, and every `format` must have a registered checker.
    Returns problems; empty means the schema is clean.
    """
    known = set(cls.VALIDATORS) | ANNOTATION_KEYWORDS
    problems: List[str] = []
    for parts, sub in _subschemas(schema):
        where = "#" + json_pointer(parts)
        for kw in sub:
            if kw not in known:
                problems.append(f"unknown keyword {kw!r} at {where}")
        fmt = sub.get("format")
        if isinstance(fmt, str) and fmt not in format_checker.checkers:
            problems.append(f"unknown format {fmt!r} at {where}")
    return problems


def compile_validator(schema: Any) -> Validator:
    """
    Build the one validator used for the whole run.

    The schema is checked against its draft's meta-schema and then in strict
    mode. Union types ("type": [...]) are plain JSON Schema and need nothing
    extra. Formats are asserted, not just annotated.
    """
    cls = validator_class_for(schema)
    try:
        cls.check_schema(schema)
    except SchemaError as exc:
        raise SchemaCompileError(f"schema is invalid: {exc.message}") from exc

    format_checker = FormatChecker()
    problems = check_strict(schema, cls, format_checker)
    if problems:
        raise StrictSchemaError("strict mode: " + "; ".join(problems))

    logger.debug("compiled %s with %d format checkers", cls.__name__, len(format_checker.checkers))
    return cls(schema, format_checker=format_checker)


def collect_violations(validator: Validator, document: Any) -> Tuple[Violation, ...]:
    """All violations for one document, in the order the engine reports them."""
    return tuple(
        Violation(
            path=json_pointer(list(err.absolute_path)),
            keyword=str(err.validator),
            schema_path=json_pointer(list(err.absolute_schema_path)),
            message=err.message,
        )
        for err in validator.iter_errors(document)
    )


def format_violations(violations: Sequence[Violation], separator: str = ERROR_SEPARATOR) -> str:
    if not violations:
        return "No errors"
    return separator.join(v.describe() for v in violations)
