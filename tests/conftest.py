from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

REQUIRES_ID = {"type": "object", "required": ["id"]}


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


@pytest.fixture
def workspace(tmp_path: Path) -> Callable[..., Path]:
    """Lay out schema/edm.v0.4.schema.json and examples/*.ddna.json under tmp_path."""

    def make(schema: Optional[Any] = REQUIRES_ID, examples: Optional[Dict[str, Any]] = None) -> Path:
        if schema is not None:
            _write_json(tmp_path / "schema" / "edm.v0.4.schema.json", schema)
        (tmp_path / "examples").mkdir(exist_ok=True)
        for name, doc in (examples or {}).items():
            target = tmp_path / "examples" / name
            if isinstance(doc, str):
                target.write_text(doc, encoding="utf-8")
            else:
                _write_json(target, doc)
        return tmp_path

    return make
