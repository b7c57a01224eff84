#!/usr/bin/env python
"""Export the registered swagger document to .well-known files."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from config import INSTANCE_NAME
from swagger_edge.app import app
from swagger_edge.registry import DocRegistry, register_app


def export(target: Path, *, name: str = INSTANCE_NAME, docs: DocRegistry | None = None) -> tuple[Path, Path]:
    if docs is None:
        docs = DocRegistry()
        register_app(app, name, target=docs)
    spec = json.loads(docs.read_doc(name))

    target.mkdir(parents=True, exist_ok=True)
    json_path = target / "openapi.json"
    yaml_path = target / "openapi.yaml"

    json_path.write_text(json.dumps(spec, indent=2))
    yaml_path.write_text(yaml.safe_dump(spec, sort_keys=False, allow_unicode=True))
    return json_path, yaml_path


def main() -> None:
    root = Path(__file__).resolve().parent.parent
    for path in export(root / ".well-known"):
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
