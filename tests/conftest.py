"""Shared fixtures: a small registry and its template tree."""

import copy
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from my_ui.core.manifest_engine import validate_registry
from my_ui.models import Registry


def _item(name: str, category: str, files, dependencies=(), **meta) -> Dict[str, Any]:
    return {
        "name": name,
        "description": f"{name} description",
        "category": category,
        "files": list(files),
        "dependencies": list(dependencies),
        "meta": {"since": "1.0.0", **meta},
    }


REGISTRY_DATA: Dict[str, Any] = {
    "name": "my-ui",
    "version": "1.2.0",
    "items": {
        "test-configs": [
            _item("test/setup", "test", ["test-setup.ts"]),
            _item("test/globals", "test", ["test-globals.d.ts"]),
            _item("test/css-modules", "test", ["css-modules.d.ts"]),
            _item("test/vitest-config", "test", ["vitest.config.example.ts"]),
            _item("test/jest-config", "test", ["jest.config.example.js"]),
            _item("test/rstest-config", "test", ["rstest.config.example.ts"]),
        ],
        "components": [
            _item("ui/button", "ui", ["ui/button/button.tsx", "ui/button/button.test.tsx"], ["lib/cn"]),
            _item(
                "ui/modal", "ui", ["ui/modal/modal.tsx"], ["hooks/use-click-outside"],
                deprecated="Use ui/dialog",
            ),
        ],
        "hooks": [
            _item("hooks/use-toggle", "hooks", ["hooks/use-toggle/use-toggle.ts"]),
            _item("hooks/use-click-outside", "hooks", ["hooks/use-click-outside/use-click-outside.ts"]),
        ],
        "utils": [
            _item("lib/cn", "lib", ["lib/cn/cn.ts", "lib/cn/cn.example.ts"]),
        ],
    },
}


@pytest.fixture
def registry_data() -> Dict[str, Any]:
    """A fresh, valid manifest document that tests may mutate."""
    return copy.deepcopy(REGISTRY_DATA)


@pytest.fixture
def registry(registry_data: Dict[str, Any]) -> Registry:
    return validate_registry(registry_data)


@pytest.fixture
def templates_dir(tmp_path: Path, registry_data: Dict[str, Any]) -> Path:
    """Template tree holding one file per manifest entry."""
    root = tmp_path / "templates"
    for items in registry_data["items"].values():
        for item in items:
            for file in item["files"]:
                path = root / file
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(f"// {file}\n", encoding="utf-8")
    return root


@pytest.fixture
def registry_path(tmp_path: Path, registry_data: Dict[str, Any]) -> Path:
    path = tmp_path / "registry.json"
    path.write_text(json.dumps(registry_data), encoding="utf-8")
    return path


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path
