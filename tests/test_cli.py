"""Tests for the my-ui command line interface."""

import json
from pathlib import Path
from typing import List

import pytest
from click.testing import CliRunner, Result

from my_ui.__version__ import __version__
from my_ui.cli.main import cli
from my_ui.constants import PROJECT_CONFIG_FILE


@pytest.fixture
def invoke(project_dir: Path, registry_path: Path, templates_dir: Path):
    """Run the CLI against the fixture registry, templates and project."""

    def _invoke(args: List[str], input: str = None) -> Result:
        runner = CliRunner()
        return runner.invoke(
            cli,
            [
                "--project-root", str(project_dir),
                "--registry", str(registry_path),
                "--templates", str(templates_dir),
                *args,
            ],
            input=input,
        )

    return _invoke


def test_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_shows_installable_items(invoke) -> None:
    result = invoke(["list"])

    assert result.exit_code == 0, result.output
    assert "my-ui v1.2.0" in result.output
    assert "ui/button" in result.output
    assert "hooks/use-toggle" in result.output
    assert "lib/cn" in result.output
    assert "test/setup" not in result.output


def test_list_filters_by_bucket(invoke) -> None:
    result = invoke(["ls", "--hooks"])

    assert result.exit_code == 0, result.output
    assert "hooks/use-click-outside" in result.output
    assert "ui/button" not in result.output


def test_invalid_registry_exits_with_error(invoke, registry_path: Path) -> None:
    data = json.loads(registry_path.read_text(encoding="utf-8"))
    data["items"]["components"][0]["category"] = "lib"
    registry_path.write_text(json.dumps(data), encoding="utf-8")

    result = invoke(["list"])

    assert result.exit_code == 1
    assert "registry.json" in result.output
    assert "must be 'ui'" in result.output


def test_info_text(invoke) -> None:
    result = invoke(["info", "ui/modal"])

    assert result.exit_code == 0, result.output
    assert "hooks/use-click-outside" in result.output
    assert "Deprecated" in result.output


def test_info_json(invoke) -> None:
    result = invoke(["info", "lib/cn", "--format", "json"])

    assert result.exit_code == 0, result.output
    assert '"category": "lib"' in result.output


def test_info_yaml(invoke) -> None:
    result = invoke(["info", "hooks/use-toggle", "--format", "yaml"])

    assert result.exit_code == 0, result.output
    assert "category: hooks" in result.output


def test_info_unknown_item(invoke) -> None:
    result = invoke(["info", "ui/nope"])

    assert result.exit_code == 0
    assert "Item not found: ui/nope" in result.output


def test_add_copies_item_and_dependencies(invoke, project_dir: Path) -> None:
    result = invoke(["add", "ui/modal", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "src/components/ui/modal/modal.tsx").exists()
    assert (
        project_dir / "src/hooks/hooks/use-click-outside/use-click-outside.ts"
    ).exists()
    assert "(dependency)" in result.output
    assert "Done!" in result.output


def test_add_reports_unknown_names_and_continues(invoke, project_dir: Path) -> None:
    result = invoke(["add", "ui/nope", "hooks/use-toggle", "--yes"])

    assert result.exit_code == 0, result.output
    assert "Item not found: ui/nope" in result.output
    assert (project_dir / "src/hooks/hooks/use-toggle/use-toggle.ts").exists()


def test_add_only_unknown_names(invoke) -> None:
    result = invoke(["add", "ui/nope", "--yes"])

    assert result.exit_code == 0
    assert "No items to add" in result.output


def test_add_keeps_existing_files(invoke, project_dir: Path) -> None:
    existing = project_dir / "src/lib/lib/cn/cn.ts"
    existing.parent.mkdir(parents=True)
    existing.write_text("mine", encoding="utf-8")

    result = invoke(["add", "lib/cn", "--yes"])

    assert result.exit_code == 0, result.output
    assert existing.read_text(encoding="utf-8") == "mine"
    assert "already exists" in result.output


def test_add_uses_project_config(invoke, project_dir: Path) -> None:
    (project_dir / PROJECT_CONFIG_FILE).write_text(
        json.dumps({"hooks": "app/hooks"}), encoding="utf-8"
    )

    result = invoke(["add", "hooks/use-toggle", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "app/hooks/hooks/use-toggle/use-toggle.ts").exists()


def test_add_with_tests_suggests_setup(invoke) -> None:
    result = invoke(["add", "ui/button", "--yes"])

    assert result.exit_code == 0, result.output
    assert "setup-tests" in result.output


def test_add_all_skips_test_configs(invoke, project_dir: Path) -> None:
    result = invoke(["add", "--all", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "src/components/ui/button/button.tsx").exists()
    assert not (project_dir / "vitest.config.ts").exists()


def test_add_declined(invoke, project_dir: Path) -> None:
    result = invoke(["add", "lib/cn"], input="n\n")

    assert result.exit_code == 0
    assert "Cancelled" in result.output
    assert not (project_dir / "src").exists()


def test_init_with_defaults(invoke, project_dir: Path) -> None:
    result = invoke(["init", "--yes", "--components", "app/ui"])

    assert result.exit_code == 0, result.output
    data = json.loads((project_dir / PROJECT_CONFIG_FILE).read_text(encoding="utf-8"))
    assert data == {
        "components": "app/ui",
        "hooks": "src/hooks",
        "utils": "src/lib",
        "tests": ".",
    }


def test_init_interactive(invoke, project_dir: Path) -> None:
    result = invoke(["init"], input="app/ui\n\n\n\nn\n")

    assert result.exit_code == 0, result.output
    data = json.loads((project_dir / PROJECT_CONFIG_FILE).read_text(encoding="utf-8"))
    assert data["components"] == "app/ui"
    assert data["hooks"] == "src/hooks"
    assert not (project_dir / "test-setup.ts").exists()


def test_setup_tests_installs_framework(invoke, project_dir: Path) -> None:
    result = invoke(["setup-tests", "--framework", "jest", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "jest.config.js").exists()
    assert (project_dir / "test-setup.ts").exists()
    assert (project_dir / "test-globals.d.ts").exists()
    assert (project_dir / "css-modules.d.ts").exists()
    assert not (project_dir / "vitest.config.ts").exists()
    assert "npm install -D jest" in result.output


def test_setup_tests_defaults_to_vitest(invoke, project_dir: Path) -> None:
    result = invoke(["setup-tests", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "vitest.config.ts").exists()


def test_setup_tests_overwrites_existing(invoke, project_dir: Path) -> None:
    setup_file = project_dir / "test-setup.ts"
    setup_file.write_text("old", encoding="utf-8")

    result = invoke(["setup-tests", "-f", "vitest", "--yes"])

    assert result.exit_code == 0, result.output
    assert setup_file.read_text(encoding="utf-8") == "// test-setup.ts\n"


def test_setup_tests_into_configured_directory(invoke, project_dir: Path) -> None:
    (project_dir / PROJECT_CONFIG_FILE).write_text(
        json.dumps({"tests": "web"}), encoding="utf-8"
    )

    result = invoke(["setup-tests", "-f", "rstest", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "web/rstest.config.ts").exists()


def test_setup_tests_complete_setup_not_reinstalled(invoke, project_dir: Path) -> None:
    for name in ("vitest.config.ts", "test-setup.ts", "test-globals.d.ts"):
        (project_dir / name).write_text("mine", encoding="utf-8")

    result = invoke(["setup-tests"], input="n\n")

    assert result.exit_code == 0, result.output
    assert "already configured" in result.output
    assert (project_dir / "test-setup.ts").read_text(encoding="utf-8") == "mine"


def test_registry_from_environment(
    project_dir: Path, registry_path: Path, templates_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MY_UI_REGISTRY", str(registry_path))
    monkeypatch.setenv("MY_UI_TEMPLATES", str(templates_dir))
    monkeypatch.chdir(project_dir)

    result = CliRunner().invoke(cli, ["add", "lib/cn", "--yes"])

    assert result.exit_code == 0, result.output
    assert (project_dir / "src/lib/lib/cn/cn.ts").exists()
