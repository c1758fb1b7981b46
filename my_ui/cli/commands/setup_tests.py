"""Test environment setup command"""

from typing import List

import click

from ..decorators import require_registry
from ..utils.interactive import confirm, select_framework
from ..utils.output import (
    console,
    format_copy_result,
    print_install_hints,
    print_success,
    print_warning,
)
from ...constants import (
    APP_NAME,
    EMOJI_CLIPBOARD,
    EMOJI_TEST,
    TEST_FRAMEWORK_CHOICES,
)
from ...core.setup_tests import check_test_setup, select_test_items
from ...models import Config, Registry, RegistryItem


def install_test_items(obj,
                       items: List[RegistryItem],
                       config: Config,
                       overwrite: bool) -> None:
    """Copy test-config items and report each file"""
    console.print(f"\n[cyan]{EMOJI_CLIPBOARD} Installing test configuration:[/cyan]\n")

    if not items:
        print_warning("No test configuration items found in the registry")
        return

    for item in items:
        console.print(f"[bold]{item.name}:[/bold]")
        result = obj.materializer.copy_files(item, config, overwrite=overwrite)
        format_copy_result(result)

    print_success("Test environment configured!")


def offer_test_setup(obj, registry: Registry, config: Config, ask: bool = True) -> None:
    """Install whatever part of the test environment is missing

    Existing files are kept; only absent setup files and framework configs
    are copied.
    """
    status = check_test_setup(obj.project_root / config.tests)

    if status.is_complete:
        return

    if ask:
        console.print(f"\n[cyan]{EMOJI_TEST} Tests found, but the test environment is not set up[/cyan]\n")
        if not confirm("Install test configuration?", default=True):
            console.print(f"[yellow]Skipped. Run '{APP_NAME} setup-tests' later.[/yellow]\n")
            return

    framework = select_framework()
    items = select_test_items(registry, framework, status)
    install_test_items(obj, items, config, overwrite=False)
    print_install_hints(framework)


@click.command(name='setup-tests')
@click.option(
    '--framework', '-f',
    type=click.Choice(TEST_FRAMEWORK_CHOICES),
    help='Test framework to configure'
)
@click.option(
    '--yes', '-y',
    is_flag=True,
    help='Skip confirmation (uses vitest when no framework is given)'
)
@click.pass_context
@require_registry
def setup_tests(ctx, framework, yes):
    """Set up the test environment

    Installs the shared test setup files and the config of the chosen
    framework, replacing existing copies.

    Examples:
        my-ui setup-tests
        my-ui setup-tests --framework jest --yes
    """
    registry = ctx.obj.registry
    config = ctx.obj.config_service.config

    status = check_test_setup(ctx.obj.project_root / config.tests)

    if status.is_complete:
        print_success("Test environment is already configured!")
        if not yes and not confirm("Reinstall configuration?", default=False):
            return

    if not framework:
        framework = "vitest" if yes else select_framework()

    items = select_test_items(registry, framework)
    install_test_items(ctx.obj, items, config, overwrite=True)
    print_install_hints(framework)
