"""Add command: copies items and their dependencies into the project"""

import click

from .setup_tests import offer_test_setup
from ..decorators import require_registry
from ..utils.interactive import confirm, select_items
from ..utils.output import (
    console,
    format_copy_result,
    format_install_plan,
    print_success,
    print_warning,
)
from ...constants import APP_NAME, EMOJI_FOLDER
from ...core.dependency_resolver import build_install_plan
from ...core.setup_tests import check_test_setup


@click.command()
@click.argument('items', nargs=-1)
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation')
@click.option('--all', '-a', 'add_all', is_flag=True, help='Add every item')
@click.pass_context
@require_registry
def add(ctx, items, yes, add_all):
    """Add components, hooks or utilities to the project

    Dependencies are added too. Files that already exist are kept.

    Examples:
        my-ui add ui/modal
        my-ui add ui/button hooks/use-toggle --yes
        my-ui add --all --yes
    """
    registry = ctx.obj.registry
    config = ctx.obj.config_service.config

    if add_all:
        selected = registry.all_items()
    elif items:
        selected = []
        for name in items:
            item = registry.find_item(name)
            if item is None:
                print_warning(f"Item not found: {name}")
            else:
                selected.append(item)
    else:
        selected = select_items(registry.all_items())
        if not selected:
            console.print("\n[yellow]Nothing selected.[/yellow]")
            return

    if not selected:
        console.print("[yellow]No items to add.[/yellow]")
        return

    plan = build_install_plan(registry, selected)
    format_install_plan(plan)

    if not yes and not confirm("Continue?", default=True):
        console.print("\n[yellow]Cancelled.[/yellow]")
        return

    has_tests = any(entry.item.has_tests for entry in plan)

    console.print(f"[cyan]{EMOJI_FOLDER} Copying files:[/cyan]\n")
    for entry in plan:
        console.print(f"[bold]{entry.name}:[/bold]")
        result = ctx.obj.materializer.copy_files(entry.item, config)
        format_copy_result(result)

    print_success("Done!")

    if has_tests:
        if yes:
            status = check_test_setup(ctx.obj.project_root / config.tests)
            if not status.is_complete:
                console.print(
                    f"[dim]Added items include tests. Run '{APP_NAME} setup-tests' "
                    f"to configure a test runner.[/dim]"
                )
        else:
            offer_test_setup(ctx.obj, registry, config)
