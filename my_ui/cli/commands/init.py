"""Initialize command: writes the project configuration"""

import click

from .setup_tests import offer_test_setup
from ..decorators import load_registry_or_exit
from ..utils.interactive import confirm, prompt_config
from ..utils.output import console, print_success
from ...api.exceptions import UserCancelledError
from ...constants import APP_NAME, EMOJI_WRENCH, PROJECT_CONFIG_FILE
from ...models import Config


@click.command()
@click.option('--components', help='Directory for components')
@click.option('--hooks', help='Directory for hooks')
@click.option('--utils', help='Directory for utilities')
@click.option('--tests', help='Directory for test configs')
@click.option(
    '--yes', '-y',
    is_flag=True,
    help='Accept defaults without prompting'
)
@click.pass_context
def init(ctx, components, hooks, utils, tests, yes):
    """Initialize the configuration in the current project

    Examples:
        my-ui init
        my-ui init --yes --components src/ui
    """
    console.print(f"\n[cyan]{EMOJI_WRENCH} Setting up {APP_NAME}[/cyan]\n")

    defaults = Config()
    overrides = {
        "components": components,
        "hooks": hooks,
        "utils": utils,
        "tests": tests,
    }
    defaults = Config.from_dict({
        **defaults.to_dict(),
        **{key: value for key, value in overrides.items() if value}
    })

    if yes:
        config = defaults
    else:
        try:
            config = prompt_config(defaults)
        except UserCancelledError:
            console.print("\n[yellow]Cancelled.[/yellow]")
            return

    ctx.obj.config_service.save_config(config)
    print_success(f"Configuration saved to {PROJECT_CONFIG_FILE}")

    if yes:
        console.print(f"[dim]Run '{APP_NAME} setup-tests' to configure testing.[/dim]")
        return

    registry = load_registry_or_exit(ctx)
    if confirm("Set up the test environment now?", default=True):
        offer_test_setup(ctx.obj, registry, config, ask=False)
