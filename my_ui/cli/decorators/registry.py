"""Registry context decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import console
from ...api.exceptions import ManifestError
from ...constants import EMOJI_ERROR
from ...models import Registry


def load_registry_or_exit(ctx: click.Context) -> Registry:
    """Load the registry held by the CLI context

    A manifest violation is fatal: the message is printed and the process
    exits with status 1.
    """
    try:
        return ctx.obj.registry
    except ManifestError as e:
        console.print(f"[red]{EMOJI_ERROR} {e}[/red]")
        if ctx.obj.debug:
            console.print_exception()
        ctx.exit(1)


def require_registry(func: Callable) -> Callable:
    """Decorator that loads and validates the registry before the command runs

    The command reads the registry from ``ctx.obj.registry``.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        load_registry_or_exit(ctx)
        return func(*args, **kwargs)

    return wrapper
