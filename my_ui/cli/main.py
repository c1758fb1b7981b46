# my_ui/cli/main.py
"""Main CLI entry point for my-ui"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import (
    APP_NAME,
    LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_PROJECT_ROOT,
    ENV_REGISTRY_PATH,
    ENV_TEMPLATES_DIR,
)
from ..core import FileMaterializer, PathResolver, load_registry
from ..models import Registry
from ..services import ConfigService
from .utils.output import console, print_error

# Import all commands
from .commands import (
    init,
    listing,
    add,
    info,
    setup_tests,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    env_level = os.environ.get(ENV_LOG_LEVEL)
    if env_level and not (debug or verbose):
        level = logging.getLevelName(env_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object with lazy registry and config loading

    The registry is read and validated the first time a command asks for
    it, and then shared for the rest of the invocation.
    """

    def __init__(self,
                 project_root: Optional[Path] = None,
                 registry_path: Optional[Path] = None,
                 templates_dir: Optional[Path] = None):
        """Initialize CLI context"""
        self.path_resolver = PathResolver(project_root, registry_path, templates_dir)
        self.verbose: bool = False
        self.debug: bool = False
        self._registry: Optional[Registry] = None
        self._config_service: Optional[ConfigService] = None
        self._materializer: Optional[FileMaterializer] = None

    @property
    def project_root(self) -> Path:
        return self.path_resolver.project_root

    @property
    def registry(self) -> Registry:
        """Get validated registry (lazy loading)

        Raises:
            ManifestError: if the manifest is invalid
        """
        if self._registry is None:
            self._registry = load_registry(self.path_resolver.get_registry_path())
        return self._registry

    @property
    def config_service(self) -> ConfigService:
        """Get config service for the project"""
        if self._config_service is None:
            self._config_service = ConfigService(self.project_root)
        return self._config_service

    @property
    def materializer(self) -> FileMaterializer:
        """Get file materializer bound to the template tree and project"""
        if self._materializer is None:
            self._materializer = FileMaterializer(
                self.path_resolver.get_templates_dir(),
                self.project_root
            )
        return self._materializer


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all log output except errors')
@click.option('--project-root', type=click.Path(file_okay=False, path_type=Path),
              envvar=ENV_PROJECT_ROOT, help='Consumer project root (default: current directory)')
@click.option('--registry', 'registry_path', type=click.Path(dir_okay=False, path_type=Path),
              envvar=ENV_REGISTRY_PATH, help='Registry manifest to use instead of the bundled one')
@click.option('--templates', 'templates_dir', type=click.Path(file_okay=False, path_type=Path),
              envvar=ENV_TEMPLATES_DIR, help='Template directory to use instead of the bundled one')
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root, registry_path, templates_dir):
    """my-ui - copy components, hooks and utilities into your project

    Items are copied as source files, so you own and can edit them.
    Dependencies between items are resolved and copied along.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.WARNING)
    else:
        logging.disable(logging.NOTSET)
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root, registry_path, templates_dir)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug

    if debug:
        for name, path in ctx.obj.path_resolver.describe().items():
            console.print(f"[dim]{name}: {path}[/dim]")


# Register commands
cli.add_command(init.init)
cli.add_command(listing.list_items)
cli.add_command(listing.list_items, name='ls')
cli.add_command(add.add)
cli.add_command(info.info)
cli.add_command(setup_tests.setup_tests)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        print_error("Unexpected error", e)
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
