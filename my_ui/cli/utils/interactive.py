"""Interactive prompts"""

from typing import List, Sequence

from rich.prompt import Confirm, Prompt

from .output import console, print_warning
from ...api.exceptions import UserCancelledError
from ...constants import TEST_FRAMEWORK_CHOICES, TEST_FRAMEWORK_DESCRIPTIONS
from ...models import Config, RegistryItem


def confirm(message: str, default: bool = True) -> bool:
    """Ask a yes/no question"""
    return Confirm.ask(message, default=default, console=console)


def prompt_config(defaults: Config) -> Config:
    """Ask for each destination directory

    Raises:
        UserCancelledError: if the components path is left empty
    """
    components = Prompt.ask("Path for components", default=defaults.components, console=console)
    if not components:
        raise UserCancelledError()

    hooks = Prompt.ask("Path for hooks", default=defaults.hooks, console=console)
    utils = Prompt.ask("Path for utilities", default=defaults.utils, console=console)
    tests = Prompt.ask("Path for test configs", default=defaults.tests, console=console)

    return Config(components=components, hooks=hooks, utils=utils, tests=tests)


def select_items(items: Sequence[RegistryItem]) -> List[RegistryItem]:
    """Let the user pick items by number

    Returns:
        Selected items in list order; empty when nothing was chosen
    """
    console.print("[bold]Select items to add:[/bold]\n")
    for index, item in enumerate(items, 1):
        console.print(f"  {index:>2}. [green]{item.name}[/green] [dim]{item.description}[/dim]")

    answer = Prompt.ask(
        "\nNumbers separated by commas (empty to cancel)",
        default="",
        show_default=False,
        console=console
    )

    selected: List[RegistryItem] = []
    for token in answer.replace(" ", ",").split(","):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= len(items):
            print_warning(f"Ignoring invalid choice: {token}")
            continue
        item = items[int(token) - 1]
        if item not in selected:
            selected.append(item)

    return selected


def select_framework(default: str = "vitest") -> str:
    """Ask which test framework to configure"""
    console.print("\n[bold]Test framework:[/bold]")
    for index, choice in enumerate(TEST_FRAMEWORK_CHOICES, 1):
        console.print(f"  {index}. {TEST_FRAMEWORK_DESCRIPTIONS[choice]}")

    choice_map = {str(index): choice for index, choice in enumerate(TEST_FRAMEWORK_CHOICES, 1)}
    default_key = next(key for key, value in choice_map.items() if value == default)

    answer = Prompt.ask(
        "Select framework",
        choices=list(choice_map),
        default=default_key,
        console=console
    )
    return choice_map[answer]
