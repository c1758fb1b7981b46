"""Info command"""

import click

from ..decorators import require_registry
from ..utils.output import format_item_info, format_json, format_yaml, print_warning
from ...constants import OutputFormat


@click.command()
@click.argument('name')
@click.option(
    '--format', 'output_format',
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help='Output format'
)
@click.pass_context
@require_registry
def info(ctx, name, output_format):
    """Show information about an item

    Examples:
        my-ui info ui/modal
        my-ui info hooks/use-toggle --format yaml
    """
    item = ctx.obj.registry.find_item(name)

    if item is None:
        print_warning(f"Item not found: {name}")
        return

    output_format = OutputFormat(output_format)
    if output_format is OutputFormat.JSON:
        format_json(item.to_dict())
    elif output_format is OutputFormat.YAML:
        format_yaml(item.to_dict())
    else:
        format_item_info(item)
