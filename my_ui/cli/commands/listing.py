"""List command"""

import click

from ..decorators import require_registry
from ..utils.output import console, format_item_table
from ...constants import EMOJI_PACKAGE
from ...models import Bucket

BUCKET_STYLES = {
    Bucket.COMPONENTS: "green",
    Bucket.HOOKS: "blue",
    Bucket.UTILS: "yellow",
}


@click.command(name='list')
@click.option('--components', '-c', is_flag=True, help='Only components')
@click.option('--hooks', is_flag=True, help='Only hooks')
@click.option('--utils', '-u', is_flag=True, help='Only utilities')
@click.pass_context
@require_registry
def list_items(ctx, components, hooks, utils):
    """List available items

    Examples:
        my-ui list
        my-ui ls --hooks
    """
    registry = ctx.obj.registry

    console.print(f"\n[cyan]{EMOJI_PACKAGE} {registry.name} v{registry.version}[/cyan]\n")

    show_all = not (components or hooks or utils)
    selected = {
        Bucket.COMPONENTS: components,
        Bucket.HOOKS: hooks,
        Bucket.UTILS: utils,
    }

    for bucket, flag in selected.items():
        if show_all or flag:
            format_item_table(registry.bucket(bucket), bucket.label, BUCKET_STYLES[bucket])
