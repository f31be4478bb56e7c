"""
analog CLI

Usage: python -m analog [command] [options]

Commands:
    bootstrap        Create collections and indexes, insert the seed watch target
    verify           Check the bootstrap state, exit 1 if it is incomplete
    reset            Drop the contracts and events collections
    targets list     List watch targets
    targets add      Add a watch target
    targets remove   Remove a watch target by ID
"""
import asyncio

import click
from pymongo.errors import PyMongoError

from analog.config import get_settings
from analog.core.logging import configure_logging
from analog.database.connections import close_connections, get_mongo_client
from analog.database.databases import analog_db
from analog.schemas.watch_target import WatchTargetCreate
from analog.services.bootstrap_service import BootstrapService
from analog.services.watch_target_service import WatchTargetService


def run_async(factory):
    """Run the coroutine built by factory(client), then close the client."""
    async def _run():
        try:
            client = await get_mongo_client()
            return await factory(client)
        finally:
            await close_connections()

    try:
        return asyncio.run(_run())
    except (ValueError, PyMongoError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """analog - event-watch target store

    Prepares analog_db and manages the watch targets in its contracts
    collection.
    """
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@cli.command()
@click.option('--no-seed', is_flag=True, help='Skip inserting the seed watch target')
def bootstrap(no_seed):
    """Create collections and indexes and insert the seed watch target"""
    report = run_async(lambda client: BootstrapService(client).bootstrap(seed=not no_seed))

    click.echo(f"Database: {report.db_name}")
    click.echo(f"  created:  {', '.join(report.collections.created) or '-'}")
    click.echo(f"  existing: {', '.join(report.collections.existing) or '-'}")
    if report.seed_skipped:
        click.echo("  seed:     skipped")
    else:
        click.echo(f"  seed:     {'inserted' if report.seed_inserted else 'already present'}")


@cli.command()
def verify():
    """Check that both collections exist and the seed is stored once"""
    report = run_async(lambda client: BootstrapService(client).verify())

    click.echo(report.model_dump_json(indent=2))
    if not report.ok:
        raise click.ClickException("; ".join(report.problems))


@cli.command()
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
def reset(yes):
    """Drop the contracts and events collections"""
    if not yes:
        click.confirm(
            f"Drop {', '.join(analog_db.Collections.BOOTSTRAP)} from {analog_db.DB_NAME}?",
            abort=True,
        )
    dropped = run_async(lambda client: BootstrapService(client).reset())
    click.echo(f"Dropped: {', '.join(dropped) or 'nothing'}")


@cli.group()
def targets():
    """Manage watch targets"""
    pass


def _service(client) -> WatchTargetService:
    return WatchTargetService(client[analog_db.DB_NAME])


@targets.command('list')
@click.option('--contract-address', help='Only targets for this contract')
@click.option('--limit', default=100, show_default=True, type=click.IntRange(min=1),
              help='Maximum number of targets to show')
def list_targets(contract_address, limit):
    """List watch targets"""
    rows = run_async(
        lambda client: _service(client).list_targets(contract_address=contract_address, limit=limit)
    )

    if not rows:
        click.echo("No watch targets")
        return
    for row in rows:
        click.echo(f"{row.id}  {row.chain_endpoint}  {row.contract_address}  {row.event_type}")


@targets.command('add')
@click.argument('chain_endpoint')
@click.argument('contract_address')
@click.argument('event_type')
def add_target(chain_endpoint, contract_address, event_type):
    """Add a watch target

    Example:
        analog targets add ws://127.0.0.1:8545/ 0x5FbDB2315678afecb367f032d93F642f64180aa3 \\
            ddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef
    """
    try:
        request = WatchTargetCreate(
            chain_endpoint=chain_endpoint,
            contract_address=contract_address,
            event_type=event_type,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    created = run_async(lambda client: _service(client).create_target(request))
    click.echo(f"Added watch target {created.id}")


@targets.command('remove')
@click.argument('target_id')
def remove_target(target_id):
    """Remove a watch target by ID"""
    removed = run_async(lambda client: _service(client).delete_target(target_id))
    if not removed:
        raise click.ClickException(f"Watch target not found: {target_id}")
    click.echo(f"Removed watch target {target_id}")


def main():
    cli(obj={})
