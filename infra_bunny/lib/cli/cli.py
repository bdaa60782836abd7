import json
import logging

import click
import jmespath
import yaml
from click_option_group import optgroup, RequiredMutuallyExclusiveOptionGroup

from infra_bunny.lib.bunny.pullzone import find_pullzone_by_name, pull_zone_to_shared
from infra_bunny.lib.bunny.pullzone.get_pullzone import SENSITIVE_FIELDS
from infra_bunny.lib.client import API_ERRORS, Client, DEFAULT_PER_PAGE, models
from infra_bunny.lib.provider import CredentialsNotConfiguredError, resolve_api_key
from infra_bunny.lib.provider.settings import API_KEY_ENV_VAR

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["json", "yaml"]


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def echo_data(data, output: str):
    if output == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False))
    else:
        click.echo(json.dumps(data, indent=2))


def pull_zone_summary(pz: models.PullZone) -> dict:
    return {
        "id": pz.id,
        "name": pz.name,
        "origin_url": pz.origin_url,
        "storage_zone_id": pz.storage_zone_id,
        "enabled": pz.enabled,
        "hostnames": [h.value for h in pz.hostnames or []],
        "edge_rules": len(pz.edge_rules or []),
    }


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
@click.option("--api-key", envvar=API_KEY_ENV_VAR, help=f"bunny.net API key, defaults to ${API_KEY_ENV_VAR}")
@click.pass_context
def cli(ctx, debug, api_key):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")

    try:
        ctx.obj = Client(resolve_api_key(api_key))
    except CredentialsNotConfiguredError as e:
        raise click.UsageError(str(e))


@cli.command()
@click.option("--per-page", default=DEFAULT_PER_PAGE, show_default=True, help="Pull zones fetched per request")
@click.option("--query", help="JMESPath expression applied to the list of pull zones")
@click.option("--output", type=click.Choice(OUTPUT_FORMATS), default="json", show_default=True)
@click.pass_obj
def list_pullzones(client: Client, per_page, query, output):
    """List all pull zones"""
    try:
        pull_zones = [pull_zone_summary(pz) for pz in client.pull_zone.iter_all(per_page=per_page)]
    except API_ERRORS as e:
        raise click.ClickException(f"listing pull zones failed: {e}")

    echo_data(jmespath.search(query, pull_zones) if query else pull_zones, output)


@cli.command()
@optgroup.group(
    "Identifiers",
    cls=RequiredMutuallyExclusiveOptionGroup,
    help="The manner of identifying the pull zone",
)
@optgroup.option("--id", type=int, help="Pull zone ID")
@optgroup.option("--name", help="Pull zone name")
@click.option("--output", type=click.Choice(OUTPUT_FORMATS), default="json", show_default=True)
@click.pass_obj
def show_pullzone(client: Client, id, name, output):
    """Show the shared attributes of a pull zone, secrets excluded"""
    try:
        pz = client.pull_zone.get(id) if id is not None else find_pullzone_by_name(client, name)
    except API_ERRORS as e:
        raise click.ClickException(f"retrieving pull zone failed: {e}")

    if pz is None:
        raise click.ClickException(f"no pull zone with name {name!r} was found")

    shared = pull_zone_to_shared(pz)
    for key in SENSITIVE_FIELDS:
        if shared.get(key):
            shared[key] = "***hidden***"

    echo_data(shared, output)


@cli.command()
@click.option("--prefix", required=True, help="Only pull zones with names starting with this are deleted")
@click.option(
    "-y",
    "--yes",
    help="Answer yes to all questions",
    is_flag=True,
)
@click.pass_obj
def sweep(client: Client, prefix, yes):
    """Delete all pull zones whose name starts with a prefix, e.g. the leftovers of test runs"""
    if not prefix.strip():
        raise click.BadParameter("must not be empty", param_hint="--prefix")

    try:
        candidates = [pz for pz in client.pull_zone.iter_all() if pz.name and pz.name.startswith(prefix)]
    except API_ERRORS as e:
        raise click.ClickException(f"listing pull zones failed: {e}")

    for pz in candidates:
        echo_key_value(pz.id, pz.name)

    if not candidates:
        click.echo(f"no pull zone name starts with {prefix!r}")
        return

    if not (yes or click.confirm(f"Do you want to delete {len(candidates)} pull zones?")):
        return

    failed = []
    for pz in candidates:
        if pz.id is None:
            logger.warning("ignoring pull zone with nil ID: %s", pz.name)
            continue

        try:
            client.pull_zone.delete(pz.id)
        except API_ERRORS as e:
            logger.error("deleting pull zone %d (%s) failed: %s", pz.id, pz.name, e)
            failed.append(pz.name)
            continue

        echo_key_value("Deleted", f"{pz.id} ({pz.name})")

    if failed:
        raise click.ClickException(f"deleting pull zones failed: {', '.join(failed)}")


def run():
    exit(cli())


if __name__ == "__main__":
    run()
