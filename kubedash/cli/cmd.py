import os

import click
from kubernetes.client.exceptions import ApiException
from pydantic import ValidationError
from kubedash.utils.logger import init_logger, get_logger

from kubedash.models.custom_errors import (
    InvalidCoordinatesError,
    UnsupportedResourceKindError,
)
from kubedash.models.replicationcontroller import ReplicationControllerSpec
from kubedash.resource.persistentvolume import (
    get_persistent_volume_detail_with_multi_tenancy,
)
from kubedash.resource.replicationcontroller import (
    get_replication_controller_detail_with_multi_tenancy,
    update_replicas_count_with_multi_tenancy,
)
from kubedash.utils.cluster_client import ClusterClient
from kubedash.utils.fs import (
    dump_data,
    guess_format,
    read_config_from_file,
    save_data_to_file,
)

_KIND_ALIASES = {
    "pv": "persistentvolume",
    "persistentvolume": "persistentvolume",
    "rc": "replicationcontroller",
    "replicationcontroller": "replicationcontroller",
}


def _common_options(func):
    options = [
        click.option(
            "--kubeconfig",
            "-k",
            help="Path to cluster kubeconfig file. Setting this will override value in config file.",
            envvar="KUBECONFIG",
            default=None,
        ),
        click.option("--config", "-c", help="Path to kubedash config file."),
        click.option(
            "--namespace",
            "-n",
            help="Namespace of the resource. Defaults to the value in config file.",
            default=None,
        ),
        click.option(
            "--tenant",
            "-t",
            help="Tenant of the resource. All tenants when omitted.",
            default=None,
        ),
        click.option("-v", "--verbose", count=True, help="Increase verbosity of output."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_config(logger, config: str, kubeconfig: str):
    if config and not os.path.exists(config):
        logger.error("Config file not found.")
        exit(1)
    try:
        parsed_config = read_config_from_file(config, kubeconfig)
    except ValidationError as err:
        logger.error("Unable to parse config file: %s", err)
        exit(1)

    if not parsed_config.kubeconfig_file_path:
        logger.error("Kubeconfig file not found.")
        exit(1)
    return parsed_config


@click.group(context_settings={"show_default": True})
def main():
    pass


@main.command(help="Show details of a persistent volume or replication controller")
@click.argument("kind", type=click.Choice(sorted(_KIND_ALIASES), case_sensitive=False))
@click.argument("name")
@_common_options
@click.option(
    "--format",
    "-f",
    help="Format of the output. Defaults to the value in config file.",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default=None,
)
@click.option("--output", "-o", help="File to save details to instead of printing them.")
@click.pass_context
def describe(
    ctx,
    kind: str,
    name: str,
    kubeconfig: str,
    config: str,
    namespace: str = None,
    tenant: str = None,
    verbose: int = 0,
    format: str = None,
    output: str = None,
):
    init_logger(None, verbose >= 1)
    logger = get_logger(__name__)

    parsed_config = _load_config(logger, config, kubeconfig)
    tenant = tenant or parsed_config.tenant
    namespace = namespace or parsed_config.namespace
    default_format = parsed_config.output_format.value

    try:
        client = ClusterClient(parsed_config.kubeconfig_file_path)
        if _KIND_ALIASES[kind.lower()] == "persistentvolume":
            detail = get_persistent_volume_detail_with_multi_tenancy(client, tenant, name)
        else:
            detail = get_replication_controller_detail_with_multi_tenancy(
                client, tenant, namespace, name
            )
    except ApiException as err:
        logger.error("Unable to get %s %s: %s %s", kind, name, err.status, err.reason)
        exit(1)
    except (InvalidCoordinatesError, UnsupportedResourceKindError, ValidationError) as err:
        logger.error("Invalid resource: %s", err)
        exit(1)

    data = detail.model_dump(mode="json", by_alias=True)
    if output:
        try:
            save_data_to_file(data, output, format or guess_format(output, default_format))
        except OSError as err:
            logger.error("Unable to save details to %s: %s", output, err)
            exit(1)
        logger.info("Saved %s details to %s", kind, output)
    else:
        click.echo(dump_data(data, format or default_format))


@main.command(help="Update the replicas count of a replication controller")
@click.argument("kind", type=click.Choice(["rc", "replicationcontroller"], case_sensitive=False))
@click.argument("name")
@_common_options
@click.option("--replicas", "-r", type=int, required=True, help="Desired number of replicas.")
@click.pass_context
def scale(
    ctx,
    kind: str,
    name: str,
    kubeconfig: str,
    config: str,
    replicas: int,
    namespace: str = None,
    tenant: str = None,
    verbose: int = 0,
):
    init_logger(None, verbose >= 1)
    logger = get_logger(__name__)

    parsed_config = _load_config(logger, config, kubeconfig)
    tenant = tenant or parsed_config.tenant
    namespace = namespace or parsed_config.namespace

    try:
        spec = ReplicationControllerSpec(replicas=replicas)
        client = ClusterClient(parsed_config.kubeconfig_file_path)
        update_replicas_count_with_multi_tenancy(client, tenant, namespace, name, spec)
    except ApiException as err:
        logger.error("Unable to scale %s %s: %s %s", kind, name, err.status, err.reason)
        exit(1)
    except (InvalidCoordinatesError, ValidationError) as err:
        logger.error("Invalid request: %s", err)
        exit(1)
