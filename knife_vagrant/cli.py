"""
Command line interface.

.. code-block:: bash

    $ knife-vagrant test -r "recipe[nginx], role[web]" -b bento/ubuntu-22.04 -x
"""
import logging
import os
import re

import click

from knife_vagrant import init_logging
from knife_vagrant.chef.configuration import ChefConfiguration
from knife_vagrant.configuration import Configuration
from knife_vagrant.constants import (
    BACKENDS,
    CHEF_LOGLEVELS,
    DEFAULT_BACKEND,
    DEFAULT_BOX,
    DEFAULT_BOX_FILENAME,
    DEFAULT_CHEF_CONFIG,
    DEFAULT_CHEF_LOGLEVEL,
    DEFAULT_HOSTNAME,
    DEFAULT_MEMSIZE,
)
from knife_vagrant.environment import check as vagrant_check
from knife_vagrant.provisioner import VagrantTest
from knife_vagrant.version import __version__

logger = logging.getLogger(__name__)


def split_run_list(ctx, param, value):
    if not value:
        return []
    return [item for item in re.split(r"[\s,]+", value) if item]


@click.group()
@click.version_option(__version__)
def cli():
    """Spin up vagrant boxes to test chef run lists."""


@cli.command("test")
@click.option(
    "-D",
    "--vagrant-dir",
    type=click.Path(file_okay=False),
    default=os.getcwd,
    show_default="current directory",
    help="Path to vagrant project directory.",
)
@click.option(
    "-r",
    "--vagrant-run-list",
    "run_list",
    callback=split_run_list,
    help="Comma separated list of roles/recipes to apply.",
)
@click.option(
    "-b", "--box", default=DEFAULT_BOX, show_default=True, help="Name of vagrant box."
)
@click.option(
    "-H",
    "--hostname",
    default=DEFAULT_HOSTNAME,
    show_default=True,
    help="Hostname to be set on the vagrant box when provisioned.",
)
@click.option(
    "-U",
    "--box-url",
    default=lambda: os.path.join(os.getcwd(), DEFAULT_BOX_FILENAME),
    show_default=f"./{DEFAULT_BOX_FILENAME}",
    help="URL of pre-packaged vbox template. Can be a local path or an HTTP URL.",
)
@click.option(
    "-m",
    "--memsize",
    type=click.IntRange(min=1),
    default=DEFAULT_MEMSIZE,
    show_default=True,
    help="Amount of RAM to allocate to provisioned VM, in MB.",
)
@click.option(
    "-l",
    "--chef-loglevel",
    type=click.Choice(CHEF_LOGLEVELS, case_sensitive=False),
    default=DEFAULT_CHEF_LOGLEVEL,
    show_default=True,
    help="Logging level for the chef-client process running inside the VM.",
)
@click.option(
    "-x",
    "--destroy",
    is_flag=True,
    help="Destroy vagrant box and delete chef node/client when finished.",
)
@click.option("-y", "--yes", is_flag=True, help="Say yes to all prompts.")
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default=DEFAULT_BACKEND,
    show_default=True,
    help="Vagrant provider to use.",
)
@click.option("--config-extra", default="", help="Extra config (in vagrant DSL).")
@click.option(
    "-c",
    "--config",
    "config_file",
    default=DEFAULT_CHEF_CONFIG,
    show_default=True,
    help="Chef configuration file (YAML).",
)
@click.option("-s", "--server-url", help="Chef server URL.")
@click.option("-u", "--user", help="API client used to talk to the chef server.")
@click.option("-k", "--key", help="Private key of the API client.")
@click.option("--validation-key", help="Path to the validation key.")
@click.option("--validation-client-name", help="Name of the validation client.")
@click.option("-V", "--verbose", is_flag=True, help="Show debug messages.")
def test_command(
    config_file,
    server_url,
    user,
    key,
    validation_key,
    validation_client_name,
    verbose,
    **kwargs,
):
    """Spin up a vagrant box and test a run list on it."""
    init_logging(level=logging.DEBUG if verbose else logging.INFO)
    chef_conf = ChefConfiguration.from_file(
        config_file,
        overrides=dict(
            chef_server_url=server_url,
            node_name=user,
            client_key=key,
            validation_key=validation_key,
            validation_client_name=validation_client_name,
        ),
    )
    conf = Configuration.from_dictionary(kwargs)
    VagrantTest(conf, chef_conf).run()


@cli.command("check")
@click.pass_context
def check_command(ctx):
    """Check that vagrant is usable."""
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Vagrant check")
    table.add_column("Key")
    table.add_column("Status", justify="center")
    table.add_column("Hint", no_wrap=True, width=30)
    statuses = vagrant_check()
    for key, status_ok, hint in statuses:
        table.add_row(key, "✅" if status_ok else "❌", hint)

    Console().print(table)
    if not all(status_ok for _, status_ok, _ in statuses):
        ctx.exit(1)


def main():
    cli()
