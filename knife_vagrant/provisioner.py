import logging
import os
from typing import Iterable, Optional, Type

import click
from jinja2 import Environment, FileSystemLoader

from .chef.api import ChefAPI
from .chef.configuration import ChefConfiguration
from .chef.objects import ChefObject, Client, Node
from .configuration import Configuration
from .constants import FORWARDED_PORT, TEMPLATE_DIR, VAGRANTFILE, VAGRANTFILE_TEMPLATE
from .environment import VagrantEnvironment

logger = logging.getLogger(__name__)


def build_runlist(run_list: Iterable[str]) -> str:
    return ",\n".join(f'"{item}"' for item in run_list)


class VagrantTest:
    """Spins up a vagrant box and tests a chef run list on it.

    The box is described by a Vagrantfile generated in the vagrant project
    directory. Vagrant's chef_client provisioner registers the box against the
    chef server and applies the run list.

    A Vagrantfile found in the project directory is the leftover of a
    previous run: the corresponding box and chef objects are cleaned up
    before starting again.

    Args:
        conf: the options of the run
        chef_conf: the chef server to register the box against
        chef_api: the client used to delete the chef objects, built from
            ``chef_conf`` if not given
    """

    def __init__(
        self,
        conf: Configuration,
        chef_conf: ChefConfiguration,
        chef_api: Optional[ChefAPI] = None,
    ):
        self.config = conf.finalize()
        self.chef_config = chef_conf.finalize()
        self._chef_api = chef_api
        self._vagrant_env: Optional[VagrantEnvironment] = None

    @property
    def chef_api(self) -> ChefAPI:
        if self._chef_api is None:
            self._chef_api = ChefAPI.from_configuration(self.chef_config)
        return self._chef_api

    @property
    def vagrant(self) -> VagrantEnvironment:
        if self._vagrant_env is None:
            self._vagrant_env = VagrantEnvironment(
                self.config.vagrant_dir, backend=self.config.backend
            )
        return self._vagrant_env

    def build_vagrantfile(self) -> str:
        # this is ruby, not markup: no autoescape
        loader = FileSystemLoader(searchpath=TEMPLATE_DIR)
        env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        template = env.get_template(VAGRANTFILE_TEMPLATE)
        guest_port, host_port = FORWARDED_PORT
        return template.render(
            conf=self.config,
            chef_conf=self.chef_config,
            run_list=build_runlist(self.config.run_list),
            guest_port=guest_port,
            host_port=host_port,
        )

    def write_vagrantfile(self, path: str, content: str):
        with open(path, "w") as f:
            f.write(content)
        logger.debug(f"Vagrantfile written in {path}")

    def confirm(self, question: str):
        """Ask the user to confirm, aborts if they don't.

        Nothing is asked when the ``yes`` option is set.
        """
        if self.config.yes:
            return
        click.confirm(f"{question}?", abort=True)

    def delete_object(self, cls: Type[ChefObject], name: str):
        obj = cls(name, self.chef_api)
        self.confirm(f"Do you really want to delete {obj.kind} {name}")
        obj.delete()
        logger.info(f"Deleted {obj}")

    def cleanup(self, path: str):
        """Destroy the box and forget about it.

        This removes the Vagrantfile and the chef node and client of the box.
        The vagrant environment is rebuilt on its next use.

        Args:
            path: path to the Vagrantfile
        """
        yes = self.config.yes
        self.config.yes = True
        try:
            self.vagrant.cli("destroy", "--force")
            os.remove(path)
            self.delete_object(Node, self.config.hostname)
            self.delete_object(Client, self.config.hostname)
        finally:
            self.config.yes = yes
        self._vagrant_env = None

    def run(self):
        os.chdir(self.config.vagrant_dir)
        vagrantfile = os.path.join(self.config.vagrant_dir, VAGRANTFILE)
        logger.info("Loading vagrant environment...")

        if os.path.exists(vagrantfile):
            logger.info("Vagrantfile already exists, cleaning up last run...")
            self.cleanup(vagrantfile)

        self.write_vagrantfile(vagrantfile, self.build_vagrantfile())
        self.vagrant.load()
        try:
            self.vagrant.cli("up")
        finally:
            if self.config.destroy:
                self.confirm(
                    f"Destroy vagrant box {self.config.box} "
                    "and delete chef node and client"
                )
                self.cleanup(vagrantfile)
