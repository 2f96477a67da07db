# flake8: noqa
import logging
from typing import Any, Dict

from knife_vagrant.chef import ChefAPI, ChefConfiguration, Client, Node
from knife_vagrant.configuration import Configuration
from knife_vagrant.environment import VagrantEnvironment, check
from knife_vagrant.provisioner import VagrantTest, build_runlist
from knife_vagrant.version import __version__


def init_logging(level=logging.INFO, **kwargs):
    """Enable Rich display of log messages.

    kwargs: kwargs passed to RichHandler.
      knife-vagrant chooses some defaults for you
        show_time=False,
    """
    from rich.logging import RichHandler

    default_kwargs: Dict[str, Any] = dict(
        show_time=False,
    )

    default_kwargs.update(**kwargs)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(**default_kwargs)],
    )

    return logging
