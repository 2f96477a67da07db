import logging
import os
from typing import Mapping, Optional

import yaml

from ..configuration import BaseConfiguration
from ..constants import DEFAULT_VALIDATION_CLIENT_NAME, DEFAULT_VALIDATION_KEY
from ..errors import ChefConfigurationNotFoundError
from ..schema import CHEF_SCHEMA

logger = logging.getLogger(__name__)


class ChefConfiguration(BaseConfiguration):
    """Connection parameters of the chef server.

    This is what knife reads from its configuration file: the server URL, the
    API client (and its key) used to talk to the server and the validation
    credentials handed over to the chef-client running in the box.
    """

    _SCHEMA = CHEF_SCHEMA
    _KEYS = [
        "chef_server_url",
        "node_name",
        "client_key",
        "validation_key",
        "validation_client_name",
        "ssl_verify",
        "timeout",
    ]
    _PATH_KEYS = ["client_key", "validation_key"]

    def __init__(self):
        self.chef_server_url = ""
        self.node_name = ""
        self.client_key = ""
        self.validation_key = DEFAULT_VALIDATION_KEY
        self.validation_client_name = DEFAULT_VALIDATION_CLIENT_NAME
        self.ssl_verify = True
        self.timeout: Optional[float] = None

    @classmethod
    def from_dictionary(
        cls, dictionary: Mapping, validate: bool = True
    ) -> "ChefConfiguration":
        d = dict(dictionary)
        for key in cls._PATH_KEYS:
            if d.get(key):
                d[key] = os.path.expanduser(d[key])
        return super().from_dictionary(d, validate=validate)

    @classmethod
    def from_file(
        cls, path: str, overrides: Optional[Mapping] = None
    ) -> "ChefConfiguration":
        """Load the configuration from a YAML file.

        Args:
            path: path to the file, ``~`` is expanded.
            overrides: values taking precedence over the file ones. ``None``
                values are ignored.
        """
        path = os.path.expanduser(path)
        if not os.path.isfile(path):
            raise ChefConfigurationNotFoundError(path)
        with open(path) as f:
            d = yaml.safe_load(f) or {}
        logger.debug(f"Loaded chef configuration from {path}")
        d.update({k: v for k, v in (overrides or {}).items() if v is not None})
        return cls.from_dictionary(d)
