import json
import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional

import jsonschema

from .constants import (
    DEFAULT_BACKEND,
    DEFAULT_BOX,
    DEFAULT_BOX_FILENAME,
    DEFAULT_CHEF_LOGLEVEL,
    DEFAULT_HOSTNAME,
    DEFAULT_MEMSIZE,
)
from .schema import SCHEMA

logger = logging.getLogger(__name__)


class BaseConfiguration:
    """Base class for the configuration objects.

    A configuration is a plain bag of attributes that can be built from a
    dictionary (e.g. loaded from a file or from the command line options)
    and checked against a json schema.
    """

    # Setting this is deferred to the inherited classes
    _SCHEMA: Optional[Dict[Any, Any]] = None
    _VALIDATOR_FUNC: Optional[Callable] = None
    _KEYS: List[str] = []

    @classmethod
    def from_dictionary(cls, dictionary: Mapping, validate: bool = True):
        """Alternative constructor. Build the configuration from a
        dictionary."""
        self = cls()
        # unset keys keep their default value
        d = self.to_dict()
        d.update({k: v for k, v in dictionary.items() if v is not None})
        if validate:
            cls.validate(d)
        self.set(**{key: d[key] for key in cls._KEYS})
        return self.finalize() if validate else self

    @classmethod
    def from_settings(cls, **kwargs):
        """Alternative constructor. Build the configuration from
        the kwargs."""
        self = cls()
        self.set(**kwargs)
        return self

    @classmethod
    def validate(cls, dictionary: Mapping, schema: Optional[Dict] = None):
        if schema is None:
            schema = cls._SCHEMA
        if cls._VALIDATOR_FUNC is None:
            jsonschema.validate(dictionary, schema)
        else:
            # pylint: disable-next=not-callable
            cls._VALIDATOR_FUNC(schema).validate(dictionary)

    def to_dict(self) -> Dict:
        return {key: getattr(self, key) for key in self._KEYS}

    def finalize(self):
        d = self.to_dict()
        logger.debug(json.dumps(d, indent=4))
        self.validate(d)
        return self

    def set(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        return self

    def __repr__(self) -> str:
        r = f"Conf@{hex(id(self))}\n"
        r += json.dumps(self.to_dict(), indent=4)
        return r


class Configuration(BaseConfiguration):
    """Options of one ``knife-vagrant test`` invocation.

    Examples:

        .. code-block:: python

            conf = Configuration.from_settings(
                box="bento/ubuntu-22.04",
                run_list=["recipe[nginx]", "role[web]"],
                destroy=True,
            ).finalize()
    """

    _SCHEMA = SCHEMA
    _KEYS = [
        "vagrant_dir",
        "run_list",
        "box",
        "hostname",
        "box_url",
        "memsize",
        "chef_loglevel",
        "destroy",
        "yes",
        "backend",
        "config_extra",
    ]

    def __init__(self):
        cwd = os.getcwd()
        self.vagrant_dir = cwd
        self.run_list: List[str] = []
        self.box = DEFAULT_BOX
        self.hostname = DEFAULT_HOSTNAME
        self.box_url = os.path.join(cwd, DEFAULT_BOX_FILENAME)
        self.memsize = DEFAULT_MEMSIZE
        self.chef_loglevel = DEFAULT_CHEF_LOGLEVEL
        self.destroy = False
        # auto-confirm the prompts
        self.yes = False
        self.backend = DEFAULT_BACKEND
        self.config_extra = ""

    def finalize(self):
        super().finalize()
        # run() changes to this directory, a relative path would be resolved twice
        self.vagrant_dir = os.path.abspath(self.vagrant_dir)
        return self

