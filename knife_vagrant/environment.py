import logging
import os
from typing import List, Tuple

import vagrant

from .constants import DEFAULT_BACKEND, VAGRANTFILE
from .errors import (
    UnsupportedVagrantActionError,
    VagrantfileNotFoundError,
    VagrantNotFoundError,
)

logger = logging.getLogger(__name__)

#: supported actions and their accepted flags
ACTIONS = {
    "up": [],
    "destroy": ["--force"],
}


def check() -> List[Tuple[str, bool, str]]:
    if vagrant.get_vagrant_executable() is None:
        return [("access", False, "Vagrant executable not found")]
    else:
        return [("access", True, "Looks good so far")]


class VagrantEnvironment:
    """A vagrant project directory and the lifecycle actions run against it.

    Building the environment is cheap: vagrant is only looked up when the
    environment is loaded, either explicitly or by the first action.

    Args:
        root: the directory holding the Vagrantfile
        backend: the vagrant provider used to bring the machine up
    """

    def __init__(self, root: str, backend: str = DEFAULT_BACKEND):
        self.root = os.path.abspath(root)
        self.backend = backend
        self._v = None

    @property
    def loaded(self) -> bool:
        return self._v is not None

    def load(self) -> "VagrantEnvironment":
        if vagrant.get_vagrant_executable() is None:
            raise VagrantNotFoundError()
        vagrantfile = os.path.join(self.root, VAGRANTFILE)
        if not os.path.isfile(vagrantfile):
            raise VagrantfileNotFoundError(vagrantfile)

        # Build env for Vagrant with a copy of env variables (needed by
        # subprocess opened by vagrant
        v_env = dict(os.environ)
        v_env["VAGRANT_DEFAULT_PROVIDER"] = self.backend
        self._v = vagrant.Vagrant(
            root=self.root, quiet_stdout=False, quiet_stderr=False, env=v_env
        )
        logger.debug(f"Loaded vagrant environment in {self.root}")
        return self

    def cli(self, *args: str):
        """Run a lifecycle action, e.g. ``cli("up")`` or
        ``cli("destroy", "--force")``."""
        action, flags = (args[0], args[1:]) if args else ("", ())
        if action not in ACTIONS or any(f not in ACTIONS[action] for f in flags):
            raise UnsupportedVagrantActionError(args)

        if not self.loaded:
            self.load()
        logger.debug(f"vagrant {' '.join(args)}")
        # python-vagrant always passes --force to destroy
        return getattr(self._v, action)()
