import os

# PATH constants
KNIFE_VAGRANT_PATH = os.path.abspath(os.path.dirname(os.path.realpath(__file__)))
TEMPLATE_DIR = KNIFE_VAGRANT_PATH
VAGRANTFILE = "Vagrantfile"
VAGRANTFILE_TEMPLATE = "Vagrantfile.j2"

# Box
DEFAULT_BOX = "generic/debian11"
DEFAULT_BOX_FILENAME = "package.box"

# Backends
BACKEND_VIRTUALBOX = "virtualbox"
BACKEND_LIBVIRT = "libvirt"
BACKENDS = [BACKEND_LIBVIRT, BACKEND_VIRTUALBOX]

DEFAULT_BACKEND = BACKEND_VIRTUALBOX

DEFAULT_HOSTNAME = "vagrant-test"

# in MB
DEFAULT_MEMSIZE = 1024

#: guest, host
FORWARDED_PORT = (22, 2222)

#: Log levels understood by chef-client
CHEF_LOGLEVELS = ["debug", "info", "warn", "error", "fatal"]
DEFAULT_CHEF_LOGLEVEL = "INFO"

# Chef server
DEFAULT_CHEF_CONFIG = os.path.join("~", ".chef", "knife.yml")
DEFAULT_VALIDATION_KEY = "/etc/chef/validation.pem"
DEFAULT_VALIDATION_CLIENT_NAME = "chef-validator"

CHEF_SIGN_VERSION = "1.3"
CHEF_SIGN_ALGORITHM = "sha256"
CHEF_SERVER_API_VERSION = "1"
CHEF_VERSION = "18.0.0"
# length of each X-Ops-Authorization-N header
CHEF_AUTH_CHUNK_SIZE = 60
