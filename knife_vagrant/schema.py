from .constants import (
    BACKENDS,
    CHEF_LOGLEVELS,
    DEFAULT_BACKEND,
    DEFAULT_BOX,
    DEFAULT_CHEF_LOGLEVEL,
    DEFAULT_HOSTNAME,
    DEFAULT_MEMSIZE,
    DEFAULT_VALIDATION_CLIENT_NAME,
    DEFAULT_VALIDATION_KEY,
)

JSON_SCHEMA = "http://json-schema.org/draft-07/schema#"

SCHEMA = {
    "type": "object",
    "title": "Vagrant Test Configuration Schema",
    "$schema": JSON_SCHEMA,
    "properties": {
        "vagrant_dir": {
            "description": "Path to the vagrant project directory",
            "type": "string",
            "minLength": 1,
        },
        "run_list": {
            "description": "Roles/recipes to apply, in order",
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "box": {
            "description": f"Name of the vagrant box (default: {DEFAULT_BOX})",
            "type": "string",
            "minLength": 1,
        },
        "hostname": {
            "description": f"Hostname of the box (default: {DEFAULT_HOSTNAME})",
            "type": "string",
            "minLength": 1,
        },
        "box_url": {
            "description": "Local path or HTTP URL of the box, empty to omit",
            "type": "string",
        },
        "memsize": {
            "description": f"RAM of the box in MB (default: {DEFAULT_MEMSIZE})",
            "type": "integer",
            "minimum": 1,
        },
        "chef_loglevel": {
            "description": f"chef-client log level (default: {DEFAULT_CHEF_LOGLEVEL})",
            "type": "string",
            "pattern": "(?i)^(%s)$" % "|".join(CHEF_LOGLEVELS),
        },
        "destroy": {"type": "boolean"},
        "yes": {"type": "boolean"},
        "backend": {
            "description": f"VM hypervisor to use (default: {DEFAULT_BACKEND})",
            "type": "string",
            "enum": BACKENDS,
        },
        "config_extra": {
            "description": "Extra config to pass (in vagrant DSL)",
            "type": "string",
        },
    },
    "additionalProperties": False,
    "required": ["vagrant_dir", "run_list", "box", "hostname", "memsize"],
}


CHEF_SCHEMA = {
    "type": "object",
    "title": "Chef Server Configuration Schema",
    "$schema": JSON_SCHEMA,
    "properties": {
        "chef_server_url": {
            "description": "URL of the chef server, organization included",
            "type": "string",
            "pattern": "^https?://",
        },
        "node_name": {
            "description": "Name of the API client used to talk to the server",
            "type": "string",
            "minLength": 1,
        },
        "client_key": {
            "description": "Path to the private key of node_name",
            "type": "string",
            "minLength": 1,
        },
        "validation_key": {
            "description": f"Path to the validation key (default: {DEFAULT_VALIDATION_KEY})",
            "type": "string",
            "minLength": 1,
        },
        "validation_client_name": {
            "description": "Name of the validation client "
            f"(default: {DEFAULT_VALIDATION_CLIENT_NAME})",
            "type": "string",
            "minLength": 1,
        },
        "ssl_verify": {"type": "boolean"},
        "timeout": {"type": ["number", "null"], "exclusiveMinimum": 0},
    },
    "additionalProperties": False,
    "required": [
        "chef_server_url",
        "node_name",
        "client_key",
        "validation_key",
        "validation_client_name",
    ],
}
