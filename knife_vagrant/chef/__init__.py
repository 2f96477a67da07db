from .api import ChefAPI
from .configuration import ChefConfiguration
from .objects import ChefObject, Client, Node
