from urllib.parse import quote

from .api import ChefAPI


class ChefObject:
    """A record stored on the chef server, identified by its name."""

    #: kind of the object as displayed to the user
    kind = ""
    #: endpoint of the collection on the server
    url = ""

    def __init__(self, name: str, api: ChefAPI):
        self.name = name
        self.api = api

    @property
    def path(self) -> str:
        return "{}/{}".format(self.url, quote(self.name, safe=""))

    def delete(self):
        self.api.delete(self.path)

    def __str__(self) -> str:
        return f"{self.kind}[{self.name}]"


class Node(ChefObject):
    kind = "node"
    url = "/nodes"


class Client(ChefObject):
    kind = "client"
    url = "/clients"
