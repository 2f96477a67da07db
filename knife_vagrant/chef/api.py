"""
A minimal client of the chef server API.

Only what the cleanup of a test box needs is there: authenticated requests and
the deletion of objects. Requests are signed following the version 1.3 of the
chef authentication protocol, see
https://docs.chef.io/server/api_chef_server/#authentication-headers
"""
import base64
import hashlib
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests
from cryptography.hazmat.backends import default_backend as crypto_default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization as crypto_serialization
from cryptography.hazmat.primitives.asymmetric import padding

from ..constants import (
    CHEF_AUTH_CHUNK_SIZE,
    CHEF_SERVER_API_VERSION,
    CHEF_SIGN_ALGORITHM,
    CHEF_SIGN_VERSION,
    CHEF_VERSION,
)
from ..errors import ChefKeyError, ChefServerError

logger = logging.getLogger(__name__)


def _digest(content: bytes) -> str:
    return base64.b64encode(hashlib.sha256(content).digest()).decode()


def _timestamp(now: Optional[datetime] = None) -> str:
    if now is None:
        now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%SZ")


def canonical_request(
    method: str,
    path: str,
    content_hash: str,
    timestamp: str,
    user_id: str,
    api_version: str = CHEF_SERVER_API_VERSION,
) -> str:
    return "\n".join(
        [
            f"Method:{method.upper()}",
            f"Path:{path}",
            f"X-Ops-Content-Hash:{content_hash}",
            f"X-Ops-Sign:version={CHEF_SIGN_VERSION}",
            f"X-Ops-Timestamp:{timestamp}",
            f"X-Ops-UserId:{user_id}",
            f"X-Ops-Server-API-Version:{api_version}",
        ]
    )


class ChefAPI:
    """Talks to a chef server on behalf of an API client.

    Args:
        url: URL of the server (e.g https://chef.example.com/organizations/org)
        client_key: path to the PEM private key of the API client
        client_name: name of the API client
        ssl_verify: verify the server certificate
        timeout: timeout of the HTTP requests, in seconds (none by default)
    """

    def __init__(
        self,
        url: str,
        client_key: str,
        client_name: str,
        ssl_verify: bool = True,
        timeout: Optional[float] = None,
    ):
        self.url = url.rstrip("/")
        self.client_key = client_key
        self.client_name = client_name
        self.ssl_verify = ssl_verify
        self.timeout = timeout
        self.api_version = CHEF_SERVER_API_VERSION
        self._base_path = urlparse(self.url).path
        self._key = None
        self.session = requests.Session()

    @classmethod
    def from_configuration(cls, conf) -> "ChefAPI":
        return cls(
            conf.chef_server_url,
            conf.client_key,
            conf.node_name,
            ssl_verify=conf.ssl_verify,
            timeout=conf.timeout,
        )

    @property
    def key(self):
        # read lazily, the key isn't needed until the first request
        if self._key is None:
            try:
                with open(self.client_key, "rb") as f:
                    self._key = crypto_serialization.load_pem_private_key(
                        f.read(), password=None, backend=crypto_default_backend()
                    )
            except (OSError, ValueError) as e:
                raise ChefKeyError(self.client_key, str(e)) from e
        return self._key

    def sign(self, canonical: str) -> str:
        signature = self.key.sign(
            canonical.encode(), padding.PKCS1v15(), hashes.SHA256()
        )
        return base64.b64encode(signature).decode()

    def headers(
        self, method: str, path: str, body: bytes = b"", timestamp: Optional[str] = None
    ) -> Dict[str, str]:
        """Build the authentication headers of a request.

        Args:
            method: HTTP verb
            path: path of the request on the server (organization included)
            body: payload of the request
            timestamp: override the time of the request (mostly for testing)
        """
        if timestamp is None:
            timestamp = _timestamp()
        content_hash = _digest(body)
        signature = self.sign(
            canonical_request(
                method,
                path,
                content_hash,
                timestamp,
                self.client_name,
                api_version=self.api_version,
            )
        )
        headers = {
            "Accept": "application/json",
            "X-Chef-Version": CHEF_VERSION,
            "X-Ops-Sign": f"algorithm={CHEF_SIGN_ALGORITHM};version={CHEF_SIGN_VERSION}",
            "X-Ops-Userid": self.client_name,
            "X-Ops-Timestamp": timestamp,
            "X-Ops-Content-Hash": content_hash,
            "X-Ops-Server-API-Version": self.api_version,
        }
        chunks = [
            signature[i : i + CHEF_AUTH_CHUNK_SIZE]
            for i in range(0, len(signature), CHEF_AUTH_CHUNK_SIZE)
        ]
        for index, chunk in enumerate(chunks):
            headers[f"X-Ops-Authorization-{index + 1}"] = chunk
        return headers

    def request(self, method: str, path: str, data: Any = None) -> Any:
        body = b""
        headers = {}
        if data is not None:
            body = json.dumps(data).encode()
            headers["Content-Type"] = "application/json"
        headers.update(self.headers(method, self._base_path + path, body))
        url = self.url + path
        logger.debug(f"{method} {url}")
        response = self.session.request(
            method,
            url,
            data=body or None,
            headers=headers,
            verify=self.ssl_verify,
            timeout=self.timeout,
        )
        if not response.ok:
            raise ChefServerError(method, path, response.status_code, response.text)
        if response.content:
            return response.json()
        return None

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
