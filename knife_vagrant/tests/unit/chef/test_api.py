import base64
import os
import tempfile
from unittest import mock

from cryptography.hazmat.backends import default_backend as crypto_default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import serialization as crypto_serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from knife_vagrant.chef.api import ChefAPI, canonical_request
from knife_vagrant.chef.configuration import ChefConfiguration
from knife_vagrant.errors import ChefKeyError, ChefServerError
from knife_vagrant.tests.unit import KnifeVagrantTest

URL = "https://chef.example.com/organizations/acme"
# base64(sha256(b""))
EMPTY_HASH = "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
TIMESTAMP = "2026-10-19T12:00:00Z"


def _signature(headers):
    chunks = []
    index = 1
    while f"X-Ops-Authorization-{index}" in headers:
        chunks.append(headers[f"X-Ops-Authorization-{index}"])
        index += 1
    return base64.b64decode("".join(chunks))


class TestChefAPI(KnifeVagrantTest):
    def setUp(self):
        self.key = rsa.generate_private_key(
            backend=crypto_default_backend(), public_exponent=65537, key_size=2048
        )
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.key_path = os.path.join(self.tmp_dir.name, "alice.pem")
        with open(self.key_path, "wb") as f:
            f.write(
                self.key.private_bytes(
                    encoding=crypto_serialization.Encoding.PEM,
                    format=crypto_serialization.PrivateFormat.PKCS8,
                    encryption_algorithm=crypto_serialization.NoEncryption(),
                )
            )
        self.api = ChefAPI(URL, self.key_path, "alice")

    def tearDown(self):
        self.tmp_dir.cleanup()

    def assertSigned(self, headers, method, path, content_hash=EMPTY_HASH):
        canonical = canonical_request(
            method, path, content_hash, headers["X-Ops-Timestamp"], "alice"
        )
        # raises InvalidSignature if the signature doesn't match
        self.key.public_key().verify(
            _signature(headers), canonical.encode(), padding.PKCS1v15(), hashes.SHA256()
        )

    def test_canonical_request(self):
        canonical = canonical_request(
            "delete", "/organizations/acme/nodes/box", EMPTY_HASH, TIMESTAMP, "alice"
        )
        self.assertEqual(
            "\n".join(
                [
                    "Method:DELETE",
                    "Path:/organizations/acme/nodes/box",
                    f"X-Ops-Content-Hash:{EMPTY_HASH}",
                    "X-Ops-Sign:version=1.3",
                    f"X-Ops-Timestamp:{TIMESTAMP}",
                    "X-Ops-UserId:alice",
                    "X-Ops-Server-API-Version:1",
                ]
            ),
            canonical,
        )

    def test_headers(self):
        headers = self.api.headers(
            "DELETE", "/organizations/acme/nodes/box", timestamp=TIMESTAMP
        )
        self.assertEqual("algorithm=sha256;version=1.3", headers["X-Ops-Sign"])
        self.assertEqual("alice", headers["X-Ops-Userid"])
        self.assertEqual(TIMESTAMP, headers["X-Ops-Timestamp"])
        self.assertEqual(EMPTY_HASH, headers["X-Ops-Content-Hash"])
        self.assertEqual("1", headers["X-Ops-Server-API-Version"])
        self.assertSigned(headers, "DELETE", "/organizations/acme/nodes/box")

    def test_authorization_chunks(self):
        headers = self.api.headers("DELETE", "/nodes/box", timestamp=TIMESTAMP)
        chunks = [v for k, v in headers.items() if k.startswith("X-Ops-Authorization-")]
        # 256 bytes of signature -> 344 base64 characters
        self.assertEqual(6, len(chunks))
        self.assertTrue(all(len(c) == 60 for c in chunks[:-1]))
        self.assertEqual(44, len(chunks[-1]))

    def test_delete(self):
        self.api.session = mock.Mock()
        self.api.session.request.return_value = mock.Mock(ok=True, content=b"")
        self.assertIsNone(self.api.delete("/nodes/box"))

        args, kwargs = self.api.session.request.call_args
        self.assertEqual(("DELETE", f"{URL}/nodes/box"), args)
        self.assertIsNone(kwargs["data"])
        self.assertTrue(kwargs["verify"])
        self.assertIsNone(kwargs["timeout"])
        # the organization is part of the signed path
        self.assertSigned(kwargs["headers"], "DELETE", "/organizations/acme/nodes/box")

    def test_request_with_payload(self):
        self.api.session = mock.Mock()
        self.api.session.request.return_value = mock.Mock(
            ok=True, content=b"{}", json=mock.Mock(return_value={"name": "box"})
        )
        self.assertEqual(
            {"name": "box"}, self.api.request("PUT", "/nodes/box", data={"name": "box"})
        )
        _, kwargs = self.api.session.request.call_args
        headers = kwargs["headers"]
        self.assertEqual("application/json", headers["Content-Type"])
        self.assertNotEqual(EMPTY_HASH, headers["X-Ops-Content-Hash"])
        self.assertSigned(
            headers,
            "PUT",
            "/organizations/acme/nodes/box",
            content_hash=headers["X-Ops-Content-Hash"],
        )

    def test_delete_failure(self):
        self.api.session = mock.Mock()
        self.api.session.request.return_value = mock.Mock(
            ok=False, status_code=404, text="Cannot load node box"
        )
        with self.assertRaises(ChefServerError) as ctx:
            self.api.delete("/nodes/box")
        self.assertEqual(404, ctx.exception.status_code)
        self.assertEqual("DELETE", ctx.exception.method)
        self.assertEqual("/nodes/box", ctx.exception.path)

    def test_missing_key(self):
        api = ChefAPI(URL, os.path.join(self.tmp_dir.name, "missing.pem"), "alice")
        with self.assertRaises(ChefKeyError):
            api.headers("DELETE", "/nodes/box")

    def test_from_configuration(self):
        conf = ChefConfiguration.from_dictionary(
            {
                "chef_server_url": URL + "/",
                "node_name": "alice",
                "client_key": self.key_path,
                "ssl_verify": False,
                "timeout": 10,
            }
        )
        api = ChefAPI.from_configuration(conf)
        self.assertEqual(URL, api.url)
        self.assertEqual("alice", api.client_name)
        self.assertFalse(api.ssl_verify)
        self.assertEqual(10, api.timeout)
