"""Shared fixtures: an in-memory regtest node served through httpx.MockTransport."""

import base64
import json
from urllib.parse import unquote

import httpx
import pytest

from btcrpc.client import Client
from btcrpc.errors import RPCErrorCode

NODE_URL = "http://127.0.0.1:18443"
RPC_USER = "testuser"
RPC_PASSWORD = "lq6zequb-gYTdF2_ZEUtr8ywTXzLYtknzWU4nV8uVoo="


class RpcFault(Exception):
    def __init__(self, code, message):
        self.code = code
        self.message = message
        super().__init__(message)


class FakeNode:
    """Tiny subset of a regtest bitcoind: wallets, addresses, coinbase UTXOs, locks."""

    EMPTY_PASSPHRASE_WARNING = "Empty string given as passphrase, wallet will not be encrypted."

    def __init__(self, user=RPC_USER, password=RPC_PASSWORD):
        token = base64.b64encode(f"{user}:{password}".encode()).decode()
        self.expected_auth = f"Basic {token}"
        self.wallets = {}
        self.address_owner = {}
        self.requests = []
        self._address_counter = 0
        self._block_counter = 0

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.headers.get("authorization") != self.expected_auth:
            return httpx.Response(401)

        payload = json.loads(request.content)
        self.requests.append((request.url.path, payload))

        wallet_name = None
        if request.url.path.startswith("/wallet/"):
            wallet_name = unquote(request.url.path[len("/wallet/"):])

        handler = getattr(self, f"rpc_{payload['method']}", None)
        if handler is None:
            return self._error(payload, RPCErrorCode.RPC_METHOD_NOT_FOUND, "Method not found", 404)
        try:
            result = handler(wallet_name, *payload["params"])
        except RpcFault as fault:
            return self._error(payload, fault.code, fault.message, 500)
        return httpx.Response(200, json={"jsonrpc": "2.0", "result": result, "id": payload["id"]})

    def _error(self, payload, code, message, status):
        body = {"jsonrpc": "2.0", "error": {"code": int(code), "message": message}, "id": payload["id"]}
        return httpx.Response(status, json=body)

    def _wallet(self, wallet_name):
        if wallet_name is None:
            if len(self.wallets) != 1:
                raise RpcFault(RPCErrorCode.RPC_WALLET_NOT_SPECIFIED, "Wallet file not specified")
            return next(iter(self.wallets.values()))
        if wallet_name not in self.wallets:
            raise RpcFault(
                RPCErrorCode.RPC_WALLET_NOT_FOUND,
                "Requested wallet does not exist or is not loaded",
            )
        return self.wallets[wallet_name]

    # RPC handlers

    def rpc_getnetworkinfo(self, wallet_name):
        return {"version": 270000, "subversion": "/Satoshi:27.0.0/", "connections": 0, "networkactive": True}

    def rpc_createwallet(self, wallet_name, name, disable_private_keys=False, blank=False,
                         passphrase="", avoid_reuse=False, *rest):
        self.wallets[name] = {
            "name": name,
            "private_keys_enabled": not disable_private_keys,
            "avoid_reuse": avoid_reuse,
            "passphrase": passphrase,
            "unlocked_until": 0,
            "utxos": [],
            "locked": [],
        }
        return {"name": name, "warning": self.EMPTY_PASSPHRASE_WARNING if passphrase == "" else ""}

    def rpc_loadwallet(self, wallet_name, filename, *rest):
        raise RpcFault(RPCErrorCode.RPC_WALLET_NOT_FOUND, f"Wallet {filename} not found.")

    def rpc_listwallets(self, wallet_name):
        return sorted(self.wallets)

    def rpc_getwalletinfo(self, wallet_name):
        wallet = self._wallet(wallet_name)
        info = {
            "walletname": wallet["name"],
            "private_keys_enabled": wallet["private_keys_enabled"],
            "avoid_reuse": wallet["avoid_reuse"],
            "scanning": False,
        }
        if wallet["passphrase"]:
            info["unlocked_until"] = wallet["unlocked_until"]
        return info

    def rpc_walletpassphrase(self, wallet_name, passphrase, timeout):
        wallet = self._wallet(wallet_name)
        if passphrase != wallet["passphrase"]:
            raise RpcFault(
                RPCErrorCode.RPC_WALLET_PASSPHRASE_INCORRECT,
                "Error: The wallet passphrase entered was incorrect.",
            )
        wallet["unlocked_until"] = 1_700_000_000 + timeout
        return None

    def rpc_walletlock(self, wallet_name):
        self._wallet(wallet_name)["unlocked_until"] = 0
        return None

    def rpc_getnewaddress(self, wallet_name, label="", address_type="bech32"):
        wallet = self._wallet(wallet_name)
        self._address_counter += 1
        prefixes = {"bech32": "bcrt1q", "bech32m": "bcrt1p", "legacy": "m", "p2sh-segwit": "2"}
        address = f"{prefixes[address_type]}{self._address_counter:038x}"
        self.address_owner[address] = wallet["name"]
        return address

    def rpc_generatetoaddress(self, wallet_name, nblocks, address, *rest):
        hashes = []
        owner = self.wallets.get(self.address_owner.get(address))
        for _ in range(nblocks):
            self._block_counter += 1
            block_hash = f"{self._block_counter:064x}"
            hashes.append(block_hash)
            if owner is not None:
                owner["utxos"].append({"txid": block_hash, "vout": 0, "address": address, "amount": 50.0})
        return hashes

    def rpc_listunspent(self, wallet_name, minconf=1, maxconf=9999999, addresses=(), include_unsafe=True, *rest):
        wallet = self._wallet(wallet_name)
        locked = {(o["txid"], o["vout"]) for o in wallet["locked"]}
        return [u for u in wallet["utxos"] if (u["txid"], u["vout"]) not in locked]

    def rpc_lockunspent(self, wallet_name, unlock, transactions=None):
        wallet = self._wallet(wallet_name)
        if transactions is None:
            if unlock:
                wallet["locked"] = []
            return True
        for outpoint in transactions:
            entry = {"txid": outpoint["txid"], "vout": outpoint["vout"]}
            if unlock:
                wallet["locked"].remove(entry)
            elif entry not in wallet["locked"]:
                wallet["locked"].append(entry)
        return True

    def rpc_listlockunspent(self, wallet_name):
        return list(self._wallet(wallet_name)["locked"])


@pytest.fixture
def node():
    return FakeNode()


@pytest.fixture
def make_client(node):
    """Build a Client wired to the fake node; extra kwargs go to the constructor."""
    def _make(url=NODE_URL, user=RPC_USER, password=RPC_PASSWORD, **kwargs):
        return Client(url, user, password, transport=httpx.MockTransport(node.handle), **kwargs)
    return _make
