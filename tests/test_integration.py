"""Live tests against a regtest bitcoind.

Run with BITCOIND_ADDRESS (e.g. http://localhost:18443), BITCOIND_USER and
BITCOIND_PASSWORD pointing at a disposable regtest node.
"""

import os
import uuid

import pytest

from btcrpc.client import Client
from btcrpc.errors import AuthError, BitcoinRpcError, ConnectionError, RPCErrorCode

URL = os.getenv("BITCOIND_ADDRESS", "")
USER = os.getenv("BITCOIND_USER", "testuser")
PASSWORD = os.getenv("BITCOIND_PASSWORD", "")

pytestmark = [
    pytest.mark.skipif(not URL, reason="BITCOIND_ADDRESS not set"),
    pytest.mark.asyncio,
]


def unique(prefix):
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


async def test_get_new_address_on_regtest():
    async with Client(URL, USER, PASSWORD) as client:
        name = unique("addr")
        await client.create_wallet(name)
        address = await client.for_wallet(name).get_new_address(address_type="bech32")

    assert address.startswith("bcrt")


async def test_create_wallet_warnings():
    async with Client(URL, USER, PASSWORD) as client:
        plain = await client.create_wallet(unique("plain"))
        encrypted = await client.create_wallet(unique("enc"), passphrase="pass")

    assert "will not be encrypted" in (plain.get("warning") or " ".join(plain.get("warnings", [])))
    assert not encrypted.get("warning")


async def test_lock_unspent_roundtrip():
    async with Client(URL, USER, PASSWORD) as client:
        name = unique("locks")
        await client.create_wallet(name)
        wallet = client.for_wallet(name)
        address = await wallet.get_new_address()
        await wallet.generate_to_address(101, address)

        utxos = await wallet.list_unspent()
        to_lock = {"txid": utxos[0]["txid"], "vout": utxos[0]["vout"]}
        await wallet.lock_unspent(False, [to_lock])
        assert to_lock in await wallet.list_lock_unspent()

        await wallet.lock_unspent(True)
        assert await wallet.list_lock_unspent() == []


async def test_unknown_wallet_raises():
    async with Client(URL, USER, PASSWORD) as client:
        with pytest.raises(BitcoinRpcError) as exc_info:
            await client.for_wallet("unknown").get_wallet_info()

    assert exc_info.value == BitcoinRpcError(
        RPCErrorCode.RPC_WALLET_NOT_FOUND,
        "Requested wallet does not exist or is not loaded",
    )


async def test_bad_credentials_raise_auth_error():
    async with Client(URL, "a", "b") as client:
        with pytest.raises(AuthError):
            await client.get_network_info()


async def test_closed_port_raises_connection_error():
    async with Client("http://127.0.0.1:1", USER, PASSWORD) as client:
        with pytest.raises(ConnectionError):
            await client.get_network_info()
