"""Tests for the typed method surface: wire names and parameter defaults."""

import inspect
import json

import httpx
import pytest

from btcrpc.client import Client

URL = "http://127.0.0.1:18443"

# Methods kept for compatibility whose names do not match a node RPC
ALIASES = {
    "get_blockchain_information": "getblockchaininfo",
    "get_memory_pool_content": "getrawmempool",
    "get_memory_pool_information": "getmempoolinfo",
}


class Recorder:
    """Mock transport handler that records every JSON-RPC payload."""

    def __init__(self, result=None):
        self.result = result
        self.payloads = []

    def __call__(self, request):
        self.payloads.append(json.loads(request.content))
        return httpx.Response(200, json={"jsonrpc": "2.0", "result": self.result, "id": 1})


def typed_methods():
    return sorted(
        name for name, fn in vars(Client).items()
        if inspect.iscoroutinefunction(fn) and not name.startswith("_")
    )


def required_args(fn):
    params = list(inspect.signature(fn).parameters.values())[1:]
    return ["x" for p in params if p.default is inspect.Parameter.empty]


@pytest.mark.asyncio
@pytest.mark.parametrize("name", typed_methods())
async def test_wire_name_is_lowercase_method_name(name):
    recorder = Recorder()
    async with Client(URL, transport=httpx.MockTransport(recorder)) as client:
        method = getattr(client, name)
        await method(*required_args(getattr(Client, name)))

    assert len(recorder.payloads) == 1
    wire = recorder.payloads[0]["method"]
    assert wire == wire.lower()
    assert wire == ALIASES.get(name, name.replace("_", ""))
    assert None not in recorder.payloads[0]["params"]


def test_surface_is_complete():
    assert len(typed_methods()) >= 150


@pytest.mark.asyncio
@pytest.mark.parametrize("call, expected", [
    (lambda c: c.get_new_address(), ("getnewaddress", [""])),
    (lambda c: c.get_new_address(address_type="bech32"), ("getnewaddress", ["", "bech32"])),
    (lambda c: c.get_balance(), ("getbalance", ["*", 0, True])),
    (lambda c: c.create_wallet("alice"), ("createwallet", ["alice", False, False, "", False])),
    (lambda c: c.create_wallet("bob", True, descriptors=True),
     ("createwallet", ["bob", True, False, "", False, True])),
    (lambda c: c.list_unspent(), ("listunspent", [1, 9999999, [], True])),
    (lambda c: c.list_transactions(), ("listtransactions", ["*", 10, 0])),
    (lambda c: c.list_since_block(), ("listsinceblock", ["", 1, False])),
    (lambda c: c.list_received_by_address(), ("listreceivedbyaddress", [1, False])),
    (lambda c: c.lock_unspent(True), ("lockunspent", [True])),
    (lambda c: c.lock_unspent(False, [{"txid": "aa", "vout": 0}]),
     ("lockunspent", [False, [{"txid": "aa", "vout": 0}]])),
    (lambda c: c.import_address("bcrt1qxyz"), ("importaddress", ["bcrt1qxyz", "", True])),
    (lambda c: c.get_network_hashps(), ("getnetworkhashps", [120])),
    (lambda c: c.verify_chain(), ("verifychain", [3])),
    (lambda c: c.disconnect_node(nodeid=7), ("disconnectnode", ["", 7])),
    (lambda c: c.set_ban("10.0.0.0/24", "add"), ("setban", ["10.0.0.0/24", "add", 0])),
    (lambda c: c.get_memory_pool_content(), ("getrawmempool", [True])),
    (lambda c: c.prioritise_transaction("aa", 1000), ("prioritisetransaction", ["aa", 0, 1000])),
    (lambda c: c.send_many({"bcrt1qa": 0.1}),
     ("sendmany", ["", {"bcrt1qa": 0.1}, 0, "", [], False, 10])),
    (lambda c: c.send_to_address("bcrt1qa", 0.5),
     ("sendtoaddress", ["bcrt1qa", 0.5, "", "", False, False, 10, "UNSET"])),
    (lambda c: c.sign_raw_transaction_with_key("00", ["cPriv"]),
     ("signrawtransactionwithkey", ["00", ["cPriv"], []])),
    (lambda c: c.sign_raw_transaction_with_wallet("00", sighashtype="ALL"),
     ("signrawtransactionwithwallet", ["00", [], "ALL"])),
    (lambda c: c.get_block("ff", 2), ("getblock", ["ff", 2])),
    (lambda c: c.get_block("ff", 0), ("getblock", ["ff", 0])),
])
async def test_defaults_are_sent_and_unset_trailing_params_are_omitted(call, expected):
    recorder = Recorder()
    async with Client(URL, transport=httpx.MockTransport(recorder)) as client:
        await call(client)

    payload = recorder.payloads[0]
    assert (payload["method"], payload["params"]) == expected


@pytest.mark.asyncio
@pytest.mark.parametrize("call, expected", [
    (lambda c: c.send({"bcrt1qa": 1}, fee_rate=5), ("send", [{"bcrt1qa": 1}, None, None, 5])),
    (lambda c: c.send({"bcrt1qa": 1}, options={"add_to_wallet": False}),
     ("send", [{"bcrt1qa": 1}, None, None, None, {"add_to_wallet": False}])),
    (lambda c: c.send_all(["bcrt1qa"], estimate_mode="ECONOMICAL"),
     ("sendall", [["bcrt1qa"], None, "ECONOMICAL"])),
    (lambda c: c.wallet_process_psbt("cHNidP8", finalize=False),
     ("walletprocesspsbt", ["cHNidP8", None, None, None, False])),
    (lambda c: c.unload_wallet(load_on_startup=True), ("unloadwallet", [None, True])),
    (lambda c: c.create_wallet("w", load_on_startup=True),
     ("createwallet", ["w", False, False, "", False, None, True])),
    (lambda c: c.get_raw_transaction("aa", blockhash="bb"), ("getrawtransaction", ["aa", None, "bb"])),
    (lambda c: c.set_hd_seed(seed="cSeed"), ("sethdseed", [None, "cSeed"])),
    (lambda c: c.get_transaction("aa", verbose=True), ("gettransaction", ["aa", None, True])),
    (lambda c: c.list_received_by_address(address_filter="bcrt1qa"),
     ("listreceivedbyaddress", [1, False, None, "bcrt1qa"])),
    (lambda c: c.get_chain_tx_stats(blockhash="ff"), ("getchaintxstats", [None, "ff"])),
])
async def test_later_argument_keeps_its_slot_after_omitted_ones(call, expected):
    recorder = Recorder()
    async with Client(URL, transport=httpx.MockTransport(recorder)) as client:
        await call(client)

    payload = recorder.payloads[0]
    assert (payload["method"], payload["params"]) == expected


@pytest.mark.asyncio
async def test_result_is_returned_unmodified():
    result = {"txid": "aa", "vout": 1, "amount": 50.0, "spendable": True}
    recorder = Recorder(result=[result])
    async with Client(URL, transport=httpx.MockTransport(recorder)) as client:
        assert await client.list_unspent() == [result]


@pytest.mark.asyncio
async def test_wallet_client_is_typed_client():
    recorder = Recorder(result={"walletname": "alice"})
    async with Client(URL, transport=httpx.MockTransport(recorder)) as client:
        wallet_client = client.for_wallet("alice")
        assert isinstance(wallet_client, Client)
        info = await wallet_client.get_wallet_info()

    assert info["walletname"] == "alice"
