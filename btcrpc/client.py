"""Typed Bitcoin Core RPC surface.

Each method passes its wire name and positional parameters to
RPCClient.call. Optional parameters left as None at the end are not sent.
An omitted parameter followed by a given one is sent as null, which the
node reads as its default, so every value keeps its position.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from .constants import (
    DEFAULT_CHECK_LEVEL,
    DEFAULT_CONF_TARGET,
    DEFAULT_LIST_TRANSACTIONS_COUNT,
    DEFAULT_NETWORK_HASHPS_BLOCKS,
    MAX_CONFIRMATIONS,
)
from .rpc import RPCClient, fill_gaps
from .types import (
    AddedNodeInfo,
    AddressGrouping,
    AddressType,
    Balances,
    BannedEntry,
    Block,
    BlockFilter,
    BlockHeader,
    BumpFeeOption,
    BumpFeeResult,
    ChainInfo,
    ChainTip,
    CreateWalletResult,
    DecodedRawTransaction,
    DecodedScript,
    DescriptorInfo,
    EstimateSmartFeeResult,
    FeeEstimateMode,
    FetchedRawTransaction,
    FinalizedPsbt,
    FundRawTxOptions,
    FundRawTxResult,
    GetAddressInfoResult,
    ImportDescriptorRequest,
    ImportMultiRequest,
    ImportResult,
    ListSinceBlockResult,
    ListTransactionsResult,
    ListUnspentOptions,
    LoadWalletResult,
    MemoryStats,
    MempoolAcceptResult,
    MempoolContent,
    MempoolEntry,
    MempoolInfo,
    MiningInfo,
    MultiSigResult,
    NetTotals,
    NetworkInfo,
    NodeAddress,
    OutPoint,
    PeerInfo,
    PrevTxOut,
    PsbtResult,
    Received,
    ReceivedByAddress,
    RescanResult,
    RpcInfo,
    ScanTxOutSetResult,
    SendResult,
    SigHashType,
    SignRawTxResult,
    TxInForCreateRaw,
    TxOutForCreateRaw,
    TxOutInBlock,
    TxStats,
    UnloadWalletResult,
    UnspentTxInfo,
    UTXOStats,
    ValidateAddressResult,
    WaitForBlockResult,
    WalletDir,
    WalletInfo,
    WalletTransaction,
    ZmqNotification,
)


class Client(RPCClient):
    """Bitcoin Core RPC client with one coroutine per remote procedure."""

    async def _call(self, method: str, *params: Any) -> Any:
        return await self.call(method, *fill_gaps(params))

    # Control

    async def get_memory_info(self, mode: Optional[str] = None) -> Union[MemoryStats, str]:
        """Memory usage; mode is "stats" (default) or "mallocinfo"."""
        return await self._call("getmemoryinfo", mode)

    async def get_rpc_info(self) -> RpcInfo:
        return await self._call("getrpcinfo")

    async def help(self, command: Optional[str] = None) -> str:
        return await self._call("help", command)

    async def logging(
        self,
        include: Optional[Sequence[str]] = None,
        exclude: Optional[Sequence[str]] = None,
    ) -> Dict[str, bool]:
        """Get or set the logging categories enabled on the node."""
        return await self._call(
            "logging",
            list(include) if include is not None else None,
            list(exclude) if exclude is not None else None,
        )

    async def stop(self) -> str:
        return await self._call("stop")

    async def uptime(self) -> int:
        """Seconds since the node started."""
        return await self._call("uptime")

    # Blockchain

    async def get_best_block_hash(self) -> str:
        return await self._call("getbestblockhash")

    async def get_block(self, blockhash: str, verbosity: Optional[int] = None) -> Union[str, Block]:
        """
        Get a block.

        Args:
            blockhash: Block hash
            verbosity: 0 for hex, 1 for json with txids, 2 for json with
                       decoded transactions. Node default is 1.
        """
        return await self._call("getblock", blockhash, verbosity)

    async def get_blockchain_info(self) -> ChainInfo:
        return await self._call("getblockchaininfo")

    async def get_blockchain_information(self) -> ChainInfo:
        """Alias of get_blockchain_info."""
        return await self.get_blockchain_info()

    async def get_block_count(self) -> int:
        return await self._call("getblockcount")

    async def get_block_filter(self, blockhash: str, filtertype: Optional[str] = None) -> BlockFilter:
        return await self._call("getblockfilter", blockhash, filtertype)

    async def get_block_hash(self, height: int) -> str:
        return await self._call("getblockhash", height)

    async def get_block_header(self, blockhash: str, verbose: Optional[bool] = None) -> Union[str, BlockHeader]:
        return await self._call("getblockheader", blockhash, verbose)

    async def get_block_stats(
        self,
        hash_or_height: Union[str, int],
        stats: Optional[Sequence[str]] = None,
    ) -> Dict[str, Any]:
        return await self._call("getblockstats", hash_or_height, list(stats) if stats is not None else None)

    async def get_chain_tips(self) -> List[ChainTip]:
        return await self._call("getchaintips")

    async def get_chain_tx_stats(self, nblocks: Optional[int] = None, blockhash: Optional[str] = None) -> TxStats:
        return await self._call("getchaintxstats", nblocks, blockhash)

    async def get_deployment_info(self, blockhash: Optional[str] = None) -> Dict[str, Any]:
        return await self._call("getdeploymentinfo", blockhash)

    async def get_difficulty(self) -> float:
        return await self._call("getdifficulty")

    async def get_mempool_ancestors(
        self, txid: str, verbose: Optional[bool] = None
    ) -> Union[List[str], MempoolContent]:
        return await self._call("getmempoolancestors", txid, verbose)

    async def get_mempool_descendants(
        self, txid: str, verbose: Optional[bool] = None
    ) -> Union[List[str], MempoolContent]:
        return await self._call("getmempooldescendants", txid, verbose)

    async def get_mempool_entry(self, txid: str) -> MempoolEntry:
        return await self._call("getmempoolentry", txid)

    async def get_mempool_info(self) -> MempoolInfo:
        return await self._call("getmempoolinfo")

    async def get_memory_pool_information(self) -> MempoolInfo:
        """Alias of get_mempool_info."""
        return await self.get_mempool_info()

    async def get_raw_mempool(
        self,
        verbose: Optional[bool] = None,
        mempool_sequence: Optional[bool] = None,
    ) -> Union[List[str], MempoolContent, Dict[str, Any]]:
        return await self._call("getrawmempool", verbose, mempool_sequence)

    async def get_memory_pool_content(self) -> MempoolContent:
        """Verbose mempool listing keyed by txid."""
        return await self.get_raw_mempool(True)

    async def get_tx_out(self, txid: str, n: int, include_mempool: Optional[bool] = None) -> Optional[TxOutInBlock]:
        """Details about an unspent output, None when it is spent or unknown."""
        return await self._call("gettxout", txid, n, include_mempool)

    async def get_tx_out_proof(self, txids: Sequence[str], blockhash: Optional[str] = None) -> str:
        return await self._call("gettxoutproof", list(txids), blockhash)

    async def get_tx_out_set_info(
        self,
        hash_type: Optional[str] = None,
        hash_or_height: Optional[Union[str, int]] = None,
        use_index: Optional[bool] = None,
    ) -> UTXOStats:
        return await self._call("gettxoutsetinfo", hash_type, hash_or_height, use_index)

    async def get_tx_spending_prevout(self, outputs: Sequence[OutPoint]) -> List[Dict[str, Any]]:
        return await self._call("gettxspendingprevout", list(outputs))

    async def get_index_info(self, index_name: Optional[str] = None) -> Dict[str, Any]:
        return await self._call("getindexinfo", index_name)

    async def invalidate_block(self, blockhash: str) -> None:
        return await self._call("invalidateblock", blockhash)

    async def precious_block(self, blockhash: str) -> None:
        return await self._call("preciousblock", blockhash)

    async def prune_blockchain(self, height: int) -> int:
        """Prune up to height; returns the height of the last block pruned."""
        return await self._call("pruneblockchain", height)

    async def reconsider_block(self, blockhash: str) -> None:
        return await self._call("reconsiderblock", blockhash)

    async def save_mempool(self) -> Dict[str, str]:
        return await self._call("savemempool")

    async def scan_tx_out_set(
        self,
        action: str,
        scanobjects: Optional[Sequence[Union[str, Dict[str, Any]]]] = None,
    ) -> Union[ScanTxOutSetResult, bool, Dict[str, Any]]:
        """Scan the UTXO set; action is "start", "abort" or "status"."""
        return await self._call("scantxoutset", action, list(scanobjects) if scanobjects is not None else None)

    async def verify_chain(self, checklevel: int = DEFAULT_CHECK_LEVEL, nblocks: Optional[int] = None) -> bool:
        return await self._call("verifychain", checklevel, nblocks)

    async def verify_tx_out_proof(self, proof: str) -> List[str]:
        return await self._call("verifytxoutproof", proof)

    async def wait_for_block(self, blockhash: str, timeout: Optional[int] = None) -> WaitForBlockResult:
        return await self._call("waitforblock", blockhash, timeout)

    async def wait_for_block_height(self, height: int, timeout: Optional[int] = None) -> WaitForBlockResult:
        return await self._call("waitforblockheight", height, timeout)

    async def wait_for_new_block(self, timeout: Optional[int] = None) -> WaitForBlockResult:
        return await self._call("waitfornewblock", timeout)

    # Mining

    async def generate_block(
        self,
        output: str,
        transactions: Sequence[str],
        submit: Optional[bool] = None,
    ) -> Dict[str, str]:
        return await self._call("generateblock", output, list(transactions), submit)

    async def generate_to_address(self, nblocks: int, address: str, maxtries: Optional[int] = None) -> List[str]:
        """Mine blocks to address (regtest); returns the new block hashes."""
        return await self._call("generatetoaddress", nblocks, address, maxtries)

    async def generate_to_descriptor(
        self, num_blocks: int, descriptor: str, maxtries: Optional[int] = None
    ) -> List[str]:
        return await self._call("generatetodescriptor", num_blocks, descriptor, maxtries)

    async def get_block_template(self, template_request: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._call("getblocktemplate", template_request)

    async def get_mining_info(self) -> MiningInfo:
        return await self._call("getmininginfo")

    async def get_network_hashps(
        self,
        nblocks: int = DEFAULT_NETWORK_HASHPS_BLOCKS,
        height: Optional[int] = None,
    ) -> float:
        return await self._call("getnetworkhashps", nblocks, height)

    async def get_prioritised_transactions(self) -> Dict[str, Any]:
        return await self._call("getprioritisedtransactions")

    async def prioritise_transaction(self, txid: str, fee_delta: int, dummy: int = 0) -> bool:
        """Adjust the mining priority of a mempool transaction by fee_delta satoshis."""
        return await self._call("prioritisetransaction", txid, dummy, fee_delta)

    async def submit_block(self, hexdata: str, dummy: Optional[str] = None) -> Optional[str]:
        return await self._call("submitblock", hexdata, dummy)

    async def submit_header(self, hexdata: str) -> None:
        return await self._call("submitheader", hexdata)

    # Network

    async def add_node(self, node: str, command: str) -> None:
        """command is "add", "remove" or "onetry"."""
        return await self._call("addnode", node, command)

    async def add_peer_address(self, address: str, port: int, tried: Optional[bool] = None) -> Dict[str, bool]:
        return await self._call("addpeeraddress", address, port, tried)

    async def clear_banned(self) -> None:
        return await self._call("clearbanned")

    async def disconnect_node(self, address: str = "", nodeid: Optional[int] = None) -> None:
        return await self._call("disconnectnode", address, nodeid)

    async def get_added_node_info(self, node: Optional[str] = None) -> List[AddedNodeInfo]:
        return await self._call("getaddednodeinfo", node)

    async def get_connection_count(self) -> int:
        return await self._call("getconnectioncount")

    async def get_net_totals(self) -> NetTotals:
        return await self._call("getnettotals")

    async def get_network_info(self) -> NetworkInfo:
        return await self._call("getnetworkinfo")

    async def get_node_addresses(self, count: Optional[int] = None, network: Optional[str] = None) -> List[NodeAddress]:
        return await self._call("getnodeaddresses", count, network)

    async def get_peer_info(self) -> List[PeerInfo]:
        return await self._call("getpeerinfo")

    async def list_banned(self) -> List[BannedEntry]:
        return await self._call("listbanned")

    async def ping(self) -> None:
        return await self._call("ping")

    async def set_ban(
        self,
        subnet: str,
        command: str,
        bantime: int = 0,
        absolute: Optional[bool] = None,
    ) -> None:
        return await self._call("setban", subnet, command, bantime, absolute)

    async def set_network_active(self, state: bool) -> bool:
        return await self._call("setnetworkactive", state)

    # Raw transactions and PSBTs

    async def analyze_psbt(self, psbt: str) -> Dict[str, Any]:
        return await self._call("analyzepsbt", psbt)

    async def combine_psbt(self, txs: Sequence[str]) -> str:
        return await self._call("combinepsbt", list(txs))

    async def combine_raw_transaction(self, txs: Sequence[str]) -> str:
        return await self._call("combinerawtransaction", list(txs))

    async def convert_to_psbt(
        self,
        hexstring: str,
        permitsigdata: Optional[bool] = None,
        iswitness: Optional[bool] = None,
    ) -> str:
        return await self._call("converttopsbt", hexstring, permitsigdata, iswitness)

    async def create_psbt(
        self,
        inputs: Sequence[TxInForCreateRaw],
        outputs: Union[TxOutForCreateRaw, Sequence[TxOutForCreateRaw]],
        locktime: Optional[int] = None,
        replaceable: Optional[bool] = None,
    ) -> str:
        return await self._call("createpsbt", list(inputs), outputs, locktime, replaceable)

    async def create_raw_transaction(
        self,
        inputs: Sequence[TxInForCreateRaw],
        outputs: Union[TxOutForCreateRaw, Sequence[TxOutForCreateRaw]],
        locktime: Optional[int] = None,
        replaceable: Optional[bool] = None,
    ) -> str:
        """Create an unsigned transaction spending inputs to outputs; returns hex."""
        return await self._call("createrawtransaction", list(inputs), outputs, locktime, replaceable)

    async def decode_psbt(self, psbt: str) -> Dict[str, Any]:
        return await self._call("decodepsbt", psbt)

    async def decode_raw_transaction(self, hexstring: str, iswitness: Optional[bool] = None) -> DecodedRawTransaction:
        return await self._call("decoderawtransaction", hexstring, iswitness)

    async def decode_script(self, hexstring: str) -> DecodedScript:
        return await self._call("decodescript", hexstring)

    async def descriptor_process_psbt(
        self,
        psbt: str,
        descriptors: Sequence[Union[str, Dict[str, Any]]],
        sighashtype: Optional[SigHashType] = None,
        bip32derivs: Optional[bool] = None,
        finalize: Optional[bool] = None,
    ) -> PsbtResult:
        return await self._call("descriptorprocesspsbt", psbt, list(descriptors), sighashtype, bip32derivs, finalize)

    async def finalize_psbt(self, psbt: str, extract: Optional[bool] = None) -> FinalizedPsbt:
        return await self._call("finalizepsbt", psbt, extract)

    async def fund_raw_transaction(
        self,
        hexstring: str,
        options: Optional[FundRawTxOptions] = None,
    ) -> FundRawTxResult:
        return await self._call("fundrawtransaction", hexstring, options)

    async def get_raw_transaction(
        self,
        txid: str,
        verbose: Optional[bool] = None,
        blockhash: Optional[str] = None,
    ) -> Union[str, FetchedRawTransaction]:
        return await self._call("getrawtransaction", txid, verbose, blockhash)

    async def join_psbts(self, txs: Sequence[str]) -> str:
        return await self._call("joinpsbts", list(txs))

    async def send_raw_transaction(self, hexstring: str, maxfeerate: Optional[Union[float, str]] = None) -> str:
        """Broadcast a signed transaction; returns its txid."""
        return await self._call("sendrawtransaction", hexstring, maxfeerate)

    async def sign_raw_transaction_with_key(
        self,
        hexstring: str,
        privkeys: Sequence[str] = (),
        prevtxs: Sequence[PrevTxOut] = (),
        sighashtype: Optional[SigHashType] = None,
    ) -> SignRawTxResult:
        return await self._call("signrawtransactionwithkey", hexstring, list(privkeys), list(prevtxs), sighashtype)

    async def test_mempool_accept(
        self,
        rawtxs: Sequence[str],
        maxfeerate: Optional[Union[float, str]] = None,
    ) -> List[MempoolAcceptResult]:
        return await self._call("testmempoolaccept", list(rawtxs), maxfeerate)

    async def utxo_update_psbt(
        self,
        psbt: str,
        descriptors: Optional[Sequence[Union[str, Dict[str, Any]]]] = None,
    ) -> str:
        return await self._call("utxoupdatepsbt", psbt, list(descriptors) if descriptors is not None else None)

    # Utility

    async def create_multisig(
        self,
        nrequired: int,
        keys: Sequence[str],
        address_type: Optional[AddressType] = None,
    ) -> MultiSigResult:
        return await self._call("createmultisig", nrequired, list(keys), address_type)

    async def derive_addresses(self, descriptor: str, range: Optional[Union[int, Sequence[int]]] = None) -> List[str]:
        if range is not None and not isinstance(range, int):
            range = list(range)
        return await self._call("deriveaddresses", descriptor, range)

    async def estimate_fee(self, nblocks: int) -> float:
        """Legacy fee estimate, removed from recent nodes; prefer estimate_smart_fee."""
        return await self._call("estimatefee", nblocks)

    async def estimate_raw_fee(self, conf_target: int, threshold: Optional[float] = None) -> Dict[str, Any]:
        return await self._call("estimaterawfee", conf_target, threshold)

    async def estimate_smart_fee(
        self,
        conf_target: int,
        estimate_mode: Optional[FeeEstimateMode] = None,
    ) -> EstimateSmartFeeResult:
        return await self._call("estimatesmartfee", conf_target, estimate_mode)

    async def get_descriptor_info(self, descriptor: str) -> DescriptorInfo:
        return await self._call("getdescriptorinfo", descriptor)

    async def get_zmq_notifications(self) -> List[ZmqNotification]:
        return await self._call("getzmqnotifications")

    async def sign_message_with_priv_key(self, privkey: str, message: str) -> str:
        return await self._call("signmessagewithprivkey", privkey, message)

    async def validate_address(self, address: str) -> ValidateAddressResult:
        return await self._call("validateaddress", address)

    async def verify_message(self, address: str, signature: str, message: str) -> bool:
        return await self._call("verifymessage", address, signature, message)

    # Wallet

    async def abandon_transaction(self, txid: str) -> None:
        return await self._call("abandontransaction", txid)

    async def abort_rescan(self) -> bool:
        return await self._call("abortrescan")

    async def add_multisig_address(
        self,
        nrequired: int,
        keys: Sequence[str],
        label: str = "",
        address_type: Optional[AddressType] = None,
    ) -> MultiSigResult:
        return await self._call("addmultisigaddress", nrequired, list(keys), label, address_type)

    async def backup_wallet(self, destination: str) -> None:
        return await self._call("backupwallet", destination)

    async def bump_fee(self, txid: str, options: Optional[BumpFeeOption] = None) -> BumpFeeResult:
        return await self._call("bumpfee", txid, options)

    async def create_wallet(
        self,
        wallet_name: str,
        disable_private_keys: bool = False,
        blank: bool = False,
        passphrase: str = "",
        avoid_reuse: bool = False,
        descriptors: Optional[bool] = None,
        load_on_startup: Optional[bool] = None,
    ) -> CreateWalletResult:
        """
        Create and load a new wallet.

        An empty passphrase leaves the wallet unencrypted and the node
        reports that in the result's warning.
        """
        return await self._call(
            "createwallet",
            wallet_name,
            disable_private_keys,
            blank,
            passphrase,
            avoid_reuse,
            descriptors,
            load_on_startup,
        )

    async def dump_priv_key(self, address: str) -> str:
        return await self._call("dumpprivkey", address)

    async def dump_wallet(self, filename: str) -> Dict[str, str]:
        return await self._call("dumpwallet", filename)

    async def encrypt_wallet(self, passphrase: str) -> str:
        return await self._call("encryptwallet", passphrase)

    async def get_addresses_by_label(self, label: str) -> Dict[str, Dict[str, str]]:
        return await self._call("getaddressesbylabel", label)

    async def get_address_info(self, address: str) -> GetAddressInfoResult:
        return await self._call("getaddressinfo", address)

    async def get_balance(
        self,
        dummy: str = "*",
        minconf: int = 0,
        include_watchonly: bool = True,
        avoid_reuse: Optional[bool] = None,
    ) -> float:
        return await self._call("getbalance", dummy, minconf, include_watchonly, avoid_reuse)

    async def get_balances(self) -> Balances:
        return await self._call("getbalances")

    async def get_new_address(self, label: str = "", address_type: Optional[AddressType] = None) -> str:
        return await self._call("getnewaddress", label, address_type)

    async def get_raw_change_address(self, address_type: Optional[AddressType] = None) -> str:
        return await self._call("getrawchangeaddress", address_type)

    async def get_received_by_address(self, address: str, minconf: Optional[int] = None) -> float:
        return await self._call("getreceivedbyaddress", address, minconf)

    async def get_received_by_label(self, label: str, minconf: Optional[int] = None) -> float:
        return await self._call("getreceivedbylabel", label, minconf)

    async def get_transaction(
        self,
        txid: str,
        include_watchonly: Optional[bool] = None,
        verbose: Optional[bool] = None,
    ) -> WalletTransaction:
        return await self._call("gettransaction", txid, include_watchonly, verbose)

    async def get_unconfirmed_balance(self) -> float:
        return await self._call("getunconfirmedbalance")

    async def get_wallet_info(self) -> WalletInfo:
        return await self._call("getwalletinfo")

    async def import_address(
        self,
        address: str,
        label: str = "",
        rescan: bool = True,
        p2sh: Optional[bool] = None,
    ) -> None:
        """Watch an address or script (legacy wallets)."""
        return await self._call("importaddress", address, label, rescan, p2sh)

    async def import_descriptors(self, requests: Sequence[ImportDescriptorRequest]) -> List[ImportResult]:
        return await self._call("importdescriptors", list(requests))

    async def import_multi(
        self,
        requests: Sequence[ImportMultiRequest],
        options: Optional[Dict[str, bool]] = None,
    ) -> List[ImportResult]:
        return await self._call("importmulti", list(requests), options)

    async def import_priv_key(self, privkey: str, label: str = "", rescan: Optional[bool] = None) -> None:
        return await self._call("importprivkey", privkey, label, rescan)

    async def import_pruned_funds(self, rawtransaction: str, txoutproof: str) -> None:
        return await self._call("importprunedfunds", rawtransaction, txoutproof)

    async def import_pub_key(self, pubkey: str, label: str = "", rescan: Optional[bool] = None) -> None:
        return await self._call("importpubkey", pubkey, label, rescan)

    async def import_wallet(self, filename: str) -> None:
        return await self._call("importwallet", filename)

    async def keypool_refill(self, newsize: Optional[int] = None) -> None:
        return await self._call("keypoolrefill", newsize)

    async def list_address_groupings(self) -> List[List[AddressGrouping]]:
        return await self._call("listaddressgroupings")

    async def list_descriptors(self, private: Optional[bool] = None) -> Dict[str, Any]:
        return await self._call("listdescriptors", private)

    async def list_labels(self, purpose: Optional[str] = None) -> List[str]:
        return await self._call("listlabels", purpose)

    async def list_lock_unspent(self) -> List[OutPoint]:
        return await self._call("listlockunspent")

    async def list_received_by_address(
        self,
        minconf: int = 1,
        include_empty: bool = False,
        include_watchonly: Optional[bool] = None,
        address_filter: Optional[str] = None,
    ) -> List[ReceivedByAddress]:
        return await self._call(
            "listreceivedbyaddress",
            minconf,
            include_empty,
            include_watchonly,
            address_filter,
        )

    async def list_received_by_label(
        self,
        minconf: int = 1,
        include_empty: bool = False,
        include_watchonly: Optional[bool] = None,
    ) -> List[Received]:
        return await self._call("listreceivedbylabel", minconf, include_empty, include_watchonly)

    async def list_since_block(
        self,
        blockhash: str = "",
        target_confirmations: int = 1,
        include_watchonly: bool = False,
        include_removed: Optional[bool] = None,
    ) -> ListSinceBlockResult:
        return await self._call(
            "listsinceblock",
            blockhash,
            target_confirmations,
            include_watchonly,
            include_removed,
        )

    async def list_transactions(
        self,
        label: str = "*",
        count: int = DEFAULT_LIST_TRANSACTIONS_COUNT,
        skip: int = 0,
        include_watchonly: Optional[bool] = None,
    ) -> List[ListTransactionsResult]:
        return await self._call("listtransactions", label, count, skip, include_watchonly)

    async def list_unspent(
        self,
        minconf: int = 1,
        maxconf: int = MAX_CONFIRMATIONS,
        addresses: Sequence[str] = (),
        include_unsafe: bool = True,
        query_options: Optional[ListUnspentOptions] = None,
    ) -> List[UnspentTxInfo]:
        return await self._call(
            "listunspent",
            minconf,
            maxconf,
            list(addresses),
            include_unsafe,
            query_options,
        )

    async def list_wallet_dir(self) -> WalletDir:
        return await self._call("listwalletdir")

    async def list_wallets(self) -> List[str]:
        return await self._call("listwallets")

    async def load_wallet(self, filename: str, load_on_startup: Optional[bool] = None) -> LoadWalletResult:
        return await self._call("loadwallet", filename, load_on_startup)

    async def lock_unspent(self, unlock: bool, transactions: Optional[Sequence[OutPoint]] = None) -> bool:
        """
        Lock (unlock=False) or unlock (unlock=True) outputs.

        Without transactions, unlock=True releases every locked output.
        """
        return await self._call(
            "lockunspent",
            unlock,
            list(transactions) if transactions is not None else None,
        )

    async def new_keypool(self) -> None:
        return await self._call("newkeypool")

    async def psbt_bump_fee(self, txid: str, options: Optional[BumpFeeOption] = None) -> BumpFeeResult:
        return await self._call("psbtbumpfee", txid, options)

    async def remove_pruned_funds(self, txid: str) -> None:
        return await self._call("removeprunedfunds", txid)

    async def rescan_blockchain(
        self,
        start_height: Optional[int] = None,
        stop_height: Optional[int] = None,
    ) -> RescanResult:
        return await self._call("rescanblockchain", start_height, stop_height)

    async def restore_wallet(
        self,
        wallet_name: str,
        backup_file: str,
        load_on_startup: Optional[bool] = None,
    ) -> LoadWalletResult:
        return await self._call("restorewallet", wallet_name, backup_file, load_on_startup)

    async def send(
        self,
        outputs: Union[Dict[str, Any], Sequence[Dict[str, Any]]],
        conf_target: Optional[int] = None,
        estimate_mode: Optional[FeeEstimateMode] = None,
        fee_rate: Optional[float] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> SendResult:
        return await self._call("send", outputs, conf_target, estimate_mode, fee_rate, options)

    async def send_all(
        self,
        recipients: Sequence[Union[str, Dict[str, Any]]],
        conf_target: Optional[int] = None,
        estimate_mode: Optional[FeeEstimateMode] = None,
        fee_rate: Optional[float] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> SendResult:
        return await self._call("sendall", list(recipients), conf_target, estimate_mode, fee_rate, options)

    async def send_many(
        self,
        amounts: Dict[str, Union[float, str]],
        minconf: int = 0,
        comment: str = "",
        subtractfeefrom: Sequence[str] = (),
        replaceable: bool = False,
        conf_target: int = DEFAULT_CONF_TARGET,
        estimate_mode: Optional[FeeEstimateMode] = None,
        dummy: str = "",
    ) -> str:
        """Send to multiple addresses in one transaction; returns the txid."""
        return await self._call(
            "sendmany",
            dummy,
            amounts,
            minconf,
            comment,
            list(subtractfeefrom),
            replaceable,
            conf_target,
            estimate_mode,
        )

    async def send_to_address(
        self,
        address: str,
        amount: Union[float, str],
        comment: str = "",
        comment_to: str = "",
        subtractfeefromamount: bool = False,
        replaceable: bool = False,
        conf_target: int = DEFAULT_CONF_TARGET,
        estimate_mode: FeeEstimateMode = "UNSET",
        avoid_reuse: Optional[bool] = None,
    ) -> str:
        return await self._call(
            "sendtoaddress",
            address,
            amount,
            comment,
            comment_to,
            subtractfeefromamount,
            replaceable,
            conf_target,
            estimate_mode,
            avoid_reuse,
        )

    async def set_hd_seed(self, newkeypool: Optional[bool] = None, seed: Optional[str] = None) -> None:
        return await self._call("sethdseed", newkeypool, seed)

    async def set_label(self, address: str, label: str) -> None:
        return await self._call("setlabel", address, label)

    async def set_tx_fee(self, amount: Union[float, str]) -> bool:
        return await self._call("settxfee", amount)

    async def set_wallet_flag(self, flag: str, value: Optional[bool] = None) -> Dict[str, Any]:
        return await self._call("setwalletflag", flag, value)

    async def sign_message(self, address: str, message: str) -> str:
        return await self._call("signmessage", address, message)

    async def sign_raw_transaction_with_wallet(
        self,
        hexstring: str,
        prevtxs: Sequence[PrevTxOut] = (),
        sighashtype: Optional[SigHashType] = None,
    ) -> SignRawTxResult:
        return await self._call("signrawtransactionwithwallet", hexstring, list(prevtxs), sighashtype)

    async def simulate_raw_transaction(
        self,
        rawtxs: Optional[Sequence[str]] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, float]:
        return await self._call(
            "simulaterawtransaction",
            list(rawtxs) if rawtxs is not None else None,
            options,
        )

    async def unload_wallet(
        self,
        wallet_name: Optional[str] = None,
        load_on_startup: Optional[bool] = None,
    ) -> UnloadWalletResult:
        return await self._call("unloadwallet", wallet_name, load_on_startup)

    async def upgrade_wallet(self, version: Optional[int] = None) -> Dict[str, Any]:
        return await self._call("upgradewallet", version)

    async def wallet_create_funded_psbt(
        self,
        inputs: Sequence[TxInForCreateRaw],
        outputs: Union[TxOutForCreateRaw, Sequence[TxOutForCreateRaw]],
        locktime: Optional[int] = None,
        options: Optional[FundRawTxOptions] = None,
        bip32derivs: Optional[bool] = None,
    ) -> PsbtResult:
        return await self._call("walletcreatefundedpsbt", list(inputs), outputs, locktime, options, bip32derivs)

    async def wallet_lock(self) -> None:
        return await self._call("walletlock")

    async def wallet_passphrase(self, passphrase: str, timeout: int) -> None:
        """Unlock the wallet for timeout seconds."""
        return await self._call("walletpassphrase", passphrase, timeout)

    async def wallet_passphrase_change(self, oldpassphrase: str, newpassphrase: str) -> None:
        return await self._call("walletpassphrasechange", oldpassphrase, newpassphrase)

    async def wallet_process_psbt(
        self,
        psbt: str,
        sign: Optional[bool] = None,
        sighashtype: Optional[SigHashType] = None,
        bip32derivs: Optional[bool] = None,
        finalize: Optional[bool] = None,
    ) -> PsbtResult:
        return await self._call("walletprocesspsbt", psbt, sign, sighashtype, bip32derivs, finalize)
