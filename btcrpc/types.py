"""Argument and result shapes for the typed Bitcoin Core RPC surface.

These are declarations only. Results are returned as decoded JSON and are
never validated against them.
"""

from typing import Any, Dict, List, Literal, Tuple, TypedDict, Union

# Type aliases

AddressType = Literal["legacy", "p2sh-segwit", "bech32", "bech32m"]

Bip125Replaceable = Literal["yes", "no", "unknown"]

BitcoinNetwork = Literal["main", "test", "testnet4", "signet", "regtest"]

FeeEstimateMode = Literal["UNSET", "ECONOMICAL", "CONSERVATIVE"]

SigHashType = Literal[
    "ALL",
    "NONE",
    "SINGLE",
    "ALL|ANYONECANPAY",
    "NONE|ANYONECANPAY",
    "SINGLE|ANYONECANPAY",
]

AddressGrouping = Union[Tuple[str, float], Tuple[str, float, str]]


# Argument shapes

class OutPoint(TypedDict):
    txid: str
    vout: int


class TxInForCreateRaw(TypedDict, total=False):
    txid: str
    vout: int
    sequence: int


TxOutForCreateRaw = Dict[str, Union[float, str]]


class BumpFeeOption(TypedDict, total=False):
    conf_target: int
    fee_rate: float
    replaceable: bool
    estimate_mode: FeeEstimateMode
    outputs: List[Dict[str, Any]]


class FundRawTxOptions(TypedDict, total=False):
    add_inputs: bool
    changeAddress: str
    changePosition: int
    change_type: AddressType
    includeWatching: bool
    lockUnspents: bool
    fee_rate: float
    feeRate: float
    subtractFeeFromOutputs: List[int]
    replaceable: bool
    conf_target: int
    estimate_mode: FeeEstimateMode


class ImportMultiRequest(TypedDict, total=False):
    desc: str
    scriptPubKey: Union[str, Dict[str, str]]
    timestamp: Union[int, Literal["now"]]
    redeemscript: str
    witnessscript: str
    pubkeys: List[str]
    keys: List[str]
    range: Union[int, List[int]]
    internal: bool
    watchonly: bool
    label: str
    keypool: bool


class ImportDescriptorRequest(TypedDict, total=False):
    desc: str
    active: bool
    range: Union[int, List[int]]
    next_index: int
    timestamp: Union[int, Literal["now"]]
    internal: bool
    label: str


class ListUnspentOptions(TypedDict, total=False):
    minimumAmount: Union[float, str]
    maximumAmount: Union[float, str]
    maximumCount: int
    minimumSumAmount: Union[float, str]


class PrevTxOut(TypedDict, total=False):
    txid: str
    vout: int
    scriptPubKey: str
    redeemScript: str
    witnessScript: str
    amount: float


# Result shapes

class ScriptPubKey(TypedDict, total=False):
    asm: str
    desc: str
    hex: str
    type: str
    address: str
    reqSigs: int
    addresses: List[str]


class TxIn(TypedDict, total=False):
    txid: str
    vout: int
    coinbase: str
    scriptSig: Dict[str, str]
    txinwitness: List[str]
    sequence: int


class TxOut(TypedDict):
    value: float
    n: int
    scriptPubKey: ScriptPubKey


class Transaction(TypedDict, total=False):
    txid: str
    hash: str
    version: int
    size: int
    vsize: int
    weight: int
    locktime: int
    vin: List[TxIn]
    vout: List[TxOut]
    hex: str


DecodedRawTransaction = Transaction


class FetchedRawTransaction(Transaction, total=False):
    blockhash: str
    confirmations: int
    time: int
    blocktime: int
    in_active_chain: bool


class AddedNodeAddress(TypedDict):
    address: str
    connected: Literal["inbound", "outbound"]


class AddedNodeInfo(TypedDict):
    addednode: str
    connected: bool
    addresses: List[AddedNodeAddress]


class Block(TypedDict, total=False):
    hash: str
    confirmations: int
    strippedsize: int
    size: int
    weight: int
    height: int
    version: int
    versionHex: str
    merkleroot: str
    tx: Union[List[Transaction], List[str]]
    time: int
    mediantime: int
    nonce: int
    bits: str
    difficulty: float
    chainwork: str
    nTx: int
    previousblockhash: str
    nextblockhash: str


class BlockHeader(TypedDict, total=False):
    hash: str
    confirmations: int
    height: int
    version: int
    versionHex: str
    merkleroot: str
    time: int
    mediantime: int
    nonce: int
    bits: str
    difficulty: float
    chainwork: str
    nTx: int
    previousblockhash: str
    nextblockhash: str


class ChainInfo(TypedDict, total=False):
    chain: BitcoinNetwork
    blocks: int
    headers: int
    bestblockhash: str
    difficulty: float
    time: int
    mediantime: int
    verificationprogress: float
    initialblockdownload: bool
    chainwork: str
    size_on_disk: int
    pruned: bool
    pruneheight: int
    automatic_pruning: bool
    prune_target_size: int
    softforks: Dict[str, Any]
    warnings: Union[str, List[str]]


class ChainTip(TypedDict):
    height: int
    hash: str
    branchlen: int
    status: Literal["active", "valid-fork", "valid-headers", "headers-only", "invalid"]


class CreateWalletResult(TypedDict, total=False):
    name: str
    warning: str
    warnings: List[str]


LoadWalletResult = CreateWalletResult


class EstimateSmartFeeResult(TypedDict, total=False):
    feerate: float
    errors: List[str]
    blocks: int


class BumpFeeResult(TypedDict, total=False):
    txid: str
    psbt: str
    origfee: float
    fee: float
    errors: List[str]


class FundRawTxResult(TypedDict):
    hex: str
    fee: float
    changepos: int


class MultiSigResult(TypedDict, total=False):
    address: str
    redeemScript: str
    descriptor: str


class AddressLabel(TypedDict):
    name: str
    purpose: Literal["send", "receive"]


class GetAddressInfoResult(TypedDict, total=False):
    address: str
    scriptPubKey: str
    ismine: bool
    iswatchonly: bool
    solvable: bool
    desc: str
    parent_desc: str
    isscript: bool
    ischange: bool
    iswitness: bool
    witness_version: int
    witness_program: str
    script: str
    hex: str
    pubkeys: List[str]
    sigsrequired: int
    pubkey: str
    embedded: Dict[str, Any]
    iscompressed: bool
    label: str
    timestamp: int
    hdkeypath: str
    hdseedid: str
    hdmasterfingerprint: str
    labels: List[Union[str, AddressLabel]]


WalletTxBase = TypedDict(
    "WalletTxBase",
    {
        "address": str,
        "category": Literal["send", "receive", "generate", "immature", "orphan"],
        "amount": float,
        "vout": int,
        "fee": float,
        "confirmations": int,
        "blockhash": str,
        "blockindex": int,
        "blocktime": int,
        "txid": str,
        "time": int,
        "timereceived": int,
        "walletconflicts": List[str],
        "bip125-replaceable": Bip125Replaceable,
        "abandoned": bool,
        "comment": str,
        "label": str,
        "to": str,
    },
    total=False,
)


class ListTransactionsResult(WalletTxBase, total=False):
    trusted: bool
    involvesWatchonly: bool


class ListSinceBlockResult(TypedDict, total=False):
    transactions: List[WalletTxBase]
    removed: List[WalletTxBase]
    lastblock: str


class WalletTransactionDetail(TypedDict, total=False):
    address: str
    category: str
    amount: float
    label: str
    vout: int
    fee: float
    abandoned: bool


WalletTransaction = TypedDict(
    "WalletTransaction",
    {
        "amount": float,
        "fee": float,
        "confirmations": int,
        "blockhash": str,
        "blockindex": int,
        "blocktime": int,
        "txid": str,
        "time": int,
        "timereceived": int,
        "bip125-replaceable": Bip125Replaceable,
        "details": List[WalletTransactionDetail],
        "hex": str,
        "decoded": Transaction,
    },
    total=False,
)


class BannedEntry(TypedDict, total=False):
    address: str
    ban_created: int
    banned_until: int
    ban_duration: int
    time_remaining: int


class LockedMemoryStats(TypedDict):
    used: int
    free: int
    total: int
    locked: int
    chunks_used: int
    chunks_free: int


class MemoryStats(TypedDict):
    locked: LockedMemoryStats


class MempoolFees(TypedDict, total=False):
    base: float
    modified: float
    ancestor: float
    descendant: float


class MempoolEntry(TypedDict, total=False):
    vsize: int
    weight: int
    time: int
    height: int
    descendantcount: int
    descendantsize: int
    ancestorcount: int
    ancestorsize: int
    wtxid: str
    fees: MempoolFees
    depends: List[str]
    spentby: List[str]
    bip125_replaceable: bool
    unbroadcast: bool


MempoolContent = Dict[str, MempoolEntry]


class MempoolInfo(TypedDict, total=False):
    loaded: bool
    size: int
    bytes: int
    usage: int
    total_fee: float
    maxmempool: int
    mempoolminfee: float
    minrelaytxfee: float
    unbroadcastcount: int


class MiningInfo(TypedDict, total=False):
    blocks: int
    currentblockweight: int
    currentblocktx: int
    difficulty: float
    networkhashps: float
    pooledtx: int
    chain: BitcoinNetwork
    warnings: Union[str, List[str]]


class UploadTarget(TypedDict, total=False):
    timeframe: int
    target: int
    target_reached: bool
    serve_historical_blocks: bool
    bytes_left_in_cycle: int
    time_left_in_cycle: int


class NetTotals(TypedDict):
    totalbytesrecv: int
    totalbytessent: int
    timemillis: int
    uploadtarget: UploadTarget


class Network(TypedDict, total=False):
    name: str
    limited: bool
    reachable: bool
    proxy: str
    proxy_randomize_credentials: bool


class LocalAddress(TypedDict):
    address: str
    port: int
    score: int


class NetworkInfo(TypedDict, total=False):
    version: int
    subversion: str
    protocolversion: int
    localservices: str
    localservicesnames: List[str]
    localrelay: bool
    timeoffset: int
    connections: int
    connections_in: int
    connections_out: int
    networkactive: bool
    networks: List[Network]
    relayfee: float
    incrementalfee: float
    localaddresses: List[LocalAddress]
    warnings: Union[str, List[str]]


class PeerInfo(TypedDict, total=False):
    id: int
    addr: str
    addrbind: str
    addrlocal: str
    network: str
    services: str
    relaytxes: bool
    lastsend: int
    lastrecv: int
    bytessent: int
    bytesrecv: int
    conntime: int
    timeoffset: int
    pingtime: float
    minping: float
    version: int
    subver: str
    inbound: bool
    connection_type: str
    startingheight: int
    synced_headers: int
    synced_blocks: int
    inflight: List[int]
    bytessent_per_msg: Dict[str, int]
    bytesrecv_per_msg: Dict[str, int]


class Received(TypedDict, total=False):
    involvesWatchonly: bool
    amount: float
    confirmations: int
    label: str


class ReceivedByAddress(Received, total=False):
    address: str
    txids: List[str]


class DecodedScript(TypedDict, total=False):
    asm: str
    desc: str
    type: str
    address: str
    p2sh: str
    segwit: Dict[str, Any]


ScriptDecoded = DecodedScript


class SignRawTxError(TypedDict):
    txid: str
    vout: int
    scriptSig: str
    sequence: int
    error: str


class SignRawTxResult(TypedDict, total=False):
    hex: str
    complete: bool
    errors: List[SignRawTxError]


class TxOutInBlock(TypedDict, total=False):
    bestblock: str
    confirmations: int
    value: float
    scriptPubKey: ScriptPubKey
    coinbase: bool


class TxStats(TypedDict, total=False):
    time: int
    txcount: int
    window_final_block_hash: str
    window_final_block_height: int
    window_block_count: int
    window_tx_count: int
    window_interval: int
    txrate: float


class UnspentTxInfo(TypedDict, total=False):
    txid: str
    vout: int
    address: str
    label: str
    scriptPubKey: str
    amount: float
    confirmations: int
    redeemScript: str
    witnessScript: str
    spendable: bool
    solvable: bool
    desc: str
    safe: bool


class UTXOStats(TypedDict, total=False):
    height: int
    bestblock: str
    txouts: int
    bogosize: int
    hash_serialized_3: str
    muhash: str
    disk_size: int
    total_amount: float


class ValidateAddressResult(TypedDict, total=False):
    isvalid: bool
    address: str
    scriptPubKey: str
    isscript: bool
    iswitness: bool
    witness_version: int
    witness_program: str
    error: str
    error_locations: List[int]


class WalletScanning(TypedDict):
    duration: int
    progress: float


class WalletInfo(TypedDict, total=False):
    walletname: str
    walletversion: int
    format: str
    balance: float
    unconfirmed_balance: float
    immature_balance: float
    txcount: int
    keypoololdest: int
    keypoolsize: int
    keypoolsize_hd_internal: int
    unlocked_until: int
    paytxfee: float
    hdseedid: str
    private_keys_enabled: bool
    avoid_reuse: bool
    scanning: Union[WalletScanning, Literal[False]]
    descriptors: bool
    external_signer: bool


class BalanceDetail(TypedDict, total=False):
    trusted: float
    untrusted_pending: float
    immature: float
    used: float


class Balances(TypedDict, total=False):
    mine: BalanceDetail
    watchonly: BalanceDetail


class ImportResult(TypedDict, total=False):
    success: bool
    warnings: List[str]
    error: Dict[str, Any]


class MempoolAcceptResult(TypedDict, total=False):
    txid: str
    wtxid: str
    allowed: bool
    vsize: int
    fees: Dict[str, Any]
    reject_reason: str


class DescriptorInfo(TypedDict):
    descriptor: str
    checksum: str
    isrange: bool
    issolvable: bool
    hasprivatekeys: bool


class PsbtResult(TypedDict, total=False):
    psbt: str
    fee: float
    changepos: int
    complete: bool
    hex: str


class FinalizedPsbt(TypedDict, total=False):
    psbt: str
    hex: str
    complete: bool


class SendResult(TypedDict, total=False):
    complete: bool
    txid: str
    hex: str
    psbt: str


class RescanResult(TypedDict):
    start_height: int
    stop_height: int


class WalletDirEntry(TypedDict):
    name: str


class WalletDir(TypedDict):
    wallets: List[WalletDirEntry]


class UnloadWalletResult(TypedDict, total=False):
    warning: str
    warnings: List[str]


class BlockFilter(TypedDict):
    filter: str
    header: str


class ScanTxOutSetResult(TypedDict, total=False):
    success: bool
    txouts: int
    height: int
    bestblock: str
    unspents: List[Dict[str, Any]]
    total_amount: float


class NodeAddress(TypedDict, total=False):
    time: int
    services: int
    address: str
    port: int
    network: str


class ZmqNotification(TypedDict):
    type: str
    address: str
    hwm: int


class WaitForBlockResult(TypedDict):
    hash: str
    height: int


class RpcInfo(TypedDict):
    active_commands: List[Dict[str, Any]]
    logpath: str
