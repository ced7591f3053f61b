"""JSON-RPC call dispatcher for Bitcoin Core."""

from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import httpx

from .constants import (
    CONNECTION_REFUSED_MESSAGE,
    JSONRPC_VERSION,
    REQUEST_ID,
    WALLET_PATH_PREFIX,
)
from .errors import (
    AuthError,
    BitcoinRpcClientError,
    BitcoinRpcError,
    ConnectionError,
    UnknownError,
)
from .logging import get_logger

logger = get_logger(__name__)


class _JsonNull:
    """Explicit JSON null. Unlike None it survives unset-parameter filtering."""

    def __repr__(self):
        return "NULL"


NULL = _JsonNull()


def strip_unset(params: Iterable[Any]) -> List[Any]:
    """Drop parameters the caller left unset (None), keeping the order of the rest."""
    return [None if p is NULL else p for p in params if p is not None]


def fill_gaps(params: Iterable[Any]) -> List[Any]:
    """
    Replace unset parameters that precede a set one with NULL.

    The node reads a positional null as "use the default", so a value given
    after an omitted optional argument keeps its position. Trailing unset
    parameters are left as None and still dropped.
    """
    params = list(params)
    last = max((i for i, p in enumerate(params) if p is not None), default=-1)
    return [NULL if p is None and i < last else p for i, p in enumerate(params)]


def build_payload(method: str, params: Iterable[Any]) -> Dict[str, Any]:
    """
    Build a JSON-RPC request envelope.

    Args:
        method: RPC method name, any case
        params: Positional parameters, None entries are omitted

    Returns:
        Envelope dict ready to be serialized as the request body
    """
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": REQUEST_ID,
        "method": method.lower(),
        "params": strip_unset(params),
    }


def rpc_error_from_body(body: Any) -> Optional[BitcoinRpcClientError]:
    """
    Return the error carried by a decoded response body, if any.

    A dict with a code is the node's structured error. Any other non-null
    error field is malformed and becomes an UnknownError.
    """
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if error is None:
        return None
    if isinstance(error, dict) and "code" in error:
        return BitcoinRpcError(error["code"], error.get("message", ""))
    return UnknownError(ValueError(f"Malformed RPC error: {error!r}"))


def _decode_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class RPCClient:
    """Async Bitcoin Core RPC client sharing one HTTP connection pool."""

    def __init__(
        self,
        url: str,
        user: Optional[str] = None,
        password: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        verify: bool = True,
        timeout: Optional[float] = None,
        session: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize RPC client.

        Args:
            url: RPC URL (e.g., "http://127.0.0.1:18443" or
                 "http://127.0.0.1:18443/wallet/alice")
            user: RPC username, basic auth is used when user and password are set
            password: RPC password
            transport: Optional httpx transport passed through unmodified
                       (connection limits, proxies, unix sockets)
            verify: TLS verification setting forwarded to httpx
            timeout: Request timeout in seconds; None keeps the httpx default
            session: Existing httpx.AsyncClient to share. The caller keeps
                     ownership and must close it.
        """
        self.url = url
        self.auth: Optional[Tuple[str, str]] = None
        if user is not None and password is not None:
            self.auth = (user, password)

        if session is not None:
            self.session = session
            self._owns_session = False
        else:
            kwargs: Dict[str, Any] = {
                "transport": transport,
                "verify": verify,
                "headers": {"content-type": "application/json"},
            }
            if timeout is not None:
                kwargs["timeout"] = timeout
            self.session = httpx.AsyncClient(**kwargs)
            self._owns_session = True

    @classmethod
    def from_config(cls, config, **kwargs):
        """
        Create a client from a Config instance.

        Basic auth is sent when rpc.user is set, even with an empty
        password. An empty user means no credentials.

        Args:
            config: btcrpc.config.Config with rpc settings
            **kwargs: Extra keyword arguments for the constructor (e.g. transport)

        Returns:
            Client addressing config.wallet_url
        """
        user = config.rpc_user or None
        return cls(
            config.wallet_url,
            user,
            config.rpc_password if user is not None else None,
            verify=config.rpc_verify,
            timeout=config.rpc_timeout,
            **kwargs,
        )

    def for_wallet(self, name: str):
        """
        Return a client of the same class scoped to a loaded wallet.

        The new client targets ``<url>/wallet/<name>`` and shares this
        client's HTTP session and credentials.
        """
        url = self.url.rstrip("/") + WALLET_PATH_PREFIX + quote(name, safe="")
        wallet_client = type(self)(url, session=self.session)
        wallet_client.auth = self.auth
        return wallet_client

    async def call(self, method: str, *params: Any) -> Any:
        """
        Make an RPC call.

        Args:
            method: RPC method name, lower-cased before sending
            *params: RPC method parameters, None values are omitted

        Returns:
            The ``result`` field of the response body

        Raises:
            ConnectionError: If the node cannot be reached
            BitcoinRpcError: If the node returns a structured error
            AuthError: If the node rejects the credentials
            UnknownError: For any other transport failure or a malformed error field
        """
        payload = build_payload(method, params)
        logger.debug(f"RPC {payload['method']} with {len(payload['params'])} params")

        try:
            response = await self.session.post(self.url, json=payload, auth=self.auth)
            response.raise_for_status()
        except httpx.ConnectError as e:
            logger.warning(f"Cannot connect to {self.url}: {e}")
            raise ConnectionError(CONNECTION_REFUSED_MESSAGE) from e
        except httpx.HTTPStatusError as e:
            rpc_error = rpc_error_from_body(_decode_error_body(e.response))
            if isinstance(rpc_error, BitcoinRpcError):
                logger.debug(f"RPC {payload['method']} failed: {rpc_error.code} {rpc_error.message}")
                raise rpc_error from e
            if e.response.status_code == 401:
                logger.warning(f"Credentials rejected by {self.url}")
                raise AuthError() from e
            raise (rpc_error or UnknownError(e)) from e
        except httpx.HTTPError as e:
            raise UnknownError(e) from e

        try:
            body = response.json()
        except ValueError as e:
            raise UnknownError(e) from e
        if not isinstance(body, dict):
            raise UnknownError(ValueError(f"Unexpected response body: {body!r}"))

        # Bitcoin Core answers JSON-RPC 2.0 errors with HTTP 200
        rpc_error = rpc_error_from_body(body)
        if rpc_error is not None:
            logger.debug(f"RPC {payload['method']} failed: {rpc_error!r}")
            raise rpc_error

        return body.get("result")

    async def aclose(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            await self.session.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
