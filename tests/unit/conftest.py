"""
Shared fixtures: a fake Solana RPC node and token list served through httpx.MockTransport.
"""

import json

import httpx
import pytest

WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def token_entry(mint="Mint111", ui_amount=1.5, ui_amount_string="1.5", decimals=6):
    """One jsonParsed getTokenAccountsByOwner entry."""
    info = {"tokenAmount": {"decimals": decimals}}
    if mint is not None:
        info["mint"] = mint
    if ui_amount is not None:
        info["tokenAmount"]["uiAmount"] = ui_amount
    if ui_amount_string is not None:
        info["tokenAmount"]["uiAmountString"] = ui_amount_string
    return {
        "pubkey": "TokenAccount1111111111111111111111111111111",
        "account": {
            "data": {"parsed": {"info": info, "type": "account"}, "program": "spl-token"},
            "lamports": 2039280,
            "owner": "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA",
        },
    }


class FakeNetwork:
    """
    Canned responses keyed by JSON-RPC method, plus one token list document.

    Every request is recorded so tests can assert on call order and params.
    """

    def __init__(self):
        self.lamports = 0
        self.token_accounts = []
        self.token_list = {"tokens": []}
        self.overrides = {}
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            if "token_list" in self.overrides:
                return self.overrides["token_list"]
            return httpx.Response(200, json=self.token_list)

        body = json.loads(request.content)
        method = body["method"]
        if method in self.overrides:
            return self.overrides[method]
        if method == "getBalance":
            result = {"context": {"slot": 1}, "value": self.lamports}
        elif method == "getTokenAccountsByOwner":
            result = {"context": {"slot": 1}, "value": self.token_accounts}
        else:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"],
                                             "error": {"code": -32601, "message": "Method not found"}})
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": result})

    @property
    def rpc_methods(self):
        return [json.loads(r.content)["method"] for r in self.requests if r.method == "POST"]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def network():
    return FakeNetwork()


@pytest.fixture
def patched_network(network, monkeypatch):
    """Route every httpx.Client created by the package through the fake network."""
    real_client = httpx.Client

    def client_factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(network.handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", client_factory)
    return network


_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def base58_encode(data: bytes) -> str:
    """Base58 text for raw bytes, to build addresses of a chosen length."""
    n = int.from_bytes(data, "big")
    chars = []
    while n > 0:
        n, remainder = divmod(n, 58)
        chars.append(_ALPHABET[remainder])
    pad = len(data) - len(data.lstrip(b"\x00"))
    return "1" * pad + "".join(reversed(chars))
