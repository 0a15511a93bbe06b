import logging

import requests
from django.conf import settings

logger = logging.getLogger("notary.avalanche")


class NotaryUnavailable(Exception):
    pass


class AvalancheClient:
    """Minimal JSON-RPC client for the Avalanche C-Chain."""

    def __init__(self, rpc_url=None, timeout=None, session=None):
        self.rpc_url = rpc_url or settings.AVALANCHE_RPC_URL
        self.timeout = timeout if timeout is not None else settings.NOTARY_TIMEOUT_SECONDS
        self.session = session or requests.Session()
        self._request_id = 0

    def call(self, method, params=None):
        self._request_id += 1
        body = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params or [],
            "id": self._request_id,
        }

        try:
            response = self.session.post(
                self.rpc_url,
                json=body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("rpc.call_failed | method=%s url=%s error=%s", method, self.rpc_url, e)
            raise NotaryUnavailable(f"{method} failed: {e}") from e

        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.warning("rpc.error_response | method=%s error=%s", method, message)
            raise NotaryUnavailable(f"{method} returned an error: {message}")

        return data.get("result")

    def chain_id(self):
        return int(self.call("eth_chainId"), 16)

    def block_number(self):
        return int(self.call("eth_blockNumber"), 16)

    def get_transaction_receipt(self, tx_hash):
        return self.call("eth_getTransactionReceipt", [tx_hash])
