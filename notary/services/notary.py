import hashlib
import json
import logging
import uuid

from django.conf import settings
from django.utils.module_loading import import_string

from ..models import ChainTransaction
from .avalanche import AvalancheClient, NotaryUnavailable

logger = logging.getLogger("notary.services")


class ChainNotary:
    """Anchors registry actions to the current head of the Avalanche test network.

    The transaction hash is derived from the action payload, the anchor block
    and a random nonce. Receipts are looked up on-chain when status is asked for.
    """

    def __init__(self, client=None):
        self.client = client or AvalancheClient()

    def record_transaction(self, payload):
        anchor_block = self.client.block_number()

        document = json.dumps(
            {
                "payload": payload,
                "anchorBlock": anchor_block,
                "chainId": settings.AVALANCHE_CHAIN_ID,
                "nonce": uuid.uuid4().hex,
            },
            sort_keys=True,
            default=str,
        )
        tx_hash = "0x" + hashlib.sha256(document.encode()).hexdigest()

        logger.info(
            "record_transaction: action=%s tx=%s anchor_block=%s",
            payload.get("action"), tx_hash, anchor_block,
        )
        return {"txHash": tx_hash, "status": "pending", "anchorBlock": anchor_block}

    def get_transaction_status(self, tx_hash):
        receipt = self.client.get_transaction_receipt(tx_hash)

        if not receipt:
            return {"txHash": tx_hash, "status": "pending"}

        return {
            "txHash": tx_hash,
            "status": "confirmed" if receipt.get("status") == "0x1" else "failed",
            "blockNumber": _hex_to_int(receipt.get("blockNumber")),
            "gasUsed": _hex_to_int(receipt.get("gasUsed")),
        }

    def network_info(self):
        return network_info()


def _hex_to_int(value):
    if value in (None, ""):
        return None
    return int(value, 16)


def network_info():
    return {
        "name": settings.AVALANCHE_NETWORK_NAME,
        "chainId": settings.AVALANCHE_CHAIN_ID,
        "rpcUrl": settings.AVALANCHE_RPC_URL,
        "explorer": settings.AVALANCHE_EXPLORER_URL,
        "isTestnet": settings.AVALANCHE_CHAIN_ID == 43113,
    }


def explorer_url(tx_hash):
    return f"{settings.AVALANCHE_EXPLORER_URL.rstrip('/')}/tx/{tx_hash}"


def get_notary():
    return import_string(settings.NOTARY_BACKEND)()


def notarize(action, entity, payload, notary=None):
    """Record ``action`` for ``entity`` and store the hash on it.

    Never raises for notary problems: failures are logged and ``None`` is
    returned, leaving ``entity.on_chain_tx_hash`` unset.
    """
    entity_type = entity._meta.model_name
    entity_id = str(entity.pk)

    if not settings.NOTARY_ENABLED:
        logger.info("notarize: disabled, skipping action=%s %s=%s", action, entity_type, entity_id)
        return None

    try:
        notary = notary or get_notary()
        result = notary.record_transaction({"action": action, "entityId": entity_id, **payload})
    except NotaryUnavailable as e:
        logger.warning("notarize: notary unavailable action=%s %s=%s error=%s", action, entity_type, entity_id, e)
        return None
    except Exception:
        # notary failures are non-fatal
        logger.exception("notarize: unexpected notary error action=%s %s=%s", action, entity_type, entity_id)
        return None

    tx_hash = (result or {}).get("txHash")
    if not tx_hash:
        logger.warning("notarize: notary returned no hash action=%s %s=%s", action, entity_type, entity_id)
        return None

    ChainTransaction.objects.create(
        tx_hash=tx_hash,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        status=result.get("status") or "pending",
        anchor_block=result.get("anchorBlock"),
    )

    type(entity).objects.filter(pk=entity.pk).update(on_chain_tx_hash=tx_hash)
    entity.on_chain_tx_hash = tx_hash

    logger.info("notarize: action=%s %s=%s tx=%s", action, entity_type, entity_id, tx_hash)
    return tx_hash
