from celery import shared_task
from django.utils import timezone
import logging

from .models import ChainTransaction
from .services import NotaryUnavailable, get_notary

logger = logging.getLogger(__name__)

REFRESH_BATCH_SIZE = 100


def refresh_transaction(chain_tx, notary):
    result = notary.get_transaction_status(chain_tx.tx_hash)

    chain_tx.status = result.get("status") or chain_tx.status
    chain_tx.block_number = result.get("blockNumber")
    chain_tx.gas_used = result.get("gasUsed")
    chain_tx.checked_at = timezone.now()
    chain_tx.save(update_fields=["status", "block_number", "gas_used", "checked_at"])
    return chain_tx


@shared_task
def refresh_pending_transactions():
    notary = get_notary()
    pending = ChainTransaction.objects.filter(status="pending").order_by("created_at")[:REFRESH_BATCH_SIZE]

    checked = 0
    changed = 0
    for chain_tx in pending:
        try:
            refreshed = refresh_transaction(chain_tx, notary)
        except NotaryUnavailable as e:
            logger.warning(f"Stopping status refresh, notary unavailable: {e}")
            break

        checked += 1
        if refreshed.status != "pending":
            changed += 1
            logger.info(f"Transaction {refreshed.tx_hash} is now {refreshed.status}")

    logger.info(f"Refreshed {checked} pending chain transactions, {changed} settled")
    return {"checked": checked, "settled": changed}
