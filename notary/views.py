import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from accounts.identity import authenticate
from bluecarbon.exceptions import NotFound

from .models import ChainTransaction
from .serializers import ChainTransactionSerializer
from .services import NotaryUnavailable, explorer_url, get_notary, network_info
from .tasks import refresh_transaction

logger = logging.getLogger("notary.views")


class NetworkInfoView(APIView):

    def get(self, request):
        authenticate(request)
        return Response(network_info(), status=status.HTTP_200_OK)


class TransactionStatusView(APIView):

    def get(self, request, tx_hash):
        authenticate(request)

        chain_tx = ChainTransaction.objects.filter(tx_hash=tx_hash).first()
        if chain_tx is None:
            logger.warning("tx_status.unknown_hash | tx=%s", tx_hash)
            raise NotFound("Transaction not found")

        stale = False
        try:
            chain_tx = refresh_transaction(chain_tx, get_notary())
        except NotaryUnavailable as e:
            logger.warning("tx_status.refresh_failed | tx=%s error=%s", tx_hash, e)
            stale = True

        data = ChainTransactionSerializer(chain_tx).data
        data["explorerUrl"] = explorer_url(chain_tx.tx_hash)
        data["stale"] = stale
        return Response(data, status=status.HTTP_200_OK)
