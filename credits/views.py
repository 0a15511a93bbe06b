import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from accounts.identity import authenticate
from accounts.permissions import IsBuyer

from .serializers import (
    CarbonCreditSerializer,
    CreditHoldingSerializer,
    PurchaseSerializer,
    RetireSerializer,
    RetirementSerializer,
)
from .services import get_buyer_holdings, get_buyer_retirements, list_available, purchase, retire

logger = logging.getLogger("credits.views")


class AvailableCreditListView(APIView):
    permission_classes = [IsBuyer]

    def get(self, request):
        credits = list_available()
        return Response(
            {"availableCredits": CarbonCreditSerializer(credits, many=True).data},
            status=status.HTTP_200_OK,
        )


class PurchaseCreditView(APIView):
    permission_classes = [IsBuyer]

    def post(self, request):
        identity = authenticate(request)

        serializer = PurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        holding = purchase(
            serializer.validated_data["creditId"],
            identity,
            serializer.validated_data["amount"],
        )

        return Response(
            {
                "success": True,
                "holding": CreditHoldingSerializer(holding).data,
                "credit": CarbonCreditSerializer(holding.credit).data,
            },
            status=status.HTTP_200_OK,
        )


class RetireCreditView(APIView):
    permission_classes = [IsBuyer]

    def post(self, request):
        identity = authenticate(request)

        serializer = RetireSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        retirement = retire(
            serializer.validated_data["creditId"],
            identity,
            serializer.validated_data["amount"],
            serializer.validated_data["reason"],
        )

        return Response(
            {
                "retirementId": str(retirement.id),
                "retirement": RetirementSerializer(retirement).data,
            },
            status=status.HTTP_201_CREATED,
        )


class HoldingListView(APIView):
    permission_classes = [IsBuyer]

    def get(self, request):
        identity = authenticate(request)
        holdings = get_buyer_holdings(identity.user_id)
        return Response(
            {"holdings": CreditHoldingSerializer(holdings, many=True).data},
            status=status.HTTP_200_OK,
        )


class RetirementListView(APIView):
    permission_classes = [IsBuyer]

    def get(self, request):
        identity = authenticate(request)
        retirements = get_buyer_retirements(identity.user_id)
        return Response(
            {"retirements": RetirementSerializer(retirements, many=True).data},
            status=status.HTTP_200_OK,
        )
