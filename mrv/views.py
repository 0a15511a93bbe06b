import logging

from rest_framework.views import APIView
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework import status

from accounts.identity import authenticate
from accounts.permissions import IsProjectManager, IsVerifier

from .serializers import MRVDataSerializer, MRVDecisionSerializer
from .services import MRVIntakeService, approve_or_reject

logger = logging.getLogger("mrv.views")


class MRVUploadView(APIView):
    permission_classes = [IsProjectManager]
    parser_classes = [MultiPartParser, FormParser]

    def post(self, request):
        identity = authenticate(request)

        manifest = MRVIntakeService().upload_files(
            request.data.get("projectId"),
            request.FILES.getlist("files"),
            identity,
        )

        return Response(
            {
                "success": True,
                "files": manifest,
                "message": f"Successfully uploaded {len(manifest)} files",
            },
            status=status.HTTP_201_CREATED,
        )


class MRVSubmitView(APIView):
    permission_classes = [IsProjectManager]

    def post(self, request):
        identity = authenticate(request)
        mrv = MRVIntakeService().submit_mrv_data(request.data, identity)

        return Response(
            {
                "mrvId": str(mrv.id),
                "mrvData": MRVDataSerializer(mrv).data,
            },
            status=status.HTTP_201_CREATED,
        )


class PendingMRVListView(APIView):
    permission_classes = [IsVerifier]

    def get(self, request):
        pending = MRVIntakeService().get_pending_mrv()
        return Response(
            {"pendingMrv": MRVDataSerializer(pending, many=True).data},
            status=status.HTTP_200_OK,
        )


class MRVDecisionView(APIView):
    permission_classes = [IsVerifier]

    def post(self, request, mrv_id):
        identity = authenticate(request)

        serializer = MRVDecisionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        mrv = approve_or_reject(
            mrv_id,
            identity,
            serializer.validated_data["approved"],
            serializer.validated_data["notes"],
        )

        credit = mrv.issued_credit
        return Response(
            {
                "success": True,
                "mrvData": MRVDataSerializer(mrv).data,
                "creditId": str(credit.id) if credit else None,
            },
            status=status.HTTP_200_OK,
        )
