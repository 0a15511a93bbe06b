import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status

from accounts.identity import authenticate
from accounts.permissions import IsVerifier

from .serializers import MLVerificationSerializer, VerifyProjectSerializer
from .services import get_verification_result, verify_project

logger = logging.getLogger(__name__)


class VerifyProjectView(APIView):
    permission_classes = [IsVerifier]

    def post(self, request):
        identity = authenticate(request)

        serializer = VerifyProjectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        verification = verify_project(serializer.validated_data['projectId'], identity)

        return Response(
            {"success": True, "verification": MLVerificationSerializer(verification).data},
            status=status.HTTP_201_CREATED,
        )


class VerificationResultView(APIView):
    permission_classes = [IsVerifier]

    def get(self, request, project_id):
        verification = get_verification_result(project_id)
        return Response(
            {"verification": MLVerificationSerializer(verification).data},
            status=status.HTTP_200_OK,
        )
