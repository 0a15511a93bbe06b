import logging

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from .identity import authenticate, check_nccr_eligibility
from .serializers import NCCREligibilitySerializer, SignupSerializer, UserSerializer

logger = logging.getLogger("accounts.views")


class SignupView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = SignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.save()

        logger.info(
            "user.registered | user_id=%s email=%s role=%s",
            user.id,
            user.email,
            user.role,
        )

        return Response(
            {
                "message": "Account created successfully. You can now log in.",
                "user": UserSerializer(user).data,
            },
            status=status.HTTP_201_CREATED,
        )


class NCCREligibilityView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = NCCREligibilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        result = check_nccr_eligibility(email)

        logger.info(
            "nccr.eligibility_checked | email=%s eligible=%s",
            email,
            result["eligible"],
        )
        return Response(result, status=status.HTTP_200_OK)


class UserMeView(APIView):

    def get(self, request):
        authenticate(request)
        return Response(UserSerializer(request.user).data)
