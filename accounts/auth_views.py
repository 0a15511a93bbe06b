import logging

from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework import status

from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.views import TokenObtainPairView
from rest_framework_simplejwt.tokens import RefreshToken

from .auth_serializers import RegistryTokenObtainSerializer

logger = logging.getLogger("accounts.auth")


class LoginView(TokenObtainPairView):
    permission_classes = [AllowAny]
    serializer_class = RegistryTokenObtainSerializer

    def post(self, request, *args, **kwargs):
        response = super().post(request, *args, **kwargs)

        if response.status_code == 200:
            user = response.data["user"]
            logger.info("login_success | user_id=%s role=%s", user["id"], user["role"])

        return response


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get("refresh")

        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as exc:
                logger.warning("logout_error | user=%s error=%s", request.user.email, str(exc))

        logger.info("logout_success | user=%s", request.user.email)

        return Response(
            {"message": "Logged out successfully"},
            status=status.HTTP_200_OK,
        )
