from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .identity import Identity
from .serializers import UserSerializer


class RegistryTokenObtainSerializer(TokenObtainPairSerializer):
    """Email/password login issuing tokens that carry the registry identity."""

    username_field = "email"
    default_error_messages = {
        "no_active_account": "Invalid email or password",
    }

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        identity = Identity.from_user(user)
        token["role"] = identity.role.value
        token["email"] = identity.email
        token["name"] = identity.name
        return token

    def validate(self, attrs):
        attrs = {**attrs, "email": str(attrs.get("email", "")).lower().strip()}
        data = super().validate(attrs)

        data["user"] = UserSerializer(self.user).data
        return data
