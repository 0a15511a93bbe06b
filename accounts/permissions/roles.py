from rest_framework.permissions import BasePermission

from accounts.identity import authenticate, require_role
from accounts.models import Role


class RolePermission(BasePermission):
    required_role = None

    def has_permission(self, request, view):
        identity = authenticate(request)
        require_role(identity, self.required_role)
        return True


class IsProjectManager(RolePermission):
    required_role = Role.PROJECT_MANAGER


class IsVerifier(RolePermission):
    required_role = Role.NCCR_VERIFIER


class IsBuyer(RolePermission):
    required_role = Role.BUYER
