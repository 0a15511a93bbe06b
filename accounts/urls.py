from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .auth_views import LoginView, LogoutView
from .views import SignupView, NCCREligibilityView, UserMeView

urlpatterns = [
    path("signup/", SignupView.as_view(), name="signup"),
    path("check-nccr-eligibility/", NCCREligibilityView.as_view(), name="check-nccr-eligibility"),

    path("auth/login/", LoginView.as_view(), name="auth-login"),
    path("auth/logout/", LogoutView.as_view(), name="auth-logout"),
    path("auth/token/refresh/", TokenRefreshView.as_view(), name="token-refresh"),

    path("users/me/", UserMeView.as_view(), name="user-me"),
]
