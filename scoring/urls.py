from django.urls import path
from .views import VerificationResultView, VerifyProjectView

urlpatterns = [
    path('ml/verify-project/', VerifyProjectView.as_view(), name='ml-verify-project'),
    path('ml/verification/<uuid:project_id>/', VerificationResultView.as_view(), name='ml-verification'),
]
