from django.urls import path
from .views import MRVDecisionView, MRVSubmitView, MRVUploadView, PendingMRVListView

urlpatterns = [
    path("mrv/", MRVSubmitView.as_view(), name="mrv-submit"),
    path("mrv/upload/", MRVUploadView.as_view(), name="mrv-upload"),
    path("mrv/pending/", PendingMRVListView.as_view(), name="mrv-pending"),
    path("mrv/<uuid:mrv_id>/approve/", MRVDecisionView.as_view(), name="mrv-approve"),
]
