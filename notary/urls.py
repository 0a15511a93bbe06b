from django.urls import path
from .views import NetworkInfoView, TransactionStatusView

urlpatterns = [
    path("notary/network/", NetworkInfoView.as_view(), name="notary-network"),
    path("notary/transactions/<str:tx_hash>/", TransactionStatusView.as_view(), name="notary-transaction"),
]
