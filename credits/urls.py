from django.urls import path
from .views import (
    AvailableCreditListView,
    HoldingListView,
    PurchaseCreditView,
    RetireCreditView,
    RetirementListView,
)

urlpatterns = [
    path('credits/available/', AvailableCreditListView.as_view(), name='credits-available'),
    path('credits/purchase/', PurchaseCreditView.as_view(), name='credits-purchase'),
    path('credits/retire/', RetireCreditView.as_view(), name='credits-retire'),
    path('credits/holdings/', HoldingListView.as_view(), name='credits-holdings'),
    path('credits/retirements/', RetirementListView.as_view(), name='credits-retirements'),
]
