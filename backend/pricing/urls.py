from django.urls import path

from .views import PriceLineView, PricingTablesView

urlpatterns = [
    path('pricing/', PricingTablesView.as_view(), name='pricing-tables'),
    path('pricing/price-line', PriceLineView.as_view(), name='pricing-price-line'),
]
