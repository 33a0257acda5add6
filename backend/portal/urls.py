from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('accounts.urls')),
    path('api/', include('pricing.urls')),
    path('api/', include('inventory.urls')),
    path('api/', include('shipments.urls')),
]
