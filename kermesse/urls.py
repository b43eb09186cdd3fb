from django.urls import path, include
from drf_yasg.views import get_schema_view
from drf_yasg import openapi
from rest_framework import permissions

from . import views

# Setup Swagger schema view
schema_view = get_schema_view(
    openapi.Info(
        title='API Documentation KERMESSE',
        default_version='v1',
        description="API for registering dish sales per team and reporting totals",
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)

handler404 = 'kermesse.views.not_found'

urlpatterns = [
    path('', views.health, name='health'),
    path('api/', include('inventory.urls')),
    path('api/', include('sales.urls')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
]
