from django.urls import path
from . import views

app_name = 'sales'

urlpatterns = [
    # Ledger and sale registration
    path('ventas', views.SaleListCreateView.as_view(), name='sale-list-create'),

    # Reporting
    path('ventas/equipos', views.team_sales, name='team-sales'),

    # Admin
    path('reset', views.reset, name='reset'),
]
