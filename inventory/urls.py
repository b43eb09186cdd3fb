from django.urls import path
from . import views

app_name = 'inventory'

urlpatterns = [
    # Dish URLs
    path('platos', views.DishListView.as_view(), name='dish-list'),
    path('platos/<str:pk>', views.update_dish_sold, name='dish-update-sold'),
]
