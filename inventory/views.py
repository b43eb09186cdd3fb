from rest_framework import generics
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .models import Dish
from .serializers import DishSerializer, DishSoldCountSerializer
from .services import correct_units_sold, parse_dish_id


class DishListView(generics.ListAPIView):
    """List every dish with its stock and units sold"""
    queryset = Dish.objects.all().order_by('id')
    serializer_class = DishSerializer
    pagination_class = None
    filter_backends = []


@swagger_auto_schema(
    method='put',
    operation_description="Set the absolute units sold of a dish. "
                          "Deletes that dish's ledger lines, so team attribution for it is lost.",
    request_body=DishSoldCountSerializer,
    responses={
        200: openapi.Response(description="Dish updated"),
        400: openapi.Response(description="Out of range value or unknown dish"),
    }
)
@api_view(['PUT'])
def update_dish_sold(request, pk):
    """Admin correction of a dish's units sold"""
    serializer = DishSoldCountSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    dish = correct_units_sold(parse_dish_id(pk), serializer.validated_data['vendidos'])

    return Response({
        'success': True,
        'message': f'{dish.name} actualizado a {dish.units_sold} vendidos',
    })
