from rest_framework import status, generics
from rest_framework.decorators import api_view
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .filters import SaleLineFilter
from .models import SaleLine
from .serializers import SaleCreateSerializer, SaleLineSerializer
from .services import reset_sales, team_totals


error_response = openapi.Response(
    description="Error",
    schema=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        properties={'error': openapi.Schema(type=openapi.TYPE_STRING)},
    ),
)

success_response = openapi.Response(
    description="Success",
    schema=openapi.Schema(
        type=openapi.TYPE_OBJECT,
        properties={
            'success': openapi.Schema(type=openapi.TYPE_BOOLEAN),
            'message': openapi.Schema(type=openapi.TYPE_STRING),
        },
    ),
)


class SaleListCreateView(generics.ListAPIView):
    """
    get: List raw ledger lines, newest first
    post: Register a sale for one team
    """
    queryset = SaleLine.objects.select_related('dish').order_by('-created_at', '-id')
    serializer_class = SaleLineSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = SaleLineFilter
    pagination_class = None

    @swagger_auto_schema(
        operation_description="Sell one or more dishes on behalf of a team. "
                              "The sale is applied completely or not at all.",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['equipo', 'cantidades'],
            properties={
                'equipo': openapi.Schema(type=openapi.TYPE_STRING, description='Team key'),
                'cantidades': openapi.Schema(
                    type=openapi.TYPE_OBJECT,
                    description='Dish id -> units to sell',
                    additional_properties=openapi.Schema(type=openapi.TYPE_INTEGER, minimum=0),
                ),
            }
        ),
        responses={
            200: success_response,
            400: error_response,
        }
    )
    def post(self, request, *args, **kwargs):
        serializer = SaleCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        return Response({
            'success': True,
            'message': 'Venta registrada correctamente',
        })


@swagger_auto_schema(
    method='get',
    operation_description="Units sold, revenue and per-dish breakdown for every team",
)
@api_view(['GET'])
def team_sales(request):
    """Totals per team against their quota"""
    return Response(team_totals())


@swagger_auto_schema(
    method='post',
    operation_description="Delete every ledger line and set all dishes back to zero sold. Irreversible.",
    responses={
        200: success_response,
        500: error_response,
    }
)
@api_view(['POST'])
def reset(request):
    reset_sales()
    return Response({
        'success': True,
        'message': 'Todos los datos han sido reseteados a cero',
    }, status=status.HTTP_200_OK)
