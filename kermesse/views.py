from django.http import JsonResponse
from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response


@api_view(['GET'])
def health(request):
    """Liveness check polled by the dashboard"""
    return Response({
        'message': 'Backend Kermesse Scout funcionando',
        'timestamp': timezone.now().isoformat(),
    })


def not_found(request, exception=None):
    """JSON body for URLs that match no route"""
    return JsonResponse({'error': 'Ruta no encontrada'}, status=404)
