# =============== MIDDLEWARE FOR CROSS-ORIGIN ACCESS ===============
from django.conf import settings
from django.http import HttpResponse
from django.utils.cache import patch_vary_headers


class CorsMiddleware:
    """
    Middleware to let the dashboard, served from another origin, call the API
    """
    def __init__(self, get_response):
        self.get_response = get_response
        self.allowed_origins = [origin.strip() for origin in settings.CORS_ALLOWED_ORIGINS if origin.strip()]
        self.allowed_methods = ', '.join(settings.CORS_ALLOWED_METHODS)
        self.allow_credentials = settings.CORS_ALLOW_CREDENTIALS

    def __call__(self, request):
        # Preflight requests never reach the views
        if request.method == 'OPTIONS' and 'HTTP_ACCESS_CONTROL_REQUEST_METHOD' in request.META:
            response = HttpResponse(status=200)
        else:
            response = self.get_response(request)

        origin = request.META.get('HTTP_ORIGIN')
        allowed_origin = self.get_allowed_origin(origin)
        if allowed_origin is None:
            return response

        response['Access-Control-Allow-Origin'] = allowed_origin
        response['Access-Control-Allow-Methods'] = self.allowed_methods
        response['Access-Control-Allow-Headers'] = request.META.get(
            'HTTP_ACCESS_CONTROL_REQUEST_HEADERS', 'Content-Type'
        )
        if self.allow_credentials and allowed_origin != '*':
            response['Access-Control-Allow-Credentials'] = 'true'
        if allowed_origin != '*':
            patch_vary_headers(response, ('Origin',))
        return response

    def get_allowed_origin(self, origin):
        """Value for Access-Control-Allow-Origin, or None when the origin is refused"""
        if '*' in self.allowed_origins:
            # Credentialed requests need the concrete origin echoed back
            return origin if origin and self.allow_credentials else '*'
        if origin in self.allowed_origins:
            return origin
        return None
