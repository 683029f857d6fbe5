"""
API key authentication middleware.

This middleware validates API keys for the supplier API and
attaches the acting user to the request.
"""

import hashlib
import logging
from typing import Optional

from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from brands.infrastructure.models import ApiKey
from core.domain.value_objects import ActingUser, UserRole

logger = logging.getLogger(__name__)

PROTECTED_PREFIX = "/api/v1/brand-suppliers"


def _unauthorized(message: str) -> JsonResponse:
    return JsonResponse({"error": {"code": "UNAUTHORIZED", "message": message}}, status=401)


class APIKeyAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for API key authentication.

    This middleware:
    1. Validates API keys for supplier APIs (/api/v1/brand-suppliers*)
    2. Sets request.acting_user for the views
    3. Returns 401 Unauthorized if authentication fails
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate authentication.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        if not request.path.startswith(PROTECTED_PREFIX):
            return None
        return self._authenticate(request)

    def _authenticate(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Authenticate supplier API request.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if auth fails, None if successful
        """
        api_key = request.headers.get("X-API-Key") or request.headers.get(
            "Authorization", ""
        ).replace("Bearer ", "")

        if not api_key:
            return _unauthorized("Missing API key. Provide X-API-Key header.")

        api_key_hash = hashlib.sha256(api_key.encode()).hexdigest()

        try:
            # pylint: disable=no-member
            api_key_obj = (
                ApiKey.objects.select_related("user").filter(key_hash=api_key_hash).first()
            )
            if not api_key_obj:
                logger.warning("Invalid API key attempted: %s...", api_key[:8])
                return _unauthorized("Invalid API key")

            if not api_key_obj.is_valid():
                logger.warning("Expired API key attempted: %s...", api_key[:8])
                return _unauthorized("API key expired")

            if not api_key_obj.user.is_active:
                logger.warning("API key of inactive user attempted: %s...", api_key[:8])
                return _unauthorized("User is inactive")

            api_key_obj.mark_used()

        except DatabaseError as e:
            logger.error("Error authenticating supplier API: %s", e, exc_info=True)
            return JsonResponse(
                {"error": {"code": "INTERNAL_ERROR", "message": "Authentication error"}},
                status=500,
            )

        request.api_key = api_key_obj  # type: ignore
        request.acting_user = ActingUser(  # type: ignore
            user_id=api_key_obj.user.pk,
            username=api_key_obj.user.get_username(),
            role=UserRole(api_key_obj.role),
        )
        return None
