"""
API error types and the project-wide DRF exception handler.

Every failure leaves the API in one of two JSON shapes:

  - ``{"errors": [{"msg": ..., "param": ...}, ...]}`` for input validation
  - ``{"msg": ...}`` for everything else

Unexpected exceptions are logged with their traceback and reported to the
caller as a generic ``Server Error`` so internals never leak.
"""

import logging
import uuid

from django.core.exceptions import ObjectDoesNotExist, ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)

NO_TOKEN_MESSAGE = "No token, authorization denied"
SERVER_ERROR_MESSAGE = "Server Error"


class BadRequest(APIException):
    """A well-formed request that conflicts with the resource's current state."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request."
    default_code = "bad_request"


class NotOwner(APIException):
    """The caller is authenticated but does not own the targeted resource."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "User not authorized"
    default_code = "not_owner"


def get_or_not_found(queryset, message, **lookup):
    """
    Fetch a single object or raise ``NotFound(message)``.

    Malformed identifiers (e.g. a non-UUID string for a UUID primary key)
    are treated the same as missing objects.
    """
    try:
        return queryset.get(**lookup)
    except (ObjectDoesNotExist, DjangoValidationError, ValueError, TypeError):
        raise NotFound(message)


def find_or_not_found(items, raw_id, message):
    """
    Pick the item whose primary key equals ``raw_id`` from an already
    loaded collection, or raise ``NotFound(message)``.

    ``raw_id`` is parsed as a UUID, so letter case in the URL does not matter.
    """
    try:
        pk = uuid.UUID(str(raw_id))
    except ValueError:
        raise NotFound(message)
    for item in items:
        if item.pk == pk:
            return item
    raise NotFound(message)


# ---------------------------------------------------------------------------
# Error formatting
# ---------------------------------------------------------------------------

def _flatten_errors(detail, param=None):
    """Turn DRF's nested validation detail into a flat ``errors`` list."""
    if isinstance(detail, dict):
        items = []
        for field, value in detail.items():
            if field == "non_field_errors":
                child = param
            elif param:
                child = f"{param}.{field}"
            else:
                child = field
            items.extend(_flatten_errors(value, child))
        return items
    if isinstance(detail, list):
        items = []
        for value in detail:
            items.extend(_flatten_errors(value, param))
        return items

    error = {"msg": str(detail)}
    if param:
        error["param"] = param
    return [error]


def api_exception_handler(exc, context):
    """Map any exception raised inside a view to the JSON error contract."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.exception(
            "Unhandled error in %s: %s", view.__class__.__name__ if view else "view", exc,
        )
        set_rollback()
        return Response(
            {"msg": SERVER_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, ValidationError):
        response.data = {"errors": _flatten_errors(exc.detail)}
    elif isinstance(exc, NotAuthenticated):
        response.data = {"msg": NO_TOKEN_MESSAGE}
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"msg": str(response.data["detail"])}

    return response
