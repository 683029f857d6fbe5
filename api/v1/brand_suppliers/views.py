"""
Brand Supplier API views.

These endpoints let authenticated users:
- List suppliers, optionally filtered by brand and active flag
- Register, replace, partially update and delete suppliers
"""

from contextlib import contextmanager

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brand_suppliers.serializers import (
    BrandSupplierFilterSerializer,
    BrandSupplierRequestSerializer,
    BrandSupplierSerializer,
)
from core.domain.exceptions import DomainException
from core.domain.value_objects import ActingUser
from core.instrumentation import Status, StatusCode, get_tracer
from core.metrics import supplier_operations_total
from suppliers.application.services.brand_supplier_service import BrandSupplierService
from suppliers.infrastructure.repositories.django_brand_supplier_repository import (
    DjangoBrandSupplierRepository,
)

# Initialize repositories (in production, use DI container)
_supplier_repo = DjangoBrandSupplierRepository()

tracer = get_tracer(__name__)

SUPPLIER_ID_PARAMETER = OpenApiParameter(
    name="supplier_id",
    type=int,
    location=OpenApiParameter.PATH,
    description="Supplier ID",
)


def _service() -> BrandSupplierService:
    return BrandSupplierService(repository=_supplier_repo)


def _acting_user(request: Request) -> ActingUser:
    """Acting user resolved by the authentication middleware."""
    acting_user = getattr(request, "acting_user", None)
    if not acting_user:
        raise NotAuthenticated("Missing or invalid API key")
    return acting_user


def _invalid(span, errors) -> Response:
    span.set_attribute("error", "validation_failed")
    span.set_attribute("error.details", str(errors))
    span.set_status(Status(StatusCode.ERROR, "Validation failed"))
    return Response(
        {"error": {"code": "INVALID_INPUT", "message": "Invalid input", "details": errors}},
        status=status.HTTP_400_BAD_REQUEST,
    )


@contextmanager
def _tracked(span, operation: str):
    """Record span status and operation outcome around a service call."""
    try:
        yield
    except DomainException as exc:
        span.set_attribute("error", exc.code)
        span.set_status(Status(StatusCode.ERROR, exc.message))
        supplier_operations_total.labels(operation=operation, outcome=exc.code).inc()
        raise
    except Exception as exc:
        span.record_exception(exc)
        span.set_status(Status(StatusCode.ERROR, str(exc)))
        supplier_operations_total.labels(operation=operation, outcome="error").inc()
        raise
    span.set_status(Status(StatusCode.OK))
    supplier_operations_total.labels(operation=operation, outcome="success").inc()


class BrandSupplierListView(APIView):
    """View for listing and creating brand suppliers."""

    @extend_schema(
        operation_id="list_brand_suppliers",
        summary="List Suppliers",
        description="List all suppliers, optionally filtered by brand and active flag.",
        tags=["Brand Suppliers"],
        parameters=[
            OpenApiParameter(
                name="brandId",
                type=int,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only suppliers of this brand",
            ),
            OpenApiParameter(
                name="isActive",
                type=str,
                enum=["true", "false"],
                location=OpenApiParameter.QUERY,
                required=False,
                description="Only active or only inactive suppliers",
            ),
        ],
        responses={
            200: BrandSupplierSerializer(many=True),
            400: {"description": "Invalid filter parameters"},
            401: {"description": "Unauthorized - Missing or invalid API key"},
        },
    )
    def get(self, request: Request) -> Response:
        """List suppliers."""
        return async_to_sync(self._handle_list)(request)

    async def _handle_list(self, request: Request) -> Response:
        """Async handler for list suppliers."""
        with tracer.start_as_current_span("list_brand_suppliers") as span:
            span.set_attribute("operation", "list_brand_suppliers")

            serializer = BrandSupplierFilterSerializer(data=request.query_params)
            if not serializer.is_valid():
                return _invalid(span, serializer.errors)

            query = serializer.to_query()
            if query.brand_id is not None:
                span.set_attribute("filter.brand_id", query.brand_id)
            if query.is_active is not None:
                span.set_attribute("filter.is_active", query.is_active)

            with _tracked(span, "list"):
                suppliers = await _service().find_all(query)

            span.set_attribute("suppliers.count", len(suppliers))
            return Response(
                BrandSupplierSerializer(suppliers, many=True).data,
                status=status.HTTP_200_OK,
            )

    @extend_schema(
        operation_id="create_brand_supplier",
        summary="Create Supplier",
        description="Register a new supplier. The email must be unique.",
        tags=["Brand Suppliers"],
        request=BrandSupplierRequestSerializer,
        responses={
            201: BrandSupplierSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid API key"},
            404: {"description": "Brand not found"},
            409: {"description": "Email already registered"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a supplier."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create supplier."""
        with tracer.start_as_current_span("create_brand_supplier") as span:
            span.set_attribute("operation", "create_brand_supplier")
            acting_user = _acting_user(request)
            span.set_attribute("user.id", acting_user.user_id)

            serializer = BrandSupplierRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _invalid(span, serializer.errors)

            data = serializer.to_input()
            span.set_attribute("brand.id", data.brand_id)

            with _tracked(span, "create"):
                supplier = await _service().create(data, acting_user)

            span.set_attribute("supplier.id", supplier.id)
            return Response(
                BrandSupplierSerializer(supplier).data,
                status=status.HTTP_201_CREATED,
            )


class BrandSupplierDetailView(APIView):
    """View for reading, replacing, updating and deleting one supplier."""

    @extend_schema(
        operation_id="get_brand_supplier",
        summary="Get Supplier",
        tags=["Brand Suppliers"],
        parameters=[SUPPLIER_ID_PARAMETER],
        responses={
            200: BrandSupplierSerializer,
            401: {"description": "Unauthorized - Missing or invalid API key"},
            404: {"description": "Supplier not found"},
        },
    )
    def get(self, request: Request, supplier_id: int) -> Response:
        """Get a supplier by id."""
        return async_to_sync(self._handle_get)(request, supplier_id)

    async def _handle_get(self, request: Request, supplier_id: int) -> Response:
        """Async handler for get supplier."""
        with tracer.start_as_current_span("get_brand_supplier") as span:
            span.set_attribute("operation", "get_brand_supplier")
            span.set_attribute("supplier.id", supplier_id)

            with _tracked(span, "get"):
                supplier = await _service().find_one(supplier_id)

            return Response(BrandSupplierSerializer(supplier).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="replace_brand_supplier",
        summary="Replace Supplier",
        description=(
            "Replace every field of a supplier. Omitted optional fields are cleared. "
            "Use PATCH for a partial update."
        ),
        tags=["Brand Suppliers"],
        parameters=[SUPPLIER_ID_PARAMETER],
        request=BrandSupplierRequestSerializer,
        responses={
            200: BrandSupplierSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid API key"},
            404: {"description": "Supplier or brand not found"},
            409: {"description": "Email already registered"},
        },
    )
    def put(self, request: Request, supplier_id: int) -> Response:
        """Replace a supplier."""
        return async_to_sync(self._handle_replace)(request, supplier_id)

    async def _handle_replace(self, request: Request, supplier_id: int) -> Response:
        """Async handler for replace supplier."""
        with tracer.start_as_current_span("replace_brand_supplier") as span:
            span.set_attribute("operation", "replace_brand_supplier")
            span.set_attribute("supplier.id", supplier_id)
            acting_user = _acting_user(request)
            span.set_attribute("user.id", acting_user.user_id)

            serializer = BrandSupplierRequestSerializer(data=request.data)
            if not serializer.is_valid():
                return _invalid(span, serializer.errors)

            with _tracked(span, "replace"):
                supplier = await _service().replace(
                    supplier_id, serializer.to_input(), acting_user
                )

            return Response(BrandSupplierSerializer(supplier).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_brand_supplier",
        summary="Update Supplier",
        description="Change only the fields present in the body.",
        tags=["Brand Suppliers"],
        parameters=[SUPPLIER_ID_PARAMETER],
        request=BrandSupplierRequestSerializer(partial=True),
        responses={
            200: BrandSupplierSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Unauthorized - Missing or invalid API key"},
            404: {"description": "Supplier or brand not found"},
            409: {"description": "Email already registered"},
        },
    )
    def patch(self, request: Request, supplier_id: int) -> Response:
        """Partially update a supplier."""
        return async_to_sync(self._handle_update)(request, supplier_id)

    async def _handle_update(self, request: Request, supplier_id: int) -> Response:
        """Async handler for partial update supplier."""
        with tracer.start_as_current_span("update_brand_supplier") as span:
            span.set_attribute("operation", "update_brand_supplier")
            span.set_attribute("supplier.id", supplier_id)
            acting_user = _acting_user(request)
            span.set_attribute("user.id", acting_user.user_id)

            serializer = BrandSupplierRequestSerializer(data=request.data, partial=True)
            if not serializer.is_valid():
                return _invalid(span, serializer.errors)

            changes = dict(serializer.validated_data)
            span.set_attribute("fields", ",".join(sorted(changes)))

            with _tracked(span, "update"):
                supplier = await _service().update(supplier_id, changes, acting_user)

            return Response(BrandSupplierSerializer(supplier).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_brand_supplier",
        summary="Delete Supplier",
        description="Permanently delete a supplier.",
        tags=["Brand Suppliers"],
        parameters=[SUPPLIER_ID_PARAMETER],
        responses={
            200: {"description": "Supplier deleted successfully"},
            401: {"description": "Unauthorized - Missing or invalid API key"},
            404: {"description": "Supplier not found"},
        },
    )
    def delete(self, request: Request, supplier_id: int) -> Response:
        """Delete a supplier."""
        return async_to_sync(self._handle_delete)(request, supplier_id)

    async def _handle_delete(self, request: Request, supplier_id: int) -> Response:
        """Async handler for delete supplier."""
        with tracer.start_as_current_span("delete_brand_supplier") as span:
            span.set_attribute("operation", "delete_brand_supplier")
            span.set_attribute("supplier.id", supplier_id)
            acting_user = _acting_user(request)
            span.set_attribute("user.id", acting_user.user_id)

            with _tracked(span, "delete"):
                await _service().remove(supplier_id, acting_user)

            return Response(
                {"message": f"Supplier with ID {supplier_id} deleted successfully"},
                status=status.HTTP_200_OK,
            )
