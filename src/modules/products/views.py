"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet mounted at
``/api/products``.  Every action declaring rules runs behind
``validate``: invalid input is answered with 400 before the action body
executes.  ``ProductNotFound`` is translated into 404 here -- the view
never swallows generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import error_response, errors_from_pydantic, validate
from modules.products.constants import PRODUCT_DELETED, PRODUCT_NOT_FOUND
from modules.products.dtos import CreateProductDTO, ReplaceProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.rules import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    REPLACE_PRODUCT_RULES,
)
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService

# ---------------------------------------------------------------------------
# OpenAPI descriptions
# ---------------------------------------------------------------------------

_ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="The ID of the product",
)
_PRODUCT_RESPONSE = inline_serializer(
    "ProductResponse", fields={"data": ProductSerializer()}
)
_PRODUCT_LIST_RESPONSE = inline_serializer(
    "ProductListResponse", fields={"data": ProductSerializer(many=True)}
)
_PRODUCT_DELETED_RESPONSE = inline_serializer(
    "ProductDeletedResponse", fields={"data": serializers.CharField()}
)
_CREATE_REQUEST = inline_serializer(
    "ProductCreateRequest",
    fields={
        "name": serializers.CharField(),
        "price": serializers.FloatField(),
    },
)
_REPLACE_REQUEST = inline_serializer(
    "ProductReplaceRequest",
    fields={
        "name": serializers.CharField(),
        "price": serializers.FloatField(),
        "availability": serializers.BooleanField(),
    },
)
_INVALID_ID = OpenApiResponse(description="Bad request - Invalid ID")
_NOT_FOUND = OpenApiResponse(description="Product not found")


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        responses={200: _PRODUCT_LIST_RESPONSE},
    ),
    retrieve=extend_schema(
        summary="Get a product by ID",
        parameters=[_ID_PARAMETER],
        responses={200: _PRODUCT_RESPONSE, 400: _INVALID_ID, 404: _NOT_FOUND},
    ),
    create=extend_schema(
        summary="Creates a new product",
        request=_CREATE_REQUEST,
        responses={
            201: _PRODUCT_RESPONSE,
            400: OpenApiResponse(description="Bad request - Invalid input data"),
        },
    ),
    update=extend_schema(
        summary="Update a product with user input",
        parameters=[_ID_PARAMETER],
        request=_REPLACE_REQUEST,
        responses={
            200: _PRODUCT_RESPONSE,
            400: OpenApiResponse(description="Bad request - Invalid ID or Invalid input data"),
            404: _NOT_FOUND,
        },
    ),
    partial_update=extend_schema(
        summary="Update product availability",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={200: _PRODUCT_RESPONSE, 400: _INVALID_ID, 404: _NOT_FOUND},
    ),
    destroy=extend_schema(
        summary="Deletes a product by a given ID",
        parameters=[_ID_PARAMETER],
        responses={200: _PRODUCT_DELETED_RESPONSE, 400: _INVALID_ID, 404: _NOT_FOUND},
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Responses wrap the payload in ``{"data": ...}``.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_url_kwarg = "id"
    # Any segment reaches the id rule, so "1.5" is a 400 and not a routing 404.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"error": PRODUCT_NOT_FOUND},
            status=status.HTTP_404_NOT_FOUND,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @validate(*PRODUCT_ID_RULES)
    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @validate(*CREATE_PRODUCT_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        try:
            dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        except PydanticValidationError as exc:
            return error_response(errors_from_pydantic(exc))

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @validate(*REPLACE_PRODUCT_RULES)
    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        data = request.data
        try:
            dto = ReplaceProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            return error_response(errors_from_pydantic(exc))

        try:
            product = self._service.replace_product(int(id), dto)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate(*PRODUCT_ID_RULES)
    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}

        Toggles availability; the request body is ignored.
        """
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate(*PRODUCT_ID_RULES)
    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return self._not_found()
        return Response({"data": PRODUCT_DELETED})
