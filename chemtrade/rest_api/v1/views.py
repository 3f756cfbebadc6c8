"""
Site content and catalog API Views
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ViewSet

from chemtrade.core.catalog import api as catalog_api
from chemtrade.core.content import api as content_api

from ..utils import APIErrorsMixin, view_auth_classes
from .permissions import MethodPermissions
from .serializers import (
    ContentEntrySerializer,
    ContentUpdateBodySerializer,
    ProductQueryParamsSerializer,
    ProductSerializer,
)


@view_auth_classes
class PublicContentView(APIErrorsMixin, APIView):
    """
    View to read the published site content.

    **Example Requests**
        GET api/v1/content/

    **Query Returns**
        * 200 - Success

        Response: ``{key: live_value}`` for every published entry. Drafts and
        never-published entries are not included.
    """
    permission_classes = [MethodPermissions]
    perms_map = {
        "GET": "chemtrade_content.view_contententry",
        "HEAD": "chemtrade_content.view_contententry",
    }

    def get(self, request: Request) -> Response:
        return Response(content_api.get_published_content())


@view_auth_classes
class AdminContentView(APIErrorsMixin, APIView):
    """
    View to read all content with drafts, or to save a draft.

    **Example Requests**
        GET api/v1/admin/content/
        POST api/v1/admin/content/
        {
            "key": "home.hero_title",
            "value": "Laboratory chemicals, delivered"
        }

    **Query Returns**
        * 200 - Success
        * 400 - Invalid body
        * 403 - Permission denied

        GET response: ``{key: {content, draftContent, isPublished,
        lastPublishedAt, hasUnpublishedChanges}}``. POST returns the updated
        entry in the same shape plus its key.
    """
    permission_classes = [MethodPermissions]
    perms_map = {
        "GET": "chemtrade_content.view_draft_contententry",
        "HEAD": "chemtrade_content.view_draft_contententry",
        "POST": "chemtrade_content.change_contententry",
    }

    def get(self, request: Request) -> Response:
        entries = content_api.get_all_content()
        return Response({
            key: ContentEntrySerializer(entry).data
            for key, entry in entries.items()
        })

    def post(self, request: Request) -> Response:
        body = ContentUpdateBodySerializer(data=request.data)
        body.is_valid(raise_exception=True)

        entry = content_api.update_draft(
            body.validated_data["key"],
            body.validated_data["value"],
        )
        return Response({"key": entry.key, **ContentEntrySerializer(entry).data})


@view_auth_classes
class PublishContentView(APIErrorsMixin, APIView):
    """
    View to publish every pending draft.

    **Example Requests**
        POST api/v1/admin/content/publish/

    **Query Returns**
        * 200 - Success
        * 403 - Permission denied
    """
    permission_classes = [MethodPermissions]
    perms_map = {
        "POST": "chemtrade_content.publish_contententry",
    }

    def post(self, request: Request) -> Response:
        result = content_api.publish_all_drafts()
        return Response({
            "message": "Content published successfully",
            "keys": result.keys,
        })


@view_auth_classes
class ProductView(APIErrorsMixin, ViewSet):
    """
    View to list and retrieve catalog products.

    **List Query Parameters**
        * search (optional) - Matches name, SKU, CAS number, description and
          sub-category (case-insensitive)
        * category (optional) - Only products in this category
        * includeInactive (optional) - Also list deactivated products

    **Example Requests**
        GET api/v1/products/
        GET api/v1/products/?search=acetone
        GET api/v1/products/?category=solvents
        GET api/v1/products/:id/

    **Query Returns**
        * 200 - Success
        * 404 - Product not found
    """
    permission_classes = [MethodPermissions]
    perms_map = {
        "GET": "chemtrade_catalog.view_product",
        "HEAD": "chemtrade_catalog.view_product",
    }

    def list(self, request: Request) -> Response:
        query_params = ProductQueryParamsSerializer(data=request.query_params.dict())
        query_params.is_valid(raise_exception=True)
        products = catalog_api.get_products(
            search=query_params.validated_data.get("search"),
            category=query_params.validated_data.get("category"),
            include_inactive=query_params.validated_data.get("include_inactive", False),
        )
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk=None) -> Response:
        product = catalog_api.get_product(pk)
        return Response(ProductSerializer(product).data)


@view_auth_classes
class AdminProductView(APIErrorsMixin, ViewSet):
    """
    View to create, update or delete catalog products.

    **Create Example Requests**
        POST api/v1/admin/products/
        {
            "name": "Acetone",
            "sku": "ACE-001",
            "category": "solvents",
            "subCategory": "ketones",
            "price": "12.50"
        }

    **Update Example Requests**
        PUT api/v1/admin/products/:id/      - Only the fields sent are changed
        {
            "category": "organics"
        }

    **Delete Example Requests**
        DELETE api/v1/admin/products/:id/

    **Query Returns**
        * 200 - Success (201 on create)
        * 400 - Invalid body or duplicate SKU
        * 403 - Permission denied
        * 404 - Product not found
    """
    permission_classes = [MethodPermissions]
    perms_map = {
        "POST": "chemtrade_catalog.add_product",
        "PUT": "chemtrade_catalog.change_product",
        "PATCH": "chemtrade_catalog.change_product",
        "DELETE": "chemtrade_catalog.delete_product",
    }

    def create(self, request: Request) -> Response:
        body = ProductSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        product = catalog_api.create_product(**body.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk=None) -> Response:
        body = ProductSerializer(data=request.data, partial=True)
        body.is_valid(raise_exception=True)
        product = catalog_api.update_product(pk, **body.validated_data)
        return Response(ProductSerializer(product).data)

    def partial_update(self, request: Request, pk=None) -> Response:
        return self.update(request, pk)

    def destroy(self, request: Request, pk=None) -> Response:
        catalog_api.delete_product(pk)
        return Response({"message": "Product deleted"})
