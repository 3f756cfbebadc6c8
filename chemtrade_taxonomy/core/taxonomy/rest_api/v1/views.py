"""
Taxonomy API Views
"""
from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from chemtrade.rest_api.utils import APIErrorsMixin, view_auth_classes
from chemtrade.rest_api.v1.permissions import MethodPermissions

from ... import api
from .serializers import NameBodySerializer, TaxonomyChangeSerializer, WorkingSetSerializer

_PERMS_MAP = {
    "GET": "chemtrade_taxonomy.view_taxonomy",
    "HEAD": "chemtrade_taxonomy.view_taxonomy",
    "POST": "chemtrade_taxonomy.change_taxonomy",
    "PUT": "chemtrade_taxonomy.change_taxonomy",
    "PATCH": "chemtrade_taxonomy.change_taxonomy",
    "DELETE": "chemtrade_taxonomy.change_taxonomy",
}


class TaxonomyBaseView(APIErrorsMixin, APIView):
    """
    Shared permissions and response handling for the taxonomy views.
    """
    permission_classes = [MethodPermissions]
    perms_map = _PERMS_MAP

    def _name_from_body(self, request: Request) -> str:
        body = NameBodySerializer(data=request.data)
        body.is_valid(raise_exception=True)
        return body.validated_data["name"]

    def _change_response(self, change, status_code=status.HTTP_200_OK) -> Response:
        return Response(TaxonomyChangeSerializer(change).data, status=status_code)


@view_auth_classes
class TaxonomyView(TaxonomyBaseView):
    """
    View to get the admin's category working set.

    **Example Requests**
        GET api/v1/admin/taxonomy/

    **Query Returns**
        * 200 - Success
        * 403 - Permission denied

        Response:
          {
            "categories": ["acids", "solvents"],
            "subCategories": {"acids": ["strong", "weak"], "solvents": []}
          }
    """

    def get(self, request: Request) -> Response:
        return Response(WorkingSetSerializer(api.get_working_set()).data)


@view_auth_classes
class CategoriesView(TaxonomyBaseView):
    """
    View to add a category.

    **Example Requests**
        POST api/v1/admin/taxonomy/categories/
        {
            "name": "Acids"
        }

    **Query Returns**
        * 201 - Success
        * 400 - Empty or duplicate name
        * 403 - Permission denied

    Every taxonomy edit is published immediately.
    """

    def post(self, request: Request) -> Response:
        change = api.add_category(self._name_from_body(request))
        return self._change_response(change, status.HTTP_201_CREATED)


@view_auth_classes
class CategoryView(TaxonomyBaseView):
    """
    View to rename or delete a category.

    **Example Requests**
        PATCH api/v1/admin/taxonomy/categories/:name/     - Rename, moving products along
        {
            "name": "organics"
        }
        DELETE api/v1/admin/taxonomy/categories/:name/    - Products keep the old name

    **Query Returns**
        * 200 - Success
        * 400 - Empty, duplicate or protected name
        * 403 - Permission denied
        * 404 - Category not found
    """

    def patch(self, request: Request, category: str) -> Response:
        change = api.rename_category(category, self._name_from_body(request))
        return self._change_response(change)

    def put(self, request: Request, category: str) -> Response:
        return self.patch(request, category)

    def delete(self, request: Request, category: str) -> Response:
        return self._change_response(api.delete_category(category))


@view_auth_classes
class SubCategoriesView(TaxonomyBaseView):
    """
    View to add a sub-category to a category.

    **Example Requests**
        POST api/v1/admin/taxonomy/categories/:name/subcategories/
        {
            "name": "weak"
        }

    **Query Returns**
        * 201 - Success
        * 400 - Empty or duplicate name
        * 403 - Permission denied
        * 404 - Category not found
    """

    def post(self, request: Request, category: str) -> Response:
        change = api.add_sub_category(category, self._name_from_body(request))
        return self._change_response(change, status.HTTP_201_CREATED)


@view_auth_classes
class SubCategoryView(TaxonomyBaseView):
    """
    View to rename or delete a sub-category.

    **Example Requests**
        PATCH api/v1/admin/taxonomy/categories/:name/subcategories/:sub/
        {
            "name": "dilute"
        }
        DELETE api/v1/admin/taxonomy/categories/:name/subcategories/:sub/

    **Query Returns**
        * 200 - Success
        * 400 - Empty or duplicate name
        * 403 - Permission denied
        * 404 - Category or sub-category not found
    """

    def patch(self, request: Request, category: str, sub_category: str) -> Response:
        change = api.rename_sub_category(category, sub_category, self._name_from_body(request))
        return self._change_response(change)

    def put(self, request: Request, category: str, sub_category: str) -> Response:
        return self.patch(request, category, sub_category)

    def delete(self, request: Request, category: str, sub_category: str) -> Response:
        return self._change_response(api.delete_sub_category(category, sub_category))
