"""
API Serializers for the catalog taxonomy
"""
from __future__ import annotations

from rest_framework import serializers


class WorkingSetSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for a TaxonomyWorkingSet.

    Sub-category names are sorted; categories keep their working-set order.
    """
    categories = serializers.ListField(child=serializers.CharField())
    subCategories = serializers.SerializerMethodField()

    def get_subCategories(self, working_set) -> dict[str, list[str]]:  # pylint: disable=invalid-name
        return {
            name: sorted(working_set.sub_categories.get(name, ()))
            for name in working_set.categories
        }


class TaxonomyChangeSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the result of a taxonomy edit.
    """
    taxonomy = WorkingSetSerializer(source="working_set")
    productsChanged = serializers.IntegerField(source="products_changed")


class NameBodySerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the body of the add/rename category and sub-category views
    """
    name = serializers.CharField(allow_blank=True)
