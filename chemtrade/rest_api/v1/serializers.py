"""
API Serializers for site content and products

The wire format uses camelCase names, which is what the storefront frontend
already speaks. ``source`` maps them onto the snake_case record attributes.
"""
from __future__ import annotations

from rest_framework import serializers


class ContentEntrySerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Admin view of one content entry.
    """
    content = serializers.CharField(source="live_value")
    draftContent = serializers.CharField(source="draft_value", allow_null=True)
    isPublished = serializers.BooleanField(source="is_published")
    lastPublishedAt = serializers.DateTimeField(source="last_published_at", allow_null=True)
    hasUnpublishedChanges = serializers.BooleanField(source="has_unpublished_changes")


class ContentUpdateBodySerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the body params for the POST content view
    """
    key = serializers.CharField()
    value = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ProductQueryParamsSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the query params for the GET products view
    """
    search = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True)
    includeInactive = serializers.BooleanField(required=False, default=False, source="include_inactive")


class ProductSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for products, both for output and for create/update bodies.
    """
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    sku = serializers.CharField(max_length=100)
    category = serializers.CharField(max_length=100)
    subCategory = serializers.CharField(
        source="sub_category", max_length=100, required=False, allow_blank=True, allow_null=True,
    )
    price = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    casNumber = serializers.CharField(source="cas_number", max_length=255, required=False, allow_blank=True)
    stockQuantity = serializers.IntegerField(source="stock_quantity", required=False, min_value=0)
    isActive = serializers.BooleanField(source="is_active", required=False)
    createdAt = serializers.DateTimeField(source="created", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated", read_only=True)
