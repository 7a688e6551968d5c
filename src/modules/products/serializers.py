"""Product DRF serializers for API output.

Input is validated by the rule set in ``rules.py`` and converted by the
DTOs in ``dtos.py``; this serializer only shapes responses.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
