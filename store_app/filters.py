import django_filters
from django.db.models import Q

from .models import Product


class ProductFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method="filter_search")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    brand = django_filters.CharFilter(field_name="brand", lookup_expr="icontains")
    vendor = django_filters.CharFilter(field_name="vendor_id", lookup_expr="exact")
    featured = django_filters.BooleanFilter(field_name="featured")

    class Meta:
        model = Product
        fields = {
            "title": ["icontains"],
            "variant_state": ["exact"],
            "created_at": ["gte", "lte"],
        }

    def filter_search(self, queryset, name, value):
        """Search in title, description, brand and category."""
        return queryset.filter(
            Q(title__icontains=value)
            | Q(description__icontains=value)
            | Q(brand__icontains=value)
            | Q(category__icontains=value)
        )
