from rest_framework.pagination import PageNumberPagination

from core.responses import envelope


class EnvelopePagination(PageNumberPagination):
    """Page-number pagination rendered inside the response envelope."""

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.view = view
        return super().paginate_queryset(queryset, request, view)

    def get_paginated_response(self, data):
        message = getattr(self.view, "list_message", "Retrieved successfully")
        return envelope(
            message,
            data,
            pagination={
                "count": self.page.paginator.count,
                "next": self.get_next_link(),
                "previous": self.get_previous_link(),
                "page_size": self.get_page_size(self.request),
                "total_pages": self.page.paginator.num_pages,
                "current_page": self.page.number,
            },
        )
