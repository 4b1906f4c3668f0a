from drf_yasg.generators import OpenAPISchemaGenerator

from core.enums import ReviewSortOrder


class StoreOpenAPISchemaGenerator(OpenAPISchemaGenerator):
    def get_operation(self, view, path, prefix, method, components, request):
        operation = super().get_operation(view, path, prefix, method, components, request)
        sort_enum = [choice.value for choice in ReviewSortOrder]

        for parameter in getattr(operation, "parameters", None) or []:
            if getattr(parameter, "name", None) == "sortBy":
                parameter.enum = sort_enum

        return operation
