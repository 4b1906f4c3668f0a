"""Swagger/OpenAPI configuration for the Storefront API."""

import os


SWAGGER_GENERATOR_CLASS = "config.docs.swagger_generator.StoreOpenAPISchemaGenerator"


def get_swagger_settings() -> dict:
    """Return Swagger UI configuration."""
    environment = os.getenv("DJANGO_ENV", "development")
    is_production = environment == "production"

    return {
        "SECURITY_DEFINITIONS": {},
        "USE_SESSION_AUTH": False,
        "JSON_EDITOR": True,
        "SUPPORTED_SUBMIT_METHODS": ["get", "post", "put", "delete", "patch"],
        "DOC_EXPANSION": "none",
        "OPERATIONS_SORTER": "alpha",
        "TAGS_SORTER": "alpha",
        "DEEP_LINKING": True,
        "DEFAULT_MODEL_RENDERING": "model",
        "DEFAULT_MODEL_DEPTH": 3,
        "VALIDATOR_URL": None if is_production else "https://validator.swagger.io/validator",
        "DISPLAY_OPERATION_ID": False,
        "DEFAULT_API_URL": os.getenv("SWAGGER_DEFAULT_API_URL", "http://localhost"),
        "DEFAULT_GENERATOR_CLASS": SWAGGER_GENERATOR_CLASS,
        "TAGS": [
            {"name": "Products", "description": "Register, query, update and delete products"},
            {"name": "Variants", "description": "Priced and stocked product variants and variant groups"},
            {"name": "Combinations", "description": "Product bundles built from a parent and child products"},
            {"name": "Reviews", "description": "Reviews, reactions, replies and statistics"},
            {"name": "Profiles", "description": "User and vendor profiles referenced by products and reviews"},
        ],
    }


SWAGGER_SETTINGS = get_swagger_settings()
SWAGGER_USE_SESSION_AUTH = False
