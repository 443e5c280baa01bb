from __future__ import annotations

from flasgger import Swagger
from flask import Flask

from ..container import Container
from ..core.constants import API_DESCRIPTION, API_TITLE, API_VERSION, OPENAPI_VERSION

DOCS_ROUTE = "/api-docs/"
OPENAPI_JSON_ROUTE = "/api-docs/openapi.json"


def register(app: Flask, container: Container) -> Swagger:
    """Serve Swagger UI at /api-docs built from the YAML in route docstrings."""

    info = {"title": API_TITLE, "version": API_VERSION, "description": API_DESCRIPTION}
    contact = {
        "name": app.config.get("API_CONTACT_NAME"),
        "email": app.config.get("API_CONTACT_EMAIL"),
    }
    contact = {k: v for k, v in contact.items() if v}
    if contact:
        info["contact"] = contact

    config = {
        "headers": [],
        "specs": [
            {
                "endpoint": "openapi",
                "route": OPENAPI_JSON_ROUTE,
                "rule_filter": lambda rule: True,
                "model_filter": lambda tag: True,
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": DOCS_ROUTE,
        "openapi": OPENAPI_VERSION,
        "title": API_TITLE,
    }
    template = {"openapi": OPENAPI_VERSION, "info": info}
    return Swagger(app, config=config, template=template)
