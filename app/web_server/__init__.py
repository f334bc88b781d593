"""REST API for the datagen service."""

from app.web_server.web_server import DatagenWebServer

__all__ = ["DatagenWebServer"]
