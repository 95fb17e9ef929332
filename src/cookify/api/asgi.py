"""ASGI entrypoint for the Cookify API."""

from cookify.api.app import create_app
from cookify.containers import build_container

app = create_app(build_container())
