"""ASGI entrypoint for the culinary companion API."""

from culinary_companion.api.app import create_app
from culinary_companion.containers import build_container

app = create_app(build_container())
