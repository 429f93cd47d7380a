"""ASGI entrypoint for the restaurant directory API."""

from restaurant_directory.api.app import create_app
from restaurant_directory.containers import build_container

app = create_app(build_container())
