"""ASGI entrypoint for the memorial tributes API."""

from memorial_tributes.api.app import create_app
from memorial_tributes.containers import build_container

app = create_app(build_container())
