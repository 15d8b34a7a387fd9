"""ASGI entrypoint for the diet analyzer API."""

from diet_analyzer.api.app import create_app
from diet_analyzer.containers import build_container

app = create_app(build_container())
