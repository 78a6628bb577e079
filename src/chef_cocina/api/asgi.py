"""ASGI entrypoint for the chef assistant API."""

from chef_cocina.api.app import create_app
from chef_cocina.containers import build_container

app = create_app(build_container())
