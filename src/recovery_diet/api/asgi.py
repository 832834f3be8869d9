"""ASGI entrypoint for the recovery diet API."""

from recovery_diet.api.app import create_app
from recovery_diet.containers import build_container

app = create_app(build_container())
