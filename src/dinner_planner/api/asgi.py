"""ASGI entrypoint for the dinner planner API."""

from dinner_planner.api.app import create_app
from dinner_planner.containers import build_container

app = create_app(build_container())
