"""ASGI entrypoint serving the planner and tracker endpoints."""

from shakti_planner.api.app import create_app
from shakti_planner.config import Settings
from shakti_planner.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
