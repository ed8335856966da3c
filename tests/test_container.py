"""Tests for container wiring."""

import asyncio

from shakti_planner.adapters.openai_completion_client import OpenAICompletionClient
from shakti_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.tracker_service.timezone_name == "Asia/Kolkata"
    assert isinstance(container.goal_planning_service.client, OpenAICompletionClient)
    assert (
        container.goal_planning_service.client
        is container.meal_parsing_service.client
    )
    asyncio.run(container.close_resources())


def test_build_container_without_completion_key(settings) -> None:
    settings.completion_api_key = None

    container = build_container(settings)

    client = container.meal_parsing_service.client
    assert isinstance(client, OpenAICompletionClient)
    assert client.client is None
    asyncio.run(container.close_resources())
