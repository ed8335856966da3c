"""Tests for completion response validation."""

import json

import pytest

from shakti_planner.domain.payloads import GoalPlanPayload, MealParsePayload
from shakti_planner.errors import MalformedPayloadError, NoStructuredPayloadError
from shakti_planner.services.goals import PLAN_NUTRITION_TOOL
from shakti_planner.services.meals import PARSE_MEAL_TOOL
from shakti_planner.services.validation import extract_payload
from tests.conftest import tool_completion

VALID_MEAL = {
    "foodItem": "Masala Dosa",
    "estimatedCalories": 420,
    "completionSuggestion": "A glass of buttermilk would pair well.",
}


def _meal_with(**changes: object) -> dict[str, object]:
    payload = dict(VALID_MEAL)
    payload.update(changes)
    return payload


def test_extracts_meal_payload() -> None:
    raw = tool_completion("parse_meal", VALID_MEAL)

    payload = extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)

    assert payload.food_item == "Masala Dosa"
    assert payload.estimated_calories == 420
    assert isinstance(payload.estimated_calories, int)


def test_accepts_argument_object_instead_of_string() -> None:
    raw = tool_completion("parse_meal", VALID_MEAL)
    raw["choices"][0]["message"]["tool_calls"][0]["function"]["arguments"] = VALID_MEAL

    payload = extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)

    assert payload.completion_suggestion == VALID_MEAL["completionSuggestion"]


def test_rejects_missing_estimated_calories() -> None:
    payload = dict(VALID_MEAL)
    del payload["estimatedCalories"]
    raw = tool_completion("parse_meal", payload)

    with pytest.raises(MalformedPayloadError) as excinfo:
        extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)

    assert "estimatedCalories" in excinfo.value.message
    assert excinfo.value.raw_arguments == json.dumps(payload)


@pytest.mark.parametrize(
    "changes",
    [
        {"estimatedCalories": "not a number"},
        {"estimatedCalories": "350"},
        {"estimatedCalories": True},
        {"estimatedCalories": -10},
        {"foodItem": "   "},
        {"foodItem": 42},
        {"completionSuggestion": None},
    ],
)
def test_rejects_wrong_field_types(changes: dict[str, object]) -> None:
    raw = tool_completion("parse_meal", _meal_with(**changes))

    with pytest.raises(MalformedPayloadError):
        extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)


def test_rejects_non_finite_numbers() -> None:
    raw = tool_completion(
        "parse_meal",
        '{"foodItem": "Tea", "estimatedCalories": NaN, "completionSuggestion": "ok"}',
    )

    with pytest.raises(MalformedPayloadError):
        extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)


def test_rejects_invalid_json_arguments() -> None:
    raw = tool_completion("parse_meal", '{"foodItem": "Tea",')

    with pytest.raises(MalformedPayloadError):
        extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)


@pytest.mark.parametrize("target", [0, -1500])
def test_rejects_non_positive_calorie_target(target: int) -> None:
    raw = tool_completion(
        "plan_nutrition",
        {"dailyCalorieTarget": target, "burnSuggestion": "Walk daily."},
    )

    with pytest.raises(MalformedPayloadError):
        extract_payload(raw, PLAN_NUTRITION_TOOL, GoalPlanPayload)


def test_missing_tool_call_is_no_structured_payload() -> None:
    raw = tool_completion("parse_meal", VALID_MEAL)
    raw["choices"][0]["message"]["tool_calls"] = None
    raw["choices"][0]["message"]["content"] = "Roughly 400 kcal."

    with pytest.raises(NoStructuredPayloadError):
        extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)


def test_empty_choices_is_no_structured_payload() -> None:
    with pytest.raises(NoStructuredPayloadError):
        extract_payload({"choices": []}, PARSE_MEAL_TOOL, MealParsePayload)


def test_other_tool_is_no_structured_payload() -> None:
    raw = tool_completion("plan_nutrition", VALID_MEAL)

    with pytest.raises(NoStructuredPayloadError):
        extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload)
