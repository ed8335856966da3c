"""Meal parsing service backed by a forced tool call."""

from dataclasses import dataclass

from shakti_planner.domain.meals import MealRequest, MealResult
from shakti_planner.domain.payloads import MealParsePayload
from shakti_planner.services.completions import CompletionClient, ToolField, ToolSchema
from shakti_planner.services.prompts import build_meal_prompt
from shakti_planner.services.validation import extract_payload

PARSE_MEAL_TOOL = ToolSchema(
    name="parse_meal",
    description="Parse meal description and estimate calories",
    fields={
        "foodItem": ToolField(
            type="string",
            description="Normalized, clear description of the food logged",
        ),
        "estimatedCalories": ToolField(
            type="number",
            description="The estimated total calories for this meal entry",
        ),
        "completionSuggestion": ToolField(
            type="string",
            description=(
                "A brief suggestion (max 15 words) to help reach daily target, "
                "or congratulations if target met/exceeded"
            ),
        ),
    },
)


@dataclass
class MealParsingService:
    """Turns a free-text meal description into a calorie estimate."""

    client: CompletionClient

    async def parse(self, request: MealRequest) -> MealResult:
        """Estimate calories for one meal entry."""
        prompt = build_meal_prompt(request)
        raw = await self.client.complete(prompt, PARSE_MEAL_TOOL)
        return extract_payload(raw, PARSE_MEAL_TOOL, MealParsePayload).to_result()
