"""Goal planning service backed by a forced tool call."""

import logging
from dataclasses import dataclass

from shakti_planner.domain.goals import GoalRequest, GoalResult
from shakti_planner.domain.payloads import GoalPlanPayload
from shakti_planner.services.completions import CompletionClient, ToolField, ToolSchema
from shakti_planner.services.prompts import build_goal_prompt
from shakti_planner.services.validation import extract_payload

logger = logging.getLogger(__name__)

PLAN_NUTRITION_TOOL = ToolSchema(
    name="plan_nutrition",
    description="Calculate daily calorie target and provide fitness suggestions",
    fields={
        "dailyCalorieTarget": ToolField(
            type="number",
            description="The recommended daily calorie intake in kcal",
        ),
        "burnSuggestion": ToolField(
            type="string",
            description=(
                "A short, encouraging paragraph (100-150 words) on how to achieve "
                "the goal through exercise and lifestyle changes, specific to "
                "Indian context"
            ),
        ),
    },
)


@dataclass
class GoalPlanningService:
    """Turns a weight goal into a daily calorie target."""

    client: CompletionClient

    async def plan(self, request: GoalRequest) -> GoalResult:
        """Plan a daily calorie target for the goal."""
        prompt = build_goal_prompt(request)
        raw = await self.client.complete(prompt, PLAN_NUTRITION_TOOL)
        payload = extract_payload(raw, PLAN_NUTRITION_TOOL, GoalPlanPayload)
        result = payload.to_result()
        logger.info(
            "Planned goal",
            extra={
                "direction": request.direction.value,
                "daily_calorie_target": result.daily_calorie_target,
            },
        )
        return result
