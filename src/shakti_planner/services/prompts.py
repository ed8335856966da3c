"""Prompt construction for goal planning and meal parsing."""

from dataclasses import dataclass

from shakti_planner.domain.goals import GoalDirection, GoalRequest
from shakti_planner.domain.meals import MealRequest

GOAL_SYSTEM_PROMPT = """You are a specialized Indian Nutrition Planner and Fitness Coach. \
Your task is to calculate a daily calorie target based on the user's weight goal.

CALCULATION RULES:
1. Base metabolic rate for an average adult: 2000 kcal/day.
2. Losing 1 kg of body weight needs a deficit of about 7700 kcal.
3. Safe weight loss: 0.5-1 kg per week. Safe weight gain: about 0.5 kg per week.

DAILY TARGET BANDS (start from the 2000 kcal base):
- Weight loss:
  * 1-3 kg: 1600-1800 kcal/day
  * 3-7 kg: 1400-1600 kcal/day
  * 7 kg or more: 1300-1500 kcal/day
- Weight gain:
  * 1-3 kg: 2300-2500 kcal/day
  * 3-7 kg: 2500-2700 kcal/day
  * 7 kg or more: 2700-3000 kcal/day
- Maintenance: stay close to the 2000 kcal base (1900-2100 kcal/day).

Choose one value inside the band that applies to the weight difference.
Provide culturally appropriate fitness suggestions \
(yoga, walking, cricket, home exercises, etc.)."""

MEAL_SYSTEM_PROMPT = """You are an expert in parsing natural language descriptions \
of Indian meals and estimating their calorie count. Handle variations like \
'extra roti', 'less oil', 'small bowl' and 'large serving'.

Be accurate for common Indian dishes:
- Dal, Sabzi (vegetables), Rice, Roti/Chapati, Paratha
- Poha, Idli, Dosa, Upma
- Chicken Curry, Fish Curry, Paneer dishes
- Samosa, Pakora, Namkeen
- Chai, Lassi, Juice, Shakes
- Sweets: Gulab Jamun, Jalebi, Barfi

Consider:
- Portion sizes (small/medium/large, extra servings, number of pieces)
- Cooking methods (fried, steamed, less oil)
- Accompaniments (ghee, butter, oil quantity)

Provide realistic calorie estimates based on typical Indian portion sizes."""

_DIRECTION_LABELS = {
    GoalDirection.GAIN: "Weight Gain",
    GoalDirection.LOSE: "Weight Loss",
    GoalDirection.MAINTAIN: "Maintain Weight",
}


@dataclass(frozen=True)
class PromptPair:
    """System and user messages for one completion request."""

    system: str
    user: str


def build_goal_prompt(request: GoalRequest) -> PromptPair:
    """Render the goal planning prompt."""
    user = (
        f"Goal: {request.goal_label}\n"
        f"Current Weight: {_render_number(request.current_weight)} kg\n"
        f"Target Weight: {_render_number(request.target_weight)} kg\n"
        f"Weight Difference: {request.weight_difference:.1f} kg\n"
        f"Direction: {_DIRECTION_LABELS[request.direction]}\n\n"
        "Calculate the appropriate daily calorie target based on the weight "
        "difference and provide fitness suggestions."
    )
    return PromptPair(system=GOAL_SYSTEM_PROMPT, user=user)


def build_meal_prompt(request: MealRequest) -> PromptPair:
    """Render the meal parsing prompt."""
    user = (
        f'Meal Description: "{request.description}"\n'
        f"Current day's calories: {_render_number(request.current_calories)} kcal\n"
        f"Daily target: {_render_number(request.target_calories)} kcal\n\n"
        "Parse this meal and estimate calories. If the user is under target, "
        "provide a brief encouraging suggestion (max 15 words) on what they "
        "could add to reach their goal. If the target is met or exceeded, "
        "give a brief acknowledgement instead."
    )
    return PromptPair(system=MEAL_SYSTEM_PROMPT, user=user)


def _render_number(value: float) -> str:
    """Render a number the way the caller wrote it, without rounding."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)
