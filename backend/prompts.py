from langchain_core.prompts import PromptTemplate


SYSTEM_PROMPT = "You are a helpful fitness coach that responds ONLY with valid JSON."

# Literal braces in the JSON shape are doubled for f-string formatting.
PLAN_PROMPT = PromptTemplate.from_template(
    """
    You are a professional strength & conditioning coach creating a safe, realistic workout plan.

    User profile:
    - Goal: {goal}
    - Experience level: {experience}
    - Preferred workout style: {style}
    - Days per week: {days_per_week}
    - Duration: 6–8 weeks total

    Requirements:
    1. Create a structured training plan that lasts 6 weeks by default (you may go up to 8 if it makes sense).
    2. Use the specified number of training days per week ({days_per_week}) and fill each day with an appropriate workout.
    3. Match intensity and complexity to the user's experience level.
    4. Respect the style (e.g., Weightlifting, Pilates, HIIT, Cardio, Outdoor, Home Workouts).
    5. Include rest or active recovery days where appropriate.
    6. Avoid unsafe volume or crazy supersets. Assume normal healthy adult with no injuries.

    Return ONLY valid JSON with this exact shape (no extra text):

    {{
    "weekCount": number,
    "daysPerWeek": number,
    "summary": {{
        "title": string,
        "description": string,
        "notes": string
    }},
    "weeks": [
        {{
        "weekNumber": number,
        "focus": string,
        "days": [
            {{
            "id": string,
            "dayName": string,
            "title": string,
            "focus": string,
            "durationMinutes": number,
            "exerciseCount": number,
            "style": string,
            "experience": string,
            "exercises": [
                {{
                "name": string,
                "sets": number,
                "reps": string,
                "equipment": string,
                "notes": string
                }}
            ]
            }}
        ]
        }}
    ]
    }}
    """
)


def render_value(value) -> str:
    """Render a JSON value the way it reads in the request body."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_prompt(goal, experience, style, days_per_week) -> str:
    return PLAN_PROMPT.format(
        goal=render_value(goal),
        experience=render_value(experience),
        style=render_value(style),
        days_per_week=render_value(days_per_week),
    )


def build_messages(prompt: str) -> list:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]
