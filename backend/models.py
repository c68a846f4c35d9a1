from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

REQUIRED_FIELDS = ("goal", "experience", "style", "daysPerWeek")


def is_blank(value: Any) -> bool:
    """True for the values a JavaScript client treats as falsy.

    Empty lists and objects count as present, as they do in JavaScript.
    """
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)):
        return value == 0 or value != value  # NaN
    return False


class PlanRequest(BaseModel):
    # No type or range checks; values reach the prompt verbatim.
    # Only the camelCase wire name fills days_per_week.
    model_config = ConfigDict(populate_by_name=False)

    goal: Any = Field(default=None, description="e.g. fat-loss | muscle-gain | strength")
    experience: Any = Field(default=None, description="beginner | intermediate | advanced")
    style: Any = Field(default=None, description="Weightlifting | Pilates | HIIT | Cardio | Outdoor | Home Workouts")
    days_per_week: Any = Field(default=None, alias="daysPerWeek")

    def missing_fields(self) -> List[str]:
        values = self.model_dump(by_alias=True)
        return [name for name in REQUIRED_FIELDS if is_blank(values.get(name))]


# --- Plan shape requested from the model (documented, not enforced) ---
class Exercise(BaseModel):
    name: str
    sets: int
    reps: str
    equipment: str
    notes: str


class PlanDay(BaseModel):
    id: str
    dayName: str
    title: str
    focus: str
    durationMinutes: int
    exerciseCount: int
    style: str
    experience: str
    exercises: List[Exercise]


class PlanWeek(BaseModel):
    weekNumber: int
    focus: str
    days: List[PlanDay]


class PlanSummary(BaseModel):
    title: str
    description: str
    notes: str


class WorkoutPlan(BaseModel):
    weekCount: int
    daysPerWeek: int
    summary: PlanSummary
    weeks: List[PlanWeek]


class PlanEnvelope(BaseModel):
    ok: bool = True
    plan: WorkoutPlan


class ErrorBody(BaseModel):
    error: str
    details: Optional[str] = None


class HealthStatus(BaseModel):
    status: str
    service: str


def error_body(error: str, details: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error}
    if details is not None:
        body["details"] = details
    return body
