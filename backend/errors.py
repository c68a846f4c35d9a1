from typing import Optional


class PlanRelayError(Exception):
    """Base error for a failed plan generation request.

    Carries the HTTP status and the message shown to the caller; anything
    meant only for diagnosis is logged where the error is raised.
    """

    status_code = 500
    message = "Unexpected server error."

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None) -> None:
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class MissingFieldsError(PlanRelayError):
    status_code = 400
    message = "Missing required fields. Expect goal, experience, style, daysPerWeek."


class MissingCredentialError(PlanRelayError):
    status_code = 500
    message = "OPENAI_API_KEY is not configured on the server."


class UpstreamError(PlanRelayError):
    status_code = 502
    message = "Failed to generate workout plan from AI."


class MalformedUpstreamResponseError(PlanRelayError):
    status_code = 500
    message = "AI response was not valid JSON."


class PlanSchemaError(PlanRelayError):
    status_code = 500
    message = "Workout plan missing 'weeks' array in AI response."
