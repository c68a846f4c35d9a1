import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import HOST, LOG_LEVEL, PORT, SERVICE_NAME
from .errors import MissingFieldsError, PlanRelayError
from .models import ErrorBody, HealthStatus, PlanEnvelope, PlanRequest, error_body
from .relay import PlanRelay

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Flexyn Workout Plan API", version="0.1.0")

# CORS (any frontend may call the relay)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

relay = PlanRelay()


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    # A body that is not a JSON object carries none of the required fields.
    err = MissingFieldsError()
    return JSONResponse(status_code=err.status_code, content=error_body(err.message))


@app.get("/", response_model=HealthStatus)
def root():
    return {"status": "ok", "service": SERVICE_NAME}


@app.post(
    "/api/generate-workout-plan",
    responses={
        200: {"model": PlanEnvelope},
        400: {"model": ErrorBody},
        500: {"model": ErrorBody},
        502: {"model": ErrorBody},
    },
)
def generate_workout_plan(request: PlanRequest):
    try:
        plan = relay.generate_plan(request)
    except PlanRelayError as e:
        return JSONResponse(status_code=e.status_code, content=error_body(e.message, e.details))
    except Exception:
        logger.exception("Server error in /api/generate-workout-plan")
        return JSONResponse(status_code=500, content=error_body("Unexpected server error."))
    return {"ok": True, "plan": plan}


def run() -> None:
    logger.info("Flexyn backend running on http://localhost:%s", PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
