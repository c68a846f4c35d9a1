from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from .config import RelayConfig
from .errors import (
    MalformedUpstreamResponseError,
    MissingCredentialError,
    MissingFieldsError,
    PlanSchemaError,
    UpstreamError,
)
from .models import PlanRequest
from .prompts import build_messages, build_prompt

logger = logging.getLogger(__name__)


class PlanRelay:
    def __init__(self, cfg: Optional[RelayConfig] = None) -> None:
        self.cfg = cfg or RelayConfig()
        if not self.cfg.api_key:
            logger.warning(
                "OPENAI_API_KEY is not set; the /api/generate-workout-plan route will fail."
            )

    def generate_plan(self, req: PlanRequest) -> Dict[str, Any]:
        if req.missing_fields():
            raise MissingFieldsError()
        if not self.cfg.api_key:
            raise MissingCredentialError()

        prompt = build_prompt(req.goal, req.experience, req.style, req.days_per_week)
        content = self._complete(prompt)
        return self._parse_plan(content)

    # --- internals ---
    def _complete(self, prompt: str) -> str:
        resp = requests.post(
            self.cfg.completions_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.cfg.api_key}",
            },
            json={
                "model": self.cfg.model,
                "messages": build_messages(prompt),
                "temperature": self.cfg.temperature,
            },
        )
        if not 200 <= resp.status_code < 300:
            logger.error("OpenAI error (%s): %s", resp.status_code, resp.text)
            raise UpstreamError(details=resp.text)
        return self._first_content(resp.json())

    @staticmethod
    def _first_content(data: Any) -> str:
        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            return "{}"
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        return content or "{}"

    @staticmethod
    def _parse_plan(content: str) -> Dict[str, Any]:
        try:
            plan = json.loads(content)
        except (TypeError, ValueError) as e:
            logger.error("JSON parse error from OpenAI: %s\n%s", e, content)
            raise MalformedUpstreamResponseError() from e

        if not isinstance(plan, dict) or not isinstance(plan.get("weeks"), list):
            raise PlanSchemaError()
        return plan
