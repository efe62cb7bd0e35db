"""Ollama client implementation.

This module provides a client for interacting with an Ollama vision model.
"""

from __future__ import annotations

import asyncio
import json
import re
import urllib.error
import urllib.request
from typing import Any, Optional

import structlog

from smart_schedule.config import Settings
from smart_schedule.exceptions import OllamaConnectionError, OllamaInferenceError
from smart_schedule.models import RawEvent
from smart_schedule.ollama.prompt import PROMPT_VERSION, build_timetable_extraction_prompt
from smart_schedule.utils.data_uri import split_data_uri

logger = structlog.get_logger()


_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.S)
_JSON_ARRAY_RE = re.compile(r"\[.*\]", re.S)


def events_response_schema() -> dict[str, Any]:
    """JSON schema passed as Ollama's ``format`` to constrain the output."""
    return {
        "type": "object",
        "properties": {
            "events": {
                "type": "array",
                "items": RawEvent.model_json_schema(by_alias=True),
            },
        },
        "required": ["events"],
    }


def parse_model_json(raw: str) -> Any:
    """Parse the JSON value from a raw model response.

    Tries the whole response first, then the ``{...}`` and ``[...]`` regions,
    whichever starts earlier first.

    Raises:
        ValueError: If no JSON value can be recovered.
    """
    raw = (raw or "").strip()
    if not raw:
        raise ValueError("empty model response")

    # Fast path: direct JSON.
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass

    # Tolerant path: markdown fences or chatter around the JSON.
    matches = [m for m in (_JSON_OBJECT_RE.search(raw), _JSON_ARRAY_RE.search(raw)) if m]
    for m in sorted(matches, key=lambda m: m.start()):
        try:
            return json.loads(m.group(0))
        except json.JSONDecodeError:
            continue

    raise ValueError("model response did not contain JSON")


def unwrap_events(value: Any) -> Any:
    """Return the events array from ``{"events": [...]}``; other values pass through."""
    if isinstance(value, dict) and "events" in value:
        return value["events"]
    return value


class OllamaClient:
    """Ollama LLM client for timetable event extraction.

    This client handles communication with the Ollama API. It is the
    default event source used by ``EventExtractor``.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize Ollama client.

        Args:
            settings: Application settings. If None, uses default settings.
        """
        from smart_schedule.config import get_settings

        self.settings = settings or get_settings()
        logger.info(
            "ollama_client_initialized",
            host=self.settings.ollama_host,
            model=self.settings.ollama_model,
        )

    def _post_json(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        host = self.settings.ollama_host.rstrip("/")
        req = urllib.request.Request(
            url=f"{host}{path}",
            data=json.dumps(payload).encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )

        try:
            with urllib.request.urlopen(req, timeout=self.settings.ollama_timeout) as resp:  # noqa: S310
                body = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise OllamaInferenceError(f"Ollama returned HTTP {e.code} for {path}") from e
        except (urllib.error.URLError, TimeoutError, ConnectionError) as e:
            raise OllamaConnectionError(f"Unable to reach Ollama at {host}: {e}") from e

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise OllamaInferenceError("Ollama returned a non-JSON envelope") from e

        if not isinstance(data, dict):
            raise OllamaInferenceError("Ollama returned an unexpected envelope")
        if data.get("error"):
            raise OllamaInferenceError(f"Ollama error: {data['error']}")
        return data

    async def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        images: Optional[list[str]] = None,
        format: Any = None,
    ) -> dict[str, Any]:
        """Generate a completion using Ollama.

        Args:
            prompt: The prompt to send to the model.
            model: Model name to use. If None, uses default from settings.
            images: Base64-encoded images sent with the prompt.
            format: ``"json"`` or a JSON schema constraining the output.

        Returns:
            Response dictionary containing generated text and metadata.

        Raises:
            OllamaConnectionError: If unable to connect to Ollama.
            OllamaInferenceError: If inference fails.
        """
        model = model or self.settings.ollama_model
        payload: dict[str, Any] = {"model": model, "prompt": prompt, "stream": False}
        if images:
            payload["images"] = images
        if format is not None:
            payload["format"] = format

        logger.info("generating_text", model=model, prompt_length=len(prompt), image_count=len(images or []))
        # urllib blocks; keep the event loop free while the model runs.
        return await asyncio.to_thread(self._post_json, "/api/generate", payload)

    async def extract_raw_events(self, image_data_uri: str) -> Any:
        """Ask the vision model for the events shown in a timetable image.

        Args:
            image_data_uri: ``data:<mimetype>;base64,<encoded_data>``.

        Returns:
            The parsed model output, normally a list of event-like dicts.
            Nothing about its shape is guaranteed.

        Raises:
            InvalidDataUriError: If the data URI is malformed.
            OllamaConnectionError: If unable to connect to Ollama.
            OllamaInferenceError: If inference fails or returns no JSON.
        """
        mime_type, image_b64 = split_data_uri(image_data_uri)
        prompt = build_timetable_extraction_prompt(reference_date=self.settings.reference_date)

        response = await self.generate(prompt, images=[image_b64], format=events_response_schema())
        raw = response.get("response") or ""

        try:
            parsed = parse_model_json(raw)
        except ValueError as e:
            raise OllamaInferenceError(f"Could not parse model output: {e}") from e

        result = unwrap_events(parsed)
        logger.info(
            "ollama_events_extracted",
            model=response.get("model") or self.settings.ollama_model,
            prompt_version=PROMPT_VERSION,
            mime_type=mime_type,
            result_type=type(result).__name__,
            result_count=len(result) if isinstance(result, list) else None,
        )
        return result
