"""
Text generation capability.

Routes never talk to an AI vendor directly; they get a ``TextGenerator``
from ``app.state`` (overridable through ``get_text_generator``):

- ``ClaudeTextGenerator``: Anthropic-backed, one call per request.
- ``FallbackTextGenerator``: deterministic, no network. Used when AI is
  disabled or unconfigured, and as the default in tests.
"""
import json
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from fastapi import Request

from knowzone.core.config import Settings, settings
from knowzone.core.exceptions import AIResponseParseError, AIServiceError
from knowzone.core.logging_config import logger
from knowzone.utils.claude_client import ClaudeClient


FALLBACK_TEXT = "AI assistance is not available right now. Please try again later."

_FENCED_JSON = re.compile(r"```(?:json)?\s*([\[{].*?[\]}])\s*```", re.DOTALL)


def extract_json(text: str) -> Any:
    """
    Parse JSON out of a model reply.

    Tries the whole reply, then a fenced ```json block, then the outermost
    array or object. Raises ``AIResponseParseError`` if none parse.
    """
    text = text.strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _FENCED_JSON.search(text)
    if match:
        try:
            return json.loads(match.group(1))
        except json.JSONDecodeError:
            pass

    for opener, closer in (("[", "]"), ("{", "}")):
        start = text.find(opener)
        end = text.rfind(closer)
        if start != -1 and end > start:
            try:
                return json.loads(text[start:end + 1])
            except json.JSONDecodeError:
                continue

    raise AIResponseParseError(f"No JSON found in AI response: {text[:200]}")


class TextGenerator(ABC):
    """Free text and schema-shaped JSON from a prompt"""

    name: str = "base"

    @abstractmethod
    async def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        """Return generated text or raise ``AIServiceError``"""

    @abstractmethod
    async def generate_json(
        self,
        prompt: str,
        schema: Dict[str, Any],
        system_prompt: Optional[str] = None,
    ) -> Optional[Any]:
        """Return parsed JSON matching ``schema``, or None when unavailable"""


class ClaudeTextGenerator(TextGenerator):
    name = "anthropic"

    def __init__(self, client: ClaudeClient):
        self.client = client

    async def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        try:
            result = await self.client.generate(prompt, system_prompt=system_prompt, model="chat")
        except Exception as e:
            raise AIServiceError(f"Text generation failed: {type(e).__name__}: {e}") from e

        logger.log_ai_event("generate_text", "completed", result["model"], result["total_tokens"])
        content = result["content"].strip()
        if not content:
            raise AIServiceError("AI returned an empty response")
        return content

    async def generate_json(
        self,
        prompt: str,
        schema: Dict[str, Any],
        system_prompt: Optional[str] = None,
    ) -> Optional[Any]:
        instructions = (
            "Respond with JSON only, no prose. The JSON must match this schema:\n"
            f"{json.dumps(schema, indent=2)}"
        )
        system = f"{system_prompt}\n\n{instructions}" if system_prompt else instructions

        try:
            result = await self.client.generate(
                prompt,
                system_prompt=system,
                model="recommendation",
                temperature=0.2,
            )
        except Exception as e:
            raise AIServiceError(f"JSON generation failed: {type(e).__name__}: {e}") from e

        logger.log_ai_event("generate_json", "completed", result["model"], result["total_tokens"])
        return extract_json(result["content"])


class FallbackTextGenerator(TextGenerator):
    name = "fallback"

    def __init__(self, text: str = FALLBACK_TEXT):
        self.text = text

    async def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> str:
        return self.text

    async def generate_json(
        self,
        prompt: str,
        schema: Dict[str, Any],
        system_prompt: Optional[str] = None,
    ) -> Optional[Any]:
        return None


def build_text_generator(config: Settings = settings) -> TextGenerator:
    """Create the generator selected by ``AI_PROVIDER``"""
    provider = config.AI_PROVIDER.lower()

    if provider == "anthropic":
        if not config.ANTHROPIC_API_KEY:
            logger.warning("AI_PROVIDER=anthropic but ANTHROPIC_API_KEY is not set, using fallback generator")
            return FallbackTextGenerator()
        return ClaudeTextGenerator(ClaudeClient(config))

    if provider == "fallback":
        logger.info("AI text generation disabled (fallback generator)")
        return FallbackTextGenerator()

    raise ValueError(f"Unknown AI_PROVIDER: {config.AI_PROVIDER}")


def get_text_generator(request: Request) -> TextGenerator:
    """FastAPI dependency: the generator created at startup"""
    return request.app.state.text_generator
