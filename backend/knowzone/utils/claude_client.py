from anthropic import AsyncAnthropic, Timeout
from typing import Optional, Dict, Any

from knowzone.core.config import Settings, settings
from knowzone.core.logging_config import logger


class ClaudeClient:
    """
    Thin wrapper around the Anthropic messages API.

    One request per call: no retries or backoff. Timeouts come from
    ``CLAUDE_CONNECT_TIMEOUT`` / ``CLAUDE_REQUEST_TIMEOUT`` and any error is
    logged and re-raised for the caller to degrade.
    """

    def __init__(self, config: Settings = settings):
        client_kwargs: Dict[str, Any] = {"api_key": config.ANTHROPIC_API_KEY}

        # Only set base_url if it's a non-empty string with actual content
        if config.ANTHROPIC_BASE_URL and config.ANTHROPIC_BASE_URL.strip():
            client_kwargs["base_url"] = config.ANTHROPIC_BASE_URL.strip()
            logger.info(f"Using custom Claude API base URL: {config.ANTHROPIC_BASE_URL}")

        request_timeout = float(config.CLAUDE_REQUEST_TIMEOUT)
        client_kwargs["timeout"] = Timeout(
            connect=float(config.CLAUDE_CONNECT_TIMEOUT),
            read=request_timeout,
            write=request_timeout,
            pool=request_timeout
        )
        client_kwargs["max_retries"] = 0

        self.async_client = AsyncAnthropic(**client_kwargs)
        self.chat_model = config.CLAUDE_CHAT_MODEL
        self.recommendation_model = config.CLAUDE_RECOMMENDATION_MODEL
        self.max_tokens = config.CLAUDE_MAX_TOKENS
        self.temperature = config.CLAUDE_TEMPERATURE

        logger.info(
            f"Claude client initialized: timeout={request_timeout}s, "
            f"models=[{self.chat_model}, {self.recommendation_model}]"
        )

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        model: str = "chat",
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Generate a single (non-streaming) reply

        Args:
            prompt: User prompt
            system_prompt: System prompt
            model: "chat" or "recommendation"
            max_tokens: Maximum tokens to generate
            temperature: Temperature for generation

        Returns:
            Dict with content and usage metadata
        """
        model_name = self.recommendation_model if model == "recommendation" else self.chat_model

        if max_tokens is None:
            max_tokens = self.max_tokens
        if temperature is None:
            temperature = self.temperature

        logger.info(f"Claude API: model={model_name}, max_tokens={max_tokens}, prompt_len={len(prompt)}")
        logger.debug(f"Claude request prompt: {prompt[:100]}")

        try:
            response = await self.async_client.messages.create(
                model=model_name,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system_prompt if system_prompt else "",
                messages=[{"role": "user", "content": prompt}]
            )
        except Exception as e:
            logger.error(
                f"Claude API error: {type(e).__name__}: {e}",
                extra={
                    "event_type": "claude_api_error",
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                }
            )
            raise

        content = response.content[0].text if response.content else ""

        result = {
            "content": content,
            "model": model_name,
            "input_tokens": response.usage.input_tokens,
            "output_tokens": response.usage.output_tokens,
            "total_tokens": response.usage.input_tokens + response.usage.output_tokens,
            "stop_reason": response.stop_reason,
            "id": response.id
        }

        logger.info(f"Claude API response: id={response.id}, tokens={result['total_tokens']}, stop={response.stop_reason}")
        return result
