from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Type, TypeVar

from openai import AsyncOpenAI, ContentFilterFinishReasonError, LengthFinishReasonError
from pydantic import BaseModel, ValidationError

from edumarketer.config import get_settings

logger = logging.getLogger("openai_service")

ModelT = TypeVar("ModelT", bound=BaseModel)


class OpenAIService:
    """
    Structured-output calls to the OpenAI Chat Completions API
    """

    def __init__(self, client: Optional[AsyncOpenAI] = None):
        settings = get_settings()
        if client is None:
            if not settings.OPENAI_API_KEY:
                raise RuntimeError("OPENAI_API_KEY is not configured")
            client = AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY,
                max_retries=settings.OPENAI_MAX_RETRIES,
                timeout=settings.OPENAI_TIMEOUT_SECONDS,
            )

        self.client = client
        self.model = settings.OPENAI_MODEL
        self.temperature = settings.OPENAI_TEMPERATURE
        self._call_count = 0
        self._total_tokens = 0
        logger.info(f"OpenAI Service initialized (model={self.model})")

    async def generate_structured(
        self,
        system_prompt: str,
        user_prompt: str,
        response_model: Type[ModelT],
        operation: str = "generate",
    ) -> Optional[ModelT]:
        """
        Single API call whose JSON response is validated against response_model.

        Args:
            system_prompt: System instructions
            user_prompt: Institution context and task
            response_model: Pydantic schema the model output must satisfy
            operation: Name used in logs

        Returns:
            The parsed output, or None when the model produced nothing usable
            (refusal, truncation, content filter, schema validation failure).
            Provider and transport errors are raised to the caller.
        """
        logger.info(f"[{operation}] Calling OpenAI ({response_model.__name__})...")
        start_time = datetime.now()

        try:
            parse_response = await self.client.beta.chat.completions.parse(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                response_format=response_model,
                temperature=self.temperature,
            )
        except ValidationError as e:
            logger.warning(f"[{operation}] Output failed schema validation: {e.error_count()} errors")
            return None
        except (LengthFinishReasonError, ContentFilterFinishReasonError) as e:
            logger.warning(f"[{operation}] Output incomplete: {e}")
            return None

        elapsed = (datetime.now() - start_time).total_seconds()
        self._call_count += 1

        usage = parse_response.usage
        if usage:
            self._total_tokens += usage.total_tokens
            logger.info(
                f"[{operation}] Token usage: {usage.total_tokens} "
                f"(prompt {usage.prompt_tokens}, completion {usage.completion_tokens})"
            )
        logger.info(f"[{operation}] API call time: {elapsed:.2f}s")

        if not parse_response.choices:
            logger.warning(f"[{operation}] Empty response from OpenAI")
            return None

        message = parse_response.choices[0].message
        if message.refusal:
            logger.warning(f"[{operation}] Model refused: {message.refusal}")
            return None
        if message.parsed is None:
            logger.warning(f"[{operation}] No structured output returned")
            return None

        return message.parsed

    def get_stats(self) -> dict:
        """Get usage statistics"""
        return {
            "total_calls": self._call_count,
            "total_tokens": self._total_tokens,
        }


_openai_service: Optional[OpenAIService] = None


def get_openai_service() -> OpenAIService:
    """
    Get singleton OpenAI service instance
    """
    global _openai_service

    if _openai_service is None:
        _openai_service = OpenAIService()

    return _openai_service
