import httpx
import openai

from assetlens.extraction.client_base import BaseExtractionClient
from assetlens.extraction.exceptions import (
    ExtractionError,
    ExtractionNetworkError,
    ExtractionRateLimitError,
)


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat API.

    Gemini and GLM both expose OpenAI-compatible endpoints, so every
    remote provider goes through this adapter with its own base URL.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.RateLimitError as exc:
            raise ExtractionRateLimitError(
                f"AI provider rate limit: {exc}",
                status_code=exc.status_code,
                payload=exc.body,
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIStatusError as exc:
            raise ExtractionError(
                f"AI provider API error: {exc}",
                status_code=exc.status_code,
                payload=exc.body,
            ) from exc
        except openai.APIError as exc:
            raise ExtractionError(
                f"AI provider API error: {exc}",
                payload=exc.body,
            ) from exc

        if not response.choices:
            raise ExtractionError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ExtractionError("AI returned empty response")
        return content
