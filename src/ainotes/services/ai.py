"""
AI Service

The AI enrichment port used by the note handlers, and its OpenAI
implementation.

The port has three independent async operations: summary, tags and
embedding. They return plain values and fail by raising; the handlers treat
any failure as fatal. Supports mock mode for local development without API
costs (``OPENAI_API_KEY`` missing or set to ``mock``).
"""

from __future__ import annotations

import hashlib
import logging
import random
import re
from typing import Final, Protocol, runtime_checkable

from openai import AsyncOpenAI, OpenAIError

from ainotes.core.config import AiServiceOptions

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM_PROMPT: Final[str] = (
    "You are a helpful assistant that creates concise summaries of notes. "
    "Keep summaries brief (1-2 sentences) and capture the main point."
)

TAGS_SYSTEM_PROMPT: Final[str] = (
    "You are a helpful assistant that generates relevant tags for notes. "
    "Generate 3-5 relevant, specific tags that categorize the content. "
    "Return ONLY the tags as a comma-separated list with no extra text. "
    "Use lowercase, keep tags concise (1-3 words each)."
)

TAGS_MAX_TOKENS: Final[int] = 50
MOCK_SUMMARY_LENGTH: Final[int] = 200


@runtime_checkable
class AiService(Protocol):
    """Summarize / tag / embed capability consumed by the note handlers."""

    async def generate_summary(self, content: str) -> str: ...

    async def generate_tags(self, title: str, content: str) -> str: ...

    async def generate_embedding(self, text: str) -> list[float]: ...


class OpenAiService:
    """
    AI service backed by the OpenAI chat completion and embedding APIs.

    Blank input short-circuits to an empty value without a network call.
    API errors are logged and re-raised.

    Usage::

        service = OpenAiService(AiServiceOptions.from_settings(settings))
        summary = await service.generate_summary("Long note text...")
    """

    def __init__(
        self,
        options: AiServiceOptions,
        client: AsyncOpenAI | None = None,
    ) -> None:
        if options is None:
            raise ValueError("options is required")
        self._options = options
        self._client = client

    @property
    def is_mock(self) -> bool:
        return self._client is None and self._options.is_mock

    def _get_client(self) -> AsyncOpenAI:
        """Get or lazily create the OpenAI client."""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._options.api_key)
        return self._client

    async def _complete(
        self,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        response = await self._get_client().chat.completions.create(
            model=self._options.chat_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=max_tokens,
            temperature=temperature,
        )
        return (response.choices[0].message.content or "").strip()

    async def generate_summary(self, content: str) -> str:
        """
        Generate a 1-2 sentence summary of the note content.

        Raises:
            OpenAIError: If the OpenAI API call fails.
        """
        if not content or not content.strip():
            return ""

        if self.is_mock:
            return _mock_summary(content)

        try:
            return await self._complete(
                SUMMARY_SYSTEM_PROMPT,
                f"Summarize this note:\n\n{content}",
                max_tokens=self._options.max_summary_tokens,
                temperature=0.5,
            )
        except OpenAIError as e:
            logger.error("Error generating summary: %s", e)
            raise

    async def generate_tags(self, title: str, content: str) -> str:
        """
        Generate 3-5 comma-separated lowercase tags.

        Quote characters are stripped from the model reply.

        Raises:
            OpenAIError: If the OpenAI API call fails.
        """
        if not (title and title.strip()) and not (content and content.strip()):
            return ""

        if self.is_mock:
            return _mock_tags(title, content)

        try:
            tags = await self._complete(
                TAGS_SYSTEM_PROMPT,
                f"Generate tags for this note:\n\nTitle: {title}\n\nContent: {content}",
                max_tokens=TAGS_MAX_TOKENS,
                temperature=0.3,
            )
        except OpenAIError as e:
            logger.error("Error generating tags: %s", e)
            raise
        return tags.replace('"', "").replace("'", "").strip()

    async def generate_embedding(self, text: str) -> list[float]:
        """
        Generate a vector embedding for the given text.

        Raises:
            OpenAIError: If the OpenAI API call fails.
        """
        if not text or not text.strip():
            return []

        if self.is_mock:
            return _mock_embedding(text, self._options.embedding_dimension)

        text = text.replace("\n", " ")  # OpenAI recommends single-line input
        try:
            response = await self._get_client().embeddings.create(
                input=[text],
                model=self._options.embedding_model,
            )
        except OpenAIError as e:
            logger.error("Error generating embedding: %s", e)
            raise
        return list(response.data[0].embedding)


# ----------------------------------------------------------------------
# Mock mode
# ----------------------------------------------------------------------


def _mock_summary(content: str) -> str:
    summary = " ".join(content.split())
    if len(summary) > MOCK_SUMMARY_LENGTH:
        summary = summary[:MOCK_SUMMARY_LENGTH].rstrip() + "..."
    return summary


def _mock_tags(title: str, content: str) -> str:
    words = re.findall(r"[a-z][a-z0-9-]{3,}", f"{title} {content}".lower())
    tags: list[str] = []
    for word in words:
        if word not in tags:
            tags.append(word)
        if len(tags) == 5:
            break
    return ", ".join(tags)


def _mock_embedding(text: str, dimension: int) -> list[float]:
    # Seeded from the text so equal texts get equal vectors
    seed = int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:8], "big")
    rng = random.Random(seed)
    # Zero-centred so unrelated texts score near 0, not near 0.75
    return [rng.uniform(-1.0, 1.0) for _ in range(dimension)]
