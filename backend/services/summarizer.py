"""
Archive Summarizer - OpenAI-backed answers for searches with no local match

The summarizer never raises to callers:
- not configured (no API key): localized "service unavailable" sentence
- OpenAI/network failure: generic "try again later" sentence (logged)
- empty completion: "no records found" sentence
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from openai import AsyncOpenAI

from services.errors import SummarizationError
from services.localization import (
    LANGUAGE_NAMES,
    SUMMARY_EMPTY,
    SUMMARY_FAILED,
    resolve_language,
    unavailable_message,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.3  # Low temperature for factual answers

SYSTEM_PROMPT = """You are the Head Archivist of a prestigious digital registry of notable Somali people and organizations.
Your tone is authoritative, objective and respectful, like an encyclopedia or a government historian.

Provide a concise summary (max 150 words) about the user's query on Somali figures, history or business.
Focus on verified achievements and historical significance.
If the query is vague, politely ask for clarification instead of guessing.
Do not use markdown formatting such as bold text or headers; reply in plain text paragraphs.

IMPORTANT: The user has selected {language_name} as their preferred language. You MUST reply in {language_name}."""


class Summarizer(ABC):
    """Localized summary collaborator used by the query resolver"""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        pass

    @abstractmethod
    async def summarize(self, query: str, language: str) -> str:
        """Plain-text summary for the query in the given language. Never raises."""
        pass


class ArchiveSummarizer(Summarizer):
    """
    Summarizer using OpenAI chat completions.

    Usage:
        summarizer = ArchiveSummarizer(api_key=settings.openai_api_key)
        text = await summarizer.summarize("Who founded ...?", "so")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        openai_client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.temperature = temperature
        self.openai_client = openai_client
        if self.openai_client is None and api_key:
            self.openai_client = AsyncOpenAI(api_key=api_key)
        if self.openai_client is None:
            logger.warning("OpenAI API key missing, archive summaries are disabled")

    @property
    def is_configured(self) -> bool:
        return self.openai_client is not None

    async def summarize(self, query: str, language: str) -> str:
        if not self.is_configured:
            return unavailable_message(language)

        try:
            text = await self._generate(query, resolve_language(language))
        except SummarizationError as e:
            logger.error(f"Archive retrieval failed: {e}", exc_info=e.__cause__ or e)
            return SUMMARY_FAILED

        return text or SUMMARY_EMPTY

    async def _generate(self, query: str, language: str) -> str:
        """
        Call the model.

        Raises:
            SummarizationError: on any request failure or malformed response
        """
        system_prompt = SYSTEM_PROMPT.format(language_name=LANGUAGE_NAMES[language])
        try:
            response = await self.openai_client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": f"User Query: {query}"},
                ],
                temperature=self.temperature,
            )
        except Exception as e:
            raise SummarizationError(f"OpenAI request failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise SummarizationError("Malformed completion response") from e

        return (content or "").strip()
