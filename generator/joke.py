from __future__ import annotations

import logging
from typing import Optional, Protocol

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when the generation service fails or returns nothing usable."""


class JokeGenerator(Protocol):
    def generate(self, prompt: str, project: str) -> str:
        ...


def build_llm(project: str, settings: Optional[Settings] = None) -> BaseChatModel:
    """Chat model for the Gemini Developer API, or Vertex AI when no key is set."""
    settings = settings or get_settings()

    common = dict(
        model=settings.gemini_model,
        temperature=settings.temperature,
        top_p=settings.top_p,
        # Single attempt per call.
        max_retries=1,
    )
    if settings.google_api_key:
        return ChatGoogleGenerativeAI(google_api_key=settings.google_api_key, **common)

    return ChatGoogleGenerativeAI(
        vertexai=True,
        project=project,
        location=settings.google_cloud_location,
        **common,
    )


class GeminiJokeGenerator:
    """Generates text with Gemini. A fresh chat model is built per call."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def generate(self, prompt: str, project: str) -> str:
        logger.info(
            "Calling model=%s project=%s prompt_len=%s",
            self.settings.gemini_model,
            project,
            len(prompt),
        )
        try:
            chain = (
                ChatPromptTemplate.from_messages([("human", "{prompt}")])
                | build_llm(project, self.settings)
                | StrOutputParser()
            )
            text = chain.invoke({"prompt": prompt})
        except Exception as exc:
            raise GenerationError(str(exc)) from exc

        if not text or not text.strip():
            raise GenerationError("model returned an empty response")
        return text


def hit_me(prompt: str, project: str, settings: Optional[Settings] = None) -> str:
    return GeminiJokeGenerator(settings).generate(prompt, project)
