"""Service for generating summaries with the configured language model."""

import json
from typing import Any, Optional

from langchain_core.messages import HumanMessage
from pydantic import ValidationError

from ..core.llm_manager import LLMManager, LLMSettings
from ..models import StructuredSummary
from ..utils.logging import get_logger
from ..utils.text_utils import clean_code_fences

logger = get_logger("summary_service")


def parse_structured_response(text: str) -> StructuredSummary:
    """
    Validate a model response against the structured summary shape.

    Model output is untrusted: anything that is not a JSON object with the
    expected fields yields the parse-failure placeholder instead of raising.
    """
    cleaned = clean_code_fences(text)
    try:
        data = json.loads(cleaned)
        if not isinstance(data, dict):
            raise ValueError("Response is not a JSON object")
        return StructuredSummary.model_validate(data)
    except (ValueError, ValidationError) as e:
        logger.error(f"Response parsing error: {e}\nRaw text: {text}")
        return StructuredSummary.parse_failure()


def _content_to_text(content: Any) -> str:
    """Flatten a chat model message content into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return str(content or "")


class SummaryService:
    """Sends prompts to the language model and returns its answer."""

    def __init__(self, llm_manager: Optional[LLMManager] = None, settings: Optional[LLMSettings] = None):
        self.llm_manager = llm_manager or LLMManager()
        self.settings = settings

    async def summarize(self, prompt: str) -> str:
        """
        Generate a free-form summary for *prompt*.

        Raises:
            RuntimeError: If the model cannot be created or the call fails
        """
        try:
            llm = self.llm_manager.get_llm(self.settings)
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(f"LLM API error: {e}")
            raise RuntimeError(f"Error generating summary: {e}") from e

        summary = _content_to_text(getattr(response, "content", response))
        logger.info(f"Generated summary ({len(summary)} chars)")
        return summary

    async def summarize_structured(self, prompt: str) -> StructuredSummary:
        """Generate a summary and validate it as a StructuredSummary."""
        return parse_structured_response(await self.summarize(prompt))
