"""Text recognizer base class and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import LabelsConfig


class TextRecognizer(ABC):
    """Abstract base for reading the printed text off grocery label photos."""

    @abstractmethod
    async def recognize_text(self, image_paths: list[str]) -> str:
        """Return all text visible in the images as a single blob.

        Text from separate images is joined with newlines.
        """
        ...


def create_recognizer(config: LabelsConfig) -> TextRecognizer:
    """Create a text recognizer based on configuration."""
    backend_name = config.recognizer.backend

    match backend_name:
        case "claude":
            from .claude import ClaudeTextRecognizer

            return ClaudeTextRecognizer(
                api_key=config.recognizer.claude.api_key,
                model=config.recognizer.claude.model,
            )
        case "gemini":
            from .gemini import GeminiTextRecognizer

            return GeminiTextRecognizer(
                api_key=config.recognizer.gemini.api_key,
                model=config.recognizer.gemini.model,
            )
        case "sample":
            from .sample import SampleTextRecognizer

            return SampleTextRecognizer(seed=config.recognizer.sample.seed)
        case _:
            raise ValueError(
                f"Unknown recognizer backend: {backend_name!r} "
                f"(choose from claude / gemini / sample)"
            )


def _clean_response(text: str) -> str:
    """Strip markdown fences a model may wrap around the transcription."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        lines = cleaned.split("\n")
        # Remove first and last fence lines
        lines = [l for l in lines[1:] if not l.strip().startswith("```")]
        cleaned = "\n".join(lines)
    return cleaned.strip()
