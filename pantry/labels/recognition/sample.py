"""Offline recognizer that returns canned label transcriptions."""

from __future__ import annotations

import random

from . import TextRecognizer

SAMPLE_TEXTS: tuple[str, ...] = (
    "Milk expires 2024-12-25\n"
    "Bread best by 12/20/2024\n"
    "Apples fresh until Dec 22, 2024\n"
    "Yogurt use by 2024-12-18",
    "Bananas 12/19/2024\n"
    "Chicken breast exp 12/21/24\n"
    "Cheese expires December 23 2024\n"
    "Eggs best before 12/26/2024",
    "Tomatoes Dec 20 2024\n"
    "Lettuce expires 12/18/24\n"
    "Carrots fresh until 12/25/2024\n"
    "Onions good until December 30, 2024",
)


class SampleTextRecognizer(TextRecognizer):
    """Pick one of the sample transcriptions, ignoring the images."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    async def recognize_text(self, image_paths: list[str]) -> str:
        return self._rng.choice(SAMPLE_TEXTS)
