"""Claude API backend for label text recognition."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path

from . import TextRecognizer, _clean_response

_PROMPT = """\
These images show grocery packaging labels.
Transcribe every piece of printed text you can read, including product names
and any dates (best by, use by, expiry, sell by).

Keep each product's name and its date on the same line, one product per line.
Return only the transcribed text, with no commentary.
"""


class ClaudeTextRecognizer(TextRecognizer):
    """Read label text using Claude's vision capability."""

    def __init__(self, api_key: str = "", model: str = "claude-sonnet-4-5-20250929") -> None:
        self._api_key = api_key
        self._model = model

    async def recognize_text(self, image_paths: list[str]) -> str:
        if not self._api_key:
            raise ValueError(
                "Anthropic API key is not set. "
                "Check the config file or the ANTHROPIC_API_KEY environment variable."
            )

        try:
            import anthropic
        except ImportError:
            raise ImportError(
                "anthropic SDK is required: pip install anthropic"
            ) from None

        content: list[dict] = []
        for path in image_paths:
            data = Path(path).read_bytes()
            media_type = mimetypes.guess_type(path)[0] or "image/jpeg"
            content.append(
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": media_type,
                        "data": base64.standard_b64encode(data).decode(),
                    },
                }
            )
        content.append({"type": "text", "text": _PROMPT})

        client = anthropic.AsyncAnthropic(api_key=self._api_key)
        response = await client.messages.create(
            model=self._model,
            max_tokens=2048,
            messages=[{"role": "user", "content": content}],
        )

        return _clean_response(response.content[0].text)
