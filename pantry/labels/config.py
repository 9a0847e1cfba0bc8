"""TOML configuration loader for the labels module."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class ClaudeRecognizerConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class GeminiRecognizerConfig:
    api_key: str = ""
    model: str = "gemini-2.0-flash"


@dataclass
class SampleRecognizerConfig:
    seed: int | None = None


@dataclass
class RecognizerConfig:
    backend: str = "claude"
    claude: ClaudeRecognizerConfig = field(default_factory=ClaudeRecognizerConfig)
    gemini: GeminiRecognizerConfig = field(default_factory=GeminiRecognizerConfig)
    sample: SampleRecognizerConfig = field(default_factory=SampleRecognizerConfig)


@dataclass
class InterpreterConfig:
    # Items below this confidence are hidden from CLI output
    min_confidence: float = 0.0


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class LabelsConfig:
    recognizer: RecognizerConfig = field(default_factory=RecognizerConfig)
    interpreter: InterpreterConfig = field(default_factory=InterpreterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> LabelsConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    API keys can be overridden via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    rec = raw.get("recognizer", {})
    itp = raw.get("interpreter", {})
    log = raw.get("logging", {})

    claude_cfg = rec.get("claude", {})
    gemini_cfg = rec.get("gemini", {})
    sample_cfg = rec.get("sample", {})

    # Resolve API keys: config file → environment variable
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )
    gemini_api_key = gemini_cfg.get("api_key", "") or os.environ.get(
        "GEMINI_API_KEY", ""
    )

    return LabelsConfig(
        recognizer=RecognizerConfig(
            backend=rec.get("backend", "claude"),
            claude=ClaudeRecognizerConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
            gemini=GeminiRecognizerConfig(
                api_key=gemini_api_key,
                model=gemini_cfg.get("model", "gemini-2.0-flash"),
            ),
            sample=SampleRecognizerConfig(
                seed=sample_cfg.get("seed"),
            ),
        ),
        interpreter=InterpreterConfig(
            min_confidence=itp.get("min_confidence", 0.0),
        ),
        logging=LoggingConfig(
            level=str(log.get("level", "WARNING")).upper(),
        ),
    )
