"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from vue_weekly.core.entities import ResourceConfig

DEFAULT_SYSTEM_PROMPT = """You are the editor of the Vue.js Weekly Newsletter.
Write for working Vue and Nuxt developers: concise, accurate and friendly.
Only mention projects, repositories, discussions and articles that appear in
the provided data, and always keep their links."""

DEFAULT_USER_PROMPT = """Write this week's newsletter from the data below.

Start with the heading "# Vue.js Weekly Newsletter", then use one "##" section
per topic. Do not leave any bracketed placeholders in the output.

{{CONTEXT_DATA}}"""


@dataclass
class LLMConfig:
    """LLM backend settings."""
    provider: str = "anthropic"
    model: Optional[str] = None
    max_tokens: int = 4096
    temperature: float = 0.2
    max_retries: int = 3
    initial_retry_delay: float = 1.0
    timeout: float = 60.0


@dataclass
class PipelineConfig:
    """Collection and ranking settings."""
    fail_on_source_error: bool = True
    article_limit: int = 10
    discussion_limit: int = 10
    http_timeout: float = 10.0


@dataclass
class PromptsConfig:
    """Prompts for LLM."""
    system: str = DEFAULT_SYSTEM_PROMPT
    user: str = DEFAULT_USER_PROMPT


@dataclass
class Settings:
    """Application settings."""

    # API Keys (from environment only)
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    github_token: Optional[str] = None

    # Config sections
    llm: LLMConfig = field(default_factory=LLMConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    prompts: PromptsConfig = field(default_factory=PromptsConfig)
    sources: list[ResourceConfig] = field(default_factory=list)


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _apply_section(section: Any, values: dict, name: str) -> None:
    for key, value in (values or {}).items():
        if not hasattr(section, key):
            raise ValueError(f"Unknown {name} setting: {key}")
        setattr(section, key, value)


def _load_prompts(values: dict, base_dir: Path) -> PromptsConfig:
    """Build prompts from inline text or from files next to the config."""
    prompts = PromptsConfig()

    for key in ("system", "user"):
        if values.get(key):
            setattr(prompts, key, values[key])
        file_name = values.get(f"{key}_file")
        if file_name:
            prompt_path = base_dir / file_name
            if not prompt_path.exists():
                raise FileNotFoundError(f"{key.capitalize()} prompt not found at {prompt_path}")
            setattr(prompts, key, prompt_path.read_text(encoding="utf-8").strip())

    return prompts


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment.

    A new Settings object is built on every call; nothing is cached.
    """
    config = load_config(config_path)

    settings = Settings(
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY", ""),
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        github_token=os.getenv("GITHUB_TOKEN"),
    )

    # Apply YAML config
    if "llm" in config:
        _apply_section(settings.llm, config["llm"], "llm")

    if "pipeline" in config:
        _apply_section(settings.pipeline, config["pipeline"], "pipeline")

    if "prompts" in config:
        settings.prompts = _load_prompts(config["prompts"] or {}, config_path.parent)

    settings.sources = [ResourceConfig.from_dict(source) for source in config.get("sources") or []]

    # Environment overrides
    provider = os.getenv("LLM_PROVIDER")
    if provider:
        settings.llm.provider = provider.lower()

    if settings.llm.model is None:
        model_env = "OPENAI_MODEL" if settings.llm.provider == "openai" else "ANTHROPIC_MODEL"
        settings.llm.model = os.getenv(model_env) or None

    return settings
