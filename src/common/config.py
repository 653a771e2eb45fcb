"""Configuration loader for the debriefing pipeline."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Generic, TypeVar

import yaml

T = TypeVar("T")

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
CONFIG_ENV_VAR = "DEBRIEF_CONFIG"

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

DEFAULT_CONTENT_SELECTORS = [
    "article",
    ".content",
    ".article-content",
    ".post-content",
    ".entry-content",
    "main",
    ".main-content",
]


@dataclass
class FetchConfig:
    timeout: int = 10
    user_agent: str = DEFAULT_USER_AGENT
    max_content_length: int = 4000
    content_selectors: list[str] = field(default_factory=lambda: list(DEFAULT_CONTENT_SELECTORS))


@dataclass
class ModelConfig:
    model: str
    max_tokens: int = 500
    temperature: float = 0.7


@dataclass
class ProvidersConfig:
    openai: ModelConfig = field(default_factory=lambda: ModelConfig(model="gpt-3.5-turbo"))
    anthropic: ModelConfig = field(default_factory=lambda: ModelConfig(model="claude-3-haiku-20240307"))


@dataclass
class PipelineConfig:
    materials_dir: str = "~/Materials"
    request_delay: float = 1.0


@dataclass
class SpeechConfig:
    voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    model_id: str = "eleven_multilingual_v2"
    stability: float = 0.5
    similarity_boost: float = 0.75
    timeout: int = 120


@dataclass
class DebriefConfig:
    fetch: FetchConfig = field(default_factory=FetchConfig)
    providers: ProvidersConfig = field(default_factory=ProvidersConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    speech: SpeechConfig = field(default_factory=SpeechConfig)


def find_config_path(
    config_name: str | None,
    config_dir: Path | None = None,
    default_name: str = "prod",
    env_var: str | None = CONFIG_ENV_VAR,
) -> Path:
    """Find config file path, checking env var and defaults.

    ``config_name`` may also be a path to a YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_name is None:
        config_name = os.environ.get(env_var, default_name) if env_var else default_name

    config_dir = config_dir or CONFIG_DIR

    if config_name.endswith((".yaml", ".yml")):
        config_path = Path(config_name).expanduser()
    else:
        config_path = config_dir / f"{config_name}.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_name: str | None = None) -> DebriefConfig:
    """Load configuration from a YAML file under ``configs/``.

    Falls back to built-in defaults when no config was named (argument or
    DEBRIEF_CONFIG) and the default file is not available.
    """
    named = config_name is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    try:
        config_path = find_config_path(config_name)
    except FileNotFoundError:
        if named:
            raise
        logger.warning("Default config not found in %s, using built-in defaults", CONFIG_DIR)
        return DebriefConfig()
    return parse_config(load_yaml(config_path))


def _parse_model(data: dict, default: ModelConfig) -> ModelConfig:
    return ModelConfig(
        model=data.get("model", default.model),
        max_tokens=data.get("max_tokens", default.max_tokens),
        temperature=data.get("temperature", default.temperature),
    )


def parse_config(data: dict) -> DebriefConfig:
    """Parse config dictionary into DebriefConfig, filling gaps with defaults."""
    defaults = DebriefConfig()

    fetch_data = data.get("fetch", {})
    fetch = FetchConfig(
        timeout=fetch_data.get("timeout", defaults.fetch.timeout),
        user_agent=fetch_data.get("user_agent", defaults.fetch.user_agent),
        max_content_length=fetch_data.get("max_content_length", defaults.fetch.max_content_length),
        content_selectors=fetch_data.get("content_selectors", defaults.fetch.content_selectors),
    )

    providers_data = data.get("providers", {})
    providers = ProvidersConfig(
        openai=_parse_model(providers_data.get("openai", {}), defaults.providers.openai),
        anthropic=_parse_model(providers_data.get("anthropic", {}), defaults.providers.anthropic),
    )

    pipeline_data = data.get("pipeline", {})
    pipeline = PipelineConfig(
        materials_dir=pipeline_data.get("materials_dir", defaults.pipeline.materials_dir),
        request_delay=pipeline_data.get("request_delay", defaults.pipeline.request_delay),
    )

    speech_data = data.get("speech", {})
    speech = SpeechConfig(
        voice_id=speech_data.get("voice_id", defaults.speech.voice_id),
        model_id=speech_data.get("model_id", defaults.speech.model_id),
        stability=speech_data.get("stability", defaults.speech.stability),
        similarity_boost=speech_data.get("similarity_boost", defaults.speech.similarity_boost),
        timeout=speech_data.get("timeout", defaults.speech.timeout),
    )

    return DebriefConfig(fetch=fetch, providers=providers, pipeline=pipeline, speech=speech)


class ConfigSingleton(Generic[T]):
    """Generic config singleton manager.

    Provides get/set/reset pattern for managing a global config instance.
    """

    def __init__(self, loader: Callable[[], T] | None = None):
        self._config: T | None = None
        self._loader = loader

    def get(self) -> T:
        """Get the config, loading it lazily if needed."""
        if self._config is None:
            if self._loader is None:
                raise RuntimeError("No config loaded and no loader set")
            self._config = self._loader()
        return self._config

    def set(self, config: T) -> None:
        """Set the config directly."""
        self._config = config

    def reset(self) -> None:
        """Reset the config, forcing reload on next get()."""
        self._config = None


_manager: ConfigSingleton[DebriefConfig] = ConfigSingleton(load_config)
get_config = _manager.get
set_config = _manager.set
reset_config = _manager.reset
