"""Configuration loading and dataclasses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from .prompts import BASE_SYSTEM_PROMPT, FALLBACK_MESSAGE, GREETING


@dataclass
class AppConfig:
    title: str = "Product Advisor"
    host: str = "127.0.0.1"
    port: int = 7860
    concurrency_limit: int = 1
    log_level: str = "INFO"


@dataclass
class BackendConfig:
    url: str = "http://127.0.0.1:8787/"
    timeout_s: float | None = None


@dataclass
class ChatConfig:
    system_prompt: str = BASE_SYSTEM_PROMPT
    greeting: str = GREETING
    fallback_message: str = FALLBACK_MESSAGE
    max_messages: int = 40
    max_past_questions: int = 20
    past_questions_keep: int = 10


@dataclass
class ThemeConfig:
    storage_path: str = ".advisorchat/preferences.yaml"


@dataclass
class RootConfig:
    app: AppConfig
    backend: BackendConfig
    chat: ChatConfig
    theme: ThemeConfig


def default_config() -> RootConfig:
    return RootConfig(
        app=AppConfig(),
        backend=BackendConfig(),
        chat=ChatConfig(),
        theme=ThemeConfig(),
    )


def _get(data: dict[str, Any], key: str, default: Any) -> Any:
    return data.get(key, default) if isinstance(data, dict) else default


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def validate_config(cfg: RootConfig) -> RootConfig:
    if cfg.chat.max_messages < 1:
        raise ValueError(f"chat.max_messages must be >= 1, got {cfg.chat.max_messages}")
    if cfg.chat.past_questions_keep < 0 or cfg.chat.past_questions_keep > cfg.chat.max_past_questions:
        raise ValueError("chat.past_questions_keep must be between 0 and chat.max_past_questions")
    if cfg.app.concurrency_limit < 1:
        raise ValueError(f"app.concurrency_limit must be >= 1, got {cfg.app.concurrency_limit}")
    if cfg.backend.timeout_s is not None and cfg.backend.timeout_s <= 0:
        raise ValueError("backend.timeout_s must be positive or null")
    return cfg


def load_config(path: str) -> RootConfig:
    with open(path, "r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    app_raw = _get(raw, "app", {})
    backend_raw = _get(raw, "backend", {})
    chat_raw = _get(raw, "chat", {})
    theme_raw = _get(raw, "theme", {})

    app = AppConfig(
        title=_get(app_raw, "title", AppConfig.title),
        host=_get(app_raw, "host", AppConfig.host),
        port=int(_get(app_raw, "port", AppConfig.port)),
        concurrency_limit=int(_get(app_raw, "concurrency_limit", AppConfig.concurrency_limit)),
        log_level=str(_get(app_raw, "log_level", AppConfig.log_level)).upper(),
    )

    backend = BackendConfig(
        url=_get(backend_raw, "url", BackendConfig.url),
        timeout_s=_optional_float(_get(backend_raw, "timeout_s", BackendConfig.timeout_s)),
    )

    chat = ChatConfig(
        system_prompt=_get(chat_raw, "system_prompt", ChatConfig.system_prompt),
        greeting=_get(chat_raw, "greeting", ChatConfig.greeting),
        fallback_message=_get(chat_raw, "fallback_message", ChatConfig.fallback_message),
        max_messages=int(_get(chat_raw, "max_messages", ChatConfig.max_messages)),
        max_past_questions=int(_get(chat_raw, "max_past_questions", ChatConfig.max_past_questions)),
        past_questions_keep=int(_get(chat_raw, "past_questions_keep", ChatConfig.past_questions_keep)),
    )

    theme = ThemeConfig(
        storage_path=_get(theme_raw, "storage_path", ThemeConfig.storage_path),
    )

    return validate_config(RootConfig(app=app, backend=backend, chat=chat, theme=theme))
