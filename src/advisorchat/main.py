"""Advisor chat UI entrypoint."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os

import gradio as gr

from .backends.base import ChatBackend
from .backends.http_backend import HttpBackend
from .config import RootConfig, default_config, load_config, validate_config
from .coordinator import SendSettings
from .theme import PreferenceStore, ThemeController
from .ui.view import ChatSession

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

_APPLY_THEME_JS = "(label) => { document.body.classList.toggle('dark', label === 'Light Mode'); }"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Product advisor chat UI")
    parser.add_argument("--config", default="configs/advisorchat.yaml")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    parser.add_argument("--title")
    parser.add_argument("--concurrency-limit", type=int)
    parser.add_argument("--backend-url")
    parser.add_argument("--log-level")
    parser.add_argument("--share", action="store_true")
    return parser.parse_args(argv)


def load_root_config(path: str) -> RootConfig:
    if not os.path.exists(path):
        return default_config()
    return load_config(path)


def apply_overrides(cfg: RootConfig, args: argparse.Namespace) -> RootConfig:
    if args.title:
        cfg.app.title = args.title
    if args.host:
        cfg.app.host = args.host
    if args.port is not None:
        cfg.app.port = args.port
    if args.concurrency_limit is not None:
        cfg.app.concurrency_limit = args.concurrency_limit
    if args.backend_url:
        cfg.backend.url = args.backend_url
    if args.log_level:
        cfg.app.log_level = args.log_level.upper()
    return validate_config(cfg)


def setup_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        logging.warning("Invalid log level '%s'. Defaulting to INFO.", level_name)
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def send_settings(cfg: RootConfig) -> SendSettings:
    return SendSettings(
        max_messages=cfg.chat.max_messages,
        max_past_questions=cfg.chat.max_past_questions,
        past_questions_keep=cfg.chat.past_questions_keep,
        greeting=cfg.chat.greeting,
        fallback_message=cfg.chat.fallback_message,
    )


def build_app(cfg: RootConfig, backend: ChatBackend) -> gr.Blocks:
    settings = send_settings(cfg)
    theme = ThemeController(PreferenceStore(cfg.theme.storage_path))

    def _new_session() -> ChatSession:
        return ChatSession(cfg.chat.system_prompt, backend, settings)

    with gr.Blocks(title=cfg.app.title) as demo:
        with gr.Row():
            gr.Markdown(f"# {cfg.app.title}")
            theme_btn = gr.Button(theme.label(theme.is_dark()), size="sm", scale=0)

        session = gr.State(_new_session)
        chatbot = gr.Chatbot(label="Chat", value=[{"role": "assistant", "content": cfg.chat.greeting}])
        with gr.Row():
            user_input = gr.Textbox(
                label="Message",
                placeholder="Ask me about products and routines...",
                scale=4,
                autofocus=True,
            )
            send_btn = gr.Button("Send", scale=1)

        async def _handle_submit(message: str, chat: ChatSession):
            view = chat.view
            if chat.state.is_sending:
                # Dropped submit; leave the in-flight request's view untouched.
                yield view.bubbles(), gr.update(), gr.update(), chat
                return
            view.input_text = message or ""
            task = asyncio.create_task(chat.coordinator.submit())
            # Let submit run up to its network await so the locked state is visible.
            await asyncio.sleep(0)
            if not task.done():
                yield (
                    view.bubbles(),
                    gr.update(value=view.input_text, interactive=view.input_enabled),
                    gr.update(interactive=view.input_enabled),
                    chat,
                )
            await task
            yield (
                view.bubbles(),
                gr.update(value=view.input_text, interactive=view.input_enabled),
                gr.update(interactive=view.input_enabled),
                chat,
            )

        send_btn.click(
            _handle_submit,
            inputs=[user_input, session],
            outputs=[chatbot, user_input, send_btn, session],
        )
        user_input.submit(
            _handle_submit,
            inputs=[user_input, session],
            outputs=[chatbot, user_input, send_btn, session],
        )

        def _toggle_theme() -> str:
            now_dark = theme.toggle()
            logger.debug("Theme set to %s", "dark" if now_dark else "light")
            return theme.label(now_dark)

        theme_btn.click(_toggle_theme, outputs=[theme_btn]).then(
            None, inputs=[theme_btn], js=_APPLY_THEME_JS
        )
        demo.load(None, inputs=[theme_btn], js=_APPLY_THEME_JS)

    return demo


def main() -> None:
    args = parse_args()
    cfg = load_root_config(args.config)
    cfg = apply_overrides(cfg, args)
    setup_logging(cfg.app.log_level)

    backend = HttpBackend(cfg.backend.url, timeout_s=cfg.backend.timeout_s)
    logger.info("Backend: url=%s timeout_s=%s", backend.url, cfg.backend.timeout_s)
    app = build_app(cfg, backend)
    app.queue(default_concurrency_limit=cfg.app.concurrency_limit)
    app.launch(server_name=cfg.app.host, server_port=cfg.app.port, share=args.share)


if __name__ == "__main__":
    main()
