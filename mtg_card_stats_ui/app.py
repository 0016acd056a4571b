import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import gradio as gr
import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from mtg_card_stats_ui.app_config import app_config
from mtg_card_stats_ui.startup import startup_init
from mtg_card_stats_ui.ui.tabs import create_card_stats_tab, wire_card_stats_tab
from mtg_card_stats_ui.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MTG Card Stats dashboard")
    parser.add_argument(
        "--data",
        help="Card document path or http(s) URL for this run (overrides the application settings)",
    )
    parser.add_argument(
        "--host",
        help="Interface to bind (defaults to [UI] server_name)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (defaults to [UI] server_port)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging")
    return parser.parse_args(argv)


def create_app(source=None) -> gr.Blocks:
    """Create and configure the Gradio application.

    Args:
        source: Card document path or URL; defaults to the configured source
    """
    with gr.Blocks(title="MTG Card Statistics") as app:
        gr.Markdown("# MTG Card Statistics")
        card_stats_tab = create_card_stats_tab()
        card_stats_tab.render()
        wire_card_stats_tab(card_stats_tab, app, source=source)
    return app


def create_server(blocks: Optional[gr.Blocks] = None) -> FastAPI:
    """Serve the static card document and mount the Gradio UI at the root."""
    server = FastAPI(title="MTG Card Stats")
    server.mount(
        "/static",
        StaticFiles(directory=str(STATIC_DIR)),
        name="static",
    )

    @server.get("/health")
    def health():
        return {"status": "ok"}

    return gr.mount_gradio_app(server, blocks or create_app(), path="/")


def main(argv=None):
    # --- Unicode fix for Windows console ---
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8")  # type: ignore

    args = parse_args(argv)
    setup_logging(app_config, debug=args.debug)
    if args.debug:
        logger.info("Debug logging enabled")
    logger.info("MTG Card Stats starting up...")

    source = startup_init(data_source=args.data)
    logger.info(f"Card document: {source}")

    host = args.host or app_config.get("UI", "server_name", fallback="127.0.0.1")
    port = args.port or app_config.get_int("UI", "server_port", fallback=7860)
    uvicorn.run(create_server(create_app(source)), host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
