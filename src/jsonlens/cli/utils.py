"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the commands,
including formatted printing, document loading and the JSON envelope
used by `--json` output.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..config import LensConfig
from ..engine import SAMPLE_DOCUMENT, Document, Engine


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


def echo_json(data: Any) -> None:
    """Print a success envelope."""
    click.echo(json.dumps({"meta": {"status": "success"}, "data": data}, ensure_ascii=False))


def echo_json_error(error: Any) -> None:
    """Print an error envelope; accepts a message or a dict."""
    payload = error if isinstance(error, dict) else {"message": str(error)}
    click.echo(json.dumps({"meta": {"status": "error"}, "error": payload}, ensure_ascii=False))


def configure_logging(verbose: bool) -> None:
    """Route library logs through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, markup=False)],
        force=True,
    )


def load_document(
    source: Optional[str],
    sample: bool = False,
    config_path: Optional[str] = None,
    as_json: bool = False,
) -> Optional[Document]:
    """
    Load a document from a file path, stdin ("-") or the sample data.

    Errors are reported (as text or as a JSON envelope) and None is
    returned; callers stop there.

    Args:
        source (Optional[str]): Path to a JSON file, or "-" for stdin.
        sample (bool): Use the bundled sample document instead.
        config_path (Optional[str]): Optional `.jsonlens.yaml` override.
        as_json (bool): Report errors as a JSON envelope.

    Returns:
        Optional[Document]: The loaded document, or None if loading failed.
    """
    config = LensConfig.load(Path(config_path) if config_path else None)
    engine = Engine(config)

    if sample:
        return engine.load_value(SAMPLE_DOCUMENT)

    def fail(message: str) -> None:
        if as_json:
            echo_json_error(message)
        else:
            echo_error(message)

    if not source:
        fail("Provide a JSON file (or '-' for stdin), or use --sample")
        return None

    if source == "-":
        text = click.get_text_stream("stdin").read()
    else:
        path = Path(source)
        if not path.exists():
            fail(f"File not found: {source}")
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            fail(f"Failed to read {source}: {e}")
            return None

    result = engine.load(text)
    if result.is_err():
        error = result.error
        if as_json:
            echo_json_error(error.to_dict())
        else:
            echo_error(error.message)
        return None

    return result.unwrap()
