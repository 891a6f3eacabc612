"""Chat-completion call that turns the context bundle into a quickstart."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from openai import OpenAI, OpenAIError

from quickstart_context.config import Settings
from quickstart_context.data.errors import CompletionError
from quickstart_context.utils.paths import QUICKSTART_FILE

logger = logging.getLogger(__name__)


def generate_quickstart(request_body: Dict[str, Any], settings: Settings) -> str:
    """Send the request and return the Markdown of the first choice.

    The response is taken as-is; an empty or missing message yields "".

    Raises:
        CompletionError: If the API call fails.
    """
    client = OpenAI(api_key=settings.api_key, base_url=settings.base_url)

    try:
        response = client.chat.completions.create(
            model=request_body["model"],
            messages=request_body["messages"],
        )
    except OpenAIError as exc:
        raise CompletionError(f"Chat completion request failed: {exc}") from exc

    if not response.choices:
        logger.warning("Completion returned no choices")
        return ""
    return response.choices[0].message.content or ""


def write_quickstart(markdown: str, output_dir: Path) -> Path:
    """Write the generated Markdown to README_TMP.md in output_dir."""
    path = Path(output_dir) / QUICKSTART_FILE
    path.write_text(markdown, encoding="utf-8")
    return path
