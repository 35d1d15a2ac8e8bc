"""
Chat model definitions.

Models for the script intake chat between a doctor and the assistant.
"""

import re
from html.parser import HTMLParser

from pydantic import BaseModel, Field, field_validator

from app.core.config import get_settings

settings = get_settings()

_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E]")


class _TextExtractor(HTMLParser):
    """Collects the text of an HTML fragment, skipping script and style bodies."""

    _SKIPPED = {"script", "style"}

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self._chunks: list[str] = []
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in self._SKIPPED:
            self._skip_depth += 1

    def handle_endtag(self, tag):
        if tag in self._SKIPPED and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data):
        if not self._skip_depth:
            self._chunks.append(data)

    def text(self) -> str:
        return "".join(self._chunks)


def strip_markup(text: str) -> str:
    """Text content of an HTML fragment; a '<' that opens no tag stays as text."""
    parser = _TextExtractor()
    parser.feed(text)
    parser.close()
    return parser.text()


def sanitize_input(text: str, max_length: int = settings.CHAT_MESSAGE_MAX_LENGTH) -> str:
    """
    Strip markup and non-printable characters from chat input.

    Markup is parsed as HTML and only its text is kept (script and style
    bodies are dropped), the result is trimmed, only printable ASCII is
    kept, and the text is cut at max_length.
    """
    return _NON_PRINTABLE_RE.sub("", strip_markup(text).strip())[:max_length]


class ChatSendRequest(BaseModel):
    """Request model for sending a chat message."""

    message: str = Field(
        ...,
        min_length=1,
        max_length=settings.CHAT_MESSAGE_MAX_LENGTH,
        description="Message text",
    )

    @field_validator("message")
    @classmethod
    def _sanitize(cls, value: str) -> str:
        cleaned = sanitize_input(value)
        if not cleaned:
            raise ValueError("Message cannot be empty")
        return cleaned


class ChatSendResponse(BaseModel):
    """Response model for a chat turn."""

    message: str = Field(..., description="Assistant reply")
    finalized: bool = Field(False, description="True when the reply is a finalized script")
