# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These types describe every transient shape that flows through a single
# tool call: which service to talk to, what request to send, and what the
# caller gets back.  None of them outlive the call that created them.
#
# DESIGN PRINCIPLE — "One variant, one shape":
#   Request payloads are assembled by small builder functions (one per
#   message/content variant) that return a complete dict.  The models here
#   stay plain so those builders and the tests can use them without any
#   framework installed.
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
import json
from typing import Any, Optional


# -----------------------------------------------------------------------------
# ApiTarget — which of the three MessageBird services a request goes to
# -----------------------------------------------------------------------------
class ApiTarget(str, Enum):
    """Logical selector for a base URL (see core/config.py)."""

    CONVERSATIONS = "conversations"    # /send, /conversations, /messages
    INTEGRATIONS = "integrations"      # WhatsApp template management
    REST = "rest"                      # /contacts


# -----------------------------------------------------------------------------
# RequestSpec — everything needed to issue one HTTP call
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RequestSpec:
    """One outbound request, before URL and header assembly."""

    endpoint: str                      # Path suffix, e.g. "/contacts/abc"
    method: str = "GET"                # GET, POST, PUT, PATCH or DELETE
    body: Optional[dict[str, Any]] = None
    query_params: Optional[dict[str, Optional[str]]] = None
    target: ApiTarget = ApiTarget.CONVERSATIONS


# -----------------------------------------------------------------------------
# ToolResult — what every handler returns
# -----------------------------------------------------------------------------
# Exactly one of two outcomes: a success payload serialized as pretty JSON,
# or an error message.  is_error tells them apart.
# -----------------------------------------------------------------------------
@dataclass
class ToolResult:
    """Uniform outcome of a tool call."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, data: Any) -> "ToolResult":
        return cls(text=json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(text=message, is_error=True)

    def to_content(self) -> dict[str, Any]:
        """Render the MCP wire shape for this result."""
        payload: dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            payload["isError"] = True
        return payload


# -----------------------------------------------------------------------------
# Interactive message inputs
# -----------------------------------------------------------------------------
# The tools layer validates these from agent input; core only reads them.
# -----------------------------------------------------------------------------
@dataclass
class ReplyButton:
    """A quick-reply button on an interactive message."""

    id: str
    title: str                         # Shown to the user (max 20 chars)


@dataclass
class ListRow:
    """One selectable entry in an interactive list section."""

    id: str
    title: str                         # max 24 chars, enforced by the provider
    description: Optional[str] = None  # max 72 chars, enforced by the provider


@dataclass
class ListSection:
    """A titled group of rows in an interactive list."""

    title: str
    rows: list[ListRow] = field(default_factory=list)
