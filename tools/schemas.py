# =============================================================================
# tools/schemas.py  —  Shared Input Contracts
# =============================================================================
#
# Parameter types reused across tool families.  FastMCP reads the
# Annotated metadata below to build each tool's JSON input schema, and
# validates incoming arguments against it before a tool body runs.  By the
# time core/ sees a value it is present (if required) and well-typed.
#
# The nested models (buttons, list sections) are converted to the plain
# dataclasses in core/models.py before they cross into core/.
# =============================================================================

from typing import Annotated, Literal, Optional

from mcp.types import ToolAnnotations
from pydantic import BaseModel, Field

from core.models import ListRow, ListSection, ReplyButton


# Any absolute URL: scheme, "://", then no whitespace.
URL_PATTERN = r"^[A-Za-z][A-Za-z0-9+.\-]*://\S+$"


# -----------------------------------------------------------------------------
# Scalar parameter types
# -----------------------------------------------------------------------------
Recipient = Annotated[str, Field(description="Recipient phone number in E.164 format (e.g. +5511999999999)")]

# "from" is a Python keyword; the alias keeps it as the wire name.
Sender = Annotated[
    str,
    Field(alias="from", description="WhatsApp Channel ID (from MessageBird Channel Directory)"),
]

Offset = Annotated[Optional[str], Field(description="Number of items to skip (default: 0)")]
Limit = Annotated[Optional[str], Field(description="Max items per page (default: 20)")]

MediaType = Literal["image", "video", "audio", "file"]
ReplyType = Literal["text", "image", "video", "audio", "file", "location"]
ConversationStatus = Literal["active", "archived"]
TemplateCategory = Literal["UTILITY", "MARKETING", "AUTHENTICATION"]
HeaderFormat = Literal["TEXT", "IMAGE", "VIDEO", "DOCUMENT"]
ButtonType = Literal["PHONE_NUMBER", "URL", "QUICK_REPLY"]


Url = Annotated[str, Field(pattern=URL_PATTERN)]


# -----------------------------------------------------------------------------
# Nested inputs for interactive messages
# -----------------------------------------------------------------------------
class ReplyButtonInput(BaseModel):
    id: str = Field(description="Unique button identifier")
    title: str = Field(description="Button display text (max 20 chars)")

    def to_core(self) -> ReplyButton:
        return ReplyButton(id=self.id, title=self.title)


class ListRowInput(BaseModel):
    id: str = Field(description="Unique row identifier")
    title: str = Field(description="Row title (max 24 chars)")
    description: Optional[str] = Field(default=None, description="Row description (max 72 chars)")

    def to_core(self) -> ListRow:
        return ListRow(id=self.id, title=self.title, description=self.description)


class ListSectionInput(BaseModel):
    title: str = Field(description="Section title")
    rows: list[ListRowInput] = Field(min_length=1, description="Selectable items in this section")

    def to_core(self) -> ListSection:
        return ListSection(title=self.title, rows=[row.to_core() for row in self.rows])


# -----------------------------------------------------------------------------
# Tool annotations
# -----------------------------------------------------------------------------
# Every tool talks to MessageBird, so all of them are open-world.
# -----------------------------------------------------------------------------
def hints(read_only: bool = False, destructive: bool = False) -> ToolAnnotations:
    return ToolAnnotations(readOnlyHint=read_only, destructiveHint=destructive, openWorldHint=True)


READ_ONLY = hints(read_only=True)
WRITE = hints()
DESTRUCTIVE = hints(destructive=True)
