# =============================================================================
# core/results.py  —  The Handler Boundary
# =============================================================================
#
# Every handler funnels its work through run_tool().  It awaits the
# operation, wraps whatever it returns as a success, and converts anything
# raised underneath (ApiError, httpx failures, builder mistakes) into an
# error result prefixed with the operation's label:
#
#     "Failed to send text message: rate limit exceeded, try again shortly."
#
# Input rejected before dispatch (InvalidToolInput) keeps its own message
# and gets no prefix.  Nothing raised inside an operation escapes run_tool.
# =============================================================================

from typing import Any, Awaitable, Callable

from core.models import ToolResult


class InvalidToolInput(Exception):
    """Tool input that cannot be turned into a request; no call is made."""


def tool_result(data: Any) -> ToolResult:
    return ToolResult.success(data)


def tool_error(message: str) -> ToolResult:
    return ToolResult.error(message)


async def run_tool(label: str, operation: Callable[[], Awaitable[Any]]) -> ToolResult:
    """Run one tool operation and normalize its outcome.

    Args:
        label: Short description of the operation, used as the error prefix
               (e.g. "Failed to list contacts").
        operation: Zero-argument coroutine function that builds the request,
                   dispatches it and returns the success payload.

    Returns:
        A success ToolResult with the payload, or an error ToolResult.
    """
    try:
        data = await operation()
    except InvalidToolInput as exc:
        return tool_error(str(exc))
    except Exception as exc:
        return tool_error(f"{label}: {exc}")
    return tool_result(data)
