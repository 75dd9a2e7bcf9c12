"""Domain Types — enums and aliases that replace bare strings across the codebase.

Invariants:
    - Method and notification names encoded as str Enums — no raw string matching
    - ModelProvider lists every provider save_conversation accepts

Design Decisions:
    - str Enums: serialize to JSON without custom encoders and compare equal to
      the wire strings
"""

from enum import Enum
from typing import Any


# ─── Value Types ─────────────────────────────────────────────────

ToolArguments = dict[str, Any]


# ─── Enums ───────────────────────────────────────────────────────

class RpcMethod(str, Enum):
    """Request kinds answered with a response envelope."""
    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"


class NotificationMethod(str, Enum):
    """Notifications the server recognizes. Others are logged and ignored."""
    INITIALIZED = "notifications/initialized"
    CANCELLED = "notifications/cancelled"


class ModelProvider(str, Enum):
    """Conversation sources accepted by save_conversation."""
    CLAUDE = "claude"
    CHATGPT = "chatgpt"
    GEMINI = "gemini"
    GROK = "grok"
    DEEPSEEK = "deepseek"
    MISTRAL = "mistral"
    LLAMA = "llama"
