"""
Data models for chat room documents
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import time


def now_millis() -> int:
    return int(time.time() * 1000)


@dataclass
class ChatMessage:
    """One message document; ``encrypted_content`` is an envelope string."""

    sender_alias: str
    encrypted_content: str
    timestamp: int = field(default_factory=now_millis)
    doc_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        # Field names match the documents written by the mobile client.
        return {
            "senderAlias": self.sender_alias,
            "encryptedContent": self.encrypted_content,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], doc_id: Optional[str] = None) -> "ChatMessage":
        return cls(
            sender_alias=data.get("senderAlias", ""),
            encrypted_content=data.get("encryptedContent", ""),
            timestamp=int(data.get("timestamp") or 0),
            doc_id=doc_id if doc_id is not None else data.get("id"),
        )
