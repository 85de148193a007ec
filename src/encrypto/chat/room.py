"""Password-protected chat rooms on top of a document store.

Every message is encrypted with the room password before it reaches the
store, so the store only ever sees envelope strings. Messages are read back
encrypted and revealed one at a time on demand.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from encrypto.core.exceptions import InvalidInputError
from encrypto.security.crypto import decrypt, encrypt
from .models import ChatMessage
from .store import Document, DocumentStore

logger = logging.getLogger(__name__)


def messages_path(room_name: str) -> str:
    return f"rooms/{room_name}/messages"


def _ordered(documents: List[Document]) -> List[ChatMessage]:
    messages = [ChatMessage.from_dict(doc) for doc in documents]
    messages.sort(key=lambda m: m.timestamp)
    return messages


class ChatRoom:
    """A named room whose members share ``password``."""

    def __init__(self, store: DocumentStore, room_name: str, alias: str, password: str):
        if not room_name or not alias or not password:
            raise InvalidInputError("Room name, alias and password are required")
        self.store = store
        self.room_name = room_name
        self.alias = alias
        self._password = password

    @property
    def path(self) -> str:
        return messages_path(self.room_name)

    def send(self, text: str) -> ChatMessage | None:
        """
        Encrypt ``text`` and add it to the room.

        Surrounding whitespace is stripped; empty text is ignored and
        returns None.
        """
        if not isinstance(text, str):
            raise InvalidInputError(f"Message text must be str, got {type(text).__name__}")
        text = text.strip()
        if not text:
            return None

        message = ChatMessage(sender_alias=self.alias, encrypted_content=encrypt(text, self._password))
        message.doc_id = self.store.add(self.path, message.to_dict())
        logger.info("Sent message %s to room %s", message.doc_id, self.room_name)
        return message

    def messages(self) -> List[ChatMessage]:
        """Return the room's messages, oldest first, still encrypted."""
        return _ordered(self.store.get(self.path))

    def reveal(self, message: ChatMessage) -> str:
        """Decrypt one message with the room password.

        Raises the core decryption errors unchanged.
        """
        return decrypt(message.encrypted_content, self._password)

    def subscribe(self, callback: Callable[[List[ChatMessage]], None]) -> Callable[[], None]:
        """Forward the ordered message list to ``callback`` on every change."""
        logger.debug("Subscribing to room %s", self.room_name)
        return self.store.listen(self.path, lambda docs: callback(_ordered(docs)))
