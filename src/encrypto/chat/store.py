"""Document store boundary used by chat rooms.

Encrypto never persists anything itself. A chat room talks to whatever
store the application provides through the small ``DocumentStore``
protocol below. ``InMemoryDocumentStore`` is a process-local reference
implementation, suitable for tests and single-process use.
"""

from __future__ import annotations

import copy
import logging
import threading
import uuid
from typing import Any, Callable, Dict, List, Protocol

logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Listener = Callable[[List[Document]], None]


class DocumentStore(Protocol):
    def add(self, path: str, document: Document) -> str:
        """Append ``document`` to the collection at ``path`` and return its id."""
        ...

    def get(self, path: str) -> List[Document]:
        """Return every document in the collection at ``path``."""
        ...

    def listen(self, path: str, callback: Listener) -> Callable[[], None]:
        """Call ``callback`` with the full collection on every change.

        Returns a function that removes the listener.
        """
        ...


class InMemoryDocumentStore:
    """Thread-safe dict-of-lists store with synchronous change listeners.

    Listeners are called while the store lock is held, so each one sees
    snapshots in the order the writes happened. A listener may add to the
    store from the same thread but must not wait on another thread that does.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._collections: Dict[str, List[Document]] = {}
        self._listeners: Dict[str, List[Listener]] = {}

    def add(self, path: str, document: Document) -> str:
        doc_id = uuid.uuid4().hex
        stored = dict(document)
        stored["id"] = doc_id
        with self._lock:
            self._collections.setdefault(path, []).append(stored)
            logger.debug("Added document %s to %s", doc_id, path)
            snapshot = self._snapshot(path)
            for callback in list(self._listeners.get(path, [])):
                callback(copy.deepcopy(snapshot))
        return doc_id

    def get(self, path: str) -> List[Document]:
        with self._lock:
            return self._snapshot(path)

    def listen(self, path: str, callback: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.setdefault(path, []).append(callback)
            # Deliver the current state right away, like a snapshot listener.
            callback(self._snapshot(path))

        def unsubscribe() -> None:
            with self._lock:
                callbacks = self._listeners.get(path, [])
                if callback in callbacks:
                    callbacks.remove(callback)

        return unsubscribe

    def _snapshot(self, path: str) -> List[Document]:
        return copy.deepcopy(self._collections.get(path, []))
