"""
Interaction Store abstraction.

Holds the append-only interaction log (like, superlike, pass) and answers
per-actor history queries for ranking. Implementations: in-memory (tests,
demo) and JSON file. Swap via config. Appends are serialized by a lock;
ordering is only guaranteed per store, by append order.
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from matchmaker.models import Interaction, ensure_interactions

logger = logging.getLogger(__name__)


class InteractionStore(Protocol):
    """Protocol for the interaction log. Implement for memory, file, or a database."""

    def append(self, interaction: Interaction) -> None:
        """Append one interaction to the end of the log."""
        ...

    def list_for_actor(self, actor_id: str) -> List[Interaction]:
        """Return the actor's interactions in append order."""
        ...

    def reset(self, seed: Optional[Iterable[Interaction]] = None) -> None:
        """Replace the whole log with seed (empty when None)."""
        ...


def _log_append(interaction: Interaction) -> None:
    logger.info(
        "[analytics] %s actor_id=%s target_id=%s ts=%s",
        interaction.type.value,
        interaction.actor_id,
        interaction.target_id,
        interaction.timestamp.isoformat(),
    )


class InMemoryInteractionStore:
    """Interaction log kept in process memory."""

    def __init__(self, seed: Optional[Iterable[Interaction]] = None):
        self._lock = threading.Lock()
        self._log: List[Interaction] = list(seed or [])

    def append(self, interaction: Interaction) -> None:
        with self._lock:
            self._log.append(interaction)
        _log_append(interaction)

    def list_for_actor(self, actor_id: str) -> List[Interaction]:
        with self._lock:
            return [i for i in self._log if i.actor_id == actor_id]

    def reset(self, seed: Optional[Iterable[Interaction]] = None) -> None:
        with self._lock:
            self._log = list(seed or [])

    def __len__(self) -> int:
        return len(self._log)


class JsonInteractionStore:
    """Interaction log persisted as an ordered JSON array (e.g. data/interactions.json)."""

    def __init__(self, path: Union[Path, str], seed: Optional[Iterable[Interaction]] = None):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._log: List[Interaction] = []
        if self._path.exists():
            self._load()
        elif seed is not None:
            self._save(list(seed))

    def _load(self) -> None:
        with open(self._path) as f:
            data = json.load(f)
        records = data.get("interactions", []) if isinstance(data, dict) else data
        self._log = ensure_interactions(records)
        logger.info("[interactions] LOADED count=%s path=%s", len(self._log), self._path)

    def _save(self, log: List[Interaction]) -> None:
        """Write log to a temp file and swap it in; memory is updated only after the swap."""
        out = [i.model_dump(mode="json") for i in log]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with open(tmp, "w") as f:
                json.dump(out, f, indent=2)
            os.replace(tmp, self._path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
        self._log = log

    def append(self, interaction: Interaction) -> None:
        with self._lock:
            self._save(self._log + [interaction])
        _log_append(interaction)

    def list_for_actor(self, actor_id: str) -> List[Interaction]:
        with self._lock:
            return [i for i in self._log if i.actor_id == actor_id]

    def reset(self, seed: Optional[Iterable[Interaction]] = None) -> None:
        with self._lock:
            self._save(list(seed or []))

    def __len__(self) -> int:
        return len(self._log)
