"""
Holder for the most recently observed price snapshot.
"""

import logging
from typing import Optional

from ..models import PriceSnapshot


logger = logging.getLogger(__name__)


class SnapshotStore:
    """Keeps exactly one current PriceSnapshot, all-absent until first replaced."""

    def __init__(self, initial: Optional[PriceSnapshot] = None):
        self._current = initial if initial is not None else PriceSnapshot()

    def current(self) -> PriceSnapshot:
        """Return the stored snapshot."""
        return self._current

    def replace(self, snapshot: PriceSnapshot) -> None:
        """Overwrite the stored snapshot. Partial snapshots are accepted as-is."""
        self._current = snapshot
        logger.debug(f"Snapshot store updated: {snapshot.model_dump()}")
