from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models.instance import Instance


class BaseExporter(ABC):
    """Abstract base class for file exporters.

    Subclasses should provide a DEFAULT_FILENAME and implement `export`.
    """

    DEFAULT_FILENAME: str = "kepler-instances"

    @abstractmethod
    async def export(self, instances: List[Instance], path: str | None = None) -> str:
        """Export the provided instances to disk. Return the written path."""
        raise NotImplementedError()
