# src/kepler_source/collectors/base_collector.py
"""
This module defines the abstract base class for data sources.
The host calls `collect` once per interval and `stop` on shutdown, so any
source honouring this interface can be scheduled the same way.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class BaseCollector(ABC):
    """
    Abstract Base Class for all metric collectors.
    """

    @abstractmethod
    async def collect(self) -> List[Any]:
        """
        The main method for a collector. It should fetch data from its
        source, parse it, and return a list of Pydantic models.
        """
        pass

    async def stop(self) -> None:
        """
        Called once when the host shuts down.
        """
        pass
