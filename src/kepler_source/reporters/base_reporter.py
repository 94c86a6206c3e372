# src/kepler_source/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod
from typing import List

from ..models.instance import Instance


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report(self, instances: List[Instance]):
        """
        Presents the instances of a fetch cycle in a specific format.
        """
        pass
