"""Base analyzer class for all analysis components."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for analyzers over a records view.

    An analyzer takes a :class:`~cloud3d_tlbx.data.views.RecordsView` in its constructor,
    computes in ``fit()`` (returning itself for chaining) and packages everything it found
    into a frozen dataclass returned by ``result()``.

    Analyzers never render. Renderers in :mod:`cloud3d_tlbx.plotting` accept the ``*Result``
    dataclasses instead.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Run the analysis over the view; returns self."""
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return the frozen result dataclass.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
