"""
Pipeline state models.

Each state carries exactly the data valid for it. States are replaced
wholesale on every transition.
"""

from dataclasses import dataclass

from .forecast import ForecastSnapshot
from ..core import constants


class PipelineState:
    """Base class for the observable pipeline states."""

    @property
    def is_terminal(self) -> bool:
        """True for states that end a pipeline run."""
        return False


@dataclass(frozen=True)
class Loading(PipelineState):
    """A fetch is in progress and no forecast is available yet."""


@dataclass(frozen=True)
class SummaryPending(PipelineState):
    """The forecast has arrived; the summary is still being generated."""

    snapshot: ForecastSnapshot

    @property
    def summary(self) -> str:
        """Placeholder text shown in place of the summary."""
        return constants.SUMMARY_PLACEHOLDER


@dataclass(frozen=True)
class Success(PipelineState):
    """Forecast plus summary (or a degraded summary message)."""

    snapshot: ForecastSnapshot
    summary: str

    @property
    def is_terminal(self) -> bool:
        return True

    @property
    def is_degraded(self) -> bool:
        """True when summary generation failed and the summary is an error message."""
        return self.summary.startswith(constants.SUMMARY_FAILURE_PREFIX)


@dataclass(frozen=True)
class Error(PipelineState):
    """The forecast could not be fetched."""

    message: str

    @property
    def is_terminal(self) -> bool:
        return True
