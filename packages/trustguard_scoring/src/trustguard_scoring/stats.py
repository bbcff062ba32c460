"""Per-user aggregate update rule.

The scoring engine does not store anything. Collaborators that keep a
running average of a user's analyses apply these functions, inside
their own transaction, each time an AnalysisResult arrives.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Self

from pydantic import Field

from trustguard_scoring.analyzer import round_half_up
from trustguard_utils import StrictModel


def running_average(old_avg: int, old_count: int, new_score: int) -> int:
    """Fold one more score into an integer running mean.

    new_avg = round((old_avg * old_count + new_score) / (old_count + 1))
    """
    total = Decimal(old_avg * old_count + new_score)
    return round_half_up(total / (old_count + 1))


class TrustAggregate(StrictModel):
    """Running statistics for one user of the analyzer."""

    trust_score: int = 0
    profiles_analyzed: int = Field(default=0, ge=0)
    reports_submitted: int = Field(default=0, ge=0)

    def record_analysis(self, trust_score: int) -> Self:
        """Return a copy with one more analyzed profile folded in."""
        return self.model_copy(
            update={
                "trust_score": running_average(
                    self.trust_score, self.profiles_analyzed, trust_score
                ),
                "profiles_analyzed": self.profiles_analyzed + 1,
            }
        )

    def record_report(self) -> Self:
        """Return a copy with one more submitted report."""
        return self.model_copy(update={"reports_submitted": self.reports_submitted + 1})
