"""Default roster of simulated labelers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from labelops.models.labeler import ExperienceLevel, Labeler


def default_labelers() -> List[Labeler]:
    """Ten profiles: three experts, four intermediates, three novices."""

    expert = ExperienceLevel.EXPERT
    intermediate = ExperienceLevel.INTERMEDIATE
    novice = ExperienceLevel.NOVICE
    return [
        Labeler("Expert_Alice", expert, 0.950, 10.0, 25.00),
        Labeler("Expert_Bob", expert, 0.935, 9.5, 24.00),
        Labeler("Expert_Carol", expert, 0.920, 9.0, 23.00),
        Labeler("Intermediate_David", intermediate, 0.880, 8.0, 18.00),
        Labeler("Intermediate_Emma", intermediate, 0.860, 7.5, 17.00),
        Labeler("Intermediate_Frank", intermediate, 0.840, 7.0, 16.00),
        Labeler("Intermediate_Grace", intermediate, 0.800, 6.5, 15.00),
        Labeler("Novice_Henry", novice, 0.780, 6.0, 12.00),
        Labeler("Novice_Iris", novice, 0.750, 5.5, 11.00),
        Labeler("Novice_Jack", novice, 0.720, 5.0, 10.00),
    ]


@dataclass(frozen=True)
class TierSummary:
    level: ExperienceLevel
    count: int
    min_accuracy: float
    max_accuracy: float


def tier_breakdown(labelers: Sequence[Labeler]) -> Dict[ExperienceLevel, TierSummary]:
    """Count labelers and accuracy range per experience level, skipping empty tiers."""

    breakdown: Dict[ExperienceLevel, TierSummary] = {}
    for level in ExperienceLevel:
        accuracies = [labeler.base_accuracy for labeler in labelers if labeler.experience_level is level]
        if not accuracies:
            continue
        breakdown[level] = TierSummary(
            level=level,
            count=len(accuracies),
            min_accuracy=min(accuracies),
            max_accuracy=max(accuracies),
        )
    return breakdown


__all__ = ["TierSummary", "default_labelers", "tier_breakdown"]
