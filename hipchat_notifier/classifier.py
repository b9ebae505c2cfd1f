"""Result Classifier - map build results to severity and message color."""

from dataclasses import dataclass

from .types import BackgroundColor, BuildResult


@dataclass(frozen=True)
class Classification:
    """Severity rank (0 is best) and display color of a build result."""
    severity: int
    color: BackgroundColor


def classify(result: BuildResult) -> Classification:
    """Classify a build result."""
    return Classification(
        severity=result.ordinal,
        color=BackgroundColor.from_ball_color(result.ball_color),
    )


def is_success_class(result: BuildResult) -> bool:
    """Check if the result is at least as good as SUCCESS."""
    return result.is_better_or_equal_to(BuildResult.SUCCESS)
