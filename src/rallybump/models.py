# Value records for stages, results and competitors
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Stage:
    """One timed stage, placed along the route by its distance."""

    name: str
    distance: float


@dataclass(frozen=True)
class Result:
    """A competitor's position (1 = best) at a stage."""

    stage: Stage
    position: int


@dataclass(frozen=True)
class Competitor:
    """An entrant and their results, in stage order.

    The results may stop short of the final stage if the competitor retired,
    and may be empty altogether.
    """

    name: str
    results: Tuple[Result, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of results but hold them as a tuple
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def first_result(self) -> Optional[Result]:
        return self.results[0] if self.results else None
