# Reference dataset: four stages, three crews, with a change of lead on SS3
from .models import Competitor, Result, Stage


def reference_stages():
    return [Stage("SS1", 0), Stage("SS2", 1), Stage("SS3", 2), Stage("SS4", 3)]


def reference_competitors(stages=None):
    stages = reference_stages() if stages is None else stages
    ss1, ss2, ss3 = stages[:3]
    return [
        Competitor("Kalle", [Result(ss1, 1), Result(ss2, 1), Result(ss3, 2)]),
        Competitor("Ott", [Result(ss1, 2), Result(ss2, 2), Result(ss3, 1)]),
        Competitor("Taka", [Result(ss1, 3), Result(ss2, 3), Result(ss3, 3)]),
    ]
