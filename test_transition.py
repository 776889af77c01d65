import random

import pytest

from companion_emotion import COMPATIBILITY, EmotionCategory, EngineSettings, TransitionSmoother, is_compatible, smooth

E = EmotionCategory


class FixedRandom:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value


class NoDraw:
    def random(self):
        raise AssertionError("random draw not expected on this path")


@pytest.mark.parametrize("emotion", list(E))
def test_same_emotion_is_noop(emotion):
    assert smooth(emotion, emotion, rng=NoDraw()) is emotion


@pytest.mark.parametrize("emotion", list(E))
def test_baseline_transitions_are_immediate(emotion):
    assert smooth(E.NORMAL, emotion, rng=NoDraw()) is emotion
    assert smooth(emotion, E.NORMAL, rng=NoDraw()) is E.NORMAL


@pytest.mark.parametrize(
    "current, target",
    [(a, b) for a, targets in COMPATIBILITY.items() for b in targets if b is not E.NORMAL],
)
def test_compatible_transitions_are_deterministic(current, target):
    assert smooth(current, target, rng=NoDraw()) is target


def test_happy_to_angry_is_not_compatible():
    assert not is_compatible(E.HAPPY, E.ANGRY)
    assert E.ANGRY not in COMPATIBILITY[E.HAPPY]


def test_incompatible_transition_follows_the_draw():
    assert smooth(E.HAPPY, E.ANGRY, rng=FixedRandom(0.29)) is E.ANGRY
    assert smooth(E.HAPPY, E.ANGRY, rng=FixedRandom(0.3)) is E.HAPPY
    assert smooth(E.SAD, E.ANGRY, rng=FixedRandom(0.99)) is E.SAD


def test_incompatible_transition_uses_one_draw():
    rng = FixedRandom(0.5)
    smooth(E.EXCITED, E.SAD, rng=rng)
    assert rng.calls == 1


def test_custom_damping_threshold():
    assert smooth(E.HAPPY, E.ANGRY, rng=FixedRandom(0.5), damping=0.6) is E.ANGRY
    assert smooth(E.HAPPY, E.ANGRY, rng=FixedRandom(0.0), damping=0.0) is E.HAPPY


def test_damping_rate_is_roughly_thirty_percent():
    rng = random.Random(1234)
    trials = 10_000
    allowed = sum(smooth(E.HAPPY, E.ANGRY, rng=rng) is E.ANGRY for _ in range(trials))
    assert 0.27 < allowed / trials < 0.33


def test_compatibility_graph_is_exhaustive():
    assert set(COMPATIBILITY) == set(E) - {E.NORMAL}
    for targets in COMPATIBILITY.values():
        assert targets <= set(E)


def test_smoother_binds_settings_and_rng():
    smoother = TransitionSmoother(EngineSettings(damping_threshold=1.0), rng=FixedRandom(0.99))
    assert smoother(E.HAPPY, E.ANGRY) is E.ANGRY
    smoother = TransitionSmoother(EngineSettings(damping_threshold=0.0), rng=FixedRandom(0.0))
    assert smoother(E.HAPPY, E.ANGRY) is E.HAPPY


def test_default_source_is_created_per_call(monkeypatch):
    from companion_emotion import transition

    monkeypatch.setattr(transition.random, "Random", lambda: FixedRandom(0.0))
    assert smooth(E.HAPPY, E.ANGRY) is E.ANGRY
    monkeypatch.setattr(transition.random, "Random", lambda: FixedRandom(0.99))
    assert smooth(E.HAPPY, E.ANGRY) is E.HAPPY
