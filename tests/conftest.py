"""
Shared fixtures. NO UI DEPENDENCIES.
"""
import pytest

from games.whack_a_mole.config import RoundConfig
from games.whack_a_mole.round import RoundController
from games.whack_a_mole.view import RoundView


class RecordingView(RoundView):
    """Remembers every call the core makes, in order."""

    def __init__(self):
        self.calls = []
        self.score = None
        self.time = None
        self.banners = set()
        self.start_button = True

    def show_banner(self, kind):
        self.calls.append(("show_banner", kind))
        self.banners.add(kind)

    def hide_banner(self, kind):
        self.calls.append(("hide_banner", kind))
        self.banners.discard(kind)

    def show_start_button(self):
        self.calls.append(("show_start_button",))
        self.start_button = True

    def hide_start_button(self):
        self.calls.append(("hide_start_button",))
        self.start_button = False

    def set_score(self, score):
        self.calls.append(("set_score", score))
        self.score = score

    def set_time(self, seconds):
        self.calls.append(("set_time", seconds))
        self.time = seconds

    def animate_reveal(self, slot_id, duration):
        self.calls.append(("animate_reveal", slot_id, duration))

    def animate_hide(self, slot_id, duration):
        self.calls.append(("animate_hide", slot_id, duration))

    def hide_slot(self, slot_id):
        self.calls.append(("hide_slot", slot_id))

    def set_sprite(self, slot_id, target, lives, hit=False):
        self.calls.append(("set_sprite", slot_id, target, lives, hit))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class ScriptedRng:
    """
    Hands out queued values, then falls back to harmless defaults:
    random() -> 0.99 (no bomb / reinforced at low levels), uniform() -> low,
    integers() -> low.
    """

    def __init__(self, randoms=(), uniforms=(), integers=()):
        self.randoms = list(randoms)
        self.uniforms = list(uniforms)
        self.ints = list(integers)
        self.uniform_calls = []

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.99

    def uniform(self, low, high):
        self.uniform_calls.append((low, high))
        return self.uniforms.pop(0) if self.uniforms else low

    def integers(self, low, high):
        return self.ints.pop(0) if self.ints else low


class FakeOwner:
    def __init__(self):
        self.hits = []
        self.misses = []
        self.bombs = 0

    def report_hit(self, slot_id):
        self.hits.append(slot_id)

    def report_miss(self, slot_id, penalizable):
        self.misses.append((slot_id, penalizable))

    def report_bomb(self):
        self.bombs += 1


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def owner():
    return FakeOwner()


@pytest.fixture
def make_round(view):
    """Factory: make_round(rng=None, **config_overrides) -> started RoundController."""

    def _make(rng=None, start=True, **overrides):
        overrides.setdefault("seed", 1234)
        rnd = RoundController(RoundConfig(**overrides), view=view, rng=rng)
        if start:
            rnd.start_round()
        return rnd

    return _make
