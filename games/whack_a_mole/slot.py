"""
One mole hole and its lifecycle.
NO UI DEPENDENCIES.

    Idle --activate--> Exposed --final hit--> Resolving --delay--> Idle
                          |
                          +--exposure runs out--> Idle (miss reported)

A slot keeps at most one running timer. Starting a new one (activation,
hit resolution) simply replaces whatever was there, so a pending
quick-hide can never fire on a mole that has already popped up again.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union

from .difficulty import LIVES, RandomSource, TargetType, difficulty_for, draw_target
from .view import RoundView


class SlotOwner(Protocol):
    def report_hit(self, slot_id: int) -> None: ...

    def report_miss(self, slot_id: int, penalizable: bool) -> None: ...

    def report_bomb(self) -> None: ...


class SlotState(Enum):
    Idle = 1
    Exposed = 2
    Resolving = 3


@dataclass
class Exposure:
    """Rise for `reveal`, hold for `hold`, sink for `reveal`."""
    reveal: float
    hold: float
    elapsed: float = 0.0
    sinking: bool = False

    @property
    def sink_at(self) -> float:
        return self.reveal + self.hold

    @property
    def total(self) -> float:
        return self.sink_at + self.reveal

    @property
    def done(self) -> bool:
        return self.elapsed >= self.total

    def visibility(self) -> float:
        if self.elapsed < self.reveal:
            return self.elapsed / self.reveal
        if self.elapsed < self.sink_at:
            return 1.0
        if self.reveal <= 0:
            return 0.0
        return max(0.0, 1.0 - (self.elapsed - self.sink_at) / self.reveal)


@dataclass
class QuickHide:
    remaining: float


class Slot:
    def __init__(
        self,
        index: int,
        owner: SlotOwner,
        view: RoundView,
        rng: RandomSource,
        reveal_duration: float,
        resolve_delay: float,
    ):
        self.index = index
        self.owner = owner
        self.view = view
        self.rng = rng
        self.reveal_duration = reveal_duration
        self.resolve_delay = resolve_delay

        self.state = SlotState.Idle
        self.target = TargetType.Standard
        self.lives = 0
        self.hittable = False
        self.exposure_duration = 0.0
        self._timer: Optional[Union[Exposure, QuickHide]] = None

    # ------------- queries -------------
    @property
    def is_available(self) -> bool:
        """Can be activated: idle, or still showing a resolved hit."""
        return self.state != SlotState.Exposed

    @property
    def visibility(self) -> float:
        if self.state == SlotState.Exposed and isinstance(self._timer, Exposure):
            return self._timer.visibility()
        if self.state == SlotState.Resolving:
            return 1.0
        return 0.0

    # ------------- commands -------------
    def reset(self, index: int) -> None:
        """Round start: take a fixed index and snap to hidden."""
        self.index = index
        self.state = SlotState.Idle
        self.hittable = False
        self.lives = 0
        self._timer = None
        self.view.hide_slot(self.index)

    def activate(self, level: int) -> bool:
        if not self.is_available:
            return False

        difficulty = difficulty_for(level)
        self.target, self.exposure_duration = draw_target(difficulty, self.rng)
        self.lives = LIVES[self.target]
        self.hittable = True
        self.state = SlotState.Exposed
        self._timer = Exposure(reveal=self.reveal_duration, hold=self.exposure_duration)

        self.view.set_sprite(self.index, self.target, self.lives)
        self.view.animate_reveal(self.index, self.reveal_duration)
        return True

    def interact(self) -> None:
        """A tap on this slot. Ignored unless a live target is showing."""
        if not self.hittable or self.state != SlotState.Exposed:
            return

        if self.target == TargetType.Bomb:
            self.owner.report_bomb()
            return

        if self.target == TargetType.Reinforced and self.lives > 1:
            self.lives -= 1
            self.view.set_sprite(self.index, self.target, self.lives)
            return

        # no more taps count until the next activation
        self.hittable = False
        self.state = SlotState.Resolving
        self._timer = QuickHide(self.resolve_delay)
        self.view.set_sprite(self.index, self.target, self.lives, hit=True)
        self.owner.report_hit(self.index)

    def force_stop(self) -> None:
        if self.state == SlotState.Idle and self._timer is None and not self.hittable:
            return
        self.hittable = False
        self.state = SlotState.Idle
        self._timer = None
        self.view.hide_slot(self.index)

    def update(self, dt: float) -> None:
        """Advance whichever timer is running by dt seconds."""
        timer = self._timer
        if timer is None:
            return

        if isinstance(timer, Exposure):
            timer.elapsed += dt
            if not timer.sinking and timer.elapsed >= timer.sink_at:
                timer.sinking = True
                self.view.animate_hide(self.index, self.reveal_duration)
            if not timer.done:
                return

            self._timer = None
            self.state = SlotState.Idle
            if self.hittable:
                self.hittable = False
                self.owner.report_miss(self.index, self.target != TargetType.Bomb)
            return

        timer.remaining -= dt
        if timer.remaining <= 0:
            self._timer = None
            self.state = SlotState.Idle
            self.view.hide_slot(self.index)
