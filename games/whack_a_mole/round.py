"""
Round controller - clock, score and spawning for one playthrough.
NO UI DEPENDENCIES.

Usage:
    rnd = RoundController(RoundConfig(), view=my_view)
    rnd.start_round()
    while rnd.is_playing:
        rnd.tick(dt)
        # taps arrive as rnd.slots[i].interact()
"""
from __future__ import annotations
import logging
from typing import List, Optional, Set

import numpy as np

from .config import RoundConfig
from .difficulty import RandomSource
from .slot import Slot
from .view import EndReason, RoundView

logger = logging.getLogger(__name__)


class RoundController:
    def __init__(
        self,
        config: Optional[RoundConfig] = None,
        view: Optional[RoundView] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.config = config or RoundConfig()
        self.view = view or RoundView()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.slots: List[Slot] = [
            Slot(
                index=i,
                owner=self,
                view=self.view,
                rng=self.rng,
                reveal_duration=self.config.reveal_duration,
                resolve_delay=self.config.resolve_delay,
            )
            for i in range(self.config.slot_count)
        ]

        self.time_remaining: float = self.config.starting_time
        self.score: int = 0
        self.active_slots: Set[int] = set()
        self.is_playing: bool = False

        # summary of the current / last round
        self.hits = 0
        self.misses = 0
        self.penalized_misses = 0
        self.end_reason: Optional[EndReason] = None

    @property
    def difficulty_level(self) -> int:
        return self.score // self.config.score_per_level

    # ------------- round flow -------------
    def start_round(self) -> None:
        for kind in EndReason:
            self.view.hide_banner(kind)
        self.view.hide_start_button()

        for i, slot in enumerate(self.slots):
            slot.reset(i)

        self.active_slots.clear()
        self.time_remaining = self.config.starting_time
        self.score = 0
        self.hits = 0
        self.misses = 0
        self.penalized_misses = 0
        self.end_reason = None
        self.is_playing = True

        self.view.set_score(self.score)
        self.view.set_time(self.time_remaining)
        logger.info("Round started: %.1fs on the clock, %d slots",
                    self.time_remaining, len(self.slots))

    def end_round(self, reason: EndReason) -> None:
        if not self.is_playing:
            return
        self.is_playing = False
        self.end_reason = reason

        for slot in self.slots:
            slot.force_stop()

        self.view.show_banner(reason)
        self.view.show_start_button()
        logger.info("Round over (%s): score %d, %d hits, %d misses",
                    reason.name, self.score, self.hits, self.misses)

    def tick(self, dt: float) -> None:
        if not self.is_playing:
            return

        self.time_remaining -= dt
        if self.time_remaining <= 0:
            self.time_remaining = 0.0
            self.view.set_time(self.time_remaining)
            self.end_round(EndReason.TimeUp)
            return
        self.view.set_time(self.time_remaining)

        self._try_spawn()

        for slot in self.slots:
            slot.update(dt)
            # a slot report can end the round part way through the pass
            if not self.is_playing:
                return

    def _try_spawn(self) -> None:
        level = self.difficulty_level
        if len(self.active_slots) > level:
            return

        # One random probe per tick; a busy slot just means try again next frame.
        index = int(self.rng.integers(0, len(self.slots)))
        slot = self.slots[index]
        if index in self.active_slots or not slot.is_available:
            return

        if slot.activate(level):
            self.active_slots.add(index)
            logger.debug("Slot %d up: %s for %.2fs (level %d)",
                         index, slot.target.name, slot.exposure_duration, level)

    # ------------- slot reports -------------
    def report_hit(self, slot_id: int) -> None:
        if not self.is_playing:
            return
        self.score += 1
        self.hits += 1
        self.time_remaining += self.config.hit_bonus
        self.active_slots.discard(slot_id)
        self.view.set_score(self.score)
        logger.debug("Hit slot %d, score %d", slot_id, self.score)

    def report_miss(self, slot_id: int, penalizable: bool) -> None:
        if not self.is_playing:
            return
        self.misses += 1
        if penalizable:
            # may dip below zero; the next tick clamps and ends the round
            self.penalized_misses += 1
            self.time_remaining -= self.config.miss_penalty
        self.active_slots.discard(slot_id)
        logger.debug("Missed slot %d (penalized=%s), %.2fs left",
                     slot_id, penalizable, self.time_remaining)

    def report_bomb(self) -> None:
        if not self.is_playing:
            return
        self.end_round(EndReason.Bomb)
