"""
Tests for pointer taps -> FrameData taps.
"""
import pygame

from engine.input.pointer_input import PointerInput

SCREEN = (800, 600)


def press(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


class TestPointerInput:

    def test_left_press_is_a_tap(self):
        """A left press becomes one tap at the same spot."""
        pointer = PointerInput()
        pointer.handle_pygame_event(press((10, 20)), SCREEN)
        taps = pointer.drain()
        assert [(p.x, p.y) for p in taps] == [(10.0, 20.0)]

    def test_drain_clears(self):
        """Taps are delivered once."""
        pointer = PointerInput()
        pointer.handle_pygame_event(press((10, 20)), SCREEN)
        pointer.drain()
        assert pointer.drain() == []

    def test_other_buttons_ignored(self):
        """Right and middle clicks don't tap."""
        pointer = PointerInput()
        pointer.handle_pygame_event(press((10, 20), button=3), SCREEN)
        pointer.handle_pygame_event(press((10, 20), button=2), SCREEN)
        assert pointer.drain() == []

    def test_mirror(self):
        """Mirrored windows flip x back to logical coords."""
        pointer = PointerInput(mirror=True)
        pointer.handle_pygame_event(press((10, 20)), SCREEN)
        (p,) = pointer.drain()
        assert (p.x, p.y) == (789.0, 20.0)

    def test_focus_loss_drops_taps(self):
        """Taps queued before focus loss are thrown away."""
        pointer = PointerInput()
        pointer.handle_pygame_event(press((10, 20)), SCREEN)
        pointer.handle_pygame_event(pygame.event.Event(pygame.WINDOWFOCUSLOST), SCREEN)
        assert pointer.drain() == []
