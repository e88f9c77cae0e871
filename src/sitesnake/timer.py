from __future__ import annotations

import pygame

TICK_EVENT = pygame.USEREVENT + 1


class PygameTimer:
    """Interval timer that posts TICK_EVENT onto the pygame event queue.

    pygame keeps at most one timer per event type, so the event type itself
    serves as the handle.
    """

    def __init__(self, event_type: int = TICK_EVENT):
        self.event_type = event_type

    def start(self, interval_ms: int) -> int:
        pygame.time.set_timer(self.event_type, interval_ms)
        return self.event_type

    def cancel(self, handle: int) -> None:
        pygame.time.set_timer(handle, 0)
        # Ticks the old timer already queued must not reach the loop.
        pygame.event.clear(handle)
