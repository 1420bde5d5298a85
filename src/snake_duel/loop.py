"""Cooperative poll/tick loop driving one round."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from snake_duel.display import Clock, Display, InputSource, MonotonicClock, render_frame
from snake_duel.engine import Outcome, RoundController

logger = logging.getLogger(__name__)


def run_round(
    controller: RoundController,
    display: Display,
    input_source: InputSource,
    clock: Clock | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Outcome:
    """Play *controller*'s round to the end and return its outcome.

    Each iteration polls one key without blocking, then lets the
    controller tick if a full interval has elapsed. When no key was
    waiting the loop idles for ``poll_interval`` so it does not spin.
    """
    clock = clock or MonotonicClock()
    render_frame(display, controller.frame())
    last = clock.now()

    while controller.running:
        key = input_source.poll_key()
        controller.intent.record_key(key)
        if controller.intent.quit:
            controller.quit()
            break

        now = clock.now()
        frame = controller.advance_time(now - last)
        last = now
        if frame is not None:
            render_frame(display, frame)

        if key is None and controller.running:
            sleep(controller.config.poll_interval)

    return controller.outcome
