# animation.py
"""
Frame-paced driver for the particle text animation.

The AnimationLoop owns no ambient state: everything that changes while the
animation runs (pool, frame counter, word index, pending frame request)
lives in one `EngineState` value created by `start()` and dropped by
`stop()`. Each frame fades the canvas, ticks and draws the pool, and every
`word_interval_frames` frames moves on to the next word.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from constants import DRAW_AS_POINTS, LOG_THROTTLE_STEPS, WORD_INTERVAL_FRAMES
from field import ParticleField
from sampler import TargetSampler
from visualization import Canvas

# --- Data Contracts ---
#
# class AnimationLoop:
#   - __init__(self, scheduler, params, particle_params, rng):
#     - Inputs:
#       - scheduler: frame-pacing primitive with request_frame(callback)
#         and cancel(handle), e.g. visualization.FrameScheduler.
#       - params: The `animation` section of config.json.
#       - particle_params: The `particles` section of config.json.
#       - rng: Optional Generator; defaults to default_rng(params["seed"]).
#
#   - start(self, words: Sequence[str], canvas: Canvas) -> EngineState:
#     - Side Effects: samples and assigns words[0] immediately, then
#       requests the first frame. Restarts cleanly if already running.
#
#   - step(self) -> None:
#     - Side Effects: one fade + tick + draw + prune pass. On every
#       word_interval_frames-th frame, advances the word index cyclically
#       and resamples. Requests the next frame.
#
#   - stop(self) -> None:
#     - Side Effects: cancels the pending frame; no step runs afterwards.
#
#   - notify_resize(self, width=None, height=None) -> None:
#     - Side Effects: optionally resizes the canvas, then resamples the
#       current word without advancing the cycle.


@dataclass
class EngineState:
    words: List[str]
    canvas: Canvas
    field: ParticleField
    frame_count: int = 0
    word_index: int = 0
    pending_frame: Optional[int] = None

    @property
    def current_word(self) -> str:
        return self.words[self.word_index]


class AnimationLoop:
    """
    Cycles a playlist of words through a particle field, one frame at a time.
    """
    def __init__(
        self, scheduler, params: Optional[Dict[str, Any]] = None,
        particle_params: Optional[Dict[str, Any]] = None,
        rng: Optional[np.random.Generator] = None,
        log_throttle: int = LOG_THROTTLE_STEPS
    ):
        self.scheduler = scheduler
        self.params = params if params is not None else {}
        self.particle_params = particle_params if particle_params is not None else {}
        # All randomness is drawn from one generator so a seed replays a run.
        self.rng = rng if rng is not None else np.random.default_rng(self.params.get('seed'))
        self.sampler = TargetSampler(self.params, self.rng)
        self.word_interval = max(1, int(self.params.get('word_interval_frames', WORD_INTERVAL_FRAMES)))
        self.draw_as_points = bool(self.params.get('draw_as_points', DRAW_AS_POINTS))
        self.log_throttle = max(1, int(log_throttle))
        self.state: Optional[EngineState] = None

    @property
    def running(self) -> bool:
        return self.state is not None

    def start(self, words: Sequence[str], canvas: Canvas) -> EngineState:
        if self.state is not None:
            self.stop()

        self.state = EngineState(
            words=list(words),
            canvas=canvas,
            field=ParticleField(self.particle_params, self.rng),
        )
        logging.info(f"Animation starting with {len(self.state.words)} words on a {canvas.width}x{canvas.height} canvas.")
        self._resample()
        self.state.pending_frame = self.scheduler.request_frame(self.step)
        return self.state

    def stop(self) -> None:
        state = self.state
        if state is None:
            return
        self.scheduler.cancel(state.pending_frame)
        state.pending_frame = None
        self.state = None
        logging.info(f"Animation stopped after {state.frame_count} frames.")

    def notify_resize(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        state = self.state
        if state is None:
            return
        if width is not None and height is not None:
            state.canvas.resize(width, height)
        elif width is not None or height is not None:
            logging.warning(
                f"Resize needs both width and height, got {width}x{height}; "
                f"keeping {state.canvas.width}x{state.canvas.height}."
            )
        logging.info(f"Resampling '{state.current_word}' for {state.canvas.width}x{state.canvas.height}.")
        self._resample()

    def step(self) -> None:
        state = self.state
        if state is None:
            return
        state.pending_frame = None

        canvas = state.canvas
        canvas.fade()
        removed = state.field.update(canvas.surface, canvas.width, canvas.height, self.draw_as_points)

        state.frame_count += 1
        if state.frame_count % self.word_interval == 0:
            self.advance_word()

        if state.frame_count % self.log_throttle == 0:
            logging.debug(
                f"Frame {state.frame_count} | Pool: {len(state.field)} | "
                f"Dissolving: {state.field.dissolving_count} | Removed this frame: {removed}"
            )

        # stop() may have been called from within this frame.
        if self.state is state:
            state.pending_frame = self.scheduler.request_frame(self.step)

    def advance_word(self) -> None:
        state = self.state
        if state is None:
            return
        state.word_index = (state.word_index + 1) % len(state.words)
        logging.info(f"Switching to word {state.word_index}: '{state.current_word}'")
        self._resample()

    def _resample(self) -> None:
        state = self.state
        canvas = state.canvas
        targets = self.sampler.sample(state.current_word, canvas.width, canvas.height)
        if len(targets) == 0:
            logging.warning(f"No targets for '{state.current_word}'; dissolving the whole field.")
        state.field.assign(targets, canvas.width, canvas.height)
