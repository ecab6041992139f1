"""
Display mode controller: owns the particle layers, computes the exploded and
text layouts, and animates particles from their captured original positions
toward the active target layout.
"""
import logging
from typing import Dict, Iterable, List, Optional

import numpy as np

from .config import DisplayConfig
from .glyphs import glyph_points
from .types import DisplayMode

logger = logging.getLogger(__name__)


class ParticleLayer:
    """A named group of particles with its own original/target buffers."""

    def __init__(
        self,
        name: str,
        positions,
        colors=None,
        sizes=None,
        base_size: float = 0.15,
    ):
        self.name = name
        self.positions = np.array(positions, dtype=np.float32).reshape(-1, 3)
        self.colors = None if colors is None else np.array(colors, dtype=np.float32).reshape(-1, 3)
        self.sizes = None if sizes is None else np.array(sizes, dtype=np.float32).reshape(-1)
        self.base_size = base_size
        self.original: Optional[np.ndarray] = None
        self.target: Optional[np.ndarray] = None

    @property
    def count(self) -> int:
        return len(self.positions)

    @property
    def flat(self) -> np.ndarray:
        """Flattened xyz buffer, as uploaded to the renderer."""
        return self.positions.reshape(-1)

    def capture_original(self) -> np.ndarray:
        self.original = self.positions.copy()
        return self.original

    def __repr__(self) -> str:
        return f"ParticleLayer(name={self.name!r}, count={self.count})"


def layout_text_points(text: str, total_particles: int, cfg: DisplayConfig) -> np.ndarray:
    """
    Glyph target points for a string, in particle assignment order.

    Characters are laid out left to right, centred horizontally. Each
    character consumes at most ``total_particles // len(text)`` particles.

    Args:
        text: Uppercase string to spell
        total_particles: Number of particles across all layers
        cfg: Display configuration (glyph size and spacing)

    Returns:
        Array of shape (m, 3) with m <= total_particles
    """
    if not text or total_particles <= 0:
        return np.zeros((0, 3), dtype=np.float32)

    slot_width = cfg.char_width + cfg.char_spacing
    start_x = -(len(text) * slot_width) / 2
    per_char = total_particles // len(text)

    chunks = []
    for index, char in enumerate(text):
        points = glyph_points(char, cfg.char_width, cfg.char_height)[:per_char].copy()
        points[:, 0] += start_x + (index + 0.5) * slot_width
        chunks.append(points)

    return np.concatenate(chunks, axis=0)


class DisplayModeController:
    """
    State machine over Attached / Exploded / Text display modes.

    Every transition resets the shared animation progress; ``update`` is
    called once per rendered frame and advances it by a fixed step, so the
    transition length is tied to the frame rate rather than wall time.
    """

    def __init__(
        self,
        layers: Iterable[ParticleLayer],
        cfg: DisplayConfig,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize the controller in Attached mode."""
        self.layers: List[ParticleLayer] = list(layers)
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng()
        self.custom_text = ""
        self.set_text(cfg.default_text)

        self._mode = DisplayMode.ATTACHED
        self._steps = 0
        self.animation_progress = 0.0
        self._settled = True
        self.text_particle_count = 0

    # --- queries ---

    def current_mode(self) -> DisplayMode:
        return self._mode

    def is_dispersed(self) -> bool:
        """True while exploded or spelling text (photo selection is active)."""
        return self._mode in (DisplayMode.EXPLODED, DisplayMode.TEXT)

    @property
    def is_exploded(self) -> bool:
        return self._mode == DisplayMode.EXPLODED

    @property
    def is_text_mode(self) -> bool:
        return self._mode == DisplayMode.TEXT

    @property
    def is_settled(self) -> bool:
        return self._settled

    def total_particles(self) -> int:
        return sum(layer.count for layer in self.layers)

    def positions(self) -> Dict[str, np.ndarray]:
        """Current flattened position buffer per layer."""
        return {layer.name: layer.flat for layer in self.layers}

    # --- configuration ---

    def set_text(self, text: str) -> None:
        """Set the string spelled on the next TextMode entry."""
        self.custom_text = text.upper()[:self.cfg.max_text_length]

    # --- transitions ---

    def explode(self) -> bool:
        """
        Scatter every particle randomly around its current position.

        Returns:
            True if the transition happened (only allowed from Attached)
        """
        if self._mode != DisplayMode.ATTACHED:
            return False

        for layer in self.layers:
            original = layer.capture_original()
            layer.target = original + self._scatter_offsets(layer.count)

        self._begin(DisplayMode.EXPLODED)
        return True

    def restore(self) -> bool:
        """
        Send every particle back to its captured original position.

        Returns:
            True if the transition happened (no-op when already Attached)
        """
        if self._mode == DisplayMode.ATTACHED:
            return False

        for layer in self.layers:
            if layer.original is not None:
                layer.target = layer.original.copy()

        self._begin(DisplayMode.ATTACHED)
        return True

    def toggle_text(self) -> bool:
        """Enter TextMode, or restore if already spelling text."""
        if self._mode == DisplayMode.TEXT:
            return self.restore()

        for layer in self.layers:
            if layer.original is None:
                layer.capture_original()
        self._arrange_as_text(self.custom_text)
        self._begin(DisplayMode.TEXT)
        return True

    def _begin(self, mode: DisplayMode) -> None:
        logger.info(f"Display mode {self._mode.value} -> {mode.value}")
        self._mode = mode
        self._steps = 0
        self.animation_progress = 0.0
        self._settled = False

    # --- layouts ---

    def _scatter_offsets(self, count: int) -> np.ndarray:
        # Two independent angles and a uniform radius: denser near the centre
        angle1 = self.rng.random(count) * np.pi * 2
        angle2 = self.rng.random(count) * np.pi * 2
        radius = self.rng.random(count) * self.cfg.explode_radius
        return np.stack([
            np.sin(angle2) * np.cos(angle1) * radius,
            np.cos(angle2) * radius,
            np.sin(angle2) * np.sin(angle1) * radius,
        ], axis=1).astype(np.float32)

    def _ring_points(self, count: int) -> np.ndarray:
        angle = self.rng.random(count) * np.pi * 2
        radius = self.cfg.ring_min_radius + self.rng.random(count) * (
            self.cfg.ring_max_radius - self.cfg.ring_min_radius
        )
        height = (self.rng.random(count) - 0.5) * self.cfg.ring_height
        return np.stack([
            np.cos(angle) * radius,
            height,
            np.sin(angle) * radius,
        ], axis=1).astype(np.float32)

    def _arrange_as_text(self, text: str) -> None:
        placed = layout_text_points(text, self.total_particles(), self.cfg)
        overshoot = self.cfg.text_overshoot

        offset = 0
        for layer in self.layers:
            original = layer.original
            count = layer.count
            on_glyph = max(0, min(len(placed) - offset, count))

            target = np.empty_like(original)
            if on_glyph:
                glyph = placed[offset:offset + on_glyph]
                target[:on_glyph] = original[:on_glyph] + (glyph - original[:on_glyph]) * overshoot
            target[on_glyph:] = self._ring_points(count - on_glyph)

            layer.target = target
            offset += count

        self.text_particle_count = len(placed)
        logger.debug(f"Arranged {len(placed)} particles as {text!r}")

    # --- animation ---

    def update(self) -> float:
        """
        Advance the transition by one frame.

        Returns:
            Current animation progress in [0, 1]
        """
        if self._settled:
            return self.animation_progress

        self._steps += 1
        self.animation_progress = min(1.0, self._steps * self.cfg.animation_step)

        for layer in self.layers:
            if layer.original is None or layer.target is None:
                continue
            if self.animation_progress >= 1.0:
                np.copyto(layer.positions, layer.target)
            else:
                layer.positions[:] = layer.original + (layer.target - layer.original) * self.animation_progress

        if self.animation_progress >= 1.0 and self._mode == DisplayMode.ATTACHED:
            self._settled = True
        return self.animation_progress
