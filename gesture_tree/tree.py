"""
Builds the particle layers of the tree: a cone spiral of leaves with
ornaments, gifts, bells and snowflakes mixed in.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config import TreeConfig
from .display import ParticleLayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerStyle:
    """Base appearance of one particle layer."""
    size: float
    color: Tuple[float, float, float]
    jitter: float = 0.0  # uniform offset half-width around the spiral point
    spread: float = 1.0  # horizontal push away from the trunk


def _rgb(hex_color: int) -> Tuple[float, float, float]:
    return ((hex_color >> 16 & 0xFF) / 255.0, (hex_color >> 8 & 0xFF) / 255.0, (hex_color & 0xFF) / 255.0)


LAYER_STYLES: Dict[str, LayerStyle] = {
    "leaf": LayerStyle(size=0.15, color=_rgb(0x2D5A27)),
    "gold": LayerStyle(size=0.4, color=_rgb(0xFFD700)),
    "red": LayerStyle(size=0.5, color=_rgb(0xC41E3A)),
    "star": LayerStyle(size=0.6, color=_rgb(0xFFFFFF), spread=1.1),
    "gift": LayerStyle(size=0.7, color=_rgb(0xFF6347), jitter=0.15),
    "bell": LayerStyle(size=0.5, color=_rgb(0xFFD700), jitter=0.1),
    "snowflake": LayerStyle(size=0.3, color=_rgb(0xE6F3FF)),
}

GIFT_COLORS = np.array([_rgb(0xFF6347), _rgb(0x32CD32), _rgb(0x4169E1), _rgb(0x9370DB)], dtype=np.float32)

# Checked top-down; a draw above the threshold selects the layer
TYPE_THRESHOLDS: Sequence[Tuple[str, float]] = (
    ("star", 0.97),
    ("red", 0.93),
    ("gift", 0.88),
    ("bell", 0.85),
    ("gold", 0.82),
    ("snowflake", 0.79),
)

# (frequency, amplitude) of the size pulse per layer
PULSE: Dict[str, Tuple[float, float]] = {
    "gold": (1.0, 0.3),
    "star": (3.0, 0.3),
    "bell": (2.0, 0.3),
    "snowflake": (2.0, 0.2),
}


def assign_types(draws: np.ndarray) -> np.ndarray:
    """Map uniform draws in [0, 1) to layer names."""
    types = np.full(draws.shape, "leaf", dtype=object)
    assigned = np.zeros(draws.shape, dtype=bool)
    for name, threshold in TYPE_THRESHOLDS:
        mask = (draws > threshold) & ~assigned
        types[mask] = name
        assigned |= mask
    return types


def build_tree_layers(cfg: TreeConfig, rng: Optional[np.random.Generator] = None) -> List[ParticleLayer]:
    """
    Generate the tree's particle layers.

    Args:
        cfg: Tree size and particle count
        rng: Random generator (seed it for reproducible trees)

    Returns:
        Non-empty layers in LAYER_STYLES order
    """
    if cfg.count < 0:
        raise ValueError(f"Particle count must be non-negative, got {cfg.count}")

    rng = rng if rng is not None else np.random.default_rng()
    count = cfg.count

    index = np.arange(count, dtype=np.float64)
    types = assign_types(rng.random(count))

    y_ratio = index / count if count else index
    radius = cfg.radius * (1 - y_ratio) + rng.random(count) * 0.5
    angle = index * 2.5 + rng.random(count)
    base = np.stack([
        np.cos(angle) * radius,
        y_ratio * cfg.height - cfg.height / 2,
        np.sin(angle) * radius,
    ], axis=1)

    layers = []
    for name, style in LAYER_STYLES.items():
        mask = types == name
        n = int(mask.sum())
        if n == 0:
            continue

        positions = base[mask].copy()
        positions[:, 0] *= style.spread
        positions[:, 2] *= style.spread
        if style.jitter:
            positions += (rng.random((n, 3)) - 0.5) * (style.jitter * 2)

        if name == "gift":
            colors = GIFT_COLORS[rng.integers(0, len(GIFT_COLORS), n)]
        else:
            colors = np.tile(np.array(style.color, dtype=np.float32), (n, 1))
        colors = colors * (0.8 + rng.random((n, 1)) * 0.4)
        sizes = style.size * (0.8 + rng.random(n) * 0.4)

        layers.append(ParticleLayer(name, positions, colors=colors, sizes=sizes, base_size=style.size))

    logger.debug("Built tree: " + ", ".join(f"{layer.name}={layer.count}" for layer in layers))
    return layers


def pulse_sizes(layers: Sequence[ParticleLayer], time_s: float) -> Dict[str, float]:
    """
    Material point size per layer for the twinkle effect.

    Args:
        layers: Tree layers
        time_s: Scene time in seconds

    Returns:
        Mapping of layer name to point size
    """
    sizes = {}
    for layer in layers:
        freq, amplitude = PULSE.get(layer.name, (0.0, 0.0))
        sizes[layer.name] = layer.base_size * (1 + math.sin(time_s * freq) * amplitude)
    return sizes
