"""
Configuration management for the gesture-driven particle tree.
"""
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

from dotenv import load_dotenv


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int = 0
    width: int = 640
    height: int = 480
    fps: int = 30


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int = 2
    model_complexity: int = 1
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5


@dataclass
class ClassifierConfig:
    """Thresholds for per-hand features and composite gestures."""
    pinch_threshold: float = 0.05
    heart_tip_threshold: float = 0.08
    heart_cooldown_ms: int = 1000
    music_switch_cooldown_ms: int = 2000


@dataclass
class InteractionConfig:
    """Sensitivities and bands for the transform state machine."""
    translation_sensitivity: float = 5.0
    rotation_sensitivity: float = 3.0
    explode_delta: float = 0.15
    scale_band: float = 0.10
    min_scale: float = 0.3
    max_scale: float = 3.0


@dataclass
class DisplayConfig:
    """Particle layout and animation settings."""
    default_text: str = "MERRY XMAS"
    max_text_length: int = 20
    explode_radius: float = 15.0
    animation_step: float = 0.02
    char_width: float = 2.0
    char_height: float = 3.0
    char_spacing: float = 0.5
    text_overshoot: float = 1.5
    ring_min_radius: float = 8.0
    ring_max_radius: float = 13.0
    ring_height: float = 10.0
    show_landmarks: bool = True
    window_name: str = "Gesture Tree"


@dataclass
class TreeConfig:
    """Particle tree generation settings."""
    count: int = 20000
    height: float = 20.0
    radius: float = 6.0


@dataclass
class MusicConfig:
    """Background music settings."""
    tracks: List[str] = field(default_factory=lambda: [
        "assets/audio/music1.mp3",
        "assets/audio/music2.mp3",
        "assets/audio/music3.mp3",
    ])
    volume: float = 0.3
    switch_cooldown_ms: int = 2000


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig = field(default_factory=CameraConfig)
    mediapipe: MediaPipeConfig = field(default_factory=MediaPipeConfig)
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)
    music: MusicConfig = field(default_factory=MusicConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    A ``.env`` file is honoured: ``GESTURE_TREE_CONFIG`` selects the config
    file when no path is given, and ``GESTURE_TREE_TEXT`` overrides the
    default TextMode string.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings
    """
    load_dotenv()

    if path is None:
        path = os.getenv("GESTURE_TREE_CONFIG") or DEFAULT_CONFIG_PATH

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    cfg = _dict_to_config(data)

    text_override = os.getenv("GESTURE_TREE_TEXT")
    if text_override:
        cfg.display.default_text = text_override

    return cfg


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object. Missing sections keep their defaults."""
    return Cfg(
        camera=CameraConfig(**data.get('camera', {})),
        mediapipe=MediaPipeConfig(**data.get('mediapipe', {})),
        classifier=ClassifierConfig(**data.get('classifier', {})),
        interaction=InteractionConfig(**data.get('interaction', {})),
        display=DisplayConfig(**data.get('display', {})),
        tree=TreeConfig(**data.get('tree', {})),
        music=MusicConfig(**data.get('music', {})),
        logging=LoggingConfig(**data.get('logging', {})),
    )
