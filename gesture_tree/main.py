"""
Webcam front end: drives the gesture tree session from a live camera.
"""
import argparse
import asyncio
import logging
import time
from typing import Optional

import cv2

from .config import load_config
from .controller_mock import MockAudioPlayer, MockPhotoSurface
from .display import DisplayModeController
from .gestures import hand_centers
from .music import MusicController
from .photos import PhotoInteraction
from .session import GestureTreeSession
from .tracking import HandsTracker, draw_landmarks
from .tree import build_tree_layers

logger = logging.getLogger(__name__)


class GestureTreeApp:
    """Main application class: camera capture, tracking and the preview window."""

    def __init__(self, config_path: Optional[str] = None, text: Optional[str] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(self.config.mediapipe)

        layers = build_tree_layers(self.config.tree)
        self.display = DisplayModeController(layers, self.config.display)
        self.session = GestureTreeSession(
            self.config,
            source=self.tracker,
            display=self.display,
            music=MusicController(MockAudioPlayer(), self.config.music),
            photos=PhotoInteraction(MockPhotoSurface()),
        )
        if text:
            self.session.set_text(text)

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    async def run(self):
        """Run the main application loop."""
        logger.info(f"Starting {self.config.display.window_name}")
        logger.info("Pinch + move = pan, open hand + move = rotate, two hands = zoom / explode, "
                    "heart = text, index finger = next song. Press 'q' to quit")

        window = self.config.display.window_name
        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                self.tracker.process(frame)
                result = self.session.step(time.monotonic() * 1000.0)

                if result.signal is not None:
                    logger.info(f"Mode signal: {result.signal.value}")

                if self.config.display.show_landmarks:
                    frame = draw_landmarks(frame, self.tracker.latest_hands(), hand_centers(result.snapshot))

                t = result.transform
                status = f"Mode: {result.mode.value}  progress {result.animation_progress:.2f}"
                pose = f"yaw={t.yaw:.2f} x={t.x:.2f} y={t.y:.2f} scale={t.scale:.2f}"
                cv2.putText(frame, status, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
                cv2.putText(frame, pose, (10, 60), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
                cv2.putText(frame, "Press 'q' to quit", (10, frame.shape[0] - 20),
                            cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

                cv2.imshow(window, frame)
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break

                # Yield to other tasks between frames
                await asyncio.sleep(0)
        finally:
            self.cap.release()
            self.tracker.close()
            cv2.destroyAllWindows()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Gesture-controlled particle tree")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--text", help="Text spelled by the heart gesture")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def main(argv=None):
    """Entry point for the application."""
    args = parse_args(argv)
    level = logging.DEBUG if args.debug else load_config(args.config).logging.level
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")

    try:
        app = GestureTreeApp(config_path=args.config, text=args.text)
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
