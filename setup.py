#!/usr/bin/env python3
"""
Setup script for Gesture Tree
"""

from pathlib import Path

from setuptools import setup

HERE = Path(__file__).parent


def read_requirements(name):
    """Read a requirements file, skipping comments and blank lines"""
    lines = (HERE / name).read_text().splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


setup(
    name="gesture-tree",
    version="0.1.0",
    description="Hand-gesture control of a particle tree: rotate, zoom, explode and spell text",
    python_requires=">=3.9",
    packages=["gesture_tree"],
    package_data={"gesture_tree": ["config.default.yaml"]},
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "tracking": ["opencv-python>=4.8", "mediapipe>=0.10,<0.10.30"],
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["gesture-tree=gesture_tree.main:run"],
    },
)
