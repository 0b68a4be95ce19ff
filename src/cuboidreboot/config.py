"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (such as the
   initialization region limit) from being scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled example input when the tool is frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    EXAMPLE_STEPS_PATH (str): Absolute path to the bundled example reboot steps.
    INITIALIZATION_LIMIT (int): Half-width of the initialization region cube.
"""
import logging
import sys
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: config.py is in src/cuboidreboot/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
EXAMPLE_STEPS_PATH: str = os.path.join(ASSETS_PATH, "reboot_example.txt")

# Steps whose cuboid lies fully within [-50, 50] on every axis form the
# initialization procedure.
INITIALIZATION_LIMIT: int = 50

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
