#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
import os
from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Configuration for the wireframe pipeline and its terminal surface."""
    # Clipping
    clip_epsilon: float = 1e-6
    parallel_epsilon: float = 1e-12
    max_clip_depth: int = 12

    # Camera controls
    orbit_angle: float = 15.0     # degrees per orbit step
    move_step: float = 1.0        # truck/dolly distance in multiples of |u| / |n|

    # Animation: angle = rps * elapsed_seconds * angle_unit
    angle_unit: float = 2.0 * math.pi
    enable_animation: bool = True

    # Terminal surface
    use_color: bool = True
    use_braille: bool = True
    marker_size: int = 2
    line_color: str = "#D0DD14"
    marker_color: str = "#FF2020"
    bg_color: str = "#0E0E2C"

    @classmethod
    def detect_terminal(cls) -> 'PipelineConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Pre-init guess; real colour support is only known after curses starts
        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille
            use_braille=supports_utf8 and not is_linux_console,
        )
