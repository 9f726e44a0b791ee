#!/usr/bin/env python3
#
# PROJECT: wireframe-pipeline
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import argparse
import curses
import logging
import os
import sys

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from wireframe_pipeline import Pipeline, PipelineConfig, PipelineError, load_scene
from wireframe_pipeline.demo import DEMO_SCENE, main as demo_main


def parse_args(argv=None):
    epilog = """\
keys:
  a / d            orbit left / right
  left / right     truck left / right
  up / down        dolly forward / backward
  space            pause / resume animation
  r                reload the scene file
  c / b            toggle colour / Braille
  q                quit

examples:
  %(prog)s                                  Built-in demo scene
  %(prog)s scene.json                       Load a JSON scene description
  %(prog)s scene.json --ascii --no-color    Plain ASCII, monochrome
  %(prog)s scene.json --log-file wf.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Terminal wireframe pipeline viewer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("scene", nargs='?', help="Path to a JSON scene file")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--no-animation", action="store_true",
                        help="Start with animation paused")
    parser.add_argument("--line-color", default="#D0DD14",
                        help="Wireframe color in hex #RRGGBB (default: #D0DD14)")
    parser.add_argument("--marker-color", default="#FF2020",
                        help="Endpoint marker color in hex #RRGGBB (default: #FF2020)")
    parser.add_argument("--bg-color", default="#0E0E2C",
                        help="Background color in hex #RRGGBB (default: #0E0E2C)")
    parser.add_argument("--orbit-angle", type=float, default=15.0,
                        help="Degrees per orbit key press (default: 15)")
    parser.add_argument("--marker-size", type=int, default=2,
                        help="Endpoint marker size in sub-cell pixels (default: 2)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging threshold (default: WARNING)")
    parser.add_argument("--log-file",
                        help="Write log output to this file (default: discarded, "
                             "since curses owns the terminal)")
    return parser.parse_args(argv)


def build_config(args) -> PipelineConfig:
    config = PipelineConfig.detect_terminal()
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    config.enable_animation = not args.no_animation
    config.line_color = args.line_color
    config.marker_color = args.marker_color
    config.bg_color = args.bg_color
    config.orbit_angle = args.orbit_angle
    config.marker_size = max(0, args.marker_size)
    return config


def build_log_handler(args) -> logging.Handler:
    """Log to --log-file if given; otherwise drop records so they never
    land on the curses screen."""
    if args.log_file:
        return logging.FileHandler(args.log_file)
    return logging.NullHandler()


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        handlers=[build_log_handler(args)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pipeline = Pipeline(config=build_config(args))
    try:
        if args.scene:
            pipeline.install_scene(load_scene(args.scene))
        else:
            pipeline.update_scene(DEMO_SCENE)
    except (OSError, PipelineError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        curses.wrapper(lambda s: demo_main(s, pipeline, args.scene))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
