#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import time

from .animation import FrameClock
from .canvas import Canvas, blit
from .color import init_colors
from .errors import PipelineError
from .scene import load_scene

log = logging.getLogger(__name__)

DEMO_SCENE = {
    "view": {
        "prp": [0, 10, 42],
        "srp": [0, 0, 0],
        "vup": [0, 1, 0],
        "clip": [-12, 12, -8, 8, 20, 150],
    },
    "models": [
        {"type": "cube", "center": [-10, 0, -5], "width": 8, "height": 8, "depth": 8,
         "animation": {"axis": "y", "rps": 0.25}},
        {"type": "cone", "center": [8, 0, -5], "radius": 4, "height": 8, "sides": 12,
         "animation": {"axis": "x", "rps": 0.2}},
        {"type": "cylinder", "center": [-10, 0, 12], "radius": 3, "height": 6, "sides": 10},
        {"type": "sphere", "center": [8, 0, 12], "radius": 4, "slices": 12, "stacks": 8,
         "animation": {"axis": "z", "rps": 0.15}},
        {"type": "generic",
         "vertices": [[-20, -6, -20], [20, -6, -20], [20, -6, 20], [-20, -6, 20]],
         "edges": [[0, 1, 2, 3, 0]]},
    ],
}


class DemoApp:
    """
    Interactive curses harness: keyboard camera controls, the animation
    tick loop and a HUD line on top of the rendered wireframe.
    """

    def __init__(self, stdscr, pipeline, scene_path=None):
        self.stdscr = stdscr
        self.pipeline = pipeline
        self.config = pipeline.config
        self.scene_path = scene_path
        self.running = True
        self.status = ""

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        self.ink_pairs, self.bg_pair = init_colors(self.config)
        self.clock = FrameClock()

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_input(self):
        try:
            key = self.stdscr.getch()
        except curses.error:
            key = -1

        if key == -1:
            return

        pipeline = self.pipeline
        config = self.config

        if key == ord('q'):
            self.running = False
        elif key == ord('a'):
            pipeline.orbit_left()
        elif key == ord('d'):
            pipeline.orbit_right()
        elif key == curses.KEY_LEFT:
            pipeline.truck_left()
        elif key == curses.KEY_RIGHT:
            pipeline.truck_right()
        elif key == curses.KEY_UP:
            pipeline.dolly_forward()
        elif key == curses.KEY_DOWN:
            pipeline.dolly_backward()
        elif key == ord(' '):
            config.enable_animation = not config.enable_animation
        elif key == ord('r'):
            self.reload()
        # Runtime toggles
        elif key == ord('c'):
            config.use_color = not config.use_color
        elif key == ord('b'):
            config.use_braille = not config.use_braille

    def reload(self):
        """Re-read the scene file; a broken file keeps the current scene."""
        if not self.scene_path:
            self.status = "no scene file"
            return
        try:
            scene = load_scene(self.scene_path)
        except (OSError, PipelineError) as e:
            log.error("reload of %s failed: %s", self.scene_path, e)
            self.status = "reload failed"
            return
        self.pipeline.install_scene(scene)
        self.clock.reset()
        self.status = "reloaded"

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def run(self):
        while self.running:
            start_time = time.time()

            self.handle_input()

            elapsed, delta = self.clock.tick(time.monotonic())
            self.pipeline.tick(elapsed, delta)

            th, tw = self.stdscr.getmaxyx()
            canvas = Canvas.for_screen(th, tw, self.config.marker_size)
            drawn = self.pipeline.draw(canvas, canvas.w, canvas.h)

            self.stdscr.erase()
            if self.config.use_color and self.bg_pair:
                self.stdscr.bkgd(' ', curses.color_pair(self.bg_pair))
            ink_pairs = self.ink_pairs if self.config.use_color else {}
            blit(self.stdscr, canvas, ink_pairs, self.config.use_braille)

            # ── HUD overlay (line 0) ────────────────────────────────────
            self.frame_count += 1
            now = time.time()
            if now - self.last_fps_time >= 1.0:
                self.fps = self.frame_count
                self.frame_count = 0
                self.last_fps_time = now

            ms = (now - start_time) * 1000
            view = self.pipeline.scene.view
            modestr = (f"{'COL' if self.config.use_color else 'MON'} "
                       f"{'BRA' if self.config.use_braille else 'ASC'} "
                       f"{'ANIM' if self.config.enable_animation else 'STILL'}")
            hdr = (f" MDL:{len(self.pipeline.scene.models)}"
                   f" | SEG:{drawn}"
                   f" | PRP:({view.prp.x:.1f},{view.prp.y:.1f},{view.prp.z:.1f})"
                   f" | FPS:{self.fps}"
                   f" | {ms:.1f}ms"
                   f" | [{modestr}]"
                   f"{' | ' + self.status if self.status else ''} ")
            try:
                self.stdscr.addstr(
                    0, 0,
                    hdr.center(tw - 1, '=')[:max(0, tw - 1)],
                    curses.color_pair(0) | curses.A_BOLD)
            except curses.error:
                pass

            self.stdscr.refresh()


def main(stdscr, pipeline, scene_path=None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, pipeline, scene_path)
    app.run()
