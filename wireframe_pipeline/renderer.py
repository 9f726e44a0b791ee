#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
from typing import List, NamedTuple, Optional

from . import transforms
from .animation import update_transforms
from .clipping import LineSegment, clip_line
from .config import PipelineConfig
from .math_utils import Mat4
from .scene import Scene, process_scene

log = logging.getLogger(__name__)


class Segment2D(NamedTuple):
    """A drawable line in pixel coordinates."""
    x0: float
    y0: float
    x1: float
    y1: float


class Renderer:
    """
    Stateless wireframe renderer.

    ``project_scene`` turns a Scene into pixel-space segments without side
    effects; ``render`` hands each one to a surface exposing
    ``draw_line(x0, y0, x1, y1)``.

    Pipeline per model:
      1. animation matrix, then world -> canonical volume
      2. clip every edge segment against the canonical volume
      3. project onto z = -1, map to the viewport, dehomogenize
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig()

    def project_scene(self, scene: Scene, width: float, height: float) -> List[Segment2D]:
        cfg = self.config
        view = scene.view
        nper = view.perspective_matrix()
        z_min = view.z_min
        to_screen = Mat4.chain(transforms.viewport_matrix(width, height),
                               transforms.project_to_plane())

        segments = []
        for model in scene.models:
            to_canonical = nper @ model.matrix
            canonical = [to_canonical.mul_vec4(v) for v in model.vertices]

            for edge in model.edges:
                for a, b in zip(edge, edge[1:]):
                    line = LineSegment(canonical[a], canonical[b])
                    clipped = clip_line(line, z_min, cfg.clip_epsilon,
                                        cfg.max_clip_depth, cfg.parallel_epsilon)
                    if clipped is None:
                        continue
                    p0 = to_screen.mul_vec4(clipped.pt0).dehomogenize()
                    p1 = to_screen.mul_vec4(clipped.pt1).dehomogenize()
                    segments.append(Segment2D(p0.x, p0.y, p1.x, p1.y))

        log.debug("projected %d segment(s) from %d model(s)", len(segments), len(scene.models))
        return segments

    def render(self, surface, scene: Scene, width: float, height: float) -> int:
        """Draw one frame onto ``surface``; returns the number of segments drawn."""
        segments = self.project_scene(scene, width, height)
        for s in segments:
            surface.draw_line(s.x0, s.y0, s.x1, s.y1)
        return len(segments)


class Pipeline:
    """
    Owns the current Scene and applies everything that changes it: scene
    replacement, camera moves and animation ticks. Each change swaps in a
    new Scene value, so a failed update leaves the old scene in place.
    """

    def __init__(self, descriptor: Optional[dict] = None,
                 config: Optional[PipelineConfig] = None):
        self.config = config or PipelineConfig()
        self.renderer = Renderer(self.config)
        self.elapsed = 0.0
        self._scene = process_scene(descriptor) if descriptor is not None else None

    @property
    def scene(self) -> Optional[Scene]:
        return self._scene

    def update_scene(self, descriptor: dict) -> Scene:
        """Replace the scene. Raises InvalidParameterError without touching the current one."""
        return self.install_scene(process_scene(descriptor))

    def install_scene(self, scene: Scene) -> Scene:
        """Swap in an already processed scene, posed at the current animation time."""
        if self.config.enable_animation:
            scene = scene.with_models(
                update_transforms(scene.models, self.elapsed, 0.0, self.config.angle_unit))
        self._scene = scene
        return scene

    def tick(self, elapsed: float, delta: float):
        """Advance animation to ``elapsed`` (seconds since animation start)."""
        self.elapsed = elapsed
        if self._scene is None or not self.config.enable_animation:
            return
        self._scene = self._scene.with_models(
            update_transforms(self._scene.models, elapsed, delta, self.config.angle_unit))

    def frame(self, width: float, height: float) -> List[Segment2D]:
        if self._scene is None:
            return []
        return self.renderer.project_scene(self._scene, width, height)

    def draw(self, surface, width: float, height: float) -> int:
        if self._scene is None:
            return 0
        return self.renderer.render(surface, self._scene, width, height)

    # ── Camera controls ───────────────────────────────────────────────
    def _move(self, operation, amount):
        # No scene installed yet: nothing to move
        if self._scene is None:
            return
        view = getattr(self._scene.view, operation)(amount)
        self._scene = self._scene.with_view(view)

    def orbit_left(self):
        self._move("orbit_left", self.config.orbit_angle)

    def orbit_right(self):
        self._move("orbit_right", self.config.orbit_angle)

    def truck_left(self):
        self._move("truck_left", self.config.move_step)

    def truck_right(self):
        self._move("truck_right", self.config.move_step)

    def dolly_forward(self):
        self._move("dolly_forward", self.config.move_step)

    def dolly_backward(self):
        self._move("dolly_backward", self.config.move_step)
