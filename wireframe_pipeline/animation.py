#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import replace

from . import transforms
from .math_utils import Mat4, Vec3
from .mesh import Animation, Model


def animation_matrix(center: Vec3, animation: Animation, elapsed: float,
                     angle_unit: float) -> Mat4:
    """Rotation about ``animation.axis`` through ``center`` after ``elapsed`` time.

    The angle depends only on absolute elapsed time, so any frame can be
    reproduced without replaying the ones before it.
    """
    theta = animation.rps * elapsed * angle_unit
    to_pivot = transforms.translate(-center.x, -center.y, -center.z)
    return Mat4.chain(to_pivot.inverse(),
                      transforms.rotate_axis(animation.axis, theta),
                      to_pivot)


def animate_model(model: Model, elapsed: float, angle_unit: float) -> Model:
    if model.animation is None:
        return model
    return replace(model, matrix=animation_matrix(model.center, model.animation,
                                                  elapsed, angle_unit))


def update_transforms(models, elapsed: float, delta: float, angle_unit: float):
    """Return ``models`` with refreshed animation matrices.

    ``delta`` is accepted for frame-scheduler symmetry; the rotation is a
    function of ``elapsed`` alone.
    """
    return tuple(animate_model(m, elapsed, angle_unit) for m in models)


class FrameClock:
    """
    Turns raw timestamps from a frame scheduler into (elapsed, delta) pairs.
    The first timestamp seen becomes time zero.
    """
    __slots__ = ('start_time', 'prev_time')

    def __init__(self):
        self.start_time = None
        self.prev_time = None

    def tick(self, timestamp: float):
        if self.start_time is None:
            self.start_time = timestamp
            self.prev_time = timestamp
        elapsed = timestamp - self.start_time
        delta = timestamp - self.prev_time
        self.prev_time = timestamp
        return elapsed, delta

    def reset(self):
        self.start_time = None
        self.prev_time = None
