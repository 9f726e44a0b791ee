#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import json
import logging
from dataclasses import dataclass, replace
from typing import Tuple

from .camera import View
from .errors import InvalidParameterError
from .mesh import Model, build_model
from .params import require

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scene:
    """
    A processed scene: the camera plus every model expanded to explicit
    vertices and edges. Scenes are snapshots; camera moves and animation
    ticks produce new Scene values via ``with_view`` / ``with_models``.
    """
    view: View
    models: Tuple[Model, ...] = ()

    def with_view(self, view: View) -> 'Scene':
        return replace(self, view=view)

    def with_models(self, models) -> 'Scene':
        return replace(self, models=tuple(models))


def process_scene(descriptor: dict) -> Scene:
    """
    Build a Scene from a declarative descriptor::

        {"view": {"prp": [..], "srp": [..], "vup": [..],
                  "clip": [left, right, bottom, top, near, far]},
         "models": [{"type": "cube", "center": [..], ...}, ...]}

    Either every model is built or InvalidParameterError propagates; no
    partial scene is ever returned.
    """
    if not isinstance(descriptor, dict):
        raise InvalidParameterError(f"expected a mapping, got {type(descriptor).__name__}",
                                    field="scene")
    view = View.from_descriptor(require(descriptor, 'view', 'scene'))

    raw_models = descriptor.get('models', [])
    if not isinstance(raw_models, (list, tuple)):
        raise InvalidParameterError("expected a list", field="models")
    models = tuple(build_model(d, i) for i, d in enumerate(raw_models))

    log.info("processed scene with %d model(s)", len(models))
    return Scene(view=view, models=models)


def load_scene(path) -> Scene:
    """Read a JSON scene file and process it."""
    with open(path, 'r') as f:
        try:
            descriptor = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidParameterError(f"{path}: not valid JSON ({e})", field="scene") from e
    return process_scene(descriptor)
