#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec3, Vec4, Mat4
from .errors import PipelineError, InvalidParameterError, DegenerateGeometryError
from .config import PipelineConfig
from .camera import View
from .mesh import Model, Animation, build_model
from .scene import Scene, process_scene, load_scene
from .animation import animation_matrix, update_transforms, FrameClock
from .clipping import LineSegment, outcode, clip_line
from .renderer import Renderer, Pipeline, Segment2D
from .canvas import Canvas
