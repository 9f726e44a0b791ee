"""
Tests for the transform-matrix factory.
"""
import math

import pytest

from wireframe_pipeline import transforms
from wireframe_pipeline.errors import InvalidParameterError
from wireframe_pipeline.math_utils import Vec3, Vec4


def apply(m, x, y, z):
    return m.mul_vec4(Vec4(x, y, z, 1.0))


def approx_point(p, expected, tol=1e-9):
    assert (p.x, p.y, p.z) == pytest.approx(expected, abs=tol)


class TestAffineMatrices:

    def test_translate(self):
        approx_point(apply(transforms.translate(1, -2, 3), 1, 1, 1), (2, -1, 4))

    def test_scale(self):
        approx_point(apply(transforms.scale(2, 3, 4), 1, 1, 1), (2, 3, 4))

    @pytest.mark.parametrize("rotate, point, expected", [
        (transforms.rotate_x, (0, 1, 0), (0, 0, 1)),
        (transforms.rotate_y, (1, 0, 0), (0, 0, -1)),
        (transforms.rotate_y, (0, 0, 1), (1, 0, 0)),
        (transforms.rotate_z, (1, 0, 0), (0, 1, 0)),
    ])
    def test_quarter_turns_are_right_handed(self, rotate, point, expected):
        approx_point(apply(rotate(math.pi / 2), *point), expected)

    def test_rotate_y_layout(self):
        c, s = math.cos(0.4), math.sin(0.4)
        assert transforms.rotate_y(0.4).rows() == (
            (c, 0.0, s, 0.0),
            (0.0, 1.0, 0.0, 0.0),
            (-s, 0.0, c, 0.0),
            (0.0, 0.0, 0.0, 1.0))

    def test_rotate_axis_dispatch(self):
        assert transforms.rotate_axis('Z', 0.3) == transforms.rotate_z(0.3)

    @pytest.mark.parametrize("axis", ['w', '', None, 1])
    def test_rotate_axis_rejects_unknown_axis(self, axis):
        with pytest.raises(InvalidParameterError):
            transforms.rotate_axis(axis, 0.3)

    def test_shear_xy(self):
        approx_point(apply(transforms.shear_xy(0.5, -1), 0, 0, 2), (1, -2, 2))


class TestViewOrientation:

    @pytest.mark.parametrize("prp, srp, vup", [
        ((0, 0, 5), (0, 0, 0), (0, 1, 0)),
        ((3, 4, 5), (-1, 2, 0), (0, 1, 0)),
        ((10, -2, 1), (0, 0, 0), (0.2, 1, 0.3)),
    ])
    def test_target_lies_on_negative_n_axis(self, prp, srp, vup):
        prp, srp, vup = Vec3(*prp), Vec3(*srp), Vec3(*vup)
        m = transforms.view_orientation_matrix(prp, srp, vup)
        p = m.mul_vec4(srp.to_vec4()).dehomogenize()
        approx_point(p, (0, 0, -(prp - srp).magnitude()))
        approx_point(m.mul_vec4(prp.to_vec4()), (0, 0, 0))

    def test_axes_are_orthonormal(self):
        u, v, n = transforms.vrc_axes(Vec3(3, 4, 5), Vec3(-1, 2, 0), Vec3(0.1, 1, 0))
        for a in (u, v, n):
            assert a.magnitude() == pytest.approx(1.0)
        assert u.dot(v) == pytest.approx(0.0, abs=1e-12)
        assert u.dot(n) == pytest.approx(0.0, abs=1e-12)
        assert v.dot(n) == pytest.approx(0.0, abs=1e-12)


class TestPerspective:
    prp = Vec3(0, 0, 5)
    srp = Vec3(0, 0, 0)
    vup = Vec3(0, 1, 0)
    clip = (-1, 1, -1, 1, 1, 50)

    def matrix(self):
        return transforms.perspective_view_matrix(self.prp, self.srp, self.vup, self.clip)

    def test_target_maps_onto_the_z_axis(self):
        approx_point(apply(self.matrix(), 0, 0, 0), (0, 0, -5 / 50))

    def test_window_corner_on_near_plane_maps_to_volume_corner(self):
        p = apply(self.matrix(), 1, 1, 4)   # eye-space (1, 1, -near)
        approx_point(p, (0.02, 0.02, -0.02))
        assert transforms.canonical_z_min(self.clip) == pytest.approx(p.z)

    def test_far_plane_maps_to_minus_one(self):
        assert apply(self.matrix(), 0, 0, 5 - 50).z == pytest.approx(-1.0)

    def test_off_centre_window_is_sheared_onto_the_axis(self):
        m = transforms.perspective_view_matrix(Vec3(0, 0, 0), Vec3(0, 0, -1),
                                               Vec3(0, 1, 0), (0, 2, 0, 2, 1, 10))
        # direction through the window centre (1, 1, -1)
        for k in (1, 3, 7):
            p = apply(m, k, k, -k)
            assert p.x == pytest.approx(0.0, abs=1e-12)
            assert p.y == pytest.approx(0.0, abs=1e-12)

    def test_canonical_z_min(self):
        assert transforms.canonical_z_min((-1, 1, -1, 1, 10, 100)) == pytest.approx(-0.1)


class TestProjection:

    def test_project_to_plane_layout(self):
        assert transforms.project_to_plane().rows()[3] == (0.0, 0.0, -1.0, 0.0)

    def test_projection_and_viewport(self):
        to_screen = transforms.viewport_matrix(200, 100) @ transforms.project_to_plane()
        p = to_screen.mul_vec4(Vec4(0.02, 0.02, -0.02, 1)).dehomogenize()
        approx_point(p, (200, 100, -1))
        q = to_screen.mul_vec4(Vec4(-0.5, 0.0, -0.5, 1)).dehomogenize()
        approx_point(q, (0, 50, -1))

    def test_viewport_maps_square_to_pixels(self):
        vp = transforms.viewport_matrix(640, 480)
        approx_point(apply(vp, -1, -1, 0), (0, 0, 0))
        approx_point(apply(vp, 1, 1, 0), (640, 480, 0))
        approx_point(apply(vp, 0, 0, 0), (320, 240, 0))
