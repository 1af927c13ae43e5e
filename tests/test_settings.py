import dataclasses

import pytest

from cubkit import settings
from cubkit.settings import (
    Color,
    IntVec2,
    Ray,
    RenderValues,
    TextureId,
    Vec2,
)


def test_screen_constants():
    centre = Vec2(settings.WIDTH, settings.HEIGHT).scale(0.5)
    assert centre == Vec2(640.0, 360.0)
    assert Vec2(settings.FOV, 0.0).dot(Vec2(1.0, 0.0)) == 90.0


def test_texture_ids_in_order():
    ids = [TextureId(i) for i in range(4)]
    assert [t.name for t in ids] == ["NORTH", "SOUTH", "WEST", "EAST"]
    assert ids == list(TextureId)


@pytest.mark.parametrize(
    "a,b",
    [
        (Vec2(1.0, 2.0), Vec2(3.0, 4.0)),
        (Vec2(-0.5, 0.25), Vec2(2.0, -8.0)),
        (Vec2(), Vec2(7.0, 7.0)),
    ],
)
def test_add_then_sub_round_trip(a, b):
    assert a.add(b).sub(b) == a
    assert (a + b) - b == a


@pytest.mark.parametrize("v", [Vec2(1.0, 2.0), Vec2(-3.5, 0.5), Vec2()])
def test_scale_by_two_equals_self_added(v):
    assert v.scale(2.0) == v.add(v)
    assert v * 2.0 == 2.0 * v


def test_scale_by_zero_is_origin():
    assert Vec2(5.0, -9.0).scale(0.0) == Vec2()


def test_sub_self_is_origin():
    v = Vec2(1.5, -2.25)
    assert v.sub(v) == Vec2()


def test_add_is_commutative():
    a, b = Vec2(1.0, -2.0), Vec2(0.5, 4.0)
    assert a.add(b) == b.add(a)


def test_dot_is_commutative_and_nonnegative_on_self():
    a, b = Vec2(1.0, -2.0), Vec2(0.5, 4.0)
    assert a.dot(b) == b.dot(a)
    assert a.dot(a) >= 0
    assert Vec2().dot(a) == 0


def test_dot_of_perpendicular_vectors_is_zero():
    a = Vec2(2.0, 3.0)
    perpendicular = Vec2(-a.y, a.x)
    assert a.dot(perpendicular) == 0


def test_dot_is_linear_in_scale():
    a, b = Vec2(1.0, 2.0), Vec2(3.0, -1.0)
    assert a.scale(4.0).dot(b) == a.dot(b) * 4.0


def test_vec2_is_immutable():
    v = Vec2(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0
    assert v == Vec2(1.0, 2.0)
    moved = dataclasses.replace(v, x=5.0)
    assert moved == Vec2(5.0, 2.0)
    assert v.x == 1.0


def test_int_vec2_defaults_to_origin():
    assert IntVec2() == IntVec2(0, 0)


def test_ray_defaults():
    ray = Ray()
    assert ray.start == Vec2()
    assert ray.map_check == IntVec2()
    assert ray.hit is False
    assert ray.side is False
    assert ray.perp_dist == 0.0


def test_rays_do_not_share_fields():
    first, second = Ray(), Ray()
    first.start = Vec2(1.0, 1.0)
    first.hit = True
    assert second.start == Vec2()
    assert second.hit is False


def test_render_values_all_start_at_zero():
    values = RenderValues()
    assert all(getattr(values, f.name) == 0 for f in dataclasses.fields(values))


def test_color_fields():
    color = Color(r=10, g=20, b=30)
    assert (color.r, color.g, color.b) == (10, 20, 30)
    assert Color() == Color(0, 0, 0)