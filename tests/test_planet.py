import pytest

from orbitsim.color import Color
from orbitsim.planet import GRAVITATIONAL_CONSTANT, Planet
from orbitsim.vector import Vect


def _earth() -> Planet:
    return Planet(
        name="Terre",
        color=Color(0, 0, 255),
        mass=5.972e24,
        radius=6.371e6,
        rotation_speed=7.29211e-5,
        texture=1,
    )


def _moon() -> Planet:
    return Planet(
        name="Lune",
        color=Color(200, 200, 200),
        mass=7.345e22,
        radius=1.738e6,
        position=Vect(3.633e8, 0.0, 0.0),
        velocity=Vect(0.0, 0.0, -1076),
        rotation_speed=2.693180e-6,
        texture=2,
    )


def test_unit_masses_at_unit_distance_feel_the_gravitational_constant():
    a = Planet(mass=1.0, position=Vect(0.0, 0.0, 0.0))
    b = Planet(mass=1.0, position=Vect(1.0, 0.0, 0.0))
    force = a.gravitational_force(b)
    assert GRAVITATIONAL_CONSTANT == 6.67408e-11
    assert force.x == pytest.approx(6.67408e-11)
    assert force.y == 0.0
    assert force.z == 0.0


def test_default_planet_is_empty():
    planet = Planet()
    assert planet.name == ""
    assert planet.mass == 0.0
    assert planet.position == Vect()
    assert planet.velocity == Vect()


def test_forces_are_equal_and_opposite():
    earth, moon = _earth(), _moon()
    on_moon = moon.gravitational_force(earth)
    on_earth = earth.gravitational_force(moon)
    for a, b in zip(on_moon, on_earth):
        assert a == pytest.approx(-b)


def test_force_points_toward_other_body():
    earth, moon = _earth(), _moon()
    force = moon.gravitational_force(earth)
    assert force.x < 0
    assert force.y == 0.0
    assert force.z == 0.0


def test_force_follows_inverse_square_law():
    earth, moon = _earth(), _moon()
    near = moon.gravitational_force(earth).norm()
    moon.position = moon.position * 2
    far = moon.gravitational_force(earth).norm()
    assert far == pytest.approx(near / 4)


def test_force_scales_with_mass():
    earth, moon = _earth(), _moon()
    before = moon.gravitational_force(earth).norm()
    earth.mass *= 2
    assert moon.gravitational_force(earth).norm() == pytest.approx(before * 2)


def test_force_at_same_position_raises():
    earth = _earth()
    with pytest.raises(ValueError):
        earth.gravitational_force(_earth())


def test_scale_velocity_scales_speed_and_keeps_direction():
    moon = _moon()
    before = moon.velocity
    moon.scale_velocity(1.1)
    assert moon.velocity.norm() == pytest.approx(before.norm() * 1.1)
    assert moon.velocity.x == 0.0
    assert moon.velocity.z < 0


def test_move_without_force_is_straight_line():
    mover = Planet(mass=1.0, position=Vect(1.0, 2.0, 3.0), velocity=Vect(4.0, 5.0, 6.0))
    massless = Planet(mass=0.0, position=Vect(100.0, 0.0, 0.0))
    start = mover.position
    mover.move(massless, 2.0, Vect())
    expected = start + Vect(4.0, 5.0, 6.0) * 2.0
    for a, b in zip(mover.position, expected):
        assert a == pytest.approx(b)
    assert mover.velocity == Vect(4.0, 5.0, 6.0)


def test_move_keeps_orbit_radius_nearly_constant():
    earth, moon = _earth(), _moon()
    start = (moon.position - earth.position).norm()
    for _ in range(24):
        moon.move(earth, 3600, moon.gravitational_force(earth))
    end = (moon.position - earth.position).norm()
    assert end == pytest.approx(start, rel=0.01)


def test_move_does_not_change_the_other_body():
    earth, moon = _earth(), _moon()
    moon.move(earth, 3600, moon.gravitational_force(earth))
    assert earth.position == Vect()
    assert earth.velocity == Vect()


def test_mass_label_format():
    assert _moon().mass_label() == "Masse : 7.345000e22 kg"


def test_speed_label_format():
    assert _moon().speed_label() == "Vitesse : 1076.000000 m/s"


def test_speed_label_has_six_decimals():
    planet = Planet(velocity=Vect(3.0, 4.0, 0.0))
    assert planet.speed_label() == "Vitesse : 5.000000 m/s"