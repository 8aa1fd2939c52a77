from typing import Sequence

import numpy as np
import pytest

from solar_system_workbench.core.errors import DegenerateConfiguration, InvalidMass
from solar_system_workbench.core.model import Body, DisplayAttributes
from solar_system_workbench.core.physics import G_DEFAULT
from solar_system_workbench.core.sim import Simulation, SymplecticEulerIntegrator


def _three_body_simulation(time_scale: float = 1.0) -> Simulation:
    sim = Simulation(gravitational_constant=1.0, time_scale=time_scale)
    sim.add_body(3.0, position=[-2.0, 1.0, 0.0], velocity=[0.3, 0.0, 0.1])
    sim.add_body(5.0, position=[1.5, -0.5, 0.2], velocity=[-0.2, 0.1, 0.0])
    sim.add_body(2.0, position=[0.0, 2.5, -0.3], velocity=[0.0, -0.15, 0.0])
    return sim


def test_new_simulation_is_empty() -> None:
    sim = Simulation()
    assert len(sim) == 0
    assert sim.bodies() == ()
    assert sim.gravitational_constant == G_DEFAULT
    assert sim.time_scale == 1.0
    sim.step(1.0)
    assert sim.step_count == 1


def test_add_body_returns_stable_indices() -> None:
    sim = Simulation()
    first = sim.add_body(Body(mass=1.0, display=DisplayAttributes(label="A")))
    second = sim.add_body(2.0, position=[1.0, 0.0, 0.0], display=DisplayAttributes(label="B"))

    assert (first, second) == (0, 1)
    assert [state.body_id for state in sim.bodies()] == [0, 1]
    assert sim.body(1).display.label == "B"
    with pytest.raises(IndexError):
        sim.body(2)


def test_add_body_rejects_invalid_mass_without_appending() -> None:
    sim = Simulation()
    with pytest.raises(InvalidMass):
        sim.add_body(0.0)
    assert len(sim) == 0


def test_add_body_rejects_mixed_arguments() -> None:
    sim = Simulation()
    with pytest.raises(ValueError):
        sim.add_body(Body(mass=1.0), position=[0.0, 0.0, 0.0])


def test_concrete_two_body_step() -> None:
    sim = Simulation(gravitational_constant=6.6743e-11)
    sim.add_body(1.0e24, position=[0.0, 0.0, 0.0], velocity=[0.0, 0.0, 0.0])
    sim.add_body(1.0e24, position=[1.0e8, 0.0, 0.0], velocity=[0.0, 0.0, 0.0])

    sim.step(1.0)

    a, b = sim.bodies()
    np.testing.assert_allclose(a.velocity, np.array([6.6743e-3, 0.0, 0.0]), rtol=1e-12)
    np.testing.assert_allclose(b.velocity, np.array([-6.6743e-3, 0.0, 0.0]), rtol=1e-12)
    # Position uses the velocity updated in the same step.
    np.testing.assert_allclose(a.position, np.array([6.6743e-3, 0.0, 0.0]), rtol=1e-12)
    np.testing.assert_allclose(b.position, np.array([1.0e8 - 6.6743e-3, 0.0, 0.0]), rtol=1e-15)


def test_single_body_moves_in_a_straight_line() -> None:
    sim = Simulation(time_scale=3.0)
    position = np.array([1.0, -2.0, 0.5])
    velocity = np.array([0.25, 4.0, -1.0])
    sim.add_body(7.0, position=position, velocity=velocity)

    for _ in range(5):
        before = sim.body(0)
        sim.step(2.0)
        after = sim.body(0)
        np.testing.assert_array_equal(after.velocity, velocity)
        np.testing.assert_array_equal(after.position, before.position + velocity * (2.0 * 3.0))


def test_semi_implicit_ordering() -> None:
    sim = Simulation(gravitational_constant=1.0)
    sim.add_body(1.0, position=[0.0, 0.0, 0.0])
    sim.add_body(1.0, position=[1.0, 0.0, 0.0])

    sim.step(0.5)

    # a = 1, v = 0.5, x = v * dt = 0.25 (explicit Euler would leave x at 0).
    np.testing.assert_allclose(sim.body(0).velocity, [0.5, 0.0, 0.0])
    np.testing.assert_allclose(sim.body(0).position, [0.25, 0.0, 0.0])


def test_steps_are_deterministic() -> None:
    first = _three_body_simulation()
    second = _three_body_simulation()
    for _ in range(200):
        first.step(0.01)
        second.step(0.01)
    for a, b in zip(first.bodies(), second.bodies()):
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)


@pytest.mark.parametrize("factor", [0.5, 2.5, 4.0, 0.3])
def test_time_scale_is_linear(factor: float) -> None:
    scaled = _three_body_simulation(time_scale=factor)
    plain = _three_body_simulation()
    for _ in range(20):
        scaled.step(0.01)
        plain.step(0.01 * factor)
    for a, b in zip(scaled.bodies(), plain.bodies()):
        np.testing.assert_allclose(a.position, b.position, rtol=1e-12)
        np.testing.assert_allclose(a.velocity, b.velocity, rtol=1e-12)
    assert scaled.time == pytest.approx(plain.time)


def test_time_scale_controls() -> None:
    sim = Simulation()
    assert sim.scale_time_by(1.1) == pytest.approx(1.1)
    assert sim.scale_time_by(0.9) == pytest.approx(0.99)
    sim.set_time_scale(-2.0)
    assert sim.time_scale == -2.0
    with pytest.raises(ValueError):
        sim.set_time_scale(float("nan"))
    with pytest.raises(ValueError):
        Simulation(time_scale=float("inf"))


def test_zero_time_scale_freezes_motion() -> None:
    sim = _three_body_simulation(time_scale=0.0)
    before = sim.bodies()
    sim.step(1.0)
    for a, b in zip(before, sim.bodies()):
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)
    assert sim.time == 0.0
    assert sim.step_count == 1


@pytest.mark.parametrize("dt", [float("nan"), float("inf"), float("-inf")])
def test_step_rejects_non_finite_dt(dt: float) -> None:
    sim = _three_body_simulation()
    with pytest.raises(ValueError):
        sim.step(dt)
    assert sim.step_count == 0


def test_zero_dt_step_is_a_no_op() -> None:
    sim = _three_body_simulation()
    before = sim.bodies()
    sim.step(0.0)
    for a, b in zip(before, sim.bodies()):
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)
    assert sim.time == 0.0
    assert sim.step_count == 1


def test_negative_dt_runs_backwards() -> None:
    sim = Simulation()
    sim.add_body(1.0, position=[1.0, 2.0, 3.0], velocity=[2.0, 0.0, -4.0])
    sim.step(-0.5)
    np.testing.assert_allclose(sim.body(0).position, [0.0, 2.0, 5.0])
    assert sim.time == -0.5

    reversed_scale = _three_body_simulation(time_scale=-1.0)
    negative_dt = _three_body_simulation()
    reversed_scale.step(0.25)
    negative_dt.step(-0.25)
    for a, b in zip(reversed_scale.bodies(), negative_dt.bodies()):
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)


def test_added_body_is_isolated_from_caller() -> None:
    sim = Simulation()
    body = Body(mass=2.0, position=np.array([1.0, 0.0, 0.0]))
    sim.add_body(body)

    body.mass = -5.0
    body.position[0] = 42.0

    stored = sim.body(0)
    assert stored.mass == 2.0
    np.testing.assert_array_equal(stored.position, [1.0, 0.0, 0.0])


def test_same_body_added_twice_is_stored_independently() -> None:
    sim = Simulation(gravitational_constant=1.0)
    body = Body(mass=1.0)
    sim.add_body(body)
    body.position = np.array([3.0, 0.0, 0.0])
    sim.add_body(body)

    sim.step(0.1)

    first, second = sim.bodies()
    assert first.position[0] > 0.0
    assert second.position[0] < 3.0
    np.testing.assert_allclose(first.momentum, -second.momentum)


def test_degenerate_step_leaves_state_unchanged() -> None:
    sim = Simulation()
    sim.add_body(1.0e20, position=[1.0, 2.0, 3.0], velocity=[1.0, 0.0, 0.0])
    sim.add_body(1.0e20, position=[1.0, 2.0, 3.0], velocity=[0.0, -1.0, 0.0])
    before = sim.bodies()

    with pytest.raises(DegenerateConfiguration):
        sim.step(1.0)

    for a, b in zip(before, sim.bodies()):
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)
    assert sim.time == 0.0
    assert sim.step_count == 0
    # The simulation is idle again after the failure.
    sim.add_body(1.0, position=[9.0, 9.0, 9.0])
    assert len(sim) == 3


def test_nearly_coincident_step_leaves_state_unchanged() -> None:
    sim = Simulation()
    sim.add_body(1.0, position=[0.0, 0.0, 0.0])
    sim.add_body(1.0, position=[1.0e-160, 0.0, 0.0])
    before = sim.bodies()

    with pytest.raises(DegenerateConfiguration):
        sim.step(1.0)

    for a, b in zip(before, sim.bodies()):
        np.testing.assert_array_equal(a.position, b.position)
        np.testing.assert_array_equal(a.velocity, b.velocity)
    assert sim.step_count == 0


def test_add_body_during_step_is_rejected() -> None:
    class AddingIntegrator(SymplecticEulerIntegrator):
        def __init__(self) -> None:
            self.sim: Simulation | None = None

        def integrate(self, bodies: Sequence[Body], forces: np.ndarray, dt: float) -> None:
            assert self.sim is not None
            self.sim.add_body(1.0)

    integrator = AddingIntegrator()
    sim = Simulation(integrator=integrator)
    integrator.sim = sim
    sim.add_body(1.0)

    with pytest.raises(RuntimeError):
        sim.step(1.0)
    assert len(sim) == 1


def test_integrator_rejects_misaligned_forces() -> None:
    bodies = [Body(mass=1.0), Body(mass=1.0, position=np.array([1.0, 0.0, 0.0]))]
    with pytest.raises(ValueError):
        SymplecticEulerIntegrator().integrate(bodies, np.zeros((1, 3)), 1.0)
    np.testing.assert_array_equal(bodies[0].position, np.zeros(3))


def test_snapshots_do_not_alias_live_state() -> None:
    sim = _three_body_simulation()
    before = sim.bodies()
    original = before[0].position.copy()
    sim.step(0.1)
    np.testing.assert_array_equal(before[0].position, original)
    assert not np.array_equal(sim.body(0).position, original)
