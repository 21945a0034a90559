import numpy as np
import pytest

from kaboom.app import KEY_BINDINGS, main, movements_from_keys
from kaboom.camera import Camera, Movement


def test_no_keys_no_movement():
    assert movements_from_keys({}) == frozenset()


def test_single_key():
    assert movements_from_keys({ord("w"): True}) == frozenset({Movement.FORWARD})


def test_released_keys_are_ignored():
    keys = {ord("a"): False, ord("d"): True, ord("q"): True}
    assert movements_from_keys(keys) == frozenset({Movement.RIGHT})


def test_every_bound_key_maps_to_a_distinct_movement():
    held = {symbol: True for symbol in KEY_BINDINGS}
    assert movements_from_keys(held) == frozenset(Movement)


def test_opposing_keys_cancel():
    camera = Camera()
    start = camera.position.copy()
    camera.move(movements_from_keys({ord("w"): True, ord("s"): True}), 0.5)
    assert np.allclose(camera.position, start)


def test_held_key_moves_camera():
    camera = Camera()
    start = camera.position.copy()
    camera.move(movements_from_keys({ord(" "): True}), 0.5)
    assert camera.position[1] > start[1]
    assert np.allclose(camera.position[[0, 2]], start[[0, 2]])


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--texture" in capsys.readouterr().out


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2