import numpy as np
import pytest

from kaboom.shader import (
    ShaderError,
    _decode_log,
    _matrix_floats,
    _uniform_function,
)


def test_shader_error_carries_stage_and_log():
    error = ShaderError("linking", "0:1: undefined symbol")
    assert error.stage == "linking"
    assert error.log == "0:1: undefined symbol"
    assert "0:1: undefined symbol" in str(error)


def test_decode_log_stops_at_nul():
    assert _decode_log(b"0:3: bad token\x00\x00junk") == "0:3: bad token"


def test_decode_log_of_empty_buffer():
    assert _decode_log(bytes(512)) == ""


@pytest.mark.parametrize(
    "value, function",
    [
        (0, "glUniform1i"),
        (True, "glUniform1i"),
        (np.int32(3), "glUniform1i"),
        (np.identity(4), "glUniformMatrix4fv"),
        ([[0.0] * 4] * 4, "glUniformMatrix4fv"),
    ],
)
def test_uniform_function_by_value(value, function):
    assert _uniform_function(value) == function


@pytest.mark.parametrize("value", ["text", np.zeros(3), [[1.0, 2.0]], None])
def test_uniform_function_rejects_unsupported(value):
    with pytest.raises(TypeError):
        _uniform_function(value)


def test_matrix_floats_round_trip_identity():
    floats = _matrix_floats(np.identity(4))
    assert np.array_equal(np.array(list(floats)).reshape(4, 4), np.identity(4))


def test_matrix_floats_are_column_major():
    matrix = np.arange(16, dtype=float).reshape(4, 4)
    floats = list(_matrix_floats(matrix))
    assert np.array_equal(np.array(floats).reshape(4, 4).T, matrix)
    assert floats[12] == matrix[0, 3]


def test_matrix_floats_rejects_wrong_shape():
    with pytest.raises(ValueError):
        _matrix_floats(np.identity(3))