"""Finite difference tangent verification unit tests."""

import numpy as np

from kinemapy.kinematics.strainmeasures import compute_green_lagrange_strain
from kinemapy.verification.tangentcheck import finite_difference_tangent, \
    check_tangent


DEF_GRADIENT = np.array([1.1, 0.2, -0.1,
                         0.05, 0.95, 0.15,
                         -0.2, 0.1, 1.05])


def test_finite_difference_linear_function():
    matrix = np.arange(6, dtype=float).reshape(2, 3)
    tangent = finite_difference_tangent(lambda x: np.matmul(matrix, x),
                                        np.ones(3))
    assert tangent.shape == (6,)
    assert np.allclose(tangent, matrix.flatten())


def test_finite_difference_scalar_function():
    tangent = finite_difference_tangent(lambda x: float(np.sum(x**2)),
                                        np.array([1.0, -2.0]))
    assert np.allclose(tangent, [2.0, -4.0])


def test_check_consistent_tangent(capsys):
    _, tangent = compute_green_lagrange_strain(DEF_GRADIENT, is_tangent=True)
    is_consistent, max_error = check_tangent(
        compute_green_lagrange_strain, DEF_GRADIENT, tangent,
        label='dE/dF', is_verbose=True)
    assert is_consistent
    assert max_error < 1e-6
    output = capsys.readouterr().out
    assert 'dE/dF' in output
    assert 'inconsistent' not in output


def test_check_inconsistent_tangent():
    _, tangent = compute_green_lagrange_strain(DEF_GRADIENT, is_tangent=True)
    is_consistent, max_error = check_tangent(
        compute_green_lagrange_strain, DEF_GRADIENT, 2.0*tangent)
    assert not is_consistent
    assert max_error > 1e-2


def test_check_tangent_size_mismatch():
    is_consistent, max_error = check_tangent(
        compute_green_lagrange_strain, DEF_GRADIENT, np.zeros(9))
    assert not is_consistent
    assert max_error == np.inf
