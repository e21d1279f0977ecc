"""Finite strain kinematic measures unit tests."""

import numpy as np
import pytest

from kinemapy.ioput.errors import ShapeError, DomainError
from kinemapy.kinematics.strainmeasures import (
    compute_deformation_gradient,
    compute_right_cauchy_green,
    compute_green_lagrange_strain,
    compute_dgreen_lagrange_strain_dF,
    compute_symmetric_part,
    compute_unit_normal,
    compute_def_gradient_rate,
)
from kinemapy.verification.tangentcheck import finite_difference_tangent


DEF_GRADIENT = np.array([0.69646919, 0.28613933, 0.22685145,
                         0.55131477, 0.71946897, 0.42310646,
                         0.98076420, 0.68482974, 0.4809319])

GREEN_LAGRANGE = np.array([0.37545786, 0.63379879, 0.43147034,
                           0.63379879, 0.03425154, 0.34933978,
                           0.43147034, 0.34933978, -0.26911192])

# Well-conditioned deformation gradient
DEF_GRADIENT_WC = np.array([1.1, 0.2, -0.1,
                            0.05, 0.95, 0.15,
                            -0.2, 0.1, 1.05])

VEL_GRADIENT = np.array([0.69006282, 0.0462321, 0.88086378,
                         0.8153887, 0.54987134, 0.72085876,
                         0.66559485, 0.63708462, 0.54378588])


class TestDeformationGradient:
    """Deformation gradient from displacement gradient"""

    def test_reference_configuration(self):
        disp_gradient = np.arange(1, 10)*0.01
        def_gradient = compute_deformation_gradient(disp_gradient)
        assert np.allclose(def_gradient, np.eye(3).flatten() + disp_gradient)

    def test_current_configuration(self):
        disp_gradient = np.arange(1, 10)*0.01
        def_gradient = compute_deformation_gradient(disp_gradient,
                                                    is_current=True)
        product = np.matmul(def_gradient.reshape(3, 3),
                            np.eye(3) - disp_gradient.reshape(3, 3))
        assert np.allclose(product, np.eye(3))

    def test_nested_input(self):
        disp_gradient = np.arange(1, 10).reshape(3, 3)*0.01
        def_gradient = compute_deformation_gradient(disp_gradient)
        assert def_gradient.shape == (9,)

    def test_two_dimensional(self):
        def_gradient = compute_deformation_gradient([0.1, 0.2, 0.3, 0.4])
        assert np.allclose(def_gradient, [1.1, 0.2, 0.3, 1.4])

    @pytest.mark.parametrize('is_current', [False, True])
    def test_tangent(self, is_current):
        disp_gradient = np.array([0.1, -0.05, 0.02, 0.03, 0.08, -0.04,
                                  0.01, 0.06, -0.07])
        _, tangent = compute_deformation_gradient(
            disp_gradient, is_current=is_current, is_tangent=True)
        tangent_fd = finite_difference_tangent(
            lambda x: compute_deformation_gradient(x, is_current=is_current),
            disp_gradient)
        assert tangent.shape == (81,)
        assert np.allclose(tangent, tangent_fd, rtol=1e-5, atol=1e-6)

    def test_not_perfect_square(self):
        with pytest.raises(ShapeError):
            compute_deformation_gradient(np.zeros(8))

    def test_tangent_wraps_error(self):
        with pytest.raises(ShapeError) as excinfo:
            compute_deformation_gradient(np.zeros(5), is_tangent=True)
        assert excinfo.value.operation == \
            'compute_deformation_gradient (tangent)'
        assert isinstance(excinfo.value.__cause__, ShapeError)
        assert excinfo.value.__cause__.operation == \
            'compute_deformation_gradient'


class TestRightCauchyGreen:
    """Right Cauchy-Green strain tensor"""

    def test_value(self):
        right_cauchy_green = compute_right_cauchy_green(np.arange(1, 10))
        assert np.allclose(right_cauchy_green,
                           [66, 78, 90, 78, 93, 108, 90, 108, 126])

    def test_tangent(self):
        _, tangent = compute_right_cauchy_green(DEF_GRADIENT, is_tangent=True)
        tangent_fd = finite_difference_tangent(compute_right_cauchy_green,
                                               DEF_GRADIENT)
        assert np.allclose(tangent, tangent_fd, rtol=1e-5, atol=1e-6)

    def test_not_three_dimensional(self):
        with pytest.raises(ShapeError):
            compute_right_cauchy_green(np.eye(2))


class TestGreenLagrangeStrain:
    """Green-Lagrange strain tensor"""

    def test_value(self):
        green_lagrange = compute_green_lagrange_strain(DEF_GRADIENT)
        assert np.allclose(green_lagrange, GREEN_LAGRANGE, atol=1e-7)

    def test_direct_computation(self):
        rng = np.random.default_rng(0)
        def_gradient = np.eye(3) + 0.3*rng.random((3, 3))
        green_lagrange = compute_green_lagrange_strain(def_gradient)
        expected = 0.5*(np.matmul(def_gradient.T, def_gradient) - np.eye(3))
        assert np.allclose(green_lagrange, expected.flatten(), rtol=0.0,
                           atol=1e-10)

    def test_identity(self):
        green_lagrange = compute_green_lagrange_strain(np.eye(3))
        assert np.allclose(green_lagrange, np.zeros(9))

    def test_tangent(self):
        green_lagrange, tangent = compute_green_lagrange_strain(
            DEF_GRADIENT, is_tangent=True)
        tangent_fd = finite_difference_tangent(compute_green_lagrange_strain,
                                               DEF_GRADIENT)
        assert np.allclose(green_lagrange, GREEN_LAGRANGE, atol=1e-7)
        assert np.allclose(tangent, tangent_fd, rtol=1e-5, atol=1e-6)

    def test_standalone_tangent(self):
        _, tangent = compute_green_lagrange_strain(DEF_GRADIENT,
                                                   is_tangent=True)
        assert np.allclose(compute_dgreen_lagrange_strain_dF(DEF_GRADIENT),
                           tangent)

    def test_tangent_from_right_cauchy_green(self):
        _, dright_cauchy_green_dF = compute_right_cauchy_green(
            DEF_GRADIENT, is_tangent=True)
        assert np.allclose(compute_dgreen_lagrange_strain_dF(DEF_GRADIENT),
                           0.5*dright_cauchy_green_dF)

    def test_not_three_dimensional(self):
        with pytest.raises(ShapeError):
            compute_green_lagrange_strain(np.eye(2))
        with pytest.raises(ShapeError):
            compute_green_lagrange_strain(np.eye(2), is_tangent=True)


class TestSymmetricPart:
    """Symmetric part of second-order tensor"""

    def test_value(self):
        tensor_sym = compute_symmetric_part(np.arange(1, 10))
        assert np.allclose(tensor_sym, [1, 3, 5, 3, 5, 7, 5, 7, 9])

    def test_two_dimensional(self):
        tensor_sym = compute_symmetric_part([1.0, 2.0, 4.0, 3.0])
        assert np.allclose(tensor_sym, [1.0, 3.0, 3.0, 3.0])

    def test_tangent(self):
        tensor = np.arange(1, 10, dtype=float)
        _, tangent = compute_symmetric_part(tensor, is_tangent=True)
        tangent_fd = finite_difference_tangent(compute_symmetric_part, tensor)
        assert np.allclose(tangent, tangent_fd, rtol=1e-5, atol=1e-6)

    def test_not_perfect_square(self):
        with pytest.raises(ShapeError):
            compute_symmetric_part(np.arange(8))
        with pytest.raises(ShapeError):
            compute_symmetric_part([])


class TestUnitNormal:
    """Unit normal of second-order tensor"""

    def test_value(self):
        unit_normal = compute_unit_normal(np.arange(1, 10))
        assert np.isclose(np.linalg.norm(unit_normal), 1.0)
        assert np.allclose(unit_normal*np.linalg.norm(np.arange(1, 10)),
                           np.arange(1, 10))

    def test_tangent(self):
        tensor = np.arange(1, 10, dtype=float)
        _, tangent = compute_unit_normal(tensor, is_tangent=True)
        tangent_fd = finite_difference_tangent(compute_unit_normal, tensor)
        assert np.allclose(tangent, tangent_fd, rtol=1e-5, atol=1e-6)

    def test_null_tensor(self):
        unit_normal, tangent = compute_unit_normal(np.zeros(9),
                                                   is_tangent=True)
        assert np.allclose(unit_normal, np.zeros(9))
        assert not np.all(np.isfinite(tangent))


class TestDefGradientRate:
    """Material time derivative of deformation gradient"""

    def test_value(self):
        rate = compute_def_gradient_rate(VEL_GRADIENT, DEF_GRADIENT)
        expected = np.matmul(VEL_GRADIENT.reshape(3, 3),
                             DEF_GRADIENT.reshape(3, 3))
        assert np.allclose(rate, expected.flatten())

    def test_tangents(self):
        _, drate_dL, drate_dF = compute_def_gradient_rate(
            VEL_GRADIENT, DEF_GRADIENT, is_tangent=True)
        drate_dL_fd = finite_difference_tangent(
            lambda x: compute_def_gradient_rate(x, DEF_GRADIENT),
            VEL_GRADIENT)
        drate_dF_fd = finite_difference_tangent(
            lambda x: compute_def_gradient_rate(VEL_GRADIENT, x),
            DEF_GRADIENT)
        assert np.allclose(drate_dL, drate_dL_fd, rtol=1e-5, atol=1e-6)
        assert np.allclose(drate_dF, drate_dF_fd, rtol=1e-5, atol=1e-6)

    def test_size_mismatch(self):
        with pytest.raises(ShapeError):
            compute_def_gradient_rate(np.zeros(4), DEF_GRADIENT)
        with pytest.raises(ShapeError):
            compute_def_gradient_rate(np.zeros(4), np.eye(2))

    def test_non_finite_current_configuration(self):
        disp_gradient = np.zeros(9)
        disp_gradient[0] = np.nan
        with pytest.raises(DomainError):
            compute_deformation_gradient(disp_gradient, is_current=True)
