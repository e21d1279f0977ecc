"""Push-forward and pull-back operations unit tests."""

import numpy as np
import pytest

from kinemapy.ioput.errors import ShapeError, DomainError, get_error_chain
from kinemapy.kinematics.strainmeasures import compute_green_lagrange_strain
from kinemapy.kinematics.configurationmaps import (
    map_pk2_to_cauchy,
    push_forward_pk2_stress,
    pull_back_cauchy_stress,
    push_forward_green_lagrange_strain,
    pull_back_almansi_strain,
    pull_back_velocity_gradient,
    rotate_matrix,
)
from kinemapy.verification.tangentcheck import finite_difference_tangent


# Well-conditioned deformation gradient
DEF_GRADIENT_WC = np.array([1.1, 0.2, -0.1,
                            0.05, 0.95, 0.15,
                            -0.2, 0.1, 1.05])

PK2_STRESS = np.array([-1.07882482, -1.56821984, 2.29049707,
                       -0.61427755, -4.40322103, -1.01955745,
                       2.37995406, -3.1750827, -3.24548244])


def assert_tangent(tangent, function, x):
    tangent_fd = finite_difference_tangent(function, x)
    assert np.allclose(tangent, tangent_fd, rtol=1e-5, atol=1e-6)


class TestMapPK2ToCauchy:
    """Second Piola-Kirchhoff to Cauchy stress mapping"""

    def test_value(self):
        def_gradient = np.array([1.96469186, -2.13860665, -2.73148546,
                                 0.51314769, 2.1946897, -0.7689354,
                                 4.80764198, 1.84829739, -0.19068099])
        cauchy_stress = np.array([-2.47696057, 0.48015011, -0.28838671,
                                  0.16490963, -0.57481137, -0.92071407,
                                  -0.21450698, -1.22714923, -1.73532173])
        result = map_pk2_to_cauchy(PK2_STRESS, def_gradient)
        assert np.allclose(result, cauchy_stress, rtol=1e-6, atol=1e-7)

    def test_not_three_dimensional(self):
        with pytest.raises(ShapeError):
            map_pk2_to_cauchy(np.zeros(4), np.eye(2))

    def test_size_mismatch(self):
        with pytest.raises(ShapeError):
            map_pk2_to_cauchy(PK2_STRESS, np.eye(2))

    def test_singular_def_gradient(self):
        with pytest.raises(DomainError) as excinfo:
            map_pk2_to_cauchy(PK2_STRESS, np.zeros(9))
        error_chain = get_error_chain(excinfo.value)
        assert [record[0] for record in error_chain] == \
            ['map_pk2_to_cauchy', 'push_forward_pk2_stress']


class TestPushForwardPK2Stress:
    """Push-forward of second Piola-Kirchhoff stress"""

    def test_consistent_with_map(self):
        assert np.allclose(push_forward_pk2_stress(PK2_STRESS,
                                                   DEF_GRADIENT_WC),
                           map_pk2_to_cauchy(PK2_STRESS, DEF_GRADIENT_WC))

    def test_two_dimensional(self):
        pk2_stress = np.array([[2.0, 0.5], [0.5, 1.0]])
        def_gradient = np.array([[1.2, 0.1], [-0.3, 0.9]])
        result = push_forward_pk2_stress(pk2_stress, def_gradient)
        expected = np.matmul(def_gradient, np.matmul(
            pk2_stress, def_gradient.T))/np.linalg.det(def_gradient)
        assert np.allclose(result, expected.flatten())

    def test_tangents(self):
        _, dcauchy_dpk2, dcauchy_dF = push_forward_pk2_stress(
            PK2_STRESS, DEF_GRADIENT_WC, is_tangent=True)
        assert_tangent(dcauchy_dpk2,
                       lambda x: push_forward_pk2_stress(x, DEF_GRADIENT_WC),
                       PK2_STRESS)
        assert_tangent(dcauchy_dF,
                       lambda x: push_forward_pk2_stress(PK2_STRESS, x),
                       DEF_GRADIENT_WC)

    def test_size_mismatch(self):
        with pytest.raises(ShapeError):
            push_forward_pk2_stress(np.zeros(4), DEF_GRADIENT_WC,
                                    is_tangent=True)


class TestPullBackCauchyStress:
    """Pull-back of Cauchy stress"""

    def test_round_trip(self):
        cauchy_stress = push_forward_pk2_stress(PK2_STRESS, DEF_GRADIENT_WC)
        pk2_stress = pull_back_cauchy_stress(cauchy_stress, DEF_GRADIENT_WC)
        assert np.allclose(pk2_stress, PK2_STRESS)

    def test_tangents(self):
        cauchy_stress = push_forward_pk2_stress(PK2_STRESS, DEF_GRADIENT_WC)
        _, dpk2_dcauchy, dpk2_dF = pull_back_cauchy_stress(
            cauchy_stress, DEF_GRADIENT_WC, is_tangent=True)
        assert_tangent(dpk2_dcauchy,
                       lambda x: pull_back_cauchy_stress(x, DEF_GRADIENT_WC),
                       cauchy_stress)
        assert_tangent(dpk2_dF,
                       lambda x: pull_back_cauchy_stress(cauchy_stress, x),
                       DEF_GRADIENT_WC)

    def test_singular_def_gradient(self):
        with pytest.raises(DomainError):
            pull_back_cauchy_stress(PK2_STRESS, np.zeros(9))


class TestGreenLagrangeAlmansi:
    """Push-forward of Green-Lagrange strain and pull-back of Almansi strain"""

    def test_push_forward(self):
        def_gradient = np.array([0.30027935, -0.72811411, 0.26475099,
                                 1.2285819, 0.57663593, 1.43113814,
                                 -0.45871432, 0.2175795, 0.54013937])
        almansi = np.array([-0.33393717, 0.0953188, -0.29053383,
                            0.0953188, 0.35345526, 0.11588247,
                            -0.29053383, 0.11588247, -0.56150741])
        green_lagrange = compute_green_lagrange_strain(def_gradient)
        result = push_forward_green_lagrange_strain(green_lagrange,
                                                    def_gradient)
        assert np.allclose(result, almansi, rtol=1e-6, atol=1e-7)

    def test_pull_back(self):
        def_gradient = np.array([0.1740535, 1.2519364, -0.9531442,
                                 -0.7512021, -0.60229072, 0.32640812,
                                 -0.59754476, -0.06209685, -1.50856757])
        almansi = np.array([0.25045537, 0.48303426, 0.98555979,
                            0.51948512, 0.61289453, 0.12062867,
                            0.8263408, 0.60306013, 0.54506801])
        green_lagrange = np.array([0.55339061, -0.59325289, 0.92984685,
                                   -0.83130342, -0.25274097, -1.5877536,
                                   1.67911302, -0.83554021, 3.47033811])
        result = pull_back_almansi_strain(almansi, def_gradient)
        assert np.allclose(result, green_lagrange, rtol=1e-6, atol=1e-7)

    def test_round_trip(self):
        green_lagrange = compute_green_lagrange_strain(DEF_GRADIENT_WC)
        almansi = push_forward_green_lagrange_strain(green_lagrange,
                                                     DEF_GRADIENT_WC)
        result = pull_back_almansi_strain(almansi, DEF_GRADIENT_WC)
        assert np.allclose(result, green_lagrange)

    def test_push_forward_tangents(self):
        green_lagrange = compute_green_lagrange_strain(DEF_GRADIENT_WC)
        _, dalmansi_dE, dalmansi_dF = push_forward_green_lagrange_strain(
            green_lagrange, DEF_GRADIENT_WC, is_tangent=True)
        assert_tangent(
            dalmansi_dE,
            lambda x: push_forward_green_lagrange_strain(x, DEF_GRADIENT_WC),
            green_lagrange)
        assert_tangent(
            dalmansi_dF,
            lambda x: push_forward_green_lagrange_strain(green_lagrange, x),
            DEF_GRADIENT_WC)

    def test_pull_back_tangents(self):
        almansi = np.array([0.02, 0.01, -0.03, 0.01, 0.05, 0.02,
                            -0.03, 0.02, -0.01])
        _, dE_dalmansi, dE_dF = pull_back_almansi_strain(
            almansi, DEF_GRADIENT_WC, is_tangent=True)
        assert_tangent(dE_dalmansi,
                       lambda x: pull_back_almansi_strain(x, DEF_GRADIENT_WC),
                       almansi)
        assert_tangent(dE_dF,
                       lambda x: pull_back_almansi_strain(almansi, x),
                       DEF_GRADIENT_WC)

    def test_not_three_dimensional(self):
        with pytest.raises(ShapeError):
            push_forward_green_lagrange_strain(np.zeros(4), DEF_GRADIENT_WC)
        with pytest.raises(ShapeError):
            pull_back_almansi_strain(np.zeros(9), np.eye(2))


class TestPullBackVelocityGradient:
    """Pull-back of velocity gradient"""

    vel_gradient = np.array([0.69006282, 0.0462321, 0.88086378,
                             0.8153887, 0.54987134, 0.72085876,
                             0.66559485, 0.63708462, 0.54378588])

    def test_value(self):
        def_gradient = np.array([0.69646919, 0.28613933, 0.22685145,
                                 0.55131477, 0.71946897, 0.42310646,
                                 0.98076420, 0.68482974, 0.4809319])
        expected = np.array([6.32482111, 3.11877752, 2.43195977,
                             20.19439192, 10.22175689, 7.88052809,
                             -38.85113898, -18.79212468, -14.76285795])
        result = pull_back_velocity_gradient(self.vel_gradient, def_gradient)
        assert np.allclose(result, expected, rtol=1e-6, atol=1e-6)

    def test_tangents(self):
        _, dvel_dL, dvel_dF = pull_back_velocity_gradient(
            self.vel_gradient, DEF_GRADIENT_WC, is_tangent=True)
        assert_tangent(
            dvel_dL,
            lambda x: pull_back_velocity_gradient(x, DEF_GRADIENT_WC),
            self.vel_gradient)
        assert_tangent(
            dvel_dF,
            lambda x: pull_back_velocity_gradient(self.vel_gradient, x),
            DEF_GRADIENT_WC)


class TestRotateMatrix:
    """Rotation of second-order tensor"""

    rotation = np.array([-0.44956296, -0.88488713, -0.12193405,
                         -0.37866166, 0.31242661, -0.87120891,
                         0.80901699, -0.3454915, -0.47552826])

    def test_value(self):
        expected = np.array([-0.09485264, -3.38815017, -5.39748037,
                             -1.09823916, 2.23262233, 4.68884658,
                             -1.68701666, 6.92240128, 12.8622303])
        result = rotate_matrix(np.arange(1, 10), self.rotation)
        assert np.allclose(result, expected, rtol=1e-6, atol=1e-6)

    def test_rotate_back(self):
        rtensor = rotate_matrix(np.arange(1, 10), self.rotation)
        rotation_t = self.rotation.reshape(3, 3).T
        result = rotate_matrix(rtensor, rotation_t)
        assert np.allclose(result, np.arange(1, 10), rtol=1e-6, atol=1e-6)

    def test_size_mismatch(self):
        with pytest.raises(ShapeError):
            rotate_matrix(np.arange(1, 10), np.eye(2))

    def test_not_perfect_square(self):
        with pytest.raises(ShapeError):
            rotate_matrix(np.arange(8), np.arange(8))


class TestNonFiniteInput:
    """Non-finite deformation gradient"""

    @pytest.mark.parametrize('value', [np.inf, np.nan])
    def test_pull_back_and_push_forward(self, value):
        def_gradient = DEF_GRADIENT_WC.copy()
        def_gradient[4] = value
        with pytest.raises(DomainError):
            pull_back_cauchy_stress(np.ones(9), def_gradient)
        with pytest.raises(DomainError):
            push_forward_pk2_stress(PK2_STRESS, def_gradient, is_tangent=True)
        with pytest.raises(DomainError):
            map_pk2_to_cauchy(PK2_STRESS, def_gradient)
        with pytest.raises(DomainError):
            push_forward_green_lagrange_strain(np.zeros(9), def_gradient)
        with pytest.raises(DomainError):
            pull_back_velocity_gradient(np.zeros(9), def_gradient)
