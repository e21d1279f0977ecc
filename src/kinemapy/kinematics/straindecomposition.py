"""Volumetric/isochoric decomposition of Green-Lagrange strain tensor.

Functions
---------
decompose_green_lagrange_strain
    Decompose Green-Lagrange strain into isochoric and volumetric parts.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
# Local
import kinemapy.tensor.tensoroperations as top
import kinemapy.tensor.matrixoperations as mop
from kinemapy.ioput.errors import KinematicsError, DomainError, chain_error
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
def decompose_green_lagrange_strain(green_lagrange, is_tangent=False):
    """Decompose Green-Lagrange strain into isochoric and volumetric parts.

    Given the right Cauchy-Green strain tensor
    :math:`\\mathbf{C} = 2 \\mathbf{E} + \\mathbf{I}`, the volumetric
    jacobian and the isochoric Green-Lagrange strain tensor are

    .. math::

       J = \\sqrt{\\det (\\mathbf{C})} \\, , \\qquad
       \\bar{\\mathbf{E}} = J^{-2/3} \\mathbf{E} + \\dfrac{1}{2}
       (J^{-2/3} - 1) \\mathbf{I} \\, .

    The associated derivatives are

    .. math::

       \\dfrac{\\partial J}{\\partial \\mathbf{E}} = J \\mathbf{C}^{-T}
       \\, ,

    .. math::

       \\dfrac{\\partial \\bar{E}_{ij}}{\\partial E_{kl}} =
       J^{-2/3} \\delta_{ik} \\delta_{jl} - \\dfrac{1}{3} J^{-5/3}
       \\delta_{ij} \\dfrac{\\partial J}{\\partial E_{kl}}
       - \\dfrac{2}{3} J^{-5/3} E_{ij}
       \\dfrac{\\partial J}{\\partial E_{kl}} \\, .

    ----

    Parameters
    ----------
    green_lagrange : array_like
        Green-Lagrange strain tensor (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the isochoric
        Green-Lagrange strain tensor and of the volumetric jacobian with
        respect to the Green-Lagrange strain tensor.

    Returns
    -------
    green_lagrange_iso : numpy.ndarray (1d)
        Isochoric Green-Lagrange strain tensor (flat storage).
    jacobian : float
        Volumetric jacobian.
    dgreen_lagrange_iso_dgreen_lagrange : numpy.ndarray (1d)
        Derivative of isochoric Green-Lagrange strain tensor with respect to
        the Green-Lagrange strain tensor (flat storage). Only returned if
        `is_tangent` is `True`.
    djacobian_dgreen_lagrange : numpy.ndarray (1d)
        Derivative of volumetric jacobian with respect to the Green-Lagrange
        strain tensor (flat storage). Only returned if `is_tangent` is
        `True`.
    """
    operation = 'decompose_green_lagrange_strain'
    if is_tangent:
        try:
            green_lagrange_iso, jacobian = \
                decompose_green_lagrange_strain(green_lagrange)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to decompose Green-Lagrange strain.') \
                from err
        green_lagrange_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(green_lagrange), 3)
        soid, foid, _, _, _ = top.get_id_operators(3)
        right_cauchy_green = 2.0*green_lagrange_mf + soid
        # Compute derivative of volumetric jacobian
        djacobian_dgreen_lagrange = \
            jacobian*mop.inverse(right_cauchy_green, operation).T
        # Compute derivative of isochoric Green-Lagrange strain tensor
        jacobian_23 = jacobian**(-2.0/3.0)
        jacobian_53 = jacobian**(-5.0/3.0)
        dgreen_lagrange_iso_dgreen_lagrange = jacobian_23*foid \
            - (1.0/3.0)*jacobian_53*top.dyad22_1(soid,
                                                 djacobian_dgreen_lagrange) \
            - (2.0/3.0)*jacobian_53*top.dyad22_1(green_lagrange_mf,
                                                 djacobian_dgreen_lagrange)
        # Return
        return green_lagrange_iso, jacobian, \
            dgreen_lagrange_iso_dgreen_lagrange.flatten(), \
            djacobian_dgreen_lagrange.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    green_lagrange = mop.get_flat_tensor(green_lagrange)
    mop.check_tensor_3d(green_lagrange, operation,
                        name='Green-Lagrange strain')
    green_lagrange_mf = mop.get_tensor_mf(green_lagrange, 3)
    # Compute right Cauchy-Green strain tensor determinant
    det_right_cauchy_green = \
        mop.determinant(2.0*green_lagrange_mf + np.eye(3),
                        operation)
    if det_right_cauchy_green <= 0.0:
        raise DomainError(operation, 'The determinant of the right '
                          'Cauchy-Green strain tensor (2E + I) is not '
                          'positive (' + str(det_right_cauchy_green) + ').')
    # Compute volumetric jacobian
    jacobian = np.sqrt(det_right_cauchy_green)
    # Compute isochoric Green-Lagrange strain tensor
    jacobian_23 = jacobian**(-2.0/3.0)
    green_lagrange_iso = jacobian_23*green_lagrange_mf \
        + 0.5*(jacobian_23 - 1.0)*np.eye(3)
    # Return
    return green_lagrange_iso.flatten(), float(jacobian)
