"""Finite strain kinematic measures.

This module includes the computation of the fundamental finite strain
kinematic measures (deformation gradient, right Cauchy-Green tensor,
Green-Lagrange strain tensor, among others) and their derivatives with
respect to the associated tensorial arguments.

Every function receives and returns tensors in flat row-major storage (see
:py:mod:`kinemapy.tensor.matrixoperations`). The derivatives are returned as
fourth-order tensors in flat storage and are only computed if requested
(``is_tangent=True``), in which case the value computation is always
performed first.

Functions
---------
compute_deformation_gradient
    Compute deformation gradient from displacement gradient.
compute_right_cauchy_green
    Compute right Cauchy-Green strain tensor.
compute_green_lagrange_strain
    Compute Green-Lagrange strain tensor.
compute_dgreen_lagrange_strain_dF
    Compute derivative of Green-Lagrange strain tensor.
compute_symmetric_part
    Compute symmetric part of second-order tensor.
compute_unit_normal
    Compute unit normal of second-order tensor.
compute_def_gradient_rate
    Compute material time derivative of deformation gradient.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
# Local
import kinemapy.tensor.tensoroperations as top
import kinemapy.tensor.matrixoperations as mop
from kinemapy.ioput.errors import KinematicsError, chain_error
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
def compute_deformation_gradient(disp_gradient, is_current=False,
                                 is_tangent=False):
    """Compute deformation gradient from displacement gradient.

    If the displacement gradient is taken with respect to the reference
    configuration,

    .. math::

       \\mathbf{F} = \\mathbf{I} + \\nabla_{0} \\mathbf{u} \\, ,

    while if it is taken with respect to the current configuration,

    .. math::

       \\mathbf{F} = (\\mathbf{I} - \\nabla \\mathbf{u})^{-1} \\, .

    The associated derivatives are, respectively,

    .. math::

       \\dfrac{\\partial F_{ij}}{\\partial (\\nabla u)_{kl}} =
       \\delta_{ik}\\delta_{jl} \\, , \\qquad
       \\dfrac{\\partial F_{ij}}{\\partial (\\nabla u)_{kl}} =
       F_{ik} F_{lj} \\, .

    ----

    Parameters
    ----------
    disp_gradient : array_like
        Displacement gradient (flat storage, any dimension).
    is_current : bool, default=False
        If `True`, then the displacement gradient is taken with respect to the
        current configuration, otherwise it is taken with respect to the
        reference configuration.
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the deformation gradient
        with respect to the displacement gradient.

    Returns
    -------
    def_gradient : numpy.ndarray (1d)
        Deformation gradient (flat storage).
    ddef_gradient_ddisp_gradient : numpy.ndarray (1d)
        Derivative of deformation gradient with respect to the displacement
        gradient (flat storage). Only returned if `is_tangent` is `True`.
    """
    operation = 'compute_deformation_gradient'
    if is_tangent:
        try:
            def_gradient = compute_deformation_gradient(
                disp_gradient, is_current=is_current)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute deformation gradient.') \
                from err
        # Get dimension
        n_dim = mop.get_tensor_dim(def_gradient, operation)
        # Set identity operators
        _, foid, _, _, _ = top.get_id_operators(n_dim)
        # Compute derivative
        if is_current:
            def_gradient_mf = mop.get_tensor_mf(def_gradient, n_dim)
            ddef_gradient_ddisp_gradient = \
                top.dyad22_2(def_gradient_mf, def_gradient_mf.T)
        else:
            ddef_gradient_ddisp_gradient = foid
        # Return
        return def_gradient, ddef_gradient_ddisp_gradient.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    disp_gradient = mop.get_flat_tensor(disp_gradient)
    n_dim = mop.get_tensor_dim(disp_gradient, operation,
                               name='displacement gradient')
    disp_gradient_mf = mop.get_tensor_mf(disp_gradient, n_dim)
    # Compute deformation gradient
    if is_current:
        def_gradient_mf = mop.inverse(np.eye(n_dim) - disp_gradient_mf,
                                      operation)
    else:
        def_gradient_mf = np.eye(n_dim) + disp_gradient_mf
    # Return
    return def_gradient_mf.flatten()
# =============================================================================
def compute_right_cauchy_green(def_gradient, is_tangent=False):
    """Compute right Cauchy-Green strain tensor.

    .. math::

       \\mathbf{C} = \\mathbf{F}^{T} \\mathbf{F} \\, , \\qquad
       \\dfrac{\\partial C_{IJ}}{\\partial F_{kK}} =
       \\delta_{IK} F_{kJ} + F_{kI} \\delta_{JK}

    ----

    Parameters
    ----------
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the right Cauchy-Green
        strain tensor with respect to the deformation gradient.

    Returns
    -------
    right_cauchy_green : numpy.ndarray (1d)
        Right Cauchy-Green strain tensor (flat storage).
    dright_cauchy_green_dF : numpy.ndarray (1d)
        Derivative of right Cauchy-Green strain tensor with respect to the
        deformation gradient (flat storage). Only returned if `is_tangent` is
        `True`.
    """
    operation = 'compute_right_cauchy_green'
    if is_tangent:
        try:
            right_cauchy_green = compute_right_cauchy_green(def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute right Cauchy-Green strain '
                              'tensor.') from err
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), 3)
        soid, _, _, _, _ = top.get_id_operators(3)
        # Compute derivative
        dright_cauchy_green_dF = top.dyad22_3(soid, def_gradient_mf.T) \
            + top.dyad22_2(def_gradient_mf.T, soid)
        # Return
        return right_cauchy_green, dright_cauchy_green_dF.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    def_gradient_mf = mop.get_tensor_mf(def_gradient, 3)
    # Compute right Cauchy-Green strain tensor
    right_cauchy_green = np.matmul(def_gradient_mf.T, def_gradient_mf)
    # Return
    return right_cauchy_green.flatten()
# =============================================================================
def compute_green_lagrange_strain(def_gradient, is_tangent=False):
    """Compute Green-Lagrange strain tensor.

    .. math::

       \\mathbf{E} = \\dfrac{1}{2} (\\mathbf{F}^{T} \\mathbf{F}
       - \\mathbf{I})

    ----

    Parameters
    ----------
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the Green-Lagrange strain
        tensor with respect to the deformation gradient (see
        :py:func:`compute_dgreen_lagrange_strain_dF`).

    Returns
    -------
    green_lagrange : numpy.ndarray (1d)
        Green-Lagrange strain tensor (flat storage).
    dgreen_lagrange_dF : numpy.ndarray (1d)
        Derivative of Green-Lagrange strain tensor with respect to the
        deformation gradient (flat storage). Only returned if `is_tangent` is
        `True`.
    """
    operation = 'compute_green_lagrange_strain'
    if is_tangent:
        try:
            green_lagrange = compute_green_lagrange_strain(def_gradient)
            dgreen_lagrange_dF = \
                compute_dgreen_lagrange_strain_dF(def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute Green-Lagrange strain '
                              'tensor.') from err
        return green_lagrange, dgreen_lagrange_dF
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    def_gradient_mf = mop.get_tensor_mf(def_gradient, 3)
    # Compute Green-Lagrange strain tensor
    green_lagrange = 0.5*(np.matmul(def_gradient_mf.T, def_gradient_mf)
                          - np.eye(3))
    # Return
    return green_lagrange.flatten()
# =============================================================================
def compute_dgreen_lagrange_strain_dF(def_gradient):
    """Compute derivative of Green-Lagrange strain tensor.

    .. math::

       \\dfrac{\\partial E_{IJ}}{\\partial F_{kK}} =
       \\dfrac{1}{2} (\\delta_{IK} F_{kJ} + F_{kI} \\delta_{JK})

    ----

    Parameters
    ----------
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).

    Returns
    -------
    dgreen_lagrange_dF : numpy.ndarray (1d)
        Derivative of Green-Lagrange strain tensor with respect to the
        deformation gradient (flat storage).
    """
    operation = 'compute_dgreen_lagrange_strain_dF'
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    def_gradient_mf = mop.get_tensor_mf(def_gradient, 3)
    soid, _, _, _, _ = top.get_id_operators(3)
    # Compute derivative
    dgreen_lagrange_dF = 0.5*(top.dyad22_3(soid, def_gradient_mf.T)
                              + top.dyad22_2(def_gradient_mf.T, soid))
    # Return
    return dgreen_lagrange_dF.flatten()
# =============================================================================
def compute_symmetric_part(tensor, is_tangent=False):
    """Compute symmetric part of second-order tensor.

    .. math::

       \\text{sym}(\\mathbf{A}) = \\dfrac{1}{2} (\\mathbf{A} +
       \\mathbf{A}^{T}) \\, , \\qquad
       \\dfrac{\\partial \\, \\text{sym}(\\mathbf{A})_{ij}}{\\partial
       A_{kl}} = \\dfrac{1}{2}(\\delta_{ik}\\delta_{jl} +
       \\delta_{jk}\\delta_{il})

    ----

    Parameters
    ----------
    tensor : array_like
        Second-order tensor (flat storage, any dimension).
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the symmetric part with
        respect to the second-order tensor.

    Returns
    -------
    tensor_sym : numpy.ndarray (1d)
        Symmetric part of second-order tensor (flat storage).
    dtensor_sym_dtensor : numpy.ndarray (1d)
        Derivative of symmetric part with respect to the second-order tensor
        (flat storage). Only returned if `is_tangent` is `True`.
    """
    operation = 'compute_symmetric_part'
    if is_tangent:
        try:
            tensor_sym = compute_symmetric_part(tensor)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute symmetric part.') from err
        n_dim = mop.get_tensor_dim(tensor_sym, operation)
        _, _, _, fosym, _ = top.get_id_operators(n_dim)
        return tensor_sym, fosym.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    tensor = mop.get_flat_tensor(tensor)
    n_dim = mop.get_tensor_dim(tensor, operation)
    tensor_mf = mop.get_tensor_mf(tensor, n_dim)
    _, _, _, fosym, _ = top.get_id_operators(n_dim)
    # Compute symmetric part
    tensor_sym = top.ddot42_1(fosym, tensor_mf)
    # Return
    return tensor_sym.flatten()
# =============================================================================
def compute_unit_normal(tensor, is_tangent=False, tolerance=1e-9):
    """Compute unit normal of second-order tensor.

    .. math::

       \\mathbf{n} = \\dfrac{\\mathbf{A}}{\\|\\mathbf{A}\\|} \\, , \\qquad
       \\dfrac{\\partial \\mathbf{n}}{\\partial \\mathbf{A}} =
       \\dfrac{1}{\\|\\mathbf{A}\\|} (\\mathbf{I} - \\mathbf{n} \\otimes
       \\mathbf{n})

    where :math:`\\| \\cdot \\|` denotes the Frobenius norm. The unit normal
    of a null tensor is the null tensor. The derivative is not defined for a
    null tensor, in which case it is returned with non-finite components.

    ----

    Parameters
    ----------
    tensor : array_like
        Second-order tensor (flat storage, any dimension).
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the unit normal with
        respect to the second-order tensor.
    tolerance : float, default=1e-9
        Norm below which the tensor is considered null.

    Returns
    -------
    unit_normal : numpy.ndarray (1d)
        Unit normal (flat storage).
    dunit_normal_dtensor : numpy.ndarray (1d)
        Derivative of unit normal with respect to the second-order tensor
        (flat storage). Only returned if `is_tangent` is `True`.
    """
    operation = 'compute_unit_normal'
    if is_tangent:
        try:
            unit_normal = compute_unit_normal(tensor, tolerance=tolerance)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute unit normal.') from err
        norm = np.linalg.norm(mop.get_flat_tensor(tensor))
        n_comps = len(unit_normal)
        # Compute derivative (non-finite for null tensor)
        with np.errstate(divide='ignore', invalid='ignore'):
            dunit_normal_dtensor = \
                (np.eye(n_comps) - top.dyad11(unit_normal, unit_normal))/norm
        # Return
        return unit_normal, dunit_normal_dtensor.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    tensor = mop.get_flat_tensor(tensor)
    mop.get_tensor_dim(tensor, operation)
    # Compute unit normal
    norm = np.linalg.norm(tensor)
    if norm < tolerance:
        unit_normal = np.zeros(len(tensor))
    else:
        unit_normal = tensor/norm
    # Return
    return unit_normal
# =============================================================================
def compute_def_gradient_rate(vel_gradient, def_gradient, is_tangent=False):
    """Compute material time derivative of deformation gradient.

    .. math::

       \\dot{\\mathbf{F}} = \\mathbf{L} \\mathbf{F} \\, , \\qquad
       \\dfrac{\\partial \\dot{F}_{iI}}{\\partial L_{kl}} =
       \\delta_{ik} F_{lI} \\, , \\qquad
       \\dfrac{\\partial \\dot{F}_{iI}}{\\partial F_{kK}} =
       L_{ik} \\delta_{IK}

    ----

    Parameters
    ----------
    vel_gradient : array_like
        Velocity gradient (flat storage, three-dimensional).
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the deformation gradient
        rate with respect to the velocity gradient and deformation gradient.

    Returns
    -------
    def_gradient_rate : numpy.ndarray (1d)
        Material time derivative of deformation gradient (flat storage).
    drate_dvel_gradient : numpy.ndarray (1d)
        Derivative of deformation gradient rate with respect to the velocity
        gradient (flat storage). Only returned if `is_tangent` is `True`.
    drate_ddef_gradient : numpy.ndarray (1d)
        Derivative of deformation gradient rate with respect to the
        deformation gradient (flat storage). Only returned if `is_tangent` is
        `True`.
    """
    operation = 'compute_def_gradient_rate'
    if is_tangent:
        try:
            def_gradient_rate = compute_def_gradient_rate(vel_gradient,
                                                          def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute deformation gradient '
                              'rate.') from err
        vel_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(vel_gradient), 3)
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), 3)
        soid, _, _, _, _ = top.get_id_operators(3)
        # Compute derivatives
        drate_dvel_gradient = top.dyad22_2(soid, def_gradient_mf.T)
        drate_ddef_gradient = top.dyad22_2(vel_gradient_mf, soid)
        # Return
        return def_gradient_rate, drate_dvel_gradient.flatten(), \
            drate_ddef_gradient.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    vel_gradient = mop.get_flat_tensor(vel_gradient)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_same_size(vel_gradient, def_gradient, operation,
                        names=('velocity gradient', 'deformation gradient'))
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    # Compute deformation gradient rate
    def_gradient_rate = np.matmul(mop.get_tensor_mf(vel_gradient, 3),
                                  mop.get_tensor_mf(def_gradient, 3))
    # Return
    return def_gradient_rate.flatten()
