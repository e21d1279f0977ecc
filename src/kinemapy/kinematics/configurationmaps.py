"""Push-forward and pull-back operations between configurations.

This module includes the operations that map strain, stress and rate tensors
between the reference and current configurations through the deformation
gradient, together with their derivatives with respect to both the mapped
tensor and the deformation gradient. Reference configuration indexes are
denoted with upper case letters, while current configuration indexes are
denoted with lower case letters.

Every function receives and returns tensors in flat row-major storage (see
:py:mod:`kinemapy.tensor.matrixoperations`).

Functions
---------
map_pk2_to_cauchy
    Map second Piola-Kirchhoff stress tensor to Cauchy stress tensor.
push_forward_pk2_stress
    Push-forward second Piola-Kirchhoff stress tensor.
pull_back_cauchy_stress
    Pull-back Cauchy stress tensor.
push_forward_green_lagrange_strain
    Push-forward Green-Lagrange strain tensor.
pull_back_almansi_strain
    Pull-back Almansi strain tensor.
pull_back_velocity_gradient
    Pull-back velocity gradient.
rotate_matrix
    Rotate second-order tensor.
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
#
#                                                                Stress tensors
# =============================================================================
def map_pk2_to_cauchy(pk2_stress, def_gradient):
    """Map second Piola-Kirchhoff stress tensor to Cauchy stress tensor.

    Three-dimensional counterpart of :py:func:`push_forward_pk2_stress`.

    .. math::

       \\boldsymbol{\\sigma} = \\dfrac{1}{\\det (\\mathbf{F})} \\mathbf{F}
       \\mathbf{S} \\mathbf{F}^{T}

    ----

    Parameters
    ----------
    pk2_stress : array_like
        Second Piola-Kirchhoff stress tensor (flat storage,
        three-dimensional).
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).

    Returns
    -------
    cauchy_stress : numpy.ndarray (1d)
        Cauchy stress tensor (flat storage).
    """
    operation = 'map_pk2_to_cauchy'
    pk2_stress = mop.get_flat_tensor(pk2_stress)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(pk2_stress, operation,
                        name='second Piola-Kirchhoff stress')
    mop.check_same_size(pk2_stress, def_gradient, operation,
                        names=('second Piola-Kirchhoff stress',
                               'deformation gradient'))
    try:
        cauchy_stress = push_forward_pk2_stress(pk2_stress, def_gradient)
    except KinematicsError as err:
        raise chain_error(err, operation, 'Unable to push-forward second '
                          'Piola-Kirchhoff stress.') from err
    return cauchy_stress
# =============================================================================
def push_forward_pk2_stress(pk2_stress, def_gradient, is_tangent=False):
    """Push-forward second Piola-Kirchhoff stress tensor.

    .. math::

       \\sigma_{ij} = \\dfrac{1}{J} F_{iA} S_{AB} F_{jB} \\, ,
       \\qquad J = \\det (\\mathbf{F})

    The associated derivatives are

    .. math::

       \\dfrac{\\partial \\sigma_{ij}}{\\partial S_{AB}} =
       \\dfrac{1}{J} F_{iA} F_{jB} \\, ,

    .. math::

       \\dfrac{\\partial \\sigma_{ij}}{\\partial F_{AB}} =
       - \\sigma_{ij} F^{-1}_{BA} + \\dfrac{1}{J} (\\delta_{iA}
       (\\mathbf{F} \\mathbf{S}^{T})_{jB} + (\\mathbf{F}\\mathbf{S})_{iB}
       \\delta_{jA}) \\, .

    ----

    Parameters
    ----------
    pk2_stress : array_like
        Second Piola-Kirchhoff stress tensor (flat storage, any dimension).
    def_gradient : array_like
        Deformation gradient (flat storage, same dimension of stress).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the Cauchy stress tensor
        with respect to the second Piola-Kirchhoff stress tensor and the
        deformation gradient.

    Returns
    -------
    cauchy_stress : numpy.ndarray (1d)
        Cauchy stress tensor (flat storage).
    dcauchy_dpk2 : numpy.ndarray (1d)
        Derivative of Cauchy stress tensor with respect to the second
        Piola-Kirchhoff stress tensor (flat storage). Only returned if
        `is_tangent` is `True`.
    dcauchy_dF : numpy.ndarray (1d)
        Derivative of Cauchy stress tensor with respect to the deformation
        gradient (flat storage). Only returned if `is_tangent` is `True`.
    """
    operation = 'push_forward_pk2_stress'
    if is_tangent:
        try:
            cauchy_stress = push_forward_pk2_stress(pk2_stress, def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to push-forward second '
                              'Piola-Kirchhoff stress.') from err
        n_dim = mop.get_tensor_dim(cauchy_stress, operation)
        pk2_stress_mf = mop.get_tensor_mf(mop.get_flat_tensor(pk2_stress),
                                          n_dim)
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), n_dim)
        cauchy_stress_mf = mop.get_tensor_mf(cauchy_stress, n_dim)
        soid, _, _, _, _ = top.get_id_operators(n_dim)
        # Compute volumetric jacobian and its derivative
        jacobian = mop.determinant(def_gradient_mf, operation)
        djacobian_dF = mop.ddet_dmatrix(def_gradient_mf, operation)
        # Compute derivative with respect to second Piola-Kirchhoff stress
        dcauchy_dpk2 = (1.0/jacobian)*top.dyad22_2(def_gradient_mf,
                                                   def_gradient_mf)
        # Compute derivative with respect to deformation gradient
        dcauchy_dF = \
            -(1.0/jacobian)*top.dyad22_1(cauchy_stress_mf, djacobian_dF) \
            + (1.0/jacobian)*(
                top.dyad22_2(soid, np.matmul(def_gradient_mf,
                                             pk2_stress_mf.T))
                + top.dyad22_3(np.matmul(def_gradient_mf, pk2_stress_mf),
                               soid))
        # Return
        return cauchy_stress, dcauchy_dpk2.flatten(), dcauchy_dF.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    pk2_stress = mop.get_flat_tensor(pk2_stress)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_same_size(pk2_stress, def_gradient, operation,
                        names=('second Piola-Kirchhoff stress',
                               'deformation gradient'))
    n_dim = mop.get_tensor_dim(def_gradient, operation,
                               name='deformation gradient')
    pk2_stress_mf = mop.get_tensor_mf(pk2_stress, n_dim)
    def_gradient_mf = mop.get_tensor_mf(def_gradient, n_dim)
    # Compute volumetric jacobian
    jacobian = mop.determinant(def_gradient_mf, operation)
    if jacobian == 0.0:
        raise DomainError(operation, 'The deformation gradient is singular '
                          '(null jacobian).')
    # Compute Cauchy stress tensor
    cauchy_stress = (1.0/jacobian)*np.matmul(
        def_gradient_mf, np.matmul(pk2_stress_mf, def_gradient_mf.T))
    # Return
    return cauchy_stress.flatten()
# =============================================================================
def pull_back_cauchy_stress(cauchy_stress, def_gradient, is_tangent=False):
    """Pull-back Cauchy stress tensor.

    .. math::

       S_{AB} = J F^{-1}_{Ai} \\sigma_{ij} F^{-1}_{Bj} \\, ,
       \\qquad J = \\det (\\mathbf{F})

    The associated derivatives are

    .. math::

       \\dfrac{\\partial S_{AB}}{\\partial \\sigma_{kl}} =
       J F^{-1}_{Ak} F^{-1}_{Bl} \\, ,

    .. math::

       \\dfrac{\\partial S_{AB}}{\\partial F_{kl}} =
       F^{-1}_{lk} S_{AB} - F^{-1}_{Ak} S_{lB} - F^{-1}_{Bk} S_{Al} \\, .

    ----

    Parameters
    ----------
    cauchy_stress : array_like
        Cauchy stress tensor (flat storage, any dimension).
    def_gradient : array_like
        Deformation gradient (flat storage, same dimension of stress).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the second Piola-Kirchhoff
        stress tensor with respect to the Cauchy stress tensor and the
        deformation gradient.

    Returns
    -------
    pk2_stress : numpy.ndarray (1d)
        Second Piola-Kirchhoff stress tensor (flat storage).
    dpk2_dcauchy : numpy.ndarray (1d)
        Derivative of second Piola-Kirchhoff stress tensor with respect to
        the Cauchy stress tensor (flat storage). Only returned if
        `is_tangent` is `True`.
    dpk2_dF : numpy.ndarray (1d)
        Derivative of second Piola-Kirchhoff stress tensor with respect to
        the deformation gradient (flat storage). Only returned if
        `is_tangent` is `True`.
    """
    operation = 'pull_back_cauchy_stress'
    if is_tangent:
        try:
            pk2_stress = pull_back_cauchy_stress(cauchy_stress, def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to pull-back Cauchy stress.') from err
        n_dim = mop.get_tensor_dim(pk2_stress, operation)
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), n_dim)
        pk2_stress_mf = mop.get_tensor_mf(pk2_stress, n_dim)
        jacobian = mop.determinant(def_gradient_mf, operation)
        def_gradient_inv = mop.inverse(def_gradient_mf, operation)
        # Compute derivative with respect to Cauchy stress
        dpk2_dcauchy = jacobian*top.dyad22_2(def_gradient_inv,
                                             def_gradient_inv)
        # Compute derivative with respect to deformation gradient
        dpk2_dF = top.dyad22_1(pk2_stress_mf, def_gradient_inv.T) \
            - top.dyad22_2(def_gradient_inv, pk2_stress_mf.T) \
            - top.dyad22_3(pk2_stress_mf, def_gradient_inv)
        # Return
        return pk2_stress, dpk2_dcauchy.flatten(), dpk2_dF.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    cauchy_stress = mop.get_flat_tensor(cauchy_stress)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_same_size(cauchy_stress, def_gradient, operation,
                        names=('Cauchy stress', 'deformation gradient'))
    n_dim = mop.get_tensor_dim(def_gradient, operation,
                               name='deformation gradient')
    cauchy_stress_mf = mop.get_tensor_mf(cauchy_stress, n_dim)
    def_gradient_mf = mop.get_tensor_mf(def_gradient, n_dim)
    # Compute volumetric jacobian and inverse of deformation gradient
    jacobian = mop.determinant(def_gradient_mf, operation)
    def_gradient_inv = mop.inverse(def_gradient_mf, operation)
    # Compute second Piola-Kirchhoff stress tensor
    pk2_stress = jacobian*np.matmul(
        def_gradient_inv, np.matmul(cauchy_stress_mf, def_gradient_inv.T))
    # Return
    return pk2_stress.flatten()
#
#                                                                Strain tensors
# =============================================================================
def push_forward_green_lagrange_strain(green_lagrange, def_gradient,
                                       is_tangent=False):
    """Push-forward Green-Lagrange strain tensor.

    .. math::

       e_{ij} = F^{-1}_{Ki} E_{KL} F^{-1}_{Lj}

    The associated derivatives are

    .. math::

       \\dfrac{\\partial e_{ij}}{\\partial E_{KL}} = F^{-1}_{Ki} F^{-1}_{Lj}
       \\, , \\qquad
       \\dfrac{\\partial e_{ij}}{\\partial F_{KL}} =
       - F^{-1}_{Li} e_{Kj} - F^{-1}_{Lj} e_{iK} \\, .

    ----

    Parameters
    ----------
    green_lagrange : array_like
        Green-Lagrange strain tensor (flat storage, three-dimensional).
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the Almansi strain tensor
        with respect to the Green-Lagrange strain tensor and the deformation
        gradient.

    Returns
    -------
    almansi : numpy.ndarray (1d)
        Almansi strain tensor (flat storage).
    dalmansi_dgreen_lagrange : numpy.ndarray (1d)
        Derivative of Almansi strain tensor with respect to the
        Green-Lagrange strain tensor (flat storage). Only returned if
        `is_tangent` is `True`.
    dalmansi_dF : numpy.ndarray (1d)
        Derivative of Almansi strain tensor with respect to the deformation
        gradient (flat storage). Only returned if `is_tangent` is `True`.
    """
    operation = 'push_forward_green_lagrange_strain'
    if is_tangent:
        try:
            almansi = push_forward_green_lagrange_strain(green_lagrange,
                                                         def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to push-forward Green-Lagrange '
                              'strain.') from err
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), 3)
        almansi_mf = mop.get_tensor_mf(almansi, 3)
        def_gradient_inv = mop.inverse(def_gradient_mf, operation)
        # Compute derivative with respect to Green-Lagrange strain
        dalmansi_dgreen_lagrange = top.dyad22_2(def_gradient_inv.T,
                                                def_gradient_inv.T)
        # Compute derivative with respect to deformation gradient
        dalmansi_dF = -top.dyad22_3(def_gradient_inv.T, almansi_mf.T) \
            - top.dyad22_2(almansi_mf, def_gradient_inv.T)
        # Return
        return almansi, dalmansi_dgreen_lagrange.flatten(), \
            dalmansi_dF.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    green_lagrange = mop.get_flat_tensor(green_lagrange)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(green_lagrange, operation,
                        name='Green-Lagrange strain')
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    def_gradient_inv = mop.inverse(mop.get_tensor_mf(def_gradient, 3),
                                   operation)
    # Compute Almansi strain tensor
    almansi = np.matmul(def_gradient_inv.T,
                        np.matmul(mop.get_tensor_mf(green_lagrange, 3),
                                  def_gradient_inv))
    # Return
    return almansi.flatten()
# =============================================================================
def pull_back_almansi_strain(almansi, def_gradient, is_tangent=False):
    """Pull-back Almansi strain tensor.

    .. math::

       E_{IJ} = F_{kI} e_{kl} F_{lJ}

    The associated derivatives are

    .. math::

       \\dfrac{\\partial E_{IJ}}{\\partial e_{kl}} = F_{kI} F_{lJ}
       \\, , \\qquad
       \\dfrac{\\partial E_{IJ}}{\\partial F_{kK}} =
       \\delta_{IK} (\\mathbf{e} \\mathbf{F})_{kJ}
       + (\\mathbf{F}^{T} \\mathbf{e})_{Ik} \\delta_{JK} \\, .

    ----

    Parameters
    ----------
    almansi : array_like
        Almansi strain tensor (flat storage, three-dimensional).
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the Green-Lagrange strain
        tensor with respect to the Almansi strain tensor and the deformation
        gradient.

    Returns
    -------
    green_lagrange : numpy.ndarray (1d)
        Green-Lagrange strain tensor (flat storage).
    dgreen_lagrange_dalmansi : numpy.ndarray (1d)
        Derivative of Green-Lagrange strain tensor with respect to the
        Almansi strain tensor (flat storage). Only returned if `is_tangent`
        is `True`.
    dgreen_lagrange_dF : numpy.ndarray (1d)
        Derivative of Green-Lagrange strain tensor with respect to the
        deformation gradient (flat storage). Only returned if `is_tangent`
        is `True`.
    """
    operation = 'pull_back_almansi_strain'
    if is_tangent:
        try:
            green_lagrange = pull_back_almansi_strain(almansi, def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to pull-back Almansi strain.') from err
        almansi_mf = mop.get_tensor_mf(mop.get_flat_tensor(almansi), 3)
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), 3)
        soid, _, _, _, _ = top.get_id_operators(3)
        # Compute derivative with respect to Almansi strain
        dgreen_lagrange_dalmansi = top.dyad22_2(def_gradient_mf.T,
                                                def_gradient_mf.T)
        # Compute derivative with respect to deformation gradient
        dgreen_lagrange_dF = \
            top.dyad22_3(soid, np.matmul(almansi_mf, def_gradient_mf).T) \
            + top.dyad22_2(np.matmul(def_gradient_mf.T, almansi_mf), soid)
        # Return
        return green_lagrange, dgreen_lagrange_dalmansi.flatten(), \
            dgreen_lagrange_dF.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    almansi = mop.get_flat_tensor(almansi)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(almansi, operation, name='Almansi strain')
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    def_gradient_mf = mop.get_tensor_mf(def_gradient, 3)
    # Compute Green-Lagrange strain tensor
    green_lagrange = np.matmul(def_gradient_mf.T,
                               np.matmul(mop.get_tensor_mf(almansi, 3),
                                         def_gradient_mf))
    # Return
    return green_lagrange.flatten()
#
#                                                                  Rate tensors
# =============================================================================
def pull_back_velocity_gradient(vel_gradient, def_gradient,
                                is_tangent=False):
    """Pull-back velocity gradient.

    .. math::

       \\bar{L}_{IJ} = F^{-1}_{Ik} L_{kl} F_{lJ}

    The associated derivatives are

    .. math::

       \\dfrac{\\partial \\bar{L}_{IJ}}{\\partial L_{kl}} =
       F^{-1}_{Ik} F_{lJ} \\, , \\qquad
       \\dfrac{\\partial \\bar{L}_{IJ}}{\\partial F_{kK}} =
       - F^{-1}_{Ik} \\bar{L}_{KJ} + (\\mathbf{F}^{-1} \\mathbf{L})_{Ik}
       \\delta_{JK} \\, .

    ----

    Parameters
    ----------
    vel_gradient : array_like
        Velocity gradient (flat storage, three-dimensional).
    def_gradient : array_like
        Deformation gradient (flat storage, three-dimensional).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the pulled-back velocity
        gradient with respect to the velocity gradient and the deformation
        gradient.

    Returns
    -------
    vel_gradient_ref : numpy.ndarray (1d)
        Pulled-back velocity gradient (flat storage).
    dvel_gradient_ref_dL : numpy.ndarray (1d)
        Derivative of pulled-back velocity gradient with respect to the
        velocity gradient (flat storage). Only returned if `is_tangent` is
        `True`.
    dvel_gradient_ref_dF : numpy.ndarray (1d)
        Derivative of pulled-back velocity gradient with respect to the
        deformation gradient (flat storage). Only returned if `is_tangent` is
        `True`.
    """
    operation = 'pull_back_velocity_gradient'
    if is_tangent:
        try:
            vel_gradient_ref = pull_back_velocity_gradient(vel_gradient,
                                                           def_gradient)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to pull-back velocity gradient.') \
                from err
        vel_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(vel_gradient), 3)
        def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(def_gradient), 3)
        vel_gradient_ref_mf = mop.get_tensor_mf(vel_gradient_ref, 3)
        def_gradient_inv = mop.inverse(def_gradient_mf, operation)
        soid, _, _, _, _ = top.get_id_operators(3)
        # Compute derivative with respect to velocity gradient
        dvel_gradient_ref_dL = top.dyad22_2(def_gradient_inv,
                                            def_gradient_mf.T)
        # Compute derivative with respect to deformation gradient
        dvel_gradient_ref_dF = \
            -top.dyad22_2(def_gradient_inv, vel_gradient_ref_mf.T) \
            + top.dyad22_2(np.matmul(def_gradient_inv, vel_gradient_mf),
                           soid)
        # Return
        return vel_gradient_ref, dvel_gradient_ref_dL.flatten(), \
            dvel_gradient_ref_dF.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    vel_gradient = mop.get_flat_tensor(vel_gradient)
    def_gradient = mop.get_flat_tensor(def_gradient)
    mop.check_tensor_3d(vel_gradient, operation, name='velocity gradient')
    mop.check_tensor_3d(def_gradient, operation, name='deformation gradient')
    def_gradient_mf = mop.get_tensor_mf(def_gradient, 3)
    def_gradient_inv = mop.inverse(def_gradient_mf, operation)
    # Compute pulled-back velocity gradient
    vel_gradient_ref = np.matmul(
        def_gradient_inv, np.matmul(mop.get_tensor_mf(vel_gradient, 3),
                                    def_gradient_mf))
    # Return
    return vel_gradient_ref.flatten()
#
#                                                                      Rotation
# =============================================================================
def rotate_matrix(tensor, rotation):
    """Rotate second-order tensor.

    .. math::

       A^{r}_{ij} = Q_{Ii} A_{IJ} Q_{Jj}

    where :math:`\\mathbf{Q}` is an orthogonal tensor. The rotation tensor is
    not a differentiable argument and no derivative is available.

    ----

    Parameters
    ----------
    tensor : array_like
        Second-order tensor (flat storage, any dimension).
    rotation : array_like
        Orthogonal rotation tensor (flat storage, same dimension of tensor).

    Returns
    -------
    rtensor : numpy.ndarray (1d)
        Rotated second-order tensor (flat storage).
    """
    operation = 'rotate_matrix'
    tensor = mop.get_flat_tensor(tensor)
    rotation = mop.get_flat_tensor(rotation)
    mop.check_same_size(tensor, rotation, operation,
                        names=('tensor', 'rotation tensor'))
    n_dim = mop.get_tensor_dim(tensor, operation)
    # Compute rotated tensor
    rtensor = np.einsum('Ii,IJ,Jj -> ij', mop.get_tensor_mf(rotation, n_dim),
                        mop.get_tensor_mf(tensor, n_dim),
                        mop.get_tensor_mf(rotation, n_dim))
    # Return
    return rtensor.flatten()
