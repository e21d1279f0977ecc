"""Generalized midpoint time integration of kinematic quantities.

This module includes the generalized midpoint (:math:`\\alpha`-method) update
of a generic state vector given its rate at the beginning and at the end of a
time increment, as well as its specialization to the evolution of the
deformation gradient given the velocity gradient.

The integration parameter :math:`\\alpha \\in [0, 1]` weights the rate at the
beginning of the time increment (previous rate), while :math:`1 - \\alpha`
weights the rate at the end of the time increment (current rate). As such,
:math:`\\alpha = 0` yields a fully implicit (backward Euler) update,
:math:`\\alpha = 1` yields a fully explicit (forward Euler) update and
:math:`\\alpha = 0.5` yields the trapezoidal rule.

Functions
---------
midpoint_evolution
    Generalized midpoint update of state vector.
evolve_def_gradient
    Generalized midpoint update of deformation gradient.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
# Local
import kinemapy.tensor.tensoroperations as top
import kinemapy.tensor.matrixoperations as mop
import kinemapy.ioput.ioutilities as ioutil
from kinemapy.ioput.errors import KinematicsError, ShapeError, \
    ParameterError, chain_error
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
def midpoint_evolution(time_inc, prev_state, prev_rate, rate, alpha=0.5,
                       is_tangent=False):
    """Generalized midpoint update of state vector.

    .. math::

       \\Delta A_{i} = \\Delta t \\, (\\alpha_{i} \\dot{A}^{p}_{i}
       + (1 - \\alpha_{i}) \\dot{A}_{i}) \\, , \\qquad
       A_{i} = A^{p}_{i} + \\Delta A_{i}

    The derivatives of the updated state with respect to the current and
    previous rates are diagonal,

    .. math::

       \\dfrac{\\partial A_{i}}{\\partial \\dot{A}_{j}} =
       \\Delta t (1 - \\alpha_{i}) \\delta_{ij} \\, , \\qquad
       \\dfrac{\\partial A_{i}}{\\partial \\dot{A}^{p}_{j}} =
       \\Delta t \\, \\alpha_{i} \\delta_{ij} \\, .

    ----

    Parameters
    ----------
    time_inc : float
        Time increment.
    prev_state : array_like
        State vector at the beginning of the time increment.
    prev_rate : array_like
        State vector rate at the beginning of the time increment.
    rate : array_like
        State vector rate at the end of the time increment.
    alpha : {float, array_like}, default=0.5
        Integration parameter, either a scalar (applied to all components)
        or a vector with the same size of the state vector. Every component
        must be within [0, 1].
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the updated state vector
        with respect to the current and previous rates.

    Returns
    -------
    inc_state : numpy.ndarray (1d)
        State vector increment.
    state : numpy.ndarray (1d)
        State vector at the end of the time increment.
    dstate_drate : numpy.ndarray (1d)
        Derivative of the updated state vector with respect to the current
        rate (flat storage of square matrix). Only returned if `is_tangent`
        is `True`.
    dstate_dprev_rate : numpy.ndarray (1d)
        Derivative of the updated state vector with respect to the previous
        rate (flat storage of square matrix). Only returned if `is_tangent`
        is `True`.
    """
    operation = 'midpoint_evolution'
    if is_tangent:
        try:
            inc_state, state = midpoint_evolution(time_inc, prev_state,
                                                  prev_rate, rate,
                                                  alpha=alpha)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to perform midpoint update.') from err
        alphas = _get_alphas(alpha, len(state), operation)
        # Compute derivatives
        dstate_drate = np.diag(float(time_inc)*(1.0 - alphas))
        dstate_dprev_rate = np.diag(float(time_inc)*alphas)
        # Return
        return inc_state, state, dstate_drate.flatten(), \
            dstate_dprev_rate.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    _check_time_inc(time_inc, operation)
    time_inc = float(time_inc)
    prev_state = mop.get_flat_tensor(prev_state)
    prev_rate = mop.get_flat_tensor(prev_rate)
    rate = mop.get_flat_tensor(rate)
    mop.check_same_size(prev_state, prev_rate, operation,
                        names=('previous state', 'previous rate'))
    mop.check_same_size(prev_state, rate, operation,
                        names=('previous state', 'current rate'))
    alphas = _get_alphas(alpha, len(prev_state), operation)
    # Compute state vector increment
    inc_state = time_inc*(alphas*prev_rate + (1.0 - alphas)*rate)
    # Compute updated state vector
    state = prev_state + inc_state
    # Return
    return inc_state, state
# =============================================================================
def _get_alphas(alpha, n_comps, operation):
    """Get integration parameter of each state vector component.

    Parameters
    ----------
    alpha : {float, array_like}
        Integration parameter, either a scalar or a vector.
    n_comps : int
        Number of state vector components.
    operation : str
        Name of the calling operation.

    Returns
    -------
    alphas : numpy.ndarray (1d)
        Integration parameter of each state vector component.
    """
    if np.ndim(alpha) == 0:
        if not ioutil.checknumber(alpha):
            raise ParameterError(operation, 'The integration parameter must '
                                 'be a number.')
        alphas = float(alpha)*np.ones(n_comps)
    else:
        alphas = mop.get_flat_tensor(alpha)
        if len(alphas) != n_comps:
            raise ShapeError(operation, 'The integration parameter vector '
                             '(length ' + str(len(alphas)) + ') and the '
                             'state vector (length ' + str(n_comps) + ') '
                             'must have the same size.')
    # Check integration parameter bounds
    for i, value in enumerate(alphas):
        if not ioutil.is_between(value, lower_bound=0, upper_bound=1):
            raise ParameterError(operation, 'The integration parameter '
                                 '(component ' + str(i) + ': '
                                 + str(value) + ') must be within [0, 1].')
    return alphas
# =============================================================================
def _check_time_inc(time_inc, operation):
    """Check if time increment is a finite real number.

    Parameters
    ----------
    time_inc : float
        Time increment.
    operation : str
        Name of the calling operation.
    """
    if isinstance(time_inc, (str, bytes, bool)) \
            or not ioutil.checknumber(time_inc) \
            or not np.isfinite(float(time_inc)):
        raise ParameterError(operation, 'The time increment must be a '
                             'finite number, got ' + repr(time_inc) + '.')
# =============================================================================
def evolve_def_gradient(time_inc, prev_def_gradient, prev_vel_gradient,
                        vel_gradient, alpha=0.5, mode=1, is_tangent=False):
    """Generalized midpoint update of deformation gradient.

    Let the midpoint velocity gradient be
    :math:`\\mathbf{L}^{*} = \\alpha \\mathbf{L}^{p}
    + (1 - \\alpha) \\mathbf{L}` and
    :math:`\\mathbf{X} = \\mathbf{I} - \\Delta t (1 - \\alpha) \\mathbf{L}`.

    * Mode 1 (velocity gradient in the current configuration,
      :math:`\\dot{\\mathbf{F}} = \\mathbf{L} \\mathbf{F}`):

      .. math::

         \\Delta \\mathbf{F} = \\mathbf{X}^{-1} \\, \\Delta t \\,
         \\mathbf{L}^{*} \\mathbf{F}^{p}

    * Mode 2 (velocity gradient in the reference configuration,
      :math:`\\dot{\\mathbf{F}} = \\mathbf{F} \\mathbf{L}`):

      .. math::

         \\Delta \\mathbf{F} = \\Delta t \\, \\mathbf{F}^{p}
         \\mathbf{L}^{*} \\mathbf{X}^{-1}

    where the updated deformation gradient is
    :math:`\\mathbf{F} = \\mathbf{F}^{p} + \\Delta \\mathbf{F}`.

    In mode 1, the derivatives of the updated deformation gradient are

    .. math::

       \\dfrac{\\partial F_{jI}}{\\partial L_{kl}} =
       \\Delta t (1 - \\alpha) X^{-1}_{jk} F_{lI} \\, , \\qquad
       \\dfrac{\\partial F_{jI}}{\\partial L^{p}_{kl}} =
       \\Delta t \\, \\alpha \\, X^{-1}_{jk} F^{p}_{lI} \\, , \\qquad
       \\dfrac{\\partial \\Delta F_{jI}}{\\partial F^{p}_{kK}} =
       \\Delta t (\\mathbf{X}^{-1} \\mathbf{L}^{*})_{jk} \\delta_{IK} \\, ,

    while in mode 2 they are

    .. math::

       \\dfrac{\\partial F_{jI}}{\\partial L_{KL}} =
       \\Delta t (1 - \\alpha) F_{jK} X^{-1}_{LI} \\, , \\qquad
       \\dfrac{\\partial F_{jI}}{\\partial L^{p}_{KL}} =
       \\Delta t \\, \\alpha \\, F^{p}_{jK} X^{-1}_{LI} \\, , \\qquad
       \\dfrac{\\partial \\Delta F_{jI}}{\\partial F^{p}_{kK}} =
       \\Delta t \\, \\delta_{jk} (\\mathbf{L}^{*} \\mathbf{X}^{-1})_{KI}
       \\, .

    In both modes,
    :math:`\\partial \\mathbf{F} / \\partial \\mathbf{F}^{p} =
    \\partial \\Delta \\mathbf{F} / \\partial \\mathbf{F}^{p} +
    \\mathbf{I}`.

    ----

    Parameters
    ----------
    time_inc : float
        Time increment.
    prev_def_gradient : array_like
        Deformation gradient at the beginning of the time increment (flat
        storage, three-dimensional).
    prev_vel_gradient : array_like
        Velocity gradient at the beginning of the time increment (flat
        storage, three-dimensional).
    vel_gradient : array_like
        Velocity gradient at the end of the time increment (flat storage,
        three-dimensional).
    alpha : float, default=0.5
        Integration parameter within [0, 1].
    mode : {1, 2}, default=1
        Configuration where the velocity gradient is expressed: current
        configuration (1) or reference configuration (2).
    is_tangent : bool, default=False
        If `True`, then compute the derivatives of the updated deformation
        gradient.

    Returns
    -------
    inc_def_gradient : numpy.ndarray (1d)
        Deformation gradient increment (flat storage).
    def_gradient : numpy.ndarray (1d)
        Deformation gradient at the end of the time increment (flat storage).
    ddef_gradient_dvel_gradient : numpy.ndarray (1d)
        Derivative of the updated deformation gradient with respect to the
        current velocity gradient (flat storage). Only returned if
        `is_tangent` is `True`.
    dinc_def_gradient_dprev_def_gradient : numpy.ndarray (1d)
        Derivative of the deformation gradient increment with respect to the
        previous deformation gradient (flat storage). Only returned if
        `is_tangent` is `True`.
    ddef_gradient_dprev_def_gradient : numpy.ndarray (1d)
        Derivative of the updated deformation gradient with respect to the
        previous deformation gradient (flat storage). Only returned if
        `is_tangent` is `True`.
    ddef_gradient_dprev_vel_gradient : numpy.ndarray (1d)
        Derivative of the updated deformation gradient with respect to the
        previous velocity gradient (flat storage). Only returned if
        `is_tangent` is `True`.
    """
    operation = 'evolve_def_gradient'
    if is_tangent:
        try:
            _, def_gradient = evolve_def_gradient(
                time_inc, prev_def_gradient, prev_vel_gradient, vel_gradient,
                alpha=alpha, mode=mode)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to evolve deformation gradient.') \
                from err
        time_inc = float(time_inc)
        alpha = float(alpha)
        prev_def_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(prev_def_gradient), 3)
        prev_vel_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(prev_vel_gradient), 3)
        vel_gradient_mf = mop.get_tensor_mf(
            mop.get_flat_tensor(vel_gradient), 3)
        def_gradient_mf = mop.get_tensor_mf(def_gradient, 3)
        soid, foid, _, _, _ = top.get_id_operators(3)
        # Compute midpoint velocity gradient
        vel_gradient_mid = alpha*prev_vel_gradient_mf \
            + (1.0 - alpha)*vel_gradient_mf
        # Compute inverse of implicit operator
        implicit_inv = mop.inverse(
            soid - time_inc*(1.0 - alpha)*vel_gradient_mf, operation)
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Compute derivatives
        if mode == 1:
            ddef_gradient_dvel_gradient = time_inc*(1.0 - alpha)*top.dyad22_2(
                implicit_inv, def_gradient_mf.T)
            ddef_gradient_dprev_vel_gradient = time_inc*alpha*top.dyad22_2(
                implicit_inv, prev_def_gradient_mf.T)
            dinc_def_gradient_dprev_def_gradient = time_inc*top.dyad22_2(
                np.matmul(implicit_inv, vel_gradient_mid), soid)
        else:
            ddef_gradient_dvel_gradient = time_inc*(1.0 - alpha)*top.dyad22_2(
                def_gradient_mf, implicit_inv.T)
            ddef_gradient_dprev_vel_gradient = time_inc*alpha*top.dyad22_2(
                prev_def_gradient_mf, implicit_inv.T)
            dinc_def_gradient_dprev_def_gradient = time_inc*top.dyad22_2(
                soid, np.matmul(vel_gradient_mid, implicit_inv).T)
        ddef_gradient_dprev_def_gradient = \
            dinc_def_gradient_dprev_def_gradient + foid
        # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
        # Return
        return def_gradient - prev_def_gradient_mf.flatten(), def_gradient, \
            ddef_gradient_dvel_gradient.flatten(), \
            dinc_def_gradient_dprev_def_gradient.flatten(), \
            ddef_gradient_dprev_def_gradient.flatten(), \
            ddef_gradient_dprev_vel_gradient.flatten()
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    prev_def_gradient = mop.get_flat_tensor(prev_def_gradient)
    prev_vel_gradient = mop.get_flat_tensor(prev_vel_gradient)
    vel_gradient = mop.get_flat_tensor(vel_gradient)
    mop.check_tensor_3d(prev_def_gradient, operation,
                        name='previous deformation gradient')
    mop.check_same_size(prev_vel_gradient, vel_gradient, operation,
                        names=('previous velocity gradient',
                               'velocity gradient'))
    mop.check_tensor_3d(vel_gradient, operation, name='velocity gradient')
    for tensor in (prev_def_gradient, prev_vel_gradient, vel_gradient):
        mop.check_finite(tensor, operation)
    if isinstance(mode, bool) or not isinstance(mode, (int, np.integer)) \
            or mode not in (1, 2):
        raise ParameterError(operation, 'Unknown deformation gradient '
                             'evolution mode (' + str(mode) + '). Available '
                             'modes are 1 (current configuration) and 2 '
                             '(reference configuration).')
    _check_time_inc(time_inc, operation)
    if np.ndim(alpha) != 0:
        raise ParameterError(operation, 'The integration parameter must be '
                             'a scalar.')
    # Compute midpoint velocity gradient
    try:
        vel_gradient_mid, _ = midpoint_evolution(
            1.0, np.zeros(9), prev_vel_gradient, vel_gradient, alpha=alpha)
    except KinematicsError as err:
        raise chain_error(err, operation, 'Unable to compute midpoint '
                          'velocity gradient.') from err
    time_inc = float(time_inc)
    alpha = float(alpha)
    prev_def_gradient_mf = mop.get_tensor_mf(prev_def_gradient, 3)
    vel_gradient_mid_mf = mop.get_tensor_mf(vel_gradient_mid, 3)
    # Compute inverse of implicit operator
    implicit_inv = mop.inverse(
        np.eye(3) - time_inc*(1.0 - alpha)*mop.get_tensor_mf(vel_gradient, 3),
        operation)
    # Compute deformation gradient increment
    if mode == 1:
        inc_def_gradient = np.matmul(implicit_inv, time_inc*np.matmul(
            vel_gradient_mid_mf, prev_def_gradient_mf))
    else:
        inc_def_gradient = np.matmul(time_inc*np.matmul(
            prev_def_gradient_mf, vel_gradient_mid_mf), implicit_inv)
    # Compute updated deformation gradient
    def_gradient = prev_def_gradient_mf + inc_def_gradient
    # Return
    return inc_def_gradient.flatten(), def_gradient.flatten()
