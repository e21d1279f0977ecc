"""Finite difference verification of analytical tangents.

This module includes the numerical approximation of the derivative of a
tensor-valued function by central finite differences and its comparison with
the associated analytical derivative. Both the function argument and value
are handled in flat storage, such that the finite difference derivative
shares the layout of the analytical derivatives computed in
:py:mod:`kinemapy.kinematics` (output index major).

Functions
---------
finite_difference_tangent
    Compute derivative of function by central finite differences.
check_tangent
    Check analytical derivative against finite difference approximation.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
# Local
import kinemapy.tensor.matrixoperations as mop
import kinemapy.ioput.info as info
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
def finite_difference_tangent(function, x, eps=1e-6):
    """Compute derivative of function by central finite differences.

    Each component of the argument is perturbed by
    :math:`\\pm h_{j}`, :math:`h_{j} = \\epsilon |x_{j}| + \\epsilon`, and

    .. math::

       \\dfrac{\\partial f_{i}}{\\partial x_{j}} \\approx
       \\dfrac{f_{i}(\\mathbf{x} + h_{j} \\mathbf{e}_{j})
       - f_{i}(\\mathbf{x} - h_{j} \\mathbf{e}_{j})}{2 h_{j}} \\, .

    ----

    Parameters
    ----------
    function : callable
        Function of a single argument (flat storage) returning a scalar or
        an array.
    x : array_like
        Function argument (flat storage).
    eps : float, default=1e-6
        Perturbation parameter.

    Returns
    -------
    tangent : numpy.ndarray (1d)
        Finite difference derivative (flat storage of matrix with shape
        (n_out, n_in)).
    """
    x = mop.get_flat_tensor(x)
    n_in = len(x)
    n_out = len(np.atleast_1d(function(x.copy())))
    # Initialize derivative
    tangent = np.zeros((n_out, n_in))
    # Loop over argument components
    for j in range(n_in):
        # Set perturbation
        delta = eps*abs(x[j]) + eps
        x_plus = x.copy()
        x_plus[j] += delta
        x_minus = x.copy()
        x_minus[j] -= delta
        # Compute derivative column
        tangent[:, j] = (mop.get_flat_tensor(function(x_plus))
                         - mop.get_flat_tensor(function(x_minus)))/(2*delta)
    # Return
    return tangent.flatten()
# =============================================================================
def check_tangent(function, x, tangent, eps=1e-6, rtol=1e-5, atol=1e-5,
                  label=None, is_verbose=False):
    """Check analytical derivative against finite difference approximation.

    Parameters
    ----------
    function : callable
        Function of a single argument (flat storage) returning a scalar or
        an array.
    x : array_like
        Function argument (flat storage).
    tangent : array_like
        Analytical derivative (flat storage).
    eps : float, default=1e-6
        Perturbation parameter.
    rtol : float, default=1e-5
        Relative tolerance.
    atol : float, default=1e-5
        Absolute tolerance.
    label : str, default=None
        Derivative label (display).
    is_verbose : bool, default=False
        If `True`, then display the check result.

    Returns
    -------
    is_consistent : bool
        `True` if the analytical derivative matches the finite difference
        approximation within tolerance, `False` otherwise.
    max_error : float
        Maximum absolute difference between analytical and finite difference
        derivatives.
    """
    tangent = mop.get_flat_tensor(tangent)
    # Compute finite difference derivative
    tangent_fd = finite_difference_tangent(function, x, eps=eps)
    if len(tangent) != len(tangent_fd):
        is_consistent = False
        max_error = np.inf
    else:
        is_consistent = bool(np.allclose(tangent, tangent_fd, rtol=rtol,
                                         atol=atol))
        max_error = float(np.max(np.abs(tangent - tangent_fd)))
    # Display check result
    if is_verbose:
        if label is None:
            label = getattr(function, '__name__', 'tangent')
        info.displayinfo('6', label, max_error, is_consistent)
    # Return
    return is_consistent, max_error
