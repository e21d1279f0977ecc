"""Algebraic tensorial operations and standard tensorial operators.

This module is essentially a toolkit containing the definition of several
standard tensorial operators (e.g., Kronecker delta, second- and fourth-order
identity tensors) and tensorial operations (e.g., tensorial product,
tensorial contraction, Macaulay bracket) arising in finite strain kinematics.

Tensors are here handled in their nested form (e.g., a second-order tensor
is a numpy.ndarray of shape (n_dim, n_dim)). The conversion from and to the
flat row-major storage is carried out in
:py:mod:`kinemapy.tensor.matrixoperations`.

Functions
---------
dyad11
    Dyadic product: :math:`i \\otimes j \\rightarrow ij`.
dyad22_1
    Dyadic product: :math:`ij \\otimes kl \\rightarrow ijkl`.
dyad22_2
    Dyadic product: :math:`ik \\otimes jl \\rightarrow ijkl`.
dyad22_3
    Dyadic product: :math:`il \\otimes jk \\rightarrow ijkl`.
ddot42_1
    Double contraction: :math:`ijkl : kl \\rightarrow ij`.
dd
    Kronecker delta function.
get_id_operators
    Set common second- and fourth-order identity operators.
mac
    Macaulay bracket.
dmac
    Derivative of Macaulay bracket.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
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
#                                                          Tensorial operations
# =============================================================================
# Tensorial products
dyad11 = lambda a1, b1: np.einsum('i,j -> ij', a1, b1)
dyad22_1 = lambda a2, b2: np.einsum('ij,kl -> ijkl', a2, b2)
dyad22_2 = lambda a2, b2: np.einsum('ik,jl -> ijkl', a2, b2)
dyad22_3 = lambda a2, b2: np.einsum('il,jk -> ijkl', a2, b2)
# Tensorial double contraction
ddot42_1 = lambda a4, b2: np.einsum('ijkl,kl -> ij', a4, b2)
#
#                                                                     Operators
# =============================================================================
def dd(i, j):
    """Kronecker delta function.

    .. math::

       \\delta_{ij} =
           \\begin{cases}
                   1, &         \\text{if } i=j, \\\\
                   0, &         \\text{if } i\\neq j.
           \\end{cases}

    ----

    Parameters
    ----------
    i : int
        First index.
    j : int
        Second index.

    Returns
    -------
    value : int (0 or 1)
        Kronecker delta.
    """
    if (not isinstance(i, int) and not isinstance(i, np.integer)) or \
            (not isinstance(j, int) and not isinstance(j, np.integer)):
        raise RuntimeError('The Kronecker delta function only accepts two '
                           + 'integer indexes as arguments.')
    value = 1 if i == j else 0
    return value
# =============================================================================
def get_id_operators(n_dim):
    """Set common second- and fourth-order identity operators.

    Parameters
    ----------
    n_dim : int
        Number of dimensions.

    Returns
    -------
    soid : numpy.ndarray (2d)
        Second-order identity tensor:

        .. math::

           I_{ij} = \\delta_{ij}
    foid : numpy.ndarray (4d)
        Fourth-order identity tensor:

        .. math::
           I_{ijkl} = \\delta_{ik}\\delta_{jl}
    fotransp : numpy.ndarray (4d)
        Fourth-order transposition tensor:

        .. math::

           I_{ijkl} = \\delta_{il}\\delta_{jk}
    fosym : numpy.ndarray (4d)
        Fourth-order symmetric projection tensor:

        .. math::

           I_{ijkl} = 0.5(\\delta_{ik}\\delta_{jl} +
                      \\delta_{il}\\delta_{jk})
    fodiagtrace : numpy.ndarray (4d)
        Fourth-order 'diagonal trace' tensor:

        .. math::

           I_{ijkl} = \\delta_{ij}\\delta_{kl}
    """
    # Set second-order identity tensor
    soid = np.eye(n_dim)
    # Set fourth-order identity tensor and fourth-order transposition tensor
    foid = dyad22_2(soid, soid)
    fotransp = dyad22_3(soid, soid)
    # Set fourth-order symmetric projection tensor
    fosym = 0.5*(foid + fotransp)
    # Set fourth-order 'diagonal trace' tensor
    fodiagtrace = dyad22_1(soid, soid)
    # Return
    return soid, foid, fotransp, fosym, fodiagtrace
# =============================================================================
def mac(x):
    """Macaulay bracket.

    .. math::

       \\langle x \\rangle = \\dfrac{1}{2} (|x| + x)

    ----

    Parameters
    ----------
    x : {float, numpy.ndarray}
        Scalar or array (applied component-wise).

    Returns
    -------
    value : {float, numpy.ndarray}
        Macaulay bracket.
    """
    return 0.5*(np.abs(x) + x)
# =============================================================================
def dmac(x):
    """Derivative of Macaulay bracket.

    The derivative is taken as the Heaviside step function, i.e., it is
    assumed unitary for :math:`x = 0`.

    Parameters
    ----------
    x : {float, numpy.ndarray}
        Scalar or array (applied component-wise).

    Returns
    -------
    value : {float, numpy.ndarray}
        Derivative of Macaulay bracket.
    """
    return np.where(np.asarray(x) >= 0, 1.0, 0.0)
