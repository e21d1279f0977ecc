"""Tensors flat storage and dense matrix procedures.

This module contains fundamental procedures associated with the flat storage
of second- and fourth-order tensorial quantities and related manipulations.

Every tensor that crosses the boundary of a kinematic operation is stored as
a flat (1d) array in row-major order. A second-order tensor of dimension
:math:`d` has length :math:`d^2`, component :math:`A_{ij}` being stored at
index :math:`d i + j`. A fourth-order tensor (e.g., the derivative of a
second-order tensor with respect to another second-order tensor) has length
:math:`d^4`, component :math:`A_{ijkl}` being stored at index
:math:`d^3 i + d^2 j + d k + l`. The same data can be viewed as a nested
(:math:`d^2`, :math:`d^2`) matrix of rows through :py:func:`inflate`.

Functions
---------
get_flat_tensor
    Convert array-like tensor to flat storage.
get_tensor_dim
    Get dimension of second-order tensor from its flat storage.
check_tensor_3d
    Check if flat tensor is a three-dimensional second-order tensor.
check_same_size
    Check if two flat tensors have the same size.
get_tensor_mf
    Get nested (matricial) form of flat second-order tensor.
inflate
    Reshape flat array into nested matrix of rows.
deflate
    Reshape nested matrix of rows into flat array.
inverse
    Compute inverse of square matrix.
determinant
    Compute determinant of square matrix.
check_finite
    Check if every matrix component is finite.
ddet_dmatrix
    Compute derivative of determinant of square matrix.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
import scipy.linalg
# Local
from kinemapy.ioput.errors import ShapeError, DomainError
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
#                                                                  Flat storage
# =============================================================================
def get_flat_tensor(tensor):
    """Convert array-like tensor to flat storage.

    Parameters
    ----------
    tensor : array_like
        Tensor stored either in flat or nested form.

    Returns
    -------
    tensor_flat : numpy.ndarray (1d)
        Tensor flat storage (row-major order).
    """
    return np.asarray(tensor, dtype=float).flatten()
# =============================================================================
def get_tensor_dim(tensor, operation, name='tensor'):
    """Get dimension of second-order tensor from its flat storage.

    Parameters
    ----------
    tensor : numpy.ndarray (1d)
        Second-order tensor flat storage.
    operation : str
        Name of the calling operation.
    name : str, default='tensor'
        Name of the tensor (error message).

    Returns
    -------
    n_dim : int
        Tensor dimension.
    """
    n_comps = len(tensor)
    n_dim = int(round(np.sqrt(n_comps)))
    if n_comps == 0 or n_dim*n_dim != n_comps:
        raise ShapeError(operation, 'The ' + name + ' length ('
                         + str(n_comps) + ') is not a perfect square.')
    return n_dim
# =============================================================================
def check_tensor_3d(tensor, operation, name='tensor'):
    """Check if flat tensor is a three-dimensional second-order tensor.

    Parameters
    ----------
    tensor : numpy.ndarray (1d)
        Second-order tensor flat storage.
    operation : str
        Name of the calling operation.
    name : str, default='tensor'
        Name of the tensor (error message).
    """
    if len(tensor) != 9:
        raise ShapeError(operation, 'The ' + name + ' must be a '
                         'three-dimensional second-order tensor (length 9) '
                         'but has length ' + str(len(tensor)) + '.')
# =============================================================================
def check_same_size(tensor_a, tensor_b, operation, names=('tensor_a',
                                                          'tensor_b')):
    """Check if two flat tensors have the same size.

    Parameters
    ----------
    tensor_a : numpy.ndarray (1d)
        Tensor flat storage.
    tensor_b : numpy.ndarray (1d)
        Tensor flat storage.
    operation : str
        Name of the calling operation.
    names : tuple[str], default=('tensor_a', 'tensor_b')
        Names of the tensors (error message).
    """
    if len(tensor_a) != len(tensor_b):
        raise ShapeError(operation, 'The ' + names[0] + ' (length '
                         + str(len(tensor_a)) + ') and the ' + names[1]
                         + ' (length ' + str(len(tensor_b)) + ') must have '
                         'the same size.')
# =============================================================================
def get_tensor_mf(tensor, n_dim):
    """Get nested (matricial) form of flat second-order tensor.

    Parameters
    ----------
    tensor : numpy.ndarray (1d)
        Second-order tensor flat storage.
    n_dim : int
        Tensor dimension.

    Returns
    -------
    tensor_mf : numpy.ndarray (2d)
        Second-order tensor nested form, numpy.ndarray of shape
        (n_dim, n_dim).
    """
    return np.reshape(tensor, (n_dim, n_dim))
# =============================================================================
def inflate(tensor, n_rows, n_cols):
    """Reshape flat array into nested matrix of rows.

    Parameters
    ----------
    tensor : array_like
        Flat array (e.g., fourth-order tensor flat storage).
    n_rows : int
        Number of rows.
    n_cols : int
        Number of columns.

    Returns
    -------
    matrix : numpy.ndarray (2d)
        Nested matrix of rows, numpy.ndarray of shape (n_rows, n_cols).
    """
    tensor = get_flat_tensor(tensor)
    for n in (n_rows, n_cols):
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise ShapeError('inflate', 'The number of rows and columns must '
                             'be integers, got ' + repr(n) + '.')
    if n_rows < 0 or n_cols < 0 or len(tensor) != n_rows*n_cols:
        raise ShapeError('inflate', 'Unable to inflate array of length '
                         + str(len(tensor)) + ' into a (' + str(n_rows)
                         + ', ' + str(n_cols) + ') matrix.')
    return np.reshape(tensor, (n_rows, n_cols))
# =============================================================================
def deflate(matrix):
    """Reshape nested matrix of rows into flat array.

    Parameters
    ----------
    matrix : array_like
        Nested matrix of rows.

    Returns
    -------
    tensor : numpy.ndarray (1d)
        Flat array.
    """
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2:
        raise ShapeError('deflate', 'Only a nested matrix of rows (2d) can '
                         'be deflated, got ' + str(matrix.ndim)
                         + ' dimension(s).')
    return matrix.flatten()
#
#                                                          Dense linear algebra
# =============================================================================
def inverse(matrix, operation):
    """Compute inverse of square matrix.

    Parameters
    ----------
    matrix : numpy.ndarray (2d)
        Square matrix.
    operation : str
        Name of the calling operation.

    Returns
    -------
    matrix_inv : numpy.ndarray (2d)
        Inverse of square matrix.
    """
    check_finite(matrix, operation)
    try:
        matrix_inv = scipy.linalg.inv(matrix)
    except np.linalg.LinAlgError as err:
        raise DomainError(operation, 'Unable to invert singular matrix.') \
            from err
    if not np.all(np.isfinite(matrix_inv)):
        raise DomainError(operation, 'Unable to invert singular matrix.')
    return matrix_inv
# =============================================================================
def determinant(matrix, operation):
    """Compute determinant of square matrix.

    Parameters
    ----------
    matrix : numpy.ndarray (2d)
        Square matrix.
    operation : str
        Name of the calling operation.

    Returns
    -------
    det : float
        Determinant of square matrix.
    """
    check_finite(matrix, operation)
    return float(scipy.linalg.det(matrix))
# =============================================================================
def check_finite(matrix, operation):
    """Check if every matrix component is finite.

    Parameters
    ----------
    matrix : numpy.ndarray
        Matrix.
    operation : str
        Name of the calling operation.
    """
    if not np.all(np.isfinite(matrix)):
        raise DomainError(operation, 'The matrix has non-finite (inf or '
                          'nan) components.')
# =============================================================================
def ddet_dmatrix(matrix, operation):
    """Compute derivative of determinant of square matrix.

    .. math::

       \\dfrac{\\partial \\det (\\mathbf{A})}{\\partial \\mathbf{A}} =
       \\det (\\mathbf{A}) \\, \\mathbf{A}^{-T}

    ----

    Parameters
    ----------
    matrix : numpy.ndarray (2d)
        Square matrix.
    operation : str
        Name of the calling operation.

    Returns
    -------
    ddet : numpy.ndarray (2d)
        Derivative of determinant of square matrix (cofactor matrix).
    """
    return determinant(matrix, operation)*np.transpose(
        inverse(matrix, operation))
