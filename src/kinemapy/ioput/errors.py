"""Kinematics errors and chained error display.

This module includes the definition of the errors raised by the kinematic
operations and the procedures required to walk and display their causal
chain. Every error carries the name of the operation where it was raised.
Composite operations (e.g., a tangent computation built on top of the
associated value computation) wrap an inner error with an error of the same
category, such that the original diagnostic is never lost.

Classes
-------
KinematicsError
    Base error raised by kinematic operations.
ShapeError
    Tensor with invalid or incompatible size.
DomainError
    Mathematically invalid input of well-shaped operation.
ParameterError
    Control parameter out of its admissible range.

Functions
---------
chain_error
    Build error of the same category wrapping given error.
get_error_chain
    Get the causal chain of error.
displayerror
    Display error and its causal chain.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import colorama
# Local
import kinemapy.ioput.ioutilities as ioutil
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
class KinematicsError(RuntimeError):
    """Base error raised by kinematic operations.

    Attributes
    ----------
    operation : str
        Name of the operation where the error was raised.
    message : str
        Error description.
    """
    def __init__(self, operation, message):
        """Constructor.

        Parameters
        ----------
        operation : str
            Name of the operation where the error was raised.
        message : str
            Error description.
        """
        super().__init__('{}: {}'.format(operation, message))
        self.operation = operation
        self.message = message
# =============================================================================
class ShapeError(KinematicsError):
    """Tensor with invalid or incompatible size.

    Raised when a tensor length is not a perfect square, when two tensors that
    must share the same dimension disagree, or when a three-dimensional only
    operation receives a tensor with length other than 9.
    """
    pass
# =============================================================================
class DomainError(KinematicsError):
    """Mathematically invalid input of well-shaped operation."""
    pass
# =============================================================================
class ParameterError(KinematicsError):
    """Control parameter out of its admissible range."""
    pass
# =============================================================================
def chain_error(error, operation, message):
    """Build error of the same category wrapping given error.

    The wrapping error must be raised from the wrapped error (i.e.,
    ``raise chain_error(err, operation, message) from err``) such that the
    latter becomes its cause.

    Parameters
    ----------
    error : KinematicsError
        Wrapped error.
    operation : str
        Name of the wrapping operation.
    message : str
        Error description.

    Returns
    -------
    wrapper : KinematicsError
        Error of the same category of the wrapped error.
    """
    if isinstance(error, KinematicsError):
        wrapper = type(error)(operation, message)
    else:
        wrapper = KinematicsError(operation, message)
    return wrapper
# =============================================================================
def get_error_chain(error):
    """Get the causal chain of error.

    Parameters
    ----------
    error : Exception
        Outermost error.

    Returns
    -------
    error_chain : list[tuple]
        Records (operation, message) of the causal chain, from the outermost
        error to the original cause. Errors other than kinematic errors are
        recorded with the name of their class as operation.
    """
    error_chain = []
    # Walk causal chain
    while error is not None:
        if isinstance(error, KinematicsError):
            error_chain.append((error.operation, error.message))
        else:
            error_chain.append((type(error).__name__, str(error)))
        error = error.__cause__
    # Return
    return error_chain
# =============================================================================
def displayerror(error):
    """Display error and its causal chain.

    The error is output to both default standard output device (e.g.,
    terminal) and to the '.screen' output file. The program execution is not
    aborted.

    Parameters
    ----------
    error : Exception
        Outermost error.
    """
    # Get display features
    display_features = ioutil.setdisplayfeatures()
    output_width, _, indent, asterisk_line = display_features[0:4]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set error display header and footer
    error_color = colorama.Fore.RED
    header = ('!! Error !!', type(error).__name__)
    template_header = error_color + '\n' + asterisk_line + '\n' \
        + '{:^{width}}' + '\n\n' + 'Category: ' \
        + colorama.Style.RESET_ALL + '{}' + '\n\n' \
        + error_color + 'Traceback: ' + colorama.Style.RESET_ALL + '\n'
    template_footer = error_color + '\n' + asterisk_line \
        + colorama.Style.RESET_ALL + '\n'
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set causal chain to display
    error_chain = get_error_chain(error)
    arguments = []
    template = ''
    for i, (operation, message) in enumerate(error_chain):
        arguments += [i, operation, message]
        template += '\n' + indent + colorama.Fore.YELLOW + '[{}] {}' \
            + colorama.Style.RESET_ALL + '\n' + 2*indent + '{}' + '\n'
    values = tuple(arguments)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Display error
    ioutil.print2(template_header.format(*header, width=output_width))
    ioutil.print2(template.format(*values, width=output_width))
    ioutil.print2(template_footer)
