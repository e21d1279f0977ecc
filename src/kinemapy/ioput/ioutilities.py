"""I/O utility tools.

This module includes the '.screen' file path global definition as well as
several useful tools associated with output display and the validation of
scalar parameters.

Functions
---------
print2(*objects)
    Double output printer.
setdisplayfeatures()
    Set output display features.
escapeANSI(string)
    Remove ANSI escape sequences from string.
checknumber(x)
    Check if instance is or represents a number.
is_between(x, lower_bound=0, upper_bound=1)
    Check if numeric instance is between lower and upper values (included).
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import re
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
# Set '.screen' file path as a global variable
screen_file_path = None
# =============================================================================
def print2(*objects):
    """Double output printer.

    Output to both default standard output device (e.g., terminal) and to the
    '.screen' output file (only if the '.screen' file path is set).

    Parameters
    ----------
    objects : list
        Objects to print.
    """
    # Print to default sys.stdout
    print(*objects)
    # Print to '.screen' file
    if screen_file_path is not None:
        objects_esc = [escapeANSI(str(obj)) for obj in objects]
        with open(screen_file_path, 'a', encoding='utf-8') as screen_file:
            print(*objects_esc, file=screen_file)
# =============================================================================
def setdisplayfeatures():
    """Set output display features.

    Returns
    -------
    display_features : tuple
        Output display features:

        * output_width (int) : \
            Maximum line length of '.screen' output file.
        * dashed_line (str) : \
            Dashed line of length `output_width`.
        * indent (str) : \
            Indentation spacing.
        * asterisk_line (str) : \
            Asterisks line of length `output_width`.
        * tilde_line (str) : \
            Tildes line of length `output_width`.
        * equal_line (str) : \
            Equal signs line of length `output_width`.
    """
    # Set display features
    output_width = 92
    dashed_line = '-'*output_width
    indent = '  '
    asterisk_line = '*'*output_width
    tilde_line = '~'*output_width
    equal_line = '='*output_width
    # Build display features
    display_features = (output_width, dashed_line, indent, asterisk_line,
                        tilde_line, equal_line)
    # Return
    return display_features
# =============================================================================
def escapeANSI(string):
    """Remove ANSI escape sequences from string.

    Parameters
    ----------
    string : str
        String.

    Returns
    -------
    string_esc : str
        String without ANSI escape sequences.
    """
    ansi_escape = re.compile(r'(\x9B|\x1B\[)[0-?]*[ -\/]*[@-~]')
    return ansi_escape.sub('', string)
# =============================================================================
def checknumber(x):
    """Check if instance is or represents a number.

    Parameters
    ----------
    x
        Object.

    Returns
    -------
    is_number : bool
        `True` if `x` is or represents a number, `False` otherwise.
    """
    try:
        float(x)
    except (TypeError, ValueError):
        return False
    return True
# =============================================================================
def is_between(x, lower_bound=0, upper_bound=1):
    """Check if numeric instance is between lower and upper values (included).

    Parameters
    ----------
    x : {int, float}
        Numerical type instance.
    lower_bound : {int, float}, default=0
        Lower boundary value (included).
    upper_bound : {int, float}, default=1
        Upper boundary value (included).

    Returns
    -------
    bool : bool
        `True` if numeric instance is between lower and upper values, `False`
        otherwise.
    """
    x = float(x)
    lower_bound = float(lower_bound)
    upper_bound = float(upper_bound)
    if lower_bound > upper_bound:
        raise RuntimeError('Lower boundary value (' + str(lower_bound)
                           + ') must be lower or equal than the upper '
                           'boundary value (' + str(upper_bound) + ').')
    return lower_bound <= x <= upper_bound
