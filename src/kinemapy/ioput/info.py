"""Display information during program execution.

This module includes a function that allows the output of information to both
default standard output device (e.g., terminal) and to the '.screen' output
file in a formatted and consistent manner.

Functions
---------
displayinfo
    Display information during program execution.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
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
def displayinfo(code, *args):
    """Display information during program execution.

    Information is output to both default standard output device
    (e.g., terminal) and to the '.screen' output file.

    ----

    Parameters
    ----------
    code : str
        Code associated with the output information:

        * 0 : Session launched
        * 1 : Session completed
        * 5 : Session task
        * 6 : Tangent consistency check
        * 7 : Deformation gradient evolution header and step
    """
    # Get display features
    display_features = ioutil.setdisplayfeatures()
    output_width, dashed_line, indent, asterisk_line = display_features[0:4]
    tilde_line, equal_line = display_features[4:6]
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Set informations and formats to display
    if code == '0':
        arguments = ['KINEMA - Finite Strain Kinematics Toolkit',
                     'Release 0.1.0'] + list(args[0:3])
        info = tuple(arguments)
        template = '\n' + colorama.Fore.WHITE + tilde_line \
            + colorama.Style.RESET_ALL \
            + colorama.Fore.WHITE + '\n{:^{width}}\n' \
            + '\n{:^{width}}\n\n' \
            + colorama.Fore.YELLOW + 'Session: ' \
            + colorama.Style.RESET_ALL + '{}' + '\n\n' \
            + colorama.Fore.YELLOW + 'Starting session at: ' \
            + colorama.Style.RESET_ALL + '{} ({})\n' \
            + colorama.Fore.WHITE + tilde_line \
            + colorama.Style.RESET_ALL + '\n\n' + colorama.Fore.WHITE \
            + dashed_line + colorama.Style.RESET_ALL
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '1':
        total_time = args[3]
        arguments = list(args[0:3]) \
            + [total_time, np.floor(total_time/3600),
               (total_time % 3600)/60] \
            + [colorama.Fore.GREEN + 'Session Completed'
               + colorama.Style.RESET_ALL]
        info = tuple(arguments)
        template = '\n' + colorama.Fore.WHITE + tilde_line \
            + colorama.Style.RESET_ALL + '\n' \
            + colorama.Fore.YELLOW + 'Ending session at: ' \
            + colorama.Style.RESET_ALL + '{} ({})\n\n' \
            + colorama.Fore.YELLOW + 'Session: ' \
            + colorama.Style.RESET_ALL + '{}\n\n' \
            + colorama.Fore.YELLOW + 'Total execution time: ' \
            + colorama.Style.RESET_ALL \
            + '{:.2e}s (~{:.0f}h{:.0f}m)\n\n' \
            + '{:^{width}}' + '\n'
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '5':
        if len(args) == 2:
            n_indents = args[1]
        else:
            n_indents = 1
        arguments = [args[0], ]
        info = tuple(arguments)
        template = '\n' + n_indents*indent + '> {}'
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '6':
        label = args[0]
        max_error = args[1]
        is_consistent = args[2]
        if is_consistent:
            status = colorama.Fore.GREEN + 'consistent' \
                + colorama.Style.RESET_ALL
        else:
            status = colorama.Fore.RED + 'inconsistent' \
                + colorama.Style.RESET_ALL
        arguments = [label, max_error, status]
        info = tuple(arguments)
        template = 2*indent + '{:<50}' + ' max. abs. error = {:11.4e}' \
            + '  [{}]'
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    elif code == '7':
        mode = args[0]
        if mode == 'init':
            arguments = args[1:5]
            info = tuple(arguments)
            template = colorama.Fore.CYAN + '\n' \
                + indent + 'Deformation gradient evolution' + '\n' \
                + indent + equal_line[:-len(indent)] + '\n' \
                + indent + 'Number of steps: {:4d}' + 4*' ' \
                + 'Time increment: {:8.1e}' + 4*' ' \
                + 'Alpha: {:4.2f}' + 4*' ' + 'Mode: {:1d}' \
                + colorama.Style.RESET_ALL + '\n\n' \
                + indent + '   Step        Time          det(F)' \
                + '       max|E_ij|      max|sigma_ij|' + '\n' \
                + indent + dashed_line[:-len(indent)]
        elif mode == 'step':
            arguments = args[1:6]
            info = tuple(arguments)
            template = indent + ' {:^6d}  {:>11.4e}  {:>14.6e}  {:>14.6e}' \
                + '  {:>14.6e}'
        elif mode == 'end':
            arguments = ['', ]
            info = tuple(arguments)
            template = indent + dashed_line[:-len(indent)] + '{}'
        else:
            raise RuntimeError('Unknown deformation gradient evolution '
                               'display mode: ' + str(mode))
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    else:
        raise RuntimeError('Unknown display information code: '
                           + str(code))
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    # Display information
    ioutil.print2(template.format(*info, width=output_width))
