"""Input/output display and error reporting procedures."""
#
#                                                                       Modules
# =============================================================================
from kinemapy.ioput import ioutilities
from kinemapy.ioput import errors
from kinemapy.ioput import info
