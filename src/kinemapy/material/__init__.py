"""Material temperature dependence laws."""
#
#                                                                       Modules
# =============================================================================
from kinemapy.material import temperaturelaws
