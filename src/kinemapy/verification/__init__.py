"""Verification of analytical tangents."""
#
#                                                                       Modules
# =============================================================================
from kinemapy.verification import tangentcheck
