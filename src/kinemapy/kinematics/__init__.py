"""Finite strain kinematics and deformation gradient evolution."""
#
#                                                                       Modules
# =============================================================================
from kinemapy.kinematics import strainmeasures
from kinemapy.kinematics import configurationmaps
from kinemapy.kinematics import straindecomposition
from kinemapy.kinematics import evolution
