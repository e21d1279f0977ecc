"""KINEMA (Finite Strain Kinematics Toolkit).

KINEMA provides the closed-form kinematic building blocks of finite strain
constitutive models, each together with its exact (consistent) derivatives:
strain and deformation measures, push-forward and pull-back operations
between the reference and current configurations, the volumetric/isochoric
decomposition of the Green-Lagrange strain tensor, and the generalized
midpoint evolution of the deformation gradient. It is devised to be called
once per material point and time step by a host finite element or material
point solver.

Every tensor is stored as a flat (row-major) numpy.ndarray, both at the input
and at the output of every operation (see
:py:mod:`kinemapy.tensor.matrixoperations`).
"""
#
#                                                                       Modules
# =============================================================================
from kinemapy import ioput
from kinemapy import tensor
from kinemapy import kinematics
from kinemapy import material
from kinemapy import verification
