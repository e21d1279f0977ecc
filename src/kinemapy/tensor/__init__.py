"""Tensorial operations and tensors flat storage."""
#
#                                                                       Modules
# =============================================================================
from kinemapy.tensor import tensoroperations
from kinemapy.tensor import matrixoperations
