"""Example of KINEMA session.

This module is meant to illustrate how the KINEMA kinematic operations can be
chained in a Python environment by simply executing the command:

| python3 run_kinema_benchmark.py

The deformation gradient of a material point subjected to a constant simple
shear velocity gradient is evolved in time with the generalized midpoint rule.
At each time step, the Green-Lagrange strain tensor and the Cauchy stress
tensor of a Saint Venant-Kirchhoff material are computed. The analytical
tangents of the last time step are then checked against their finite
difference approximation.

Note that this module works even if KINEMA Python package 'kinemapy' is not
installed (e.g., with pip). However, note that KINEMA third-party package
dependencies (e.g., 'numpy') must be installed and accessible to the Python
interpreter.
"""
#
#                                                                       Modules
# =============================================================================
# Standard
import sys
import time
import pathlib
# Third-party
import numpy as np
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
# Add project root directory to sys.path
root_dir = str(pathlib.Path(__file__).parents[1]) + '/src'
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
import kinemapy.ioput.info as info
from kinemapy.ioput.errors import KinematicsError, displayerror
from kinemapy.kinematics.strainmeasures import compute_green_lagrange_strain
from kinemapy.kinematics.configurationmaps import map_pk2_to_cauchy
from kinemapy.kinematics.evolution import evolve_def_gradient
from kinemapy.verification.tangentcheck import check_tangent
# =============================================================================
#
# =============================================================================
def compute_svk_pk2_stress(green_lagrange, lame_lambda=1.0, lame_mu=0.5):
    """Compute Saint Venant-Kirchhoff second Piola-Kirchhoff stress."""
    green_lagrange_mf = np.reshape(green_lagrange, (3, 3))
    pk2_stress = lame_lambda*np.trace(green_lagrange_mf)*np.eye(3) \
        + 2.0*lame_mu*green_lagrange_mf
    return pk2_stress.flatten()
# =============================================================================
# Set session name
session = 'simple_shear_benchmark'
# Get current time and date
start_date = time.strftime("%d/%b/%Y")
start_time = time.strftime("%Hh%Mm%Ss")
start_time_s = time.time()
# Display starting session header
info.displayinfo('0', session, start_time, start_date)
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Set time integration parameters
n_steps = 10
time_inc = 0.1
alpha = 0.5
mode = 1
# Set simple shear velocity gradient (constant)
shear_rate = 1.0
vel_gradient = np.zeros(9)
vel_gradient[1] = shear_rate
# Initialize deformation gradient
def_gradient = np.eye(3).flatten()
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
info.displayinfo('5', 'Evolving deformation gradient...')
info.displayinfo('7', 'init', n_steps, time_inc, alpha, mode)
# Loop over time steps
for step in range(1, n_steps + 1):
    prev_def_gradient = def_gradient
    # Evolve deformation gradient
    _, def_gradient = evolve_def_gradient(time_inc, prev_def_gradient,
                                          vel_gradient, vel_gradient,
                                          alpha=alpha, mode=mode)
    # Compute Green-Lagrange strain tensor
    green_lagrange = compute_green_lagrange_strain(def_gradient)
    # Compute Cauchy stress tensor
    cauchy_stress = map_pk2_to_cauchy(compute_svk_pk2_stress(green_lagrange),
                                      def_gradient)
    # Display time step
    info.displayinfo('7', 'step', step, step*time_inc,
                     np.linalg.det(np.reshape(def_gradient, (3, 3))),
                     np.max(np.abs(green_lagrange)),
                     np.max(np.abs(cauchy_stress)))
info.displayinfo('7', 'end')
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
info.displayinfo('5', 'Checking analytical tangents (last time step)...')
# Compute analytical tangents
_, dgreen_lagrange_dF = compute_green_lagrange_strain(def_gradient,
                                                     is_tangent=True)
_, _, ddef_gradient_dvel_gradient, _, ddef_gradient_dprev_def_gradient, _ = \
    evolve_def_gradient(time_inc, prev_def_gradient, vel_gradient,
                        vel_gradient, alpha=alpha, mode=mode,
                        is_tangent=True)
# Check analytical tangents
check_tangent(compute_green_lagrange_strain, def_gradient,
              dgreen_lagrange_dF, label='dE/dF', is_verbose=True)
check_tangent(lambda x: evolve_def_gradient(
                  time_inc, prev_def_gradient, vel_gradient, x, alpha=alpha,
                  mode=mode)[1],
              vel_gradient, ddef_gradient_dvel_gradient, label='dF/dL',
              is_verbose=True)
check_tangent(lambda x: evolve_def_gradient(
                  time_inc, x, vel_gradient, vel_gradient, alpha=alpha,
                  mode=mode)[1],
              prev_def_gradient, ddef_gradient_dprev_def_gradient,
              label='dF/dF_prev', is_verbose=True)
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
info.displayinfo('5', 'Evolving deformation gradient with singular implicit '
                 'operator...')
# Set velocity gradient leading to singular implicit operator
singular_vel_gradient = (2.0/time_inc)*np.eye(3).flatten()
try:
    evolve_def_gradient(time_inc, def_gradient, singular_vel_gradient,
                        singular_vel_gradient, alpha=alpha, mode=mode,
                        is_tangent=True)
except KinematicsError as err:
    displayerror(err)
# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
# Get current time and date
end_date = time.strftime("%d/%b/%Y")
end_time = time.strftime("%Hh%Mm%Ss")
# Display ending session message
info.displayinfo('1', end_time, end_date, session, time.time() - start_time_s)
