"""Temperature dependence laws.

This module includes the definition of the temperature dependence laws
commonly coupled with finite strain kinematics in thermo-mechanical
constitutive models, namely the Williams-Landel-Ferry time-temperature shift
factor and the quadratic thermal expansion law.

Functions
---------
get_available_temperature_laws
    Get available temperature dependence laws.
wlf_shift_factor
    Compute Williams-Landel-Ferry shift factor.
quadratic_thermal_expansion
    Compute quadratic thermal expansion strain.
"""
#
#                                                                       Modules
# =============================================================================
# Third-party
import numpy as np
# Local
import kinemapy.tensor.matrixoperations as mop
import kinemapy.ioput.ioutilities as ioutil
from kinemapy.ioput.errors import KinematicsError, ShapeError, \
    DomainError, ParameterError, chain_error
#
#                                                          Authorship & Credits
# =============================================================================
__author__ = 'KINEMA Developers'
__credits__ = ['KINEMA Developers', ]
__status__ = 'Development'
# =============================================================================
#
# =============================================================================
def get_available_temperature_laws():
    """Get available temperature dependence laws.

    Available temperature dependence laws:

    * Williams-Landel-Ferry shift factor

        .. math::

           a_{T} = 10^{- \\dfrac{C_{1} (T - T_{r})}{C_{2} + T - T_{r}}}

        where

        - :math:`T_{r}` - Reference temperature.
        - :math:`C_{1}` - Williams-Landel-Ferry first parameter.
        - :math:`C_{2}` - Williams-Landel-Ferry second parameter.

    ----

    * Quadratic thermal expansion

        .. math::

           \\varepsilon^{\\theta}_{i} = a_{i} (T - T_{0})
           + b_{i} (T^{2} - T_{0}^{2})

        where

        - :math:`T_{0}` - Reference temperature.
        - :math:`a_{i}` - Linear thermal expansion parameters.
        - :math:`b_{i}` - Quadratic thermal expansion parameters.

    ----

    Returns
    -------
    available_temperature_laws : tuple[str]
        List of available temperature dependence laws (str).
    """
    # Set available temperature dependence laws
    available_temperature_laws = ('wlf', 'quadratic_thermal_expansion')
    # Return
    return available_temperature_laws
# =============================================================================
def wlf_shift_factor(temperature, wlf_parameters, is_tangent=False,
                     tolerance=1e-9):
    """Compute Williams-Landel-Ferry shift factor.

    .. math::

       a_{T} = 10^{- \\dfrac{C_{1} (T - T_{r})}{C_{2} + T - T_{r}}}
       \\, ,

    .. math::

       \\dfrac{d a_{T}}{d T} = \\ln(10) \\, a_{T} \\left(
       - \\dfrac{C_{1}}{C_{2} + T - T_{r}}
       + \\dfrac{C_{1} (T - T_{r})}{(C_{2} + T - T_{r})^{2}}
       \\right) \\, .

    ----

    Parameters
    ----------
    temperature : float
        Temperature.
    wlf_parameters : array_like
        Williams-Landel-Ferry parameters (reference temperature, first
        parameter, second parameter).
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the shift factor with
        respect to the temperature.
    tolerance : float, default=1e-9
        Tolerance below which the denominator is considered null.

    Returns
    -------
    shift_factor : float
        Williams-Landel-Ferry shift factor.
    dshift_factor_dtemperature : float
        Derivative of Williams-Landel-Ferry shift factor with respect to the
        temperature. Only returned if `is_tangent` is `True`.
    """
    operation = 'wlf_shift_factor'
    if is_tangent:
        try:
            shift_factor = wlf_shift_factor(temperature, wlf_parameters,
                                            tolerance=tolerance)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute Williams-Landel-Ferry shift '
                              'factor.') from err
        temp_ref, c1, c2 = mop.get_flat_tensor(wlf_parameters)
        temp_diff = float(temperature) - temp_ref
        # Compute derivative
        dshift_factor_dtemperature = np.log(10.0)*shift_factor*(
            -c1/(c2 + temp_diff) + c1*temp_diff/(c2 + temp_diff)**2)
        # Return
        return shift_factor, float(dshift_factor_dtemperature)
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not ioutil.checknumber(temperature):
        raise ParameterError(operation, 'The temperature must be a number.')
    wlf_parameters = mop.get_flat_tensor(wlf_parameters)
    if len(wlf_parameters) != 3:
        raise ShapeError(operation, 'The Williams-Landel-Ferry parameters '
                         'must be three (reference temperature, C1, C2) but '
                         + str(len(wlf_parameters)) + ' were provided.')
    temp_ref, c1, c2 = wlf_parameters
    temp_diff = float(temperature) - temp_ref
    # Check denominator
    if abs(c2 + temp_diff) < tolerance:
        raise DomainError(operation, 'The Williams-Landel-Ferry denominator '
                          '(C2 + T - Tr) is null.')
    # Compute shift factor
    shift_factor = 10.0**(-c1*temp_diff/(c2 + temp_diff))
    # Return
    return float(shift_factor)
# =============================================================================
def quadratic_thermal_expansion(temperature, ref_temperature,
                                linear_parameters, quadratic_parameters,
                                is_tangent=False):
    """Compute quadratic thermal expansion strain.

    .. math::

       \\varepsilon^{\\theta}_{i} = a_{i} (T - T_{0})
       + b_{i} (T^{2} - T_{0}^{2}) \\, , \\qquad
       \\dfrac{d \\varepsilon^{\\theta}_{i}}{d T} = a_{i} + 2 b_{i} T

    ----

    Parameters
    ----------
    temperature : float
        Temperature.
    ref_temperature : float
        Reference temperature.
    linear_parameters : array_like
        Linear thermal expansion parameters.
    quadratic_parameters : array_like
        Quadratic thermal expansion parameters (same size of linear
        parameters).
    is_tangent : bool, default=False
        If `True`, then compute the derivative of the thermal expansion
        strain with respect to the temperature.

    Returns
    -------
    thermal_strain : numpy.ndarray (1d)
        Thermal expansion strain.
    dthermal_strain_dtemperature : numpy.ndarray (1d)
        Derivative of thermal expansion strain with respect to the
        temperature. Only returned if `is_tangent` is `True`.
    """
    operation = 'quadratic_thermal_expansion'
    if is_tangent:
        try:
            thermal_strain = quadratic_thermal_expansion(
                temperature, ref_temperature, linear_parameters,
                quadratic_parameters)
        except KinematicsError as err:
            raise chain_error(err, operation + ' (tangent)',
                              'Unable to compute thermal expansion strain.') \
                from err
        dthermal_strain_dtemperature = \
            mop.get_flat_tensor(linear_parameters) \
            + 2.0*mop.get_flat_tensor(quadratic_parameters)*float(temperature)
        return thermal_strain, dthermal_strain_dtemperature
    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
    if not ioutil.checknumber(temperature) \
            or not ioutil.checknumber(ref_temperature):
        raise ParameterError(operation, 'The temperature and the reference '
                             'temperature must be numbers.')
    linear_parameters = mop.get_flat_tensor(linear_parameters)
    quadratic_parameters = mop.get_flat_tensor(quadratic_parameters)
    mop.check_same_size(linear_parameters, quadratic_parameters, operation,
                        names=('linear parameters', 'quadratic parameters'))
    temperature = float(temperature)
    ref_temperature = float(ref_temperature)
    # Compute thermal expansion strain
    thermal_strain = linear_parameters*(temperature - ref_temperature) \
        + quadratic_parameters*(temperature**2 - ref_temperature**2)
    # Return
    return thermal_strain
