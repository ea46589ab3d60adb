"""
Physical constants and fiducial parameters for the omega-drift engine.

All times are in seconds and all rates in s^-1 unless noted otherwise.

Import via:
    from omegadrift.core.constants import *                       # All constants
    from omegadrift.core.constants import SECONDS_PER_YEAR, H0_FIDUCIAL
"""

# =============================================================================
# UNITS
# =============================================================================
SECONDS_PER_DAY = 24.0 * 3600.0
SECONDS_PER_YEAR = 365.25 * SECONDS_PER_DAY   # Julian year
MPC_TO_KM = 3.0856775814913673e19

# =============================================================================
# FIDUCIAL COSMOLOGY
# =============================================================================
H0_KMS_MPC = 70.0                              # km/s/Mpc
H0_FIDUCIAL = H0_KMS_MPC / MPC_TO_KM              # s^-1 (~2.27e-18)
OMEGA_M_FIDUCIAL = 0.3
OMEGA_R_FIDUCIAL = 5e-5
OMEGA_LAMBDA_FIDUCIAL = 0.69995                # Omega_m + Omega_r + Omega_L = 1
W_FIDUCIAL = -1.0                              # Cosmological constant
T_NOW = 4.35e17                                # s (~13.8 Gyr)
OMEGA_REFERENCE = 1.0                          # omega normalised at T_NOW

# =============================================================================
# ENGINE POLICY
# =============================================================================
FD_STEP_FRACTION = 0.01          # Finite-difference step dt = 0.01 * t
STEADY_STATE_DRIFT = 1e-20       # |d omega/dt| below this counts as steady
RESONANCE_FRACTION = 0.01        # gamma_critical = 0.01 * omega(t0)
NEGLIGIBLE_DRIFT = 1e-30         # drift treated as zero by projections
CLOCK_PRECISION = 1e-18          # Optical-clock fractional precision

# Full analysis sampling window, relative to t0
ANALYSIS_START_FACTOR = 1e-32
ANALYSIS_END_FACTOR = 1e3
ANALYSIS_STEPS = 1000
PERCEPTION_YEARS = 1e9
CLOCK_YEARS = 1.0

__all__ = [
    # Units
    'SECONDS_PER_DAY', 'SECONDS_PER_YEAR', 'MPC_TO_KM',
    # Fiducial cosmology
    'H0_KMS_MPC', 'H0_FIDUCIAL', 'OMEGA_M_FIDUCIAL', 'OMEGA_R_FIDUCIAL',
    'OMEGA_LAMBDA_FIDUCIAL', 'W_FIDUCIAL', 'T_NOW', 'OMEGA_REFERENCE',
    # Engine policy
    'FD_STEP_FRACTION', 'STEADY_STATE_DRIFT', 'RESONANCE_FRACTION',
    'NEGLIGIBLE_DRIFT', 'CLOCK_PRECISION',
    'ANALYSIS_START_FACTOR', 'ANALYSIS_END_FACTOR', 'ANALYSIS_STEPS',
    'PERCEPTION_YEARS', 'CLOCK_YEARS',
]
