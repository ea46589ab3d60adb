"""
Model parameters and named presets.

ModelParameters is immutable: every CosmologyModel built from it sees the
same values for its whole lifetime.
"""

import dataclasses
from dataclasses import dataclass

import numpy as np

from omegadrift.core.constants import (
    H0_FIDUCIAL,
    OMEGA_M_FIDUCIAL,
    OMEGA_R_FIDUCIAL,
    OMEGA_LAMBDA_FIDUCIAL,
    W_FIDUCIAL,
    T_NOW,
    OMEGA_REFERENCE,
)
from omegadrift.core.errors import DomainError


@dataclass(frozen=True)
class ModelParameters:
    """Configuration of the expansion model (immutable)."""
    hubble_now: float = H0_FIDUCIAL              # H_ref (s^-1)
    omega_matter: float = OMEGA_M_FIDUCIAL
    omega_radiation: float = OMEGA_R_FIDUCIAL
    omega_lambda: float = OMEGA_LAMBDA_FIDUCIAL
    dark_energy_w: float = W_FIDUCIAL
    reference_time: float = T_NOW                # t_ref (s), where a = 1
    reference_omega: float = OMEGA_REFERENCE     # omega at t_ref

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value):
                raise DomainError(f"{f.name} must be finite, got {value!r}")

        for name in ('omega_matter', 'omega_radiation', 'omega_lambda'):
            if getattr(self, name) < 0:
                raise DomainError(f"{name} must be non-negative, got {getattr(self, name)}")

        if self.hubble_now <= 0:
            raise DomainError(f"hubble_now must be positive, got {self.hubble_now}")
        if self.reference_time <= 0:
            raise DomainError(f"reference_time must be positive, got {self.reference_time}")
        if self.reference_omega <= 0:
            raise DomainError(f"reference_omega must be positive, got {self.reference_omega}")

    @property
    def omega_total(self) -> float:
        return self.omega_matter + self.omega_radiation + self.omega_lambda

    def replace(self, **changes) -> "ModelParameters":
        """Return a copy with the given fields changed (re-validated)."""
        return dataclasses.replace(self, **changes)


# =============================================================================
# PRESETS
# =============================================================================

LAMBDA_CDM = ModelParameters()

EINSTEIN_DE_SITTER = ModelParameters(
    omega_matter=1.0,
    omega_radiation=0.0,
    omega_lambda=0.0,
)

PHANTOM_ENERGY = ModelParameters(
    omega_matter=0.3,
    omega_radiation=5e-5,
    omega_lambda=0.69995,
    dark_energy_w=-1.2,
)

PURE_VACUUM = ModelParameters(
    omega_matter=0.0,
    omega_radiation=0.0,
    omega_lambda=1.0,
    dark_energy_w=-1.0,
)

PRESETS = {
    'lambda_cdm': LAMBDA_CDM,
    'einstein_de_sitter': EINSTEIN_DE_SITTER,
    'phantom': PHANTOM_ENERGY,
    'vacuum': PURE_VACUUM,
}

__all__ = [
    'ModelParameters',
    'LAMBDA_CDM', 'EINSTEIN_DE_SITTER', 'PHANTOM_ENERGY', 'PURE_VACUUM',
    'PRESETS',
]
