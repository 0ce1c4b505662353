"""
Ideal-gas mixture bookkeeping used at the wall.
Input:
  - species names and molar masses M_i [kg/mol]
  - number of energy equations (1: thermal equilibrium, 2+: multi-temperature)
Output:
  - c_i = rho_i / M_i            [mol/m^3]
  - rho_i = X_i M_i p / (R T_0)  [kg/m^3], T_0 heavy-particle temperature
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence

import numpy as np

from gsi.common.constants import R_UNIVERSAL
from gsi.common.exceptions import MissingPropertyData, StateSizeMismatch

from ..utils.units import MOLAR_MASS_TO_SI, to_si
from .registry import register

# kg/mol，JSON 未给出 M 时的缺省值
_MOLAR_MASS = {
    "N2": 28.0134e-3,
    "O2": 31.998e-3,
    "NO": 30.0061e-3,
    "N": 14.0067e-3,
    "O": 15.999e-3,
    "Ar": 39.948e-3,
    "CO": 28.0101e-3,
    "CO2": 44.0095e-3,
    "C": 12.011e-3,
    "C2": 24.022e-3,
    "C3": 36.033e-3,
    "CN": 26.0174e-3,
    "H2": 2.01588e-3,
    "H": 1.00794e-3,
    "H2O": 18.01528e-3,
    "e-": 5.48579909e-7,
}


@dataclass
class IdealGasMixtureThermo:
    names: List[str]
    molar_masses: np.ndarray  # kg/mol
    energy_eqns: int = 1

    @staticmethod
    def from_params(params: Dict[str, Any]) -> "IdealGasMixtureThermo":
        unit = params.get("M_unit", "kg/mol")
        names: List[str] = []
        masses: List[float] = []
        for sp in params["species"]:
            name = sp["name"]
            M = sp.get("M")
            if M is None:
                if name not in _MOLAR_MASS:
                    raise MissingPropertyData(f"No molar mass given or tabulated for species '{name}'")
                M_si = _MOLAR_MASS[name]
            else:
                M_si = to_si(float(M), unit, MOLAR_MASS_TO_SI, f"molar mass of {name}")
            if M_si <= 0.0:
                raise ValueError(f"Molar mass of '{name}' must be positive")
            names.append(name)
            masses.append(M_si)
        energy_eqns = int(params.get("n_energy_eqns", 1))
        if energy_eqns < 1:
            raise ValueError("n_energy_eqns must be >= 1")
        return IdealGasMixtureThermo(names, np.array(masses, dtype=float), energy_eqns)

    @property
    def species_names(self) -> List[str]:
        return list(self.names)

    def n_species(self) -> int:
        return len(self.names)

    def n_energy_eqns(self) -> int:
        return self.energy_eqns

    def species_index(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(f"Species '{name}' is not part of the mixture") from None

    def _check_length(self, values: Sequence[float], what: str) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if arr.shape != (self.n_species(),):
            raise StateSizeMismatch(f"{what} must have {self.n_species()} entries, got shape {arr.shape}")
        return arr

    def convert_rho_to_conc(self, rhoi: Sequence[float]) -> np.ndarray:
        return self._check_length(rhoi, "rhoi") / self.molar_masses

    def convert_conc_to_rho(self, conc: Sequence[float]) -> np.ndarray:
        return self._check_length(conc, "conc") * self.molar_masses

    def _normalize_X(self, X: Mapping[str, float]) -> np.ndarray:
        unknown = set(X) - set(self.names)
        if unknown:
            raise KeyError(f"Species {sorted(unknown)} are not part of the mixture")
        Xi = np.array([float(X.get(name, 0.0)) for name in self.names])
        total = Xi.sum()
        if total <= 0.0:
            raise ValueError("Mixture mole fractions all zero; provide nonzero X.")
        return Xi / total

    def densities_from_pressure(self, p: float, T: Sequence[float], X: Mapping[str, float]) -> np.ndarray:
        """Partial densities of an ideal-gas mixture at pressure ``p`` and composition ``X``."""
        T_arr = np.atleast_1d(np.asarray(T, dtype=float))
        if T_arr.shape != (self.energy_eqns,):
            raise StateSizeMismatch(f"T must have {self.energy_eqns} entries, got shape {T_arr.shape}")
        T_heavy = T_arr[0]
        if T_heavy <= 0.0:
            raise ValueError("Heavy-particle temperature must be positive to compute densities")
        Xi = self._normalize_X(X)
        conc_total = p / (R_UNIVERSAL * T_heavy)
        return Xi * conc_total * self.molar_masses


@register("ideal_gas_mixture")
def build_ideal_gas_mixture(params: Dict[str, Any]) -> IdealGasMixtureThermo:
    return IdealGasMixtureThermo.from_params(params)
