"""Provider interfaces consumed by the wall state, plus JSON builders for the shipped providers."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol, Sequence, Union, runtime_checkable

import numpy as np

from .impl.loader import load_provider_from_json
from .impl.surface_sites import SurfaceSiteProperties
from .impl.thermo_mixture import IdealGasMixtureThermo


class ThermodynamicsProvider(Protocol):
    """Gas-phase data the wall state needs: sizes and rho -> concentration."""

    def n_species(self) -> int: ...

    def n_energy_eqns(self) -> int: ...

    def convert_rho_to_conc(self, rhoi: Sequence[float]) -> np.ndarray:
        """Return molar concentrations [mol/m^3] from partial densities [kg/m^3]."""


@runtime_checkable
class PressureConvertingThermo(ThermodynamicsProvider, Protocol):
    """Thermodynamics that can also turn (p, T, X) into partial densities."""

    def densities_from_pressure(self, p: float, T: Sequence[float], X: Mapping[str, float]) -> np.ndarray: ...


class SurfacePropertiesProvider(Protocol):
    """Site model: categories, fractions and species hosted by each category."""

    def n_wall_species(self) -> int: ...

    def n_site_categories(self) -> int: ...

    def n_total_sites(self) -> float: ...

    def frac_site(self, i_site: int) -> float: ...

    def n_species_in_site(self, i_site: int) -> int: ...


def _coerce_path(path: Union[str, Path]) -> Path:
    return path if isinstance(path, Path) else Path(path)


def build_thermo(thermo_json: Union[str, Path]) -> IdealGasMixtureThermo:
    thermo = load_provider_from_json(_coerce_path(thermo_json))
    if not isinstance(thermo, IdealGasMixtureThermo):
        raise TypeError("Thermo JSON did not yield an IdealGasMixtureThermo instance")
    return thermo


def build_surface_properties(surface_json: Union[str, Path]) -> SurfaceSiteProperties:
    surf = load_provider_from_json(_coerce_path(surface_json))
    if not isinstance(surf, SurfaceSiteProperties):
        raise TypeError("Surface JSON did not yield a SurfaceSiteProperties instance")
    return surf
