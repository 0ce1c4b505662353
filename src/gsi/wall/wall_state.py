"""State of the gas and surface species at a gas-surface interface node.

The wall state keeps the primitive variables handed over by the flow solver
(partial densities or pressure, plus one temperature per energy equation) and
the site occupation densities of the surface species, which are fixed by the
site model when the wall state is created. Surface chemistry and energy
balance models read from it; nothing here solves any equation.

Either the partial densities or the pressure define the gas mass state, never
both at once. :attr:`WallState.mass_state_var` records which one was set
last; reading densities while the pressure is authoritative raises
:class:`~gsi.common.exceptions.StaleWallState` until
:meth:`WallState.convert_pressure_to_densities` is called.
"""

from __future__ import annotations

import logging
from typing import Mapping, MutableSequence, Optional, Sequence, Tuple, Union

import numpy as np

from gsi.common.constants import NA
from gsi.common.exceptions import (
    InvalidSiteModel,
    MissingPropertyData,
    StaleWallState,
    StateSizeMismatch,
    UnsupportedVariableGet,
    UnsupportedVariableSet,
)
from gsi.properties.interfaces import (
    PressureConvertingThermo,
    SurfacePropertiesProvider,
    ThermodynamicsProvider,
)

from .variable_sets import VariableSet, describe_choices

logger = logging.getLogger(__name__)

_SETTABLE = (VariableSet.P_T, VariableSet.RHOI_T)
_GETTABLE = (VariableSet.RHOI_T,)

Buffer = MutableSequence[float]


def _read_only(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.setflags(write=False)
    return view


def _checked(values: Union[float, Sequence[float]], size: int, what: str) -> np.ndarray:
    arr = np.atleast_1d(np.asarray(values, dtype=float))
    if arr.shape != (size,):
        raise StateSizeMismatch(f"{what} must have {size} entries, got shape {arr.shape}")
    return arr


def _check_buffer(buf: Buffer, size: int, what: str):
    if len(buf) != size:
        raise StateSizeMismatch(f"{what} must have length {size}, got {len(buf)}")


class WallState:
    """Primitive and surface-site state of one wall boundary element.

    Parameters
    ----------
    thermo : ThermodynamicsProvider
        Gas-phase property provider. Shared, never modified here.
    surf_props : SurfacePropertiesProvider
        Site model. Shared, never modified here.
    """

    def __init__(self, thermo: ThermodynamicsProvider, surf_props: SurfacePropertiesProvider):
        self._thermo = thermo
        self._surf_props = surf_props

        self.n_species = int(thermo.n_species())
        self.n_energy_eqns = int(thermo.n_energy_eqns())
        self.n_wall_species = int(surf_props.n_wall_species())

        self._rhoi = np.zeros(self.n_species)
        self._T = np.zeros(self.n_energy_eqns)
        self._p: Optional[float] = None
        self._mass_state_var = VariableSet.RHOI_T
        self._is_wall_state_set = False

        self._surf_state = self._initialize_surf_state()
        self._surf_state.setflags(write=False)
        logger.debug(
            "WallState created: ns=%d, nT=%d, ns_surf=%d",
            self.n_species,
            self.n_energy_eqns,
            self.n_wall_species,
        )

    @property
    def thermo(self) -> ThermodynamicsProvider:
        return self._thermo

    @property
    def surf_props(self) -> SurfacePropertiesProvider:
        return self._surf_props

    @property
    def is_wall_state_set(self) -> bool:
        return self._is_wall_state_set

    @property
    def mass_state_var(self) -> VariableSet:
        """Variable-set whose mass quantity (pressure or densities) is authoritative."""
        return self._mass_state_var

    @property
    def surf_state(self) -> np.ndarray:
        return self._surf_state

    # ------------------------------------------------------------------
    # variable-set protocol

    def set_wall_state(
        self,
        p_mass: Union[float, Sequence[float]],
        p_energy: Sequence[float],
        state_var: int,
    ) -> None:
        """Set the wall state from one of the supported variable-sets.

        ``state_var`` 0 takes a single pressure [Pa] in ``p_mass``; 1 takes the
        ``n_species`` partial densities [kg/m^3]. ``p_energy`` always holds the
        ``n_energy_eqns`` temperatures [K]. Nothing is modified if the id or any
        length is wrong.
        """
        var = self._lookup(state_var, _SETTABLE, UnsupportedVariableSet, "variable set", "set_wall_state")
        T = _checked(p_energy, self.n_energy_eqns, "p_energy")
        if var is VariableSet.P_T:
            p = _checked(p_mass, 1, "p_mass")
            self.set_wall_p(p[0])
        else:
            rhoi = _checked(p_mass, self.n_species, "p_mass")
            self.set_wall_rhoi(rhoi)
        self.set_wall_t(T)
        self._is_wall_state_set = True

    def get_wall_state(
        self,
        rhoi_out: Optional[Buffer] = None,
        T_out: Optional[Buffer] = None,
        state_var: int = VariableSet.RHOI_T,
    ) -> Tuple[Buffer, Buffer]:
        """Return ``(rhoi, T)``, filling the caller buffers when they are given."""
        self._lookup(state_var, _GETTABLE, UnsupportedVariableGet, "variable get", "get_wall_state")
        self._require_densities()
        if rhoi_out is not None:
            _check_buffer(rhoi_out, self.n_species, "rhoi_out")
        if T_out is not None:
            _check_buffer(T_out, self.n_energy_eqns, "T_out")

        if rhoi_out is None:
            rhoi_out = self._rhoi.copy()
        else:
            rhoi_out[:] = self._rhoi
        if T_out is None:
            T_out = self._T.copy()
        else:
            T_out[:] = self._T
        return rhoi_out, T_out

    @staticmethod
    def _lookup(state_var, allowed, error_cls, what: str, where: str) -> VariableSet:
        # bool is an int subclass; ids must be plain integers
        is_int = isinstance(state_var, (int, np.integer)) and not isinstance(state_var, (bool, np.bool_))
        if not is_int or int(state_var) not in {int(v) for v in allowed}:
            raise error_cls(
                what,
                state_var,
                f"This {what} is not implemented in {where}. Possible variable-sets are:\n"
                + describe_choices(allowed),
            )
        return VariableSet(int(state_var))

    # ------------------------------------------------------------------
    # single-field setters and getters

    def set_wall_rhoi(self, rhoi: Sequence[float]) -> None:
        self._rhoi[:] = _checked(rhoi, self.n_species, "rhoi")
        self._mass_state_var = VariableSet.RHOI_T

    def set_wall_t(self, T: Sequence[float]) -> None:
        self._T[:] = _checked(T, self.n_energy_eqns, "T")

    def set_wall_p(self, p: Union[float, Sequence[float]]) -> None:
        self._p = float(_checked(p, 1, "p")[0])
        self._mass_state_var = VariableSet.P_T

    def get_wall_rhoi(self) -> np.ndarray:
        return _read_only(self._rhoi)

    def get_wall_t(self) -> np.ndarray:
        return _read_only(self._T)

    def get_wall_p(self) -> float:
        if self._p is None:
            raise StaleWallState("Wall pressure has not been set; use variable-set 0 to provide it")
        return self._p

    def _require_densities(self):
        if self._mass_state_var is VariableSet.P_T:
            raise StaleWallState(
                "Wall state was last set from (pressure, temperature); species densities are not "
                "up to date. Call convert_pressure_to_densities() with the wall composition first."
            )

    def convert_pressure_to_densities(self, mole_fractions: Mapping[str, float]) -> np.ndarray:
        """Derive partial densities from the stored pressure and temperatures.

        The thermodynamics provider must implement ``densities_from_pressure``.
        Afterwards the densities are authoritative again.
        """
        p = self.get_wall_p()
        if not isinstance(self._thermo, PressureConvertingThermo):
            raise MissingPropertyData(
                f"{type(self._thermo).__name__} cannot convert pressure to species densities"
            )
        self.set_wall_rhoi(self._thermo.densities_from_pressure(p, self._T.copy(), mole_fractions))
        return self.get_wall_rhoi()

    # ------------------------------------------------------------------
    # derived quantities

    def get_nd_state_gas_surf(self, out: Optional[Buffer] = None) -> Buffer:
        """Number densities of gas species [m^-3] followed by surface site densities [m^-2]."""
        self._require_densities()
        ns = self.n_species
        size = ns + self.n_wall_species
        if out is None:
            out = np.empty(size)
        else:
            _check_buffer(out, size, "out")

        conc = np.asarray(self._thermo.convert_rho_to_conc(self.get_wall_rhoi()), dtype=float)
        if conc.shape != (ns,):
            raise StateSizeMismatch(f"convert_rho_to_conc returned shape {conc.shape}, expected ({ns},)")
        out[:ns] = conc * NA
        out[ns:] = self._surf_state
        return out

    def _initialize_surf_state(self) -> np.ndarray:
        surf = self._surf_props
        n_sites = surf.n_site_categories()
        n_total_sites = surf.n_total_sites()

        surf_state = np.zeros(self.n_wall_species)
        pos = 0
        for i_site in range(n_sites):
            frac = surf.frac_site(i_site)
            n_sp = surf.n_species_in_site(i_site)
            if n_sp <= 0:
                if frac != 0.0:
                    raise InvalidSiteModel(
                        f"Site category {i_site} has fraction {frac} but no species to hold it"
                    )
                continue
            if pos + n_sp > self.n_wall_species:
                raise InvalidSiteModel(
                    f"Site categories host more species than the {self.n_wall_species} wall species declared"
                )
            surf_state[pos:pos + n_sp] = n_total_sites * frac / n_sp
            pos += n_sp
        if pos != self.n_wall_species:
            raise InvalidSiteModel(
                f"Site categories host {pos} species but {self.n_wall_species} wall species are declared"
            )
        logger.debug("Surface site densities initialised over %d categories: %s", n_sites, surf_state)
        return surf_state
