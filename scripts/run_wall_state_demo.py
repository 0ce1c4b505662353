import logging

from gsi.properties import build_surface_properties, build_thermo
from gsi.wall import VariableSet, WallState


def main():
    logging.basicConfig(level=logging.DEBUG)
    thermo = build_thermo("data/gsi/thermo_air5.json")
    surf = build_surface_properties("data/gsi/surface_sites_catalytic.json")
    wall = WallState(thermo, surf)

    # 壁面：1500 K，先按压力给定，再由组成换算分密度
    wall.set_wall_state(1.0e4, [1500.0], VariableSet.P_T)
    wall.convert_pressure_to_densities({"N": 0.05, "O": 0.10, "NO": 0.05, "N2": 0.70, "O2": 0.10})

    rhoi, T = wall.get_wall_state(state_var=VariableSet.RHOI_T)
    nd = wall.get_nd_state_gas_surf()
    names = thermo.species_names + surf.wall_species_names
    print({"rhoi_kg_m3": dict(zip(thermo.species_names, rhoi)), "T_K": list(T)})
    print({name: value for name, value in zip(names, nd)})


if __name__ == "__main__":
    main()
