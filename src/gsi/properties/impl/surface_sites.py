"""
Surface site categories for catalysis/ablation wall models.

Each category c occupies a fraction frac_c of the total site density
n_total [m^-2] and hosts a fixed list of surface species (the empty site
included, when a model tracks it as a species).
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from gsi.common.exceptions import InvalidSiteModel

from ..utils.units import SITE_DENSITY_TO_SI, to_si
from .registry import register

logger = logging.getLogger(__name__)


@dataclass
class SiteCategory:
    label: str
    fraction: float
    species: List[str]


@dataclass
class SurfaceSiteProperties:
    total_sites: float  # m^-2
    categories: List[SiteCategory]

    def __post_init__(self):
        if self.total_sites <= 0.0:
            raise InvalidSiteModel(f"Total site density must be positive, got {self.total_sites}")
        for cat in self.categories:
            if cat.fraction < 0.0:
                raise InvalidSiteModel(f"Site category '{cat.label}' has negative fraction {cat.fraction}")
            if not cat.species and cat.fraction != 0.0:
                raise InvalidSiteModel(
                    f"Site category '{cat.label}' has fraction {cat.fraction} but hosts no species"
                )
        frac_sum = sum(cat.fraction for cat in self.categories)
        if abs(frac_sum - 1.0) > 1e-9:
            logger.warning("Site fractions sum to %g instead of 1; total occupied sites will differ", frac_sum)

    @staticmethod
    def from_params(params: Dict[str, Any]) -> "SurfaceSiteProperties":
        unit = params.get("n_total_sites_unit", "m^-2")
        total = to_si(float(params["n_total_sites"]), unit, SITE_DENSITY_TO_SI, "n_total_sites")
        categories = [
            SiteCategory(
                label=str(site.get("label", f"site_{i}")),
                fraction=float(site["fraction"]),
                species=list(site.get("species", [])),
            )
            for i, site in enumerate(params["sites"])
        ]
        return SurfaceSiteProperties(total_sites=total, categories=categories)

    def n_site_categories(self) -> int:
        return len(self.categories)

    def n_wall_species(self) -> int:
        return sum(len(cat.species) for cat in self.categories)

    def n_total_sites(self) -> float:
        return self.total_sites

    def frac_site(self, i_site: int) -> float:
        return self.categories[i_site].fraction

    def n_species_in_site(self, i_site: int) -> int:
        return len(self.categories[i_site].species)

    def site_label(self, i_site: int) -> str:
        return self.categories[i_site].label

    @property
    def wall_species_names(self) -> List[str]:
        # 按类别顺序展开，与 WallState 中的表面位密度排列一致
        return [name for cat in self.categories for name in cat.species]

    def wall_species_index(self, name: str) -> int:
        names = self.wall_species_names
        if name not in names:
            raise KeyError(f"Surface species '{name}' is not hosted by any site category")
        return names.index(name)


@register("surface_sites")
def build_surface_sites(params: Dict[str, Any]) -> SurfaceSiteProperties:
    return SurfaceSiteProperties.from_params(params)
