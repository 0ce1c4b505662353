"""Convenience exports for the thermodynamic and surface property providers."""

from .impl.loader import load_provider_from_json
from .impl.surface_sites import SiteCategory, SurfaceSiteProperties
from .impl.thermo_mixture import IdealGasMixtureThermo
from .interfaces import (
    PressureConvertingThermo,
    SurfacePropertiesProvider,
    ThermodynamicsProvider,
    build_surface_properties,
    build_thermo,
)

__all__ = [
    "IdealGasMixtureThermo",
    "PressureConvertingThermo",
    "SiteCategory",
    "SurfacePropertiesProvider",
    "SurfaceSiteProperties",
    "ThermodynamicsProvider",
    "build_surface_properties",
    "build_thermo",
    "load_provider_from_json",
]
