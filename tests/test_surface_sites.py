import logging

import pytest

from gsi.common.exceptions import InvalidSiteModel
from gsi.properties import SiteCategory, SurfaceSiteProperties


def build_two_site_params():
    return {
        "n_total_sites": 1.0e15,
        "n_total_sites_unit": "cm^-2",
        "sites": [
            {"label": "s", "fraction": 0.6, "species": ["s", "O-s", "N-s"]},
            {"label": "p", "fraction": 0.4, "species": ["p", "O-p"]},
        ],
    }


def test_counts_and_accessors():
    surf = SurfaceSiteProperties.from_params(build_two_site_params())
    assert surf.n_site_categories() == 2
    assert surf.n_wall_species() == 5
    assert surf.n_total_sites() == pytest.approx(1.0e19)
    assert surf.frac_site(0) == 0.6
    assert surf.frac_site(1) == 0.4
    assert surf.n_species_in_site(0) == 3
    assert surf.n_species_in_site(1) == 2
    assert surf.site_label(1) == "p"


def test_wall_species_follow_category_order():
    surf = SurfaceSiteProperties.from_params(build_two_site_params())
    assert surf.wall_species_names == ["s", "O-s", "N-s", "p", "O-p"]
    assert surf.wall_species_index("O-p") == 4
    with pytest.raises(KeyError):
        surf.wall_species_index("C-s")


def test_default_unit_and_labels():
    surf = SurfaceSiteProperties.from_params({"n_total_sites": 2.0e18, "sites": [{"fraction": 1.0, "species": ["s"]}]})
    assert surf.n_total_sites() == 2.0e18
    assert surf.site_label(0) == "site_0"


def test_unknown_unit_rejected():
    params = build_two_site_params()
    params["n_total_sites_unit"] = "mm^-2"
    with pytest.raises(ValueError):
        SurfaceSiteProperties.from_params(params)


def test_nonpositive_total_sites_rejected():
    with pytest.raises(InvalidSiteModel):
        SurfaceSiteProperties(total_sites=0.0, categories=[SiteCategory("s", 1.0, ["s"])])


def test_negative_fraction_rejected():
    with pytest.raises(InvalidSiteModel):
        SurfaceSiteProperties(
            total_sites=1.0,
            categories=[SiteCategory("s", 1.2, ["s"]), SiteCategory("p", -0.2, ["p"])],
        )


def test_empty_category_with_fraction_rejected():
    with pytest.raises(InvalidSiteModel):
        SurfaceSiteProperties(total_sites=1.0, categories=[SiteCategory("s", 1.0, [])])


def test_empty_category_without_fraction_allowed():
    surf = SurfaceSiteProperties(
        total_sites=1.0,
        categories=[SiteCategory("s", 1.0, ["s"]), SiteCategory("unused", 0.0, [])],
    )
    assert surf.n_wall_species() == 1
    assert surf.n_species_in_site(1) == 0


def test_fraction_sum_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="gsi.properties.impl.surface_sites"):
        SurfaceSiteProperties(total_sites=1.0, categories=[SiteCategory("s", 0.5, ["s"])])
    assert "Site fractions sum to 0.5" in caplog.text
