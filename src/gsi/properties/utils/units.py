# 面密度单位换算到 SI（m^-2）
SITE_DENSITY_TO_SI = {"m^-2": 1.0, "cm^-2": 1.0e4}
# 摩尔质量单位换算到 SI（kg/mol）
MOLAR_MASS_TO_SI = {"kg/mol": 1.0, "g/mol": 1.0e-3}


def to_si(value: float, unit: str, table: dict, what: str) -> float:
    try:
        factor = table[unit]
    except KeyError:
        raise ValueError(f"Unsupported unit '{unit}' for {what}; expected one of {sorted(table)}") from None
    return value * factor
