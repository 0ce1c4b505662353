"""Physical constants shared by the property providers and the wall state."""

NA = 6.02214076e23  # 1/mol
R_UNIVERSAL = 8.314462618  # J/mol/K
