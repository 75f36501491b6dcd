"""Physical constants (SI, CODATA 2018) used by the derived-quantity formulas."""

# Proton mass. Unit: kg.
MP = 1.672_621_911e-27

# Permeability of free space. Unit: N/A^2.
MU0 = 1.256_637_061_27e-6

# Boltzmann constant. Unit: J/K.
KB = 1.380_649e-23

# Elementary charge. Unit: C.
E = 1.602_176_634e-19
