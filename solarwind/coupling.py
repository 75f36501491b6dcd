"""
Solar wind / magnetosphere coupling quantities.

Each function combines one plasma and one magnetometer reading, normally
taken at the same time tag (see ``pair_by_time_tag``).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from solarwind.constants import E, KB, MU0
from solarwind.measurements import MagnetometerMeasurement, PlasmaMeasurement


def magnetic_reconnection_field(
    plasma: PlasmaMeasurement, magnetometer: MagnetometerMeasurement
) -> float:
    """Motional electric field V * Bz. Unit: km/s * nT (equivalently uV/m)."""
    return plasma.speed * magnetometer.bz_gsm


def plasma_beta(plasma: PlasmaMeasurement, magnetometer: MagnetometerMeasurement) -> float:
    """Ratio of thermal to magnetic pressure (dimensionless).

    beta > 1 means the plasma pressure dominates and the field is carried
    along with the flow; beta < 1 means the field dominates.
    """
    return plasma.thermal_pressure() / magnetometer.magnetic_pressure()


def bohm_diffusion(plasma: PlasmaMeasurement, magnetometer: MagnetometerMeasurement) -> float:
    """Bohm diffusion coefficient D_B = k_B T / (16 e B). Unit: m^2/s."""
    b_tesla = magnetometer.bt * 1e-9
    return (KB * plasma.temperature) / (16 * E * b_tesla)


def alfven_speed(plasma: PlasmaMeasurement, magnetometer: MagnetometerMeasurement) -> float:
    """Alfven speed V_A = B / sqrt(mu0 rho). Unit: m/s."""
    b_tesla = magnetometer.bt * 1e-9
    return b_tesla / math.sqrt(MU0 * plasma.mass_density())


def newell_coupling(
    plasma: PlasmaMeasurement, magnetometer: MagnetometerMeasurement
) -> float:
    """Newell et al. (2007) coupling function dPhi/dt.

        dPhi/dt = V^(4/3) * B_T^(2/3) * sin^(8/3)(theta / 2)

    with V in km/s, B_T = sqrt(By^2 + Bz^2) in nT and theta the IMF clock
    angle atan2(By, Bz). A negative speed is clipped to zero.
    """
    b_transverse = math.hypot(magnetometer.by_gsm, magnetometer.bz_gsm)
    theta = math.atan2(magnetometer.by_gsm, magnetometer.bz_gsm)
    return (
        max(plasma.speed, 0.0) ** (4 / 3)
        * b_transverse ** (2 / 3)
        * abs(math.sin(theta / 2)) ** (8 / 3)
    )


def pair_by_time_tag(
    plasma: Sequence[PlasmaMeasurement],
    magnetometer: Sequence[MagnetometerMeasurement],
) -> list[tuple[PlasmaMeasurement, MagnetometerMeasurement]]:
    """Match plasma and magnetometer readings that share a time tag.

    Returns:
        ``(plasma, magnetometer)`` pairs in plasma order. Readings without
        a counterpart are left out.
    """
    by_time = {m.time_tag: m for m in magnetometer}
    return [(p, by_time[p.time_tag]) for p in plasma if p.time_tag in by_time]
