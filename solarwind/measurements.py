"""
Measurement records for NOAA solar wind products.

Both record types are frozen dataclasses built once by the row parser and
never mutated. Field names match the NOAA column names, so a record can be
constructed directly from a parsed row.

Magnetometer readings are vector components in the Geocentric Solar
Magnetospheric (GSM) coordinate system: x points from Earth toward the Sun,
z toward Earth's magnetic north pole, y completes the right-handed set.
Bz is the component that matters most for geomagnetic activity: a southward
(negative) Bz couples with Earth's field and drives reconnection.

Plasma readings describe the bulk solar wind: proton number density, bulk
speed and temperature.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from solarwind.constants import KB, MP, MU0


@dataclass(frozen=True)
class MagnetometerMeasurement:
    """A single magnetometer reading.

    Attributes:
        time_tag: UTC timestamp of the reading.
        bx_gsm: Earth-Sun component. Unit: nT.
        by_gsm: East-west component. Unit: nT.
        bz_gsm: North-south component. Unit: nT.
        lon_gsm: Longitude of the field vector in the GSM XY plane, measured
            from the x axis. Unit: degrees, 0 to 360.
        lat_gsm: Latitude of the field vector relative to the GSM XY plane.
            Unit: degrees, -90 to 90.
        bt: Total field strength, sqrt(Bx^2 + By^2 + Bz^2). Unit: nT.
    """

    time_tag: datetime
    bx_gsm: float
    by_gsm: float
    bz_gsm: float
    lon_gsm: float
    lat_gsm: float
    bt: float

    def magnetic_pressure(self) -> float:
        """Magnetic pressure P_mag = B^2 / (2 mu0), in pascals."""
        bt_tesla = self.bt * 1e-9
        return (bt_tesla * bt_tesla) / (2.0 * MU0)

    def clock_angle(self) -> float:
        """IMF clock angle atan(By / Bz) in the GSM YZ plane, in degrees [0, 360)."""
        try:
            ratio = self.by_gsm / self.bz_gsm
        except ZeroDivisionError:
            ratio = math.copysign(math.inf, self.by_gsm) if self.by_gsm else math.nan
        angle = math.degrees(math.atan(ratio))
        if angle < 0.0:
            return angle + 360.0
        return angle


@dataclass(frozen=True)
class PlasmaMeasurement:
    """A single plasma reading.

    Attributes:
        time_tag: UTC timestamp of the reading.
        density: Proton number density. Unit: protons/cm^3.
        speed: Bulk solar wind speed. Unit: km/s.
        temperature: Ion temperature. Unit: K.
    """

    time_tag: datetime
    density: float
    speed: float
    temperature: float

    def mass_density(self) -> float:
        """Mass density rho = n m_p, in kg/m^3 (solar wind is mostly protons)."""
        return (self.density * 1e6) * MP

    def dynamic_pressure(self) -> float:
        """Dynamic (ram) pressure P_dyn = rho V^2 / 2, in pascals."""
        speed_ms = self.speed * 1e3
        return 0.5 * self.mass_density() * speed_ms * speed_ms

    def thermal_pressure(self) -> float:
        """Thermal pressure of a Maxwellian plasma P_th = n k_B T, in pascals."""
        return (self.density * 1e6) * KB * self.temperature

    def sound_speed(self) -> float:
        """Sound speed C_s = sqrt(gamma k_B T / m_p) with gamma = 5/3, in m/s."""
        return math.sqrt((5 * KB * self.temperature) / (3 * MP))

    def mach_number(self) -> float:
        """Sonic Mach number V / C_s (dimensionless)."""
        return (self.speed * 1e3) / self.sound_speed()


# Maps product name -> record type built by the row parser.
RECORD_TYPES: dict[str, type] = {
    "magnetometer": MagnetometerMeasurement,
    "plasma": PlasmaMeasurement,
}
