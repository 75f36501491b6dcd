"""
Demo script: fetch NOAA real-time solar wind data via the public API.

Usage:
    python scripts/fetch_solarwind.py                        # both products, 5-minute
    python scripts/fetch_solarwind.py plasma --interval 2-hour
    python scripts/fetch_solarwind.py all --coupling          # + derived quantities
    python scripts/fetch_solarwind.py magnetometer --config client.yaml

Prints each product as a table. With --coupling, also prints the physical
quantities derived from the most recent plasma/magnetometer pair that share
a time tag.
"""

from __future__ import annotations

import argparse
import logging
import sys

import requests

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("fetch_solarwind")

PRODUCT_CHOICES = ("magnetometer", "plasma", "all")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    from solarwind.config import INTERVALS

    parser = argparse.ArgumentParser(description=__doc__.split("\n\n")[0].strip())
    parser.add_argument("product", nargs="?", default="all", choices=PRODUCT_CHOICES)
    parser.add_argument("--interval", choices=INTERVALS, default=None)
    parser.add_argument("--config", default=None, help="YAML client config")
    parser.add_argument(
        "--coupling",
        action="store_true",
        help="print derived quantities for the latest paired reading",
    )
    return parser.parse_args(argv)


def _print_coupling(plasma: list, magnetometer: list) -> None:
    """Print the derived quantities of the most recent matching pair."""
    from solarwind import coupling

    pairs = coupling.pair_by_time_tag(plasma, magnetometer)
    if not pairs:
        log.warning("No plasma and magnetometer readings share a time tag")
        return

    p, m = pairs[-1]
    rows = [
        ("time_tag", p.time_tag.isoformat()),
        ("dynamic_pressure [Pa]", p.dynamic_pressure()),
        ("thermal_pressure [Pa]", p.thermal_pressure()),
        ("magnetic_pressure [Pa]", m.magnetic_pressure()),
        ("mach_number", p.mach_number()),
        ("clock_angle [deg]", m.clock_angle()),
        ("plasma_beta", coupling.plasma_beta(p, m)),
        ("alfven_speed [m/s]", coupling.alfven_speed(p, m)),
        ("bohm_diffusion [m^2/s]", coupling.bohm_diffusion(p, m)),
        ("reconnection_field [km/s nT]", coupling.magnetic_reconnection_field(p, m)),
        ("newell_coupling", coupling.newell_coupling(p, m)),
    ]
    width = max(len(name) for name, _ in rows)
    for name, value in rows:
        print(f"{name:<{width}}  {value}")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import solarwind
    from solarwind.frames import to_frame
    from solarwind.measurements import RECORD_TYPES

    args = _parse_args(argv)

    try:
        if args.product == "all" or args.coupling:
            results = solarwind.fetch_all(args.interval, config_path=args.config)
        else:
            results = {
                args.product: solarwind.fetch_measurements(
                    args.product, args.interval, config_path=args.config
                )
            }
    except (solarwind.SolarWindError, requests.RequestException) as e:
        log.error("Failed to fetch solar wind data: %s", e)
        return 1

    for name, measurements in results.items():
        if args.product not in ("all", name):
            continue
        log.info("=" * 70)
        log.info("%s: %d measurements", name, len(measurements))
        log.info("=" * 70)
        print(to_frame(measurements, RECORD_TYPES[name]).to_string(index=False))

    if args.coupling:
        _print_coupling(results["plasma"], results["magnetometer"])

    return 0


if __name__ == "__main__":
    sys.exit(main())
