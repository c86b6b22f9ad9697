#!/usr/bin/env python3
"""
Field Risk Screening - Main Entry Point

Screens a field site for entry risk using current Open-Meteo weather, the
forecast precipitation/snowfall over the next hours, and the ground, terrain
and severity conditions declared by the user.
"""

import argparse
import logging
from datetime import datetime

import config
from fieldrisk.models import Coordinates, Ground, Severity, Terrain, UserInputs
from fieldrisk.report import generate_report, get_weather_summary
from fieldrisk.session import ScreeningSession


def main(argv=None):
    """Main entry point for the field risk screener."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    inputs = UserInputs(ground=args.ground, terrain=args.terrain, severity=args.severity)
    session = ScreeningSession(inputs=inputs)

    print("=" * 60)
    print("Field Safety & Weather Risk Helper")
    print(f"Analysis time: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print("=" * 60)

    if args.lat is not None and args.lon is not None:
        print(f"\n[1/2] Fetching weather for {args.lat}, {args.lon}...")
        result = session.set_location(Coordinates(args.lat, args.lon), name=args.city or "Custom location")
    else:
        city = args.city or config.DEFAULT_LOCATION["name"]
        print(f"\n[1/2] Looking up {city} and fetching weather...")
        result = session.search(city)

    if result is None:
        print(f"ERROR: {session.error}")
        return 1

    print(f"\n{get_weather_summary(session.observation, session.location_name)}")

    print("\n[2/2] Screening result")
    print(f"  Risk: {result.level.label}")
    print(f"  Score: {result.score}")
    print(f"  Summary: {result.summary}")
    if result.reasons:
        for reason in result.reasons:
            print(f"    - {reason}")
    else:
        print("    - No risk factors detected")

    if args.report:
        print("\n" + generate_report(
            session.location_name,
            session.observation,
            session.inputs,
            result,
            session.coords,
        ))

    print("\nScreening support only. Always follow local HSE procedures and supervisor approval.")
    return 0


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Screen a field site for weather and ground related entry risk"
    )
    parser.add_argument("--city", type=str, default=None, help="Place name to look up")
    parser.add_argument("--lat", type=float, default=None, help="Latitude (use with --lon)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (use with --lat)")
    parser.add_argument(
        "--ground",
        choices=[g.value for g in Ground],
        default=Ground.NORMAL.value,
        help="Expected ground condition on site",
    )
    parser.add_argument(
        "--terrain",
        choices=[t.value for t in Terrain],
        default=Terrain.FLAT.value,
        help="Terrain type",
    )
    parser.add_argument(
        "--severity",
        choices=[s.value for s in Severity],
        default=Severity.LOW.value,
        help="Severity if an incident happens",
    )
    parser.add_argument("--report", action="store_true", help="Print the field report")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be given together")
    return args


if __name__ == "__main__":
    exit(main())
