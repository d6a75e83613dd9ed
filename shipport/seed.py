#!/usr/bin/env python3
"""
Seed a running Ship & Port API with a demo fleet.
Vessel names come from Faker; positions stay inside the Gulf of Kutch so
every vessel has a meaningful nearest port.
"""
import argparse
import sys
from typing import List, Optional

import httpx
from faker import Faker

from shipport.config import (
    API_BASE_URL, DEMO_LAT_MIN, DEMO_LAT_MAX, DEMO_LON_MIN, DEMO_LON_MAX,
    VESSEL_SPEED_MIN, VESSEL_SPEED_MAX
)
from shipport.models.vessel import Vessel

NAME_SUFFIXES = [
    "EXPLORER", "VOYAGER", "NAVIGATOR", "PIONEER", "GUARDIAN",
    "STAR", "SPIRIT", "TRADER", "HORIZON", "MERIDIAN"
]


def generate_demo_vessels(count: int, seed: Optional[int] = None) -> List[Vessel]:
    """
    Build ``count`` valid vessels (non-empty name, non-zero speed and position).

    Ids are left at 0; the registry assigns them on add.
    """
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    rng = fake.random

    vessels = []
    for _ in range(count):
        vessels.append(Vessel(
            name=f"{fake.last_name().upper()} {rng.choice(NAME_SUFFIXES)}",
            velocity=round(rng.uniform(VESSEL_SPEED_MIN, VESSEL_SPEED_MAX), 1),
            latitude=round(rng.uniform(DEMO_LAT_MIN, DEMO_LAT_MAX), 4),
            longitude=round(rng.uniform(DEMO_LON_MIN, DEMO_LON_MAX), 4),
        ))
    return vessels


def post_vessels(vessels: List[Vessel], api_url: str, client: Optional[httpx.Client] = None) -> int:
    """
    POST each vessel to ``{api_url}/api/ships``.

    Returns:
        Number of vessels the API accepted
    """
    owns_client = client is None
    if owns_client:
        client = httpx.Client(base_url=api_url, timeout=10.0)

    added = 0
    try:
        for vessel in vessels:
            response = client.post("/api/ships", json=vessel.to_dict())
            if response.status_code == 200:
                ship = response.json()["ship"]
                print(f"  ✓ {ship['name']} -> id {ship['id']}")
                added += 1
            else:
                try:
                    detail = response.json().get("detail", response.text)
                except ValueError:
                    # Proxies answer with HTML error pages
                    detail = response.text
                print(f"  ✗ {vessel.name}: {response.status_code} {detail}")
    finally:
        if owns_client:
            client.close()

    return added


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the Ship & Port API with demo vessels")
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of vessels to create (default: 10)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible fleets"
    )
    parser.add_argument(
        "--api-url",
        type=str,
        default=API_BASE_URL,
        help=f"Base URL of the API (default: {API_BASE_URL})"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the vessels without posting them"
    )

    args = parser.parse_args(argv)

    vessels = generate_demo_vessels(args.count, seed=args.seed)

    if args.dry_run:
        for vessel in vessels:
            print(f"  {vessel.name}: {vessel.velocity} kn at ({vessel.latitude}, {vessel.longitude})")
        print(f"\n{len(vessels)} vessels generated (dry run)")
        return 0

    print(f"Seeding {len(vessels)} vessels into {args.api_url}")
    try:
        added = post_vessels(vessels, args.api_url)
    except httpx.HTTPError as e:
        print(f"❌ Failed to reach API: {e}")
        return 1

    print(f"\n✓ Added {added}/{len(vessels)} vessels")
    return 0 if added == len(vessels) else 1


if __name__ == "__main__":
    sys.exit(main())
