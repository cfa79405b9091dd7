"""
Resolve a UK postcode to its grid supply point.
Usage: OCTOPUS_API_KEY=... python grid_supply_point.py "SW1A 1AA"
"""
import sys

from octopusenergyapi import ClientSettings, OctopusClient


def main():
    if len(sys.argv) != 2:
        print('Usage: python grid_supply_point.py "<postcode>"')
        sys.exit(1)
    with OctopusClient.from_settings(ClientSettings.from_env()) as client:
        gsp = client.get_grid_supply_point(sys.argv[1])
    print(f"{gsp.group_id} {gsp.name} (participant {gsp.participant_id})")
    print(f"Operator: {gsp.operator}, phone {gsp.phone_number}")


if __name__ == "__main__":
    main()
