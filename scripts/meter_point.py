"""
Show the grid supply point and profile class of an electricity meter point.
Usage: OCTOPUS_API_KEY=... python meter_point.py <mpan>
"""
import sys

from octopusenergyapi import ClientSettings, OctopusClient


def main():
    if len(sys.argv) != 2:
        print("Usage: python meter_point.py <mpan>")
        sys.exit(1)
    with OctopusClient.from_settings(ClientSettings.from_env()) as client:
        mp = client.get_meter_point(sys.argv[1])
    print(f"MPAN: {mp.mpan}")
    print(f"Profile class: {mp.profile_class} ({mp.profile_class_description})")
    print(f"GSP: {mp.gsp.group_id} {mp.gsp.name}, operated by {mp.gsp.operator} ({mp.gsp.phone_number})")


if __name__ == "__main__":
    main()
