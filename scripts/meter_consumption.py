"""
Print the last week of half-hourly consumption for one electricity meter.
Usage: OCTOPUS_API_KEY=... python meter_consumption.py <mpan> <serial> [--gas]
"""
import datetime as dt
import logging
import sys

from octopusenergyapi import ClientSettings, ConsumptionQuery, OctopusClient
from octopusenergyapi.enrich import detect_missing_intervals, total_consumption


def main():
    args = [a for a in sys.argv[1:] if a != '--gas']
    if len(args) != 2:
        print("Usage: python meter_consumption.py <mpan> <serial> [--gas]")
        sys.exit(1)
    mpan, serial = args
    fuel = 'gas' if '--gas' in sys.argv else 'electricity'
    logging.basicConfig(level=logging.INFO)

    period_to = dt.datetime.now(dt.timezone.utc)
    query = ConsumptionQuery(
        period_from=period_to - dt.timedelta(days=7),
        period_to=period_to,
        order_by='period',
        page_size=25000,  # one page covers the whole week
    )
    with OctopusClient.from_settings(ClientSettings.from_env()) as client:
        readings = client.get_meter_consumption(mpan, serial, query, fuel=fuel)

    for i, r in enumerate(readings):
        print(f"[{i}] From: {r.interval_start} To: {r.interval_end} Value: {r.value:1.3f}")
    expected, actual, missing = detect_missing_intervals(readings)
    print(f"Total consumption: {total_consumption(readings):1.3f}")
    print(f"Intervals: {actual} of {expected} ({missing} missing)")


if __name__ == "__main__":
    main()
