"""
List all Octopus Energy products, or show one product's tariffs.
Usage:
  python products.py                 # list products
  python products.py VAR-17-01-11    # tariffs of one product
"""
import logging
import sys

from octopusenergyapi import ClientSettings, OctopusClient


def main():
    logging.basicConfig(level=logging.DEBUG if '-v' in sys.argv else logging.INFO)
    args = [a for a in sys.argv[1:] if a != '-v']
    with OctopusClient.from_settings(ClientSettings.from_env()) as client:
        if not args:
            for product in client.list_products():
                green = ' (green)' if product.is_green else ''
                print(f"{product.code}: {product.full_name}{green}")
            return
        product = client.get_product(args[0])

    print(f"{product.code}: {product.full_name}")
    print(product.description)
    for region, tariffs in sorted(product.single_register_electricity_tariffs.items()):
        for payment, tariff in sorted(tariffs.items()):
            print(
                f"  {region} {payment:<22} {tariff.code:<24} "
                f"unit {tariff.standard_unit_rate_inc_vat:7.3f}p standing {tariff.standing_charge_inc_vat:7.3f}p"
            )


if __name__ == "__main__":
    main()
