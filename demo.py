#!/usr/bin/env python
from rich import print

from app.settings import CATALOG_BASE_URL
from sdk.pystore import CatalogClient, error_message
import requests


def main():
    c = CatalogClient(base_url=CATALOG_BASE_URL)

    # -----------------------------
    # Health
    # -----------------------------
    print("Checking server health...")
    print(c.health())

    # -----------------------------
    # Seeded products
    # -----------------------------
    print("\nFetching seeded products...")
    for pid in (1, 2, 3):
        print(c.get_product(pid))

    # -----------------------------
    # Replace details
    # -----------------------------
    print("\nReplacing product 1...")
    c.update_product_details(1, "Pad", 5, 2, description="d")
    print(c.get_product(1))

    # -----------------------------
    # Failures
    # -----------------------------
    print("\nRequesting a product that does not exist...")
    try:
        c.get_product(9999)
    except requests.exceptions.HTTPError as e:
        print(error_message(e))

    print("\nSending invalid product data...")
    try:
        c.update_product_details(2, "", -1, 1)
    except requests.exceptions.HTTPError as e:
        print(error_message(e))


if __name__ == "__main__":
    main()
