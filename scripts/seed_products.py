"""Seed demo products by calling the service HTTP API.

Posts a small catalogue to ``/addProducts`` in one request, so either all of
the demo products are created or none are.

Usage:
    python scripts/seed_products.py [BASE_URL]

BASE_URL defaults to $PRODUCTS_URL or http://localhost:8080.
"""
import os
import sys
import httpx

PRODUCTS_URL = os.environ.get("PRODUCTS_URL", "http://localhost:8080")

DEMO_PRODUCTS = [
    {"name": "Pen", "description": "Blue ink pen", "price": 1.50},
    {"name": "Notebook", "description": "A5 ruled notebook, 96 pages", "price": 3.20},
    {"name": "Stapler", "description": "Desktop stapler for up to 20 sheets", "price": 7.99},
    {"name": "Eraser", "description": "Soft white eraser", "price": 0.45},
]


def seed(base_url: str) -> int:
    try:
        r = httpx.post(f"{base_url}/addProducts", json=DEMO_PRODUCTS, timeout=10.0)
    except httpx.HTTPError as e:
        print(f"Product service unavailable at {base_url}: {e}")
        return 1

    if r.status_code != 200:
        print(f"/addProducts returned {r.status_code}: {r.text}")
        return 1

    for product in r.json():
        print(f"Created product {product['id']}: {product['name']} ({product['price']})")
    return 0


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else PRODUCTS_URL
    print(f"Seeding demo products into {base_url}")
    sys.exit(seed(base_url.rstrip("/")))


if __name__ == "__main__":
    main()
