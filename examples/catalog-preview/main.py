#!/usr/bin/env python3
"""Example: preview the catalog from either content format.

Loads the bundled sample content twice, once from JSON and once from the
pseudo-frontmatter text format, and prints what the site would render.

Usage:
    # From the repository root
    pip install -e .
    python examples/catalog-preview/main.py

    # Serve the same content over HTTP
    CATALOG_CONTENT_ROOT=examples/catalog-preview/content/json uvicorn api.main:app
"""

import sys
from pathlib import Path

from content import ContentRepository, load_config

CONTENT_DIR = Path(__file__).parent / "content"


def preview(label: str, repository: ContentRepository) -> None:
    print("=" * 80)
    print(f"{label}  ({repository.config.content_root})")
    print("-" * 80)

    products = repository.load_products()
    print(f"Products ({len(products)}):")
    for product in products:
        print(f"  • {product.name.en} / {product.name.ar}")
        print(f"    {product.price}  rating={product.rating}  reviews={product.reviews}")
        print(f"    primary image: {product.primary_image}")

    categories = repository.load_categories()
    if categories:
        print(f"\nCategories ({len(categories)}):")
        for category in categories:
            matches = repository.find_products_by_category(category.id)
            print(f"  • {category.name_en} ({category.id}): {len(matches)} product(s)")

    print("\nBusiness hours:")
    for hour in repository.load_business_hours():
        marker = "open" if hour.is_open else "closed"
        print(f"  {hour.day:<10} {hour.hours:<16} {marker}")

    contact = repository.load_business_contact()
    if contact is not None:
        print(f"\nContact: {contact.contact.phone}  {contact.contact.email}")
        print(f"Location: {contact.location.street}, {contact.location.district}")
        print(f"Note: {contact.holiday_hours.note}")


def main() -> None:
    preview("JSON content", ContentRepository(load_config(content_root=CONTENT_DIR / "json")))
    preview("Text content", ContentRepository(load_config(content_root=CONTENT_DIR / "mdx")))

    missing = ContentRepository(load_config(content_root=CONTENT_DIR / "missing"))
    result = missing.load_products_result()
    print("=" * 80)
    print(f"Missing content root -> status={result.status.value} error={result.error}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nInterrupted")
        sys.exit(1)
