#!/usr/bin/env python
from sdk.pyproducts import ProductClient


def main():
    c = ProductClient(base_url="http://127.0.0.1:3000")

    # -----------------------------
    # Create products
    # -----------------------------
    print("Creating products...")
    shirt = c.create_product("Blue Shirt", "Cotton, long sleeves", 24.99, "Clothing", True)
    mug = c.create_product("Coffee Mug", "350ml ceramic", 8.5, "Kitchen", True)
    lamp = c.create_product("Desk Lamp", "LED, dimmable", 0, "home", False)
    print(shirt)
    print(mug)
    print(lamp)

    # -----------------------------
    # List, filter, paginate
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nFiltering by category 'clothing'...")
    print(c.list_products(category="clothing"))

    print("\nSecond page, one per page...")
    print(c.list_products(page=2, limit=1))

    # -----------------------------
    # Search and stats
    # -----------------------------
    print("\nSearching for 'shirt'...")
    print(c.search_products("shirt"))

    print("\nCategory stats...")
    print(c.stats())

    # -----------------------------
    # Replace and delete
    # -----------------------------
    print("\nReplacing the mug...")
    print(c.replace_product(mug["id"], "Travel Mug", "Insulated, 450ml", 15.0, "Kitchen", True))

    print("\nDeleting the lamp...")
    c.delete_product(lamp["id"])
    print(c.list_products())


if __name__ == "__main__":
    main()
