#!/usr/bin/env python
from app.config import PRODUCT_API_URL
from sdk.pyproducts import ProductClient

def main():
    c = ProductClient(base_url=PRODUCT_API_URL)

    print(c.welcome())

    # -----------------------------
    # Seed data, paginated
    # -----------------------------
    print("\nListing products (2 per page)...")
    print(c.list_products(page=1, limit=2))
    print(c.list_products(page=2, limit=2))

    print("\nKitchen products only...")
    print(c.list_products(category="kitchen"))

    # -----------------------------
    # Create / update / delete
    # -----------------------------
    print("\nCreating a product...")
    mouse = c.create_product("Mouse", "Wireless optical mouse", 25, "electronics", False)
    print(mouse)

    print("\nPutting it in stock with a new price...")
    print(c.update_product(mouse["id"], price=19.99, inStock=True))

    print("\nSearching for 'mou'...")
    print(c.search_products("mou"))

    print("\nCategory stats...")
    print(c.product_stats())

    print("\nDeleting it again...")
    print(c.delete_product(mouse["id"]))

if __name__ == "__main__":
    main()
