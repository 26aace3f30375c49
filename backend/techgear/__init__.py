"""TechGear WebShop package — REST backend for products, customers, orders and reviews.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
