"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Each route calls exactly one repository operation
    - Routes raise WebShopError subclasses; error_handlers.py renders them
"""
