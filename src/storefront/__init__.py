"""Storefront admin backend.

Products with image galleries, storefront settings, banners and the single
admin account behind a FastAPI HTTP surface.
"""

__version__ = "0.1.0"
