"""Orders API: CRUD over a single `orders` table with filtered, paginated listing."""

__version__ = "1.0.0"
