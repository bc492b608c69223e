"""
Collection name constants and accessors.
"""
from app.database.databases import listings_db, scrape_db

__all__ = ["listings_db", "scrape_db"]
