"""
Scrape collections.
Raw Haraj posts as collected by the scrapers.
"""
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

DOMAIN = "scrape"


class Collections:
    """Collection names for scraped Haraj posts."""
    HARAJ_SCRAPE = "harajScrape"  # All scraped posts
    CARS_HARAJ = "CarsHaraj"      # Car posts only

    # Index definitions shared by both collections
    INDEXES = [
        {"name": "postDate_desc", "keys": [("postDate", -1)]},
        {"name": "item_postDate_desc", "keys": [("item.postDate", -1)]},
        {"name": "item_tag0_postDate_desc", "keys": [("item.tags.0", 1), ("item.postDate", -1)]},
        {"name": "item_tag1_postDate_desc", "keys": [("item.tags.1", 1), ("item.postDate", -1)]},
        {"name": "item_tag2_postDate_desc", "keys": [("item.tags.2", 1), ("item.postDate", -1)]},
        {"name": "city_asc", "keys": [("city", 1)]},
        {"name": "item_city_asc", "keys": [("item.city", 1)]},
        {"name": "item_geoCity_asc", "keys": [("item.geoCity", 1)]},
        {"name": "priceNumeric_desc", "keys": [("priceNumeric", -1)]},
        {"name": "commentsCount_desc", "keys": [("commentsCount", -1)]},
        {"name": "postId_asc", "keys": [("postId", 1)]},
    ]


def get_haraj_scrape_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[Collections.HARAJ_SCRAPE]


def get_cars_haraj_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[Collections.CARS_HARAJ]
