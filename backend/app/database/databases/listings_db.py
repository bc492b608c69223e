"""
Listings collections.
Car listings scraped from YallaMotor and Syarah.

Structure:
- yallamotortest: Legacy YallaMotor listings
- YallaUsed: Used car listings from YallaMotor
- yallaMotorNewCars: New car listings from YallaMotor
- syarah: Syarah listings
"""
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

DOMAIN = "listings"


class Collections:
    """Collection names for car listings."""
    YALLA_MOTOR_LEGACY = "yallamotortest"
    YALLA_USED = "YallaUsed"
    YALLA_NEW_CARS = "yallaMotorNewCars"
    SYARAH = "syarah"

    # Index definitions, YallaMotor collections share one set
    YALLA_INDEXES = [
        {"name": "fetchedAt_desc", "keys": [("fetchedAt", -1)]},
        {"name": "scrapedAt_desc", "keys": [("scrapedAt", -1)]},
        {"name": "detailScrapedAt_desc", "keys": [("detailScrapedAt", -1)]},
        {"name": "adId_asc", "keys": [("adId", 1)]},
        {"name": "url_asc", "keys": [("url", 1)]},
        {"name": "detail_url_asc", "keys": [("detail.url", 1)]},
    ]
    SYARAH_INDEXES = [
        {"name": "fetchedAt_desc", "keys": [("fetchedAt", -1)]},
        {"name": "post_id_asc", "keys": [("post_id", 1)]},
        {"name": "id_asc", "keys": [("id", 1)]},
        {"name": "city_asc", "keys": [("city", 1)]},
        {"name": "brand_asc", "keys": [("brand", 1)]},
        {"name": "model_asc", "keys": [("model", 1)]},
        {"name": "year_desc", "keys": [("year", -1)]},
        {"name": "mileage_km_asc", "keys": [("mileage_km", 1)]},
        {"name": "price_cash_desc", "keys": [("price_cash", -1)]},
    ]


def get_yalla_motor_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[Collections.YALLA_MOTOR_LEGACY]


def get_yalla_used_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[Collections.YALLA_USED]


def get_yalla_new_cars_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[Collections.YALLA_NEW_CARS]


def get_syarah_collection(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[Collections.SYARAH]
