"""Seed the reference accommodation listings on startup."""
import json
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from househunt.models.listing import Listing

logger = logging.getLogger(__name__)

SEED_LISTINGS = [
    {
        "title": "Cozy Studio in Berlin Mitte",
        "location": "Berlin Mitte, Germany",
        "price": "850€/month",
        "deposit": "1700€",
        "description": "Beautiful studio apartment in the heart of Berlin. Fully furnished with modern amenities. "
        "Close to public transport and universities.",
        "is_scam": False,
        "red_flags": [],
        "green_flags": [
            "Reasonable deposit (2x rent)",
            "Central location",
            "Professional description",
            "Detailed information provided",
        ],
    },
    {
        "title": "AMAZING LUXURY APARTMENT SUPER CHEAP!!!",
        "location": "Munich Center",
        "price": "400€/month",
        "deposit": "200€",
        "description": "Luxury penthouse apartment for super cheap! Amazing deal! Contact me NOW before someone "
        "else takes it!! Send money transfer immediately to secure!!!",
        "is_scam": True,
        "red_flags": [
            "Price too good to be true for location",
            "Multiple exclamation marks",
            "Pressure to act immediately",
            "Requests money transfer upfront",
            "Unprofessional writing style",
        ],
        "green_flags": [],
    },
    {
        "title": "Shared Apartment Room",
        "location": "Hamburg, St. Pauli",
        "price": "600€/month",
        "deposit": "1200€",
        "description": "Nice room in shared apartment with 3 other students. Kitchen and bathroom shared. "
        "Rent includes utilities and internet. Available from next month.",
        "is_scam": False,
        "red_flags": [],
        "green_flags": [
            "Transparent about shared facilities",
            "Reasonable pricing for location",
            "Includes utilities information",
            "Clear availability date",
        ],
    },
    {
        "title": "Exclusive Villa Room",
        "location": "Frankfurt",
        "price": "300€/month",
        "deposit": "100€",
        "description": "Room in exclusive villa. Must pay first 6 months upfront. Only serious applicants. "
        "No viewing available, trust me it's amazing!",
        "is_scam": True,
        "red_flags": [
            "Extremely low price for exclusive property",
            "Demands large upfront payment",
            "No viewing allowed",
            "Vague contact information",
        ],
        "green_flags": [],
    },
    {
        "title": "Modern 1-Bedroom Apartment",
        "location": "Cologne, Innenstadt",
        "price": "950€/month",
        "deposit": "1900€",
        "description": "Modern 1-bedroom apartment near city center. Recently renovated with new kitchen and "
        "bathroom. Viewing available weekdays 2-6 PM.",
        "is_scam": False,
        "red_flags": [],
        "green_flags": [
            "Standard deposit amount",
            "Professional photos",
            "Viewing times specified",
            "Detailed property description",
        ],
    },
    {
        "title": "Student Housing URGENT",
        "location": "Bremen",
        "price": "250€/month",
        "deposit": "50€",
        "description": "URGENT! Need to rent quickly due to emergency! Beautiful student room. Send passport copy "
        "and 500€ deposit via Western Union to hold room!",
        "is_scam": True,
        "red_flags": [
            "Fake urgency",
            "Requests passport copy upfront",
            "Western Union payment method",
            "Suspicious payment amount vs. listed deposit",
        ],
        "green_flags": [],
    },
    {
        "title": "Furnished Room in WG",
        "location": "Dresden, Neustadt",
        "price": "420€/month",
        "deposit": "840€",
        "description": "Furnished room in friendly WG with 2 other students. Room has bed, desk, wardrobe. "
        "Shared kitchen and living room. Close to TU Dresden.",
        "is_scam": False,
        "red_flags": [],
        "green_flags": [
            "Appropriate price for city",
            "Clear description of furnishing",
            "Mentions specific university proximity",
            "Normal WG setup described",
        ],
    },
    {
        "title": "Luxury Penthouse - No Questions Asked",
        "location": "Düsseldorf",
        "price": "500€/month",
        "deposit": "250€",
        "description": "Luxury penthouse. No questions asked, no documents needed. Cash only. Contact my "
        "assistant John Smith for immediate move-in.",
        "is_scam": True,
        "red_flags": [
            "No documentation required",
            "Cash only payments",
            "Suspicious middleman contact",
            "Generic English name for German property",
        ],
        "green_flags": [],
    },
]


async def seed_listings(db: AsyncSession) -> int:
    """Insert the reference listings if the table is empty. Returns number inserted."""
    count = (await db.execute(select(func.count(Listing.id)))).scalar_one()
    if count:
        logger.debug("Listings already seeded (%d rows)", count)
        return 0

    for item in SEED_LISTINGS:
        db.add(
            Listing(
                title=item["title"],
                location=item["location"],
                price=item["price"],
                deposit=item["deposit"],
                description=item["description"],
                image=item.get("image"),
                is_scam=item["is_scam"],
                red_flags_json=json.dumps(item["red_flags"], ensure_ascii=False),
                green_flags_json=json.dumps(item["green_flags"], ensure_ascii=False),
            )
        )
    await db.commit()
    logger.info("Seeded %d accommodation listings", len(SEED_LISTINGS))
    return len(SEED_LISTINGS)
