from househunt.services.accommodation_game import AccommodationGame, SessionCompleteError
from househunt.services.scoring import compute_rating, get_legit_tips, get_scam_tips
from househunt.services.seeding import seed_listings

__all__ = [
    "AccommodationGame",
    "SessionCompleteError",
    "compute_rating",
    "get_legit_tips",
    "get_scam_tips",
    "seed_listings",
]
