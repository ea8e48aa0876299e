"""Default display names for pictures created by the first object save."""
import random
from typing import Optional

ADJECTIVES = (
    "Mysterious", "Sneaky", "Magical", "Wobbly", "Sparkly", "Bouncy", "Giggly", "Fluffy",
    "Dizzy", "Quirky", "Silly", "Funky", "Wacky", "Zany", "Bubbly", "Cheery", "Goofy",
    "Peppy", "Snappy", "Zippy", "Jolly", "Merry", "Perky", "Spunky", "Chipper", "Dapper",
    "Nifty", "Spiffy", "Dandy", "Fancy", "Jazzy", "Snazzy", "Classy", "Swanky", "Posh",
)

NOUNS = (
    "Adventure", "Discovery", "Snapshot", "Memory", "Moment", "Scene", "Vision", "Glimpse",
    "Treasure", "Wonder", "Surprise", "Mystery", "Journey", "Quest", "Expedition", "Safari",
    "Exploration", "Investigation", "Hunt", "Search", "Find", "Catch", "Capture", "Shot",
    "Frame", "View", "Sight", "Spectacle", "Marvel", "Miracle", "Magic", "Enchantment",
    "Delight", "Joy", "Happiness", "Bliss", "Euphoria", "Ecstasy", "Rapture", "Thrill",
)

DEFAULT_PICTURE_DESCRIPTION = "Contains detected objects"


def generate_picture_name(rng: Optional[random.Random] = None) -> str:
    """Return a playful "<Adjective> <Noun>" name."""
    rng = rng or random
    return f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}"
