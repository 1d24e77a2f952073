"""Built-in subject kinds and decorator variants.

Importing this package registers every catalog entry with the application
registries.
"""

from . import pizza, speaker
from .pizza import PIZZA_SCHEMA, cheese, make_pizza, olives, pepperoni
from .speaker import SPEAKER_SCHEMA, bass_boost, make_speaker, power_boost, power_doubler

__all__ = [
    "pizza",
    "speaker",
    "PIZZA_SCHEMA",
    "SPEAKER_SCHEMA",
    "make_pizza",
    "make_speaker",
    "cheese",
    "pepperoni",
    "olives",
    "bass_boost",
    "power_boost",
    "power_doubler",
]
