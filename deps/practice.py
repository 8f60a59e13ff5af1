import os
import random

from practice.configuration import Configuration
from settings_store import load_configuration

# Optional fixed seed for reproducible demos; unset means system entropy.
PRACTICE_SEED = os.getenv("PRACTICE_SEED", "")

_rng = random.Random(int(PRACTICE_SEED)) if PRACTICE_SEED.strip() else random.Random()


def get_rng() -> random.Random:
    return _rng


def get_configuration() -> Configuration:
    """Settings as stored right now; read per request so changes apply to the next problem."""
    return load_configuration()
