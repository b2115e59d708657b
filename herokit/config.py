"""Central configuration defaults and constants for herokit."""

import os

# Fixed game constants
MAX_HEALTH = 100
INVENTORY_CAPACITY = 50
WEAPON_ID_MAX = 255  # Weapon ids are a single random byte

# Regeneration Defaults
DEFAULT_REGEN_STEP_DELAY = float(os.getenv("HEROKIT_REGEN_STEP_DELAY", "0.00045"))  # Seconds between +1 steps
DEFAULT_REGEN_JOIN_TIMEOUT = float(os.getenv("HEROKIT_REGEN_JOIN_TIMEOUT", "5.0"))

# Randomness
# Unset means the default roller is seeded from the OS
_random_seed_env = os.getenv("HEROKIT_RANDOM_SEED")
DEFAULT_RANDOM_SEED = int(_random_seed_env) if _random_seed_env else None
