"""Rules engines for the party game portal. One subpackage per game."""

from games import abyss, court, elemental, gifts, hitblow, midnight, secretword, valuetalk

# kind -> engine package. The kind is what clients send and what the store records.
ENGINES = {
    "elemental_paths": elemental,
    "abyss_salvage": abyss,
    "court_intrigue": court,
    "midnight_party": midnight,
    "cursed_gifts": gifts,
    "hit_and_blow": hitblow,
    "value_talk": valuetalk,
    "secret_word": secretword,
}

GAME_KINDS = tuple(ENGINES)

__all__ = ["ENGINES", "GAME_KINDS"]
