"""Character Sets — alphabets, similarity filtering, and the per-class pool builder.

Invariants:
    - Each alphabet is an ordered string of distinct characters
    - Similarity filtering preserves the order of the remaining characters
    - select_class_sets() yields classes in CharacterClass order (lowercase, uppercase, digits, symbols)
    - CharacterClassConfig is frozen — a snapshot never changes after creation

Design Decisions:
    - Frozen dataclass in core, Pydantic model at the API boundary: core stays framework-free
    - Filtered sets that come out empty are kept in the result so the generator decides
      what an empty pool means (it must be checked, not assumed)
"""

from dataclasses import dataclass

from app.core.domain_types import CharacterClass, DEFAULT_PASSWORD_LENGTH


LOWERCASE: str = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS: str = "0123456789"
SYMBOLS: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"

SIMILAR_CHARS: frozenset[str] = frozenset("il1Lo0O")

ALPHABETS: dict[CharacterClass, str] = {
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.DIGITS: DIGITS,
    CharacterClass.SYMBOLS: SYMBOLS,
}


@dataclass(frozen=True)
class CharacterClassConfig:
    """Generation criteria — which classes to draw from and how long."""
    length: int = DEFAULT_PASSWORD_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False

    @property
    def selected_classes(self) -> list[CharacterClass]:
        flags = {
            CharacterClass.LOWERCASE: self.include_lowercase,
            CharacterClass.UPPERCASE: self.include_uppercase,
            CharacterClass.DIGITS: self.include_numbers,
            CharacterClass.SYMBOLS: self.include_symbols,
        }
        return [cls for cls in CharacterClass if flags[cls]]


def remove_similar(chars: str) -> str:
    """Drop the similar-looking characters, keeping order."""
    return "".join(c for c in chars if c not in SIMILAR_CHARS)


def select_class_sets(config: CharacterClassConfig) -> list[tuple[CharacterClass, str]]:
    """Filtered alphabet for every selected class, in fixed class order."""
    result = []
    for cls in config.selected_classes:
        chars = ALPHABETS[cls]
        if config.exclude_similar:
            chars = remove_similar(chars)
        result.append((cls, chars))
    return result


def build_pool(class_sets: list[tuple[CharacterClass, str]]) -> str:
    """Effective pool: concatenation of the filtered class alphabets."""
    return "".join(chars for _, chars in class_sets)
