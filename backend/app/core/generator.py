"""Password Generator — constrained uniform construction over the selected character classes.

Invariants:
    - generate() is PURE apart from the randomness it pulls from the injected source
    - Output length == config.length, always
    - One required character per selected class (truncated when length < class count)
    - Every character index goes through uniform_index() — no direct modulo on raw words
    - Empty effective pool or non-positive length → InvalidConfigError, never a partial password

Design Decisions:
    - Required characters come from each class's own filtered set, not the combined pool:
      a uniform draw over the pool cannot guarantee coverage for short lengths
    - Truncation keeps the first `length` classes in CharacterClass order
      (lowercase, uppercase, digits, symbols) — deterministic and caller-independent
    - Fisher–Yates runs over the whole list so required characters are not clustered up front
"""

from app.core.character_sets import CharacterClassConfig, build_pool, select_class_sets
from app.core.errors import InvalidConfigError
from app.core.random_source import RandomSource, SystemRandomSource, uniform_index


def generate(config: CharacterClassConfig, source: RandomSource | None = None) -> str:
    """Generate one password satisfying the configuration."""
    if config.length < 1:
        raise InvalidConfigError(
            f"Password length must be positive, got {config.length}", "length",
        )

    class_sets = select_class_sets(config)
    pool = build_pool(class_sets)
    if not pool:
        raise InvalidConfigError(
            "At least one character type must be selected", "include",
        )
    # A selected class filtered down to nothing cannot supply a required character
    for cls, chars in class_sets:
        if not chars:
            raise InvalidConfigError(
                f"Character class '{cls.value}' is empty after excluding similar characters",
                cls.value,
            )

    rng = source or SystemRandomSource()
    required = [_pick(rng, chars) for _, chars in class_sets[:config.length]]
    filled = [_pick(rng, pool) for _ in range(config.length - len(required))]
    return "".join(shuffle(required + filled, rng))


def generate_many(
    config: CharacterClassConfig, count: int, source: RandomSource | None = None,
) -> list[str]:
    """Generate `count` independent passwords with the same configuration."""
    if count < 1:
        raise InvalidConfigError(f"Count must be positive, got {count}", "count")
    rng = source or SystemRandomSource()
    return [generate(config, rng) for _ in range(count)]


def shuffle(items: list[str], source: RandomSource) -> list[str]:
    """Unbiased Fisher–Yates permutation. Returns a new list."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = uniform_index(source, i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def _pick(source: RandomSource, chars: str) -> str:
    return chars[uniform_index(source, len(chars))]
