"""First-run seeding decision for the template store."""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Sequence, Tuple


class SeedState(str, Enum):
    """Persisted seeding state of a store directory."""
    UNSEEDED = "unseeded"
    SEEDED = "seeded"


@dataclass(frozen=True)
class SeedPlan:
    """What a store must write to move from its current state to seeded."""
    state: SeedState
    to_write: Tuple[Tuple[str, str], ...] = ()
    write_sentinel: bool = False

    @property
    def is_noop(self) -> bool:
        return not self.to_write and not self.write_sentinel


def plan_seeding(
    sentinel_present: bool,
    existing_names: AbstractSet[str],
    defaults: Sequence[Tuple[str, str]],
) -> SeedPlan:
    """
    Decide which default templates to write.

    A store with the sentinel is seeded and never changes again. An unseeded
    store gets every default whose name is not already taken (exact,
    case-sensitive match), followed by the sentinel.

    Args:
        sentinel_present: Whether the sentinel marker exists.
        existing_names: Base names of template files already in the store.
        defaults: (name, content) pairs of built-in templates.

    Returns:
        The seeding plan.
    """
    if sentinel_present:
        return SeedPlan(state=SeedState.SEEDED)
    missing = tuple(
        (name, content) for name, content in defaults if name not in existing_names
    )
    return SeedPlan(state=SeedState.UNSEEDED, to_write=missing, write_sentinel=True)
