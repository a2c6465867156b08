"""
Inventory unit scheme.

A stack holds `stack_size` items. A crate holds 27 stacks and a large
crate holds 54 stacks. Stack size varies per item, so it is passed per
conversion; the crate radixes belong to the scheme.
"""

from dataclasses import dataclass

# Stack size assumed when the input gives none
DEFAULT_STACK_SIZE = 64

# Stacks per container
LARGE_CRATE_STACKS = 54
CRATE_STACKS = 27

# Unit labels, most significant first
LARGE_CRATE_LABEL = "LC"
CRATE_LABEL = "c"
STACK_LABEL = "st"
LOOSE_LABEL = ""


@dataclass(frozen=True)
class UnitScheme:
    large_crate_stacks: int = LARGE_CRATE_STACKS
    crate_stacks: int = CRATE_STACKS

    def __post_init__(self):
        if self.crate_stacks < 1 or self.large_crate_stacks < 1:
            raise ValueError("Container sizes must be positive")

    def unit_sizes(self, stack_size: int) -> list[tuple[str, int]]:
        """Item count of each unit for a given stack size, largest first."""
        return [
            (LARGE_CRATE_LABEL, self.large_crate_stacks * stack_size),
            (CRATE_LABEL, self.crate_stacks * stack_size),
            (STACK_LABEL, stack_size),
            (LOOSE_LABEL, 1),
        ]


DEFAULT_SCHEME = UnitScheme()
