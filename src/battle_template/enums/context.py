from enum import IntEnum


class EntityContext(IntEnum):
    """Game era a template belongs to.

    Ordered by generation so that an era can only be upgraded forward.
    NONE means the era has not been pinned and the latest rules apply.
    """

    NONE = 0
    GEN1 = 1
    GEN2 = 2
    GEN3 = 3
    GEN4 = 4
    GEN5 = 5
    GEN6 = 6
    GEN7 = 7
    GEN8 = 8
    GEN9 = 9

    @property
    def generation(self) -> int:
        """Generation number; an unpinned context reports the latest generation"""
        if self is EntityContext.NONE:
            return int(LATEST_CONTEXT)
        return int(self)

    @property
    def is_game_boy(self) -> bool:
        """Gen 1/2 store 4-bit DVs instead of 5-bit IVs"""
        return self in (EntityContext.GEN1, EntityContext.GEN2)

    def upgrade(self, other: "EntityContext") -> "EntityContext":
        """Return the later of the two contexts (never moves backward)"""
        return other if other > self else self

    @classmethod
    def from_generation(cls, generation: int) -> "EntityContext":
        if not 1 <= generation <= int(LATEST_CONTEXT):
            raise ValueError(f"Generation must be 1-{int(LATEST_CONTEXT)}")
        return cls(generation)


LATEST_CONTEXT = EntityContext.GEN9
