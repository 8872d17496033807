from dataclasses import dataclass


@dataclass
class MaterializeConfig:
    """Configuration for converting a lazy sequence into a list."""

    refuse_infinite: bool = True  # raise before forcing anything if the extent is infinite
    warn_unknown: bool = False  # log a warning when the extent is unknown
    limit: int | None = None  # most elements to pull; raise if more remain

    def __post_init__(self):
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be non-negative, got {self.limit}")

    @classmethod
    def default(cls) -> "MaterializeConfig":
        """Refuse known-infinite sequences, trust everything else."""
        return cls()

    @classmethod
    def cautious(cls, limit: int) -> "MaterializeConfig":
        """Refuse known-infinite sequences and cap everything else at `limit`."""
        return cls(refuse_infinite=True, warn_unknown=True, limit=limit)
