"""
Configuration for a tile-merge game session.

Grid dimensions and the starting-value distribution are fixed for the lifetime of a session.
"""

from dataclasses import dataclass, field
from math import isclose


@dataclass(frozen=True)
class SpawnConfig:
    """
    Distribution of the exponent given to newly spawned tiles.

    The default always spawns exponent 0, which is what the reference game does
    (its starting value is computed modulo 1). Use ``SpawnConfig.classic()`` for the
    usual 90/10 split between the two lowest values.
    """

    values: tuple[int, ...] = (0,)
    probabilities: tuple[float, ...] = (1.0,)

    def __post_init__(self):
        if not self.values:
            raise ValueError('values must not be empty')
        if len(self.values) != len(self.probabilities):
            raise ValueError(
                f'values and probabilities must have the same length, '
                f'got {len(self.values)} and {len(self.probabilities)}'
            )
        if any(value < 0 for value in self.values):
            raise ValueError(f'values must be non-negative exponents, got {self.values}')
        if any(prob < 0 for prob in self.probabilities):
            raise ValueError(f'probabilities must be non-negative, got {self.probabilities}')
        if not isclose(sum(self.probabilities), 1.0):
            raise ValueError(f'probabilities must sum to 1, got {sum(self.probabilities)}')

    @classmethod
    def classic(cls) -> 'SpawnConfig':
        """Exponent 0 (a "2" in the classic game) 90% of the time, exponent 1 otherwise."""
        return cls(values=(0, 1), probabilities=(0.9, 0.1))

    @property
    def distribution(self) -> dict[int, float]:
        return dict(zip(self.values, self.probabilities))


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration of a game session.

    Attributes
    ----------
    width, height : int
        Grid dimensions.
    spawn : SpawnConfig
        Starting-value distribution of spawned tiles.
    initial_tiles : int
        Tiles spawned on reset.
    coalesce_input : bool
        If True, directions still pending after the one resolved in a tick are dropped.
        Otherwise they wait for later ticks in arrival order.
    seed : int, optional
        Seed of the session random generator.
    """

    # ##>: Grid dimensions.
    width: int = 4
    height: int = 4

    # ##>: Spawning.
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    initial_tiles: int = 2

    # ##>: Input handling.
    coalesce_input: bool = False

    seed: int | None = None

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f'grid dimensions must be positive, got {self.width}x{self.height}')
        if not 0 <= self.initial_tiles <= self.cells:
            raise ValueError(f'initial_tiles must be between 0 and {self.cells}, got {self.initial_tiles}')

    @property
    def cells(self) -> int:
        return self.width * self.height
