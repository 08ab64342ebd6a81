"""Pydantic configuration schema models for carpet calculations.

This module defines the schema for JSON job files. It uses Pydantic v2
for validation and serialization.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Supported schema versions for configuration files
# Version 1.0: Rooms, bulk text, options and packing tunables
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RoomConfig(BaseModel):
    """Configuration for one room measurement.

    Attributes:
        label: Optional room name (e.g. "LR").
        width_feet: Width, whole feet.
        width_inches: Width, additional inches.
        length_feet: Length, whole feet.
        length_inches: Length, additional inches.
    """

    model_config = ConfigDict(extra="forbid")

    label: str = Field(default="", max_length=40)
    width_feet: int = Field(..., ge=0)
    width_inches: int = Field(default=0, ge=0)
    length_feet: int = Field(..., ge=0)
    length_inches: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_non_zero(self) -> "RoomConfig":
        """Validate that both sides have a size."""
        if self.width_feet * 12 + self.width_inches == 0:
            raise ValueError("width must be greater than zero")
        if self.length_feet * 12 + self.length_inches == 0:
            raise ValueError("length must be greater than zero")
        return self


class CarpetOptionsConfig(BaseModel):
    """Input augmentation options.

    Attributes:
        add_slippage: Add the cutting buffer to every piece.
        steps: Number of 4'x2' stair pieces to add.
        slippage_inches: Cutting buffer in inches.
    """

    model_config = ConfigDict(extra="forbid")

    add_slippage: bool = False
    steps: int = Field(default=0, ge=0, le=100)
    slippage_inches: int = Field(default=4, ge=0, le=24)


class AnnealingConfigSchema(BaseModel):
    """Simulated-annealing refiner tunables."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    min_pieces: int = Field(default=3, ge=2)
    max_iterations: int = Field(default=3000, ge=0, le=100_000)
    time_limit_ms: float = Field(default=3000.0, gt=0, le=60_000)
    check_interval: int = Field(default=100, ge=1)
    initial_temperature: float = Field(default=30.0, gt=0)
    cooling_rate: float = Field(default=0.99, gt=0, le=1)
    min_temperature: float = Field(default=0.1, gt=0)
    seed: int | None = Field(default=None, description="Seed for reproducible runs")


class PackingConfigSchema(BaseModel):
    """Packing strategy tunables.

    Attributes:
        roll_width: Roll width in inches.
        loose_shelf_tolerance: Shelf surplus limit for loose shelf packing.
        tight_shelf_tolerance: Shelf surplus limit for tight shelf packing.
        length_group_tolerance: Length difference allowed in a length group.
        large_piece_threshold: Size at which a piece counts as large.
        gap_penalty_weight: Weight of trapped gap area in scored placement.
        cluster_tolerance: Dimension difference allowed in a cluster.
        long_piece_threshold: Length above which unique pieces go first.
        min_gap_size: Smallest gap side considered by gap filling.
        annealing: Refiner tunables.
    """

    model_config = ConfigDict(extra="forbid")

    roll_width: int = Field(default=144, gt=0, le=600)
    loose_shelf_tolerance: int = Field(default=6, ge=0)
    tight_shelf_tolerance: int = Field(default=4, ge=0)
    length_group_tolerance: int = Field(default=6, ge=0)
    large_piece_threshold: int = Field(default=48, gt=0)
    gap_penalty_weight: float = Field(default=0.5, ge=0)
    cluster_tolerance: int = Field(default=2, ge=0)
    long_piece_threshold: int = Field(default=100, gt=0)
    min_gap_size: int = Field(default=12, gt=0)
    annealing: AnnealingConfigSchema = Field(default_factory=AnnealingConfigSchema)


class CarpetConfiguration(BaseModel):
    """Root configuration model for a carpet job.

    Example:
        >>> config = CarpetConfiguration(
        ...     schema_version="1.0",
        ...     rooms=[RoomConfig(label="LR", width_feet=11, width_inches=6,
        ...                       length_feet=13, length_inches=6)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    rooms: list[RoomConfig] = Field(default_factory=list)
    bulk: str | None = Field(
        default=None, description="Free-text measurements, e.g. 'LR 11.6x13.6'"
    )
    options: CarpetOptionsConfig = Field(default_factory=CarpetOptionsConfig)
    packing: PackingConfigSchema = Field(default_factory=PackingConfigSchema)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_has_rooms(self) -> "CarpetConfiguration":
        """Validate that the job lists at least one room."""
        if not self.rooms and not (self.bulk and self.bulk.strip()):
            raise ValueError("Configuration needs 'rooms' or 'bulk' measurements")
        return self
