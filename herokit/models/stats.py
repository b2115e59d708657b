"""Character statistics models."""

from pydantic import BaseModel, ConfigDict, Field


class Stats(BaseModel):
    """Character stat block."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    mp5: int = Field(default=0, ge=0, description="Mana regenerated every 5 seconds")
    hp5: int = Field(default=0, ge=0, description="Health regenerated every 5 seconds")
    health: int = Field(default=0, ge=0, description="Bonus health")
    evasion: int = Field(default=0, ge=0, description="Evasion")
    movement_speed: int = Field(default=0, ge=0, description="Movement speed")
    attack_speed: int = Field(default=0, ge=0, description="Attack speed")

    def __str__(self) -> str:
        return (
            f"Stats(MP5: {self.mp5} HP5: {self.hp5} Health: {self.health} "
            f"Evasion: {self.evasion} Movement Speed: {self.movement_speed} "
            f"Attack Speed: {self.attack_speed})"
        )


class Resistance(BaseModel):
    """Damage resistances per ammo type."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    toxin: int = Field(default=0, ge=0)
    elemental: int = Field(default=0, ge=0)
    void: int = Field(default=0, ge=0)
    radiant: int = Field(default=0, ge=0)

    def __str__(self) -> str:
        return (
            f"Resistance(Toxin: {self.toxin} Elemental: {self.elemental} "
            f"Void: {self.void} Radiant: {self.radiant})"
        )
