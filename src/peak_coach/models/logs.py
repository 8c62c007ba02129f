"""User-logged wellness entries and their daily totals."""

from datetime import datetime
from typing import Annotated, Literal, Tuple, Union

from pydantic import Field

from .base import ValueModel, utc_now


ML_PER_GLASS = 250
CAFFEINE_LIMIT_MG = 300


class WaterEntry(ValueModel):
    """Water intake, e.g. 250ml for one glass."""

    kind: Literal["water"] = "water"
    amount_ml: int = Field(..., ge=0)
    timestamp: datetime = Field(default_factory=utc_now)


class CaffeineEntry(ValueModel):
    """Caffeine intake. Espresso is ~65mg, drip coffee ~95mg."""

    kind: Literal["caffeine"] = "caffeine"
    amount_mg: int = Field(..., ge=0)
    source: str = ""
    timestamp: datetime = Field(default_factory=utc_now)


class SupplementEntry(ValueModel):
    kind: Literal["supplement"] = "supplement"
    name: str = Field(..., min_length=1)
    dosage: str = ""
    timestamp: datetime = Field(default_factory=utc_now)


class MedicationEntry(ValueModel):
    kind: Literal["medication"] = "medication"
    name: str = Field(..., min_length=1)
    dosage: str = ""
    timestamp: datetime = Field(default_factory=utc_now)


LogEntry = Annotated[
    Union[WaterEntry, CaffeineEntry, SupplementEntry, MedicationEntry],
    Field(discriminator="kind"),
]


class DailyLogSummary(ValueModel):
    """Same-day totals computed from log entries."""

    water_ml: int = Field(default=0, ge=0)
    caffeine_mg: int = Field(default=0, ge=0)
    supplements: Tuple[str, ...] = ()
    medications: Tuple[str, ...] = ()

    @property
    def water_glasses(self) -> int:
        return self.water_ml // ML_PER_GLASS

    @property
    def caffeine_over_limit(self) -> bool:
        return self.caffeine_mg > CAFFEINE_LIMIT_MG
