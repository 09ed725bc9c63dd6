from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class FiscalRules(BaseModel):
    week_start_day: int = Field(default=6, ge=0, le=6)  # 0=Sunday ... 6=Saturday
    strict_week_numbers: bool = False

class InspectionNumberingRules(BaseModel):
    running_digits: int = Field(default=4, ge=1, le=8)
    stations: list[str] = Field(default_factory=list)
    restrict_stations: bool = False

    @field_validator("stations")
    @classmethod
    def stations_are_codes(cls, value: list[str]) -> list[str]:
        for station in value:
            if not station or not station.isalnum():
                raise ValueError(f"Station codes must be letters and digits: {station!r}")
        return value

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    fiscal: FiscalRules = Field(default_factory=FiscalRules)
    inspection_numbering: InspectionNumberingRules = Field(
        default_factory=InspectionNumberingRules
    )
    ops: OpsRules = Field(default_factory=OpsRules)
