"""Models for the consonant-counting demo (configuration and scenario results)."""

import logging
from typing import List, Optional
from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict


DEFAULT_NAMES = ("Cristiano", "Michele", "Sergio", "Giuseppe", "Stefano")


class DemoConfig(BaseModel):
    """Inputs for a demo run."""
    names: List[str] = Field(
        default_factory=lambda: list(DEFAULT_NAMES),
        description="Names whose consonants are counted"
    )
    log_level: str = Field(
        "INFO",
        description="Logging level name"
    )
    scenarios: Optional[List[str]] = Field(
        None,
        description="Subset of scenarios to run (all when omitted)"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Normalise and check the level against the logging module."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('scenarios')
    @classmethod
    def validate_scenarios(cls, v):
        """Reject an explicitly empty selection."""
        if v is not None:
            v = [name.strip() for name in v if name.strip()]
            if not v:
                raise ValueError("Scenario selection cannot be empty")
        return v


class ScenarioResult(BaseModel):
    """Outcome of one counting scenario."""
    scenario: str = Field(..., description="Scenario name")
    consonants: Optional[int] = Field(
        None,
        description="Number of consonants counted",
        ge=0
    )
    execution_time_ms: float = Field(
        ...,
        description="Execution time in milliseconds",
        ge=0
    )
    success: bool = Field(True, description="Whether the scenario completed")
    error: Optional[str] = Field(None, description="Error message if failed")

    @model_validator(mode='after')
    def validate_outcome(self):
        """A successful run carries a count, a failed one an error."""
        if self.success and self.consonants is None:
            raise ValueError("successful result requires consonants")
        if not self.success and not self.error:
            raise ValueError("failed result requires error")
        return self

    def message(self) -> str:
        if not self.success:
            return f"{self.scenario}: failed ({self.error})"
        return f"{self.scenario}: there are {self.consonants} consonants"


class ScenarioReport(BaseModel):
    """All scenario results for one run."""
    results: List[ScenarioResult] = Field(..., description="Per-scenario results")
    total_scenarios: int = Field(..., description="Number of scenarios run", ge=0)
    consistent: bool = Field(
        ...,
        description="True when every scenario succeeded with the same count"
    )
    timestamp: datetime = Field(default_factory=datetime.now, description="Report timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "results": [
                    {
                        "scenario": "how_many_consonants",
                        "consonants": 20,
                        "execution_time_ms": 0.05,
                        "success": True
                    }
                ],
                "total_scenarios": 1,
                "consistent": True,
                "timestamp": "2024-01-01T12:00:00"
            }
        }
    )
