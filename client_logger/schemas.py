"""
Input and output contracts for the log procedures.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from logcore import LogLevel, parse_log_level


class SerializedError(BaseModel):
    """Transport-safe projection of an error; data only"""
    model_config = ConfigDict(extra='allow')

    name: str
    message: str
    stack: Optional[str] = None


class LogInput(BaseModel):
    message: str
    context: Optional[str] = None
    data: Optional[Dict[str, Any]] = None
    error: Optional[SerializedError] = None


class LogOutput(BaseModel):
    logged: bool


class SetLevelInput(BaseModel):
    level: LogLevel

    @field_validator('level', mode='before')
    @classmethod
    def _parse_level(cls, value: Any) -> Any:
        # "warn", "WARNING" and 30 all mean LogLevel.WARN
        if isinstance(value, (str, int)):
            return parse_log_level(value)
        return value


class GetLevelOutput(BaseModel):
    level: LogLevel
    levelName: str
