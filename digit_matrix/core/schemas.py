from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MatrixMode(str, Enum):
    default = "default"
    length_filter = "length_filter"
    single_row = "single_row"
    predicate = "predicate"


class TaskState(str, Enum):
    success = "success"
    failure = "failure"


class Dimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: int = Field(ge=0)
    columns: int = Field(ge=0)

    @property
    def cells(self) -> int:
        return self.rows * self.columns


class ConversionRequest(BaseModel):
    items: list[str | None]
    length_filter: int = 0

    @field_validator("length_filter")
    @classmethod
    def length_filter_validate(cls, value: int) -> int:
        return abs(value)


class ConversionResult(BaseModel):
    state: TaskState
    matrices: list[list[list[int]]] = Field(default_factory=list)
    shapes: list[tuple[int, int]] = Field(default_factory=list)
    error_code: str | None = None
    error: str | None = None
