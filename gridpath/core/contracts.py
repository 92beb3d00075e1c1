"""Data contracts exchanged with the grid's owner."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coord(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    row: int = Field(ge=0)
    col: int = Field(ge=0)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    @classmethod
    def from_tuple(cls, value: tuple[int, int]) -> "Coord":
        row, col = value
        return cls(row=row, col=col)


class GridLayout(BaseModel):
    """Board dimensions plus start, finish and wall placement."""

    model_config = ConfigDict(extra="forbid")

    rows: int = Field(gt=0)
    cols: int = Field(gt=0)
    start: Coord
    finish: Coord
    walls: list[Coord] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_layout(self) -> "GridLayout":
        if not self.contains(self.start):
            raise ValueError("start must be inside the grid")
        if not self.contains(self.finish):
            raise ValueError("finish must be inside the grid")
        if self.start == self.finish:
            raise ValueError("start and finish must differ")
        for wall in self.walls:
            if not self.contains(wall):
                raise ValueError(f"wall {wall.as_tuple()} is outside the grid")
            if wall in (self.start, self.finish):
                raise ValueError("walls cannot cover start or finish")
        return self

    def contains(self, coord: Coord) -> bool:
        return coord.row < self.rows and coord.col < self.cols


class VisitRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    index: int
    row: int
    col: int
    distance: int


class SearchReport(BaseModel):
    model_config = ConfigDict(extra="forbid")

    layout: GridLayout
    trace: list[VisitRecord] = Field(default_factory=list)
    path: list[Coord] = Field(default_factory=list)
    reached: bool = False
    distance: int | None = None
