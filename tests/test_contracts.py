import pytest
from pydantic import ValidationError

from gridpath.core.contracts import Coord, GridLayout, SearchReport, VisitRecord


def build_layout(**overrides) -> GridLayout:
    values = {
        "rows": 3,
        "cols": 4,
        "start": {"row": 0, "col": 0},
        "finish": {"row": 2, "col": 3},
        "walls": [{"row": 1, "col": 1}],
    }
    values.update(overrides)
    return GridLayout.model_validate(values)


def test_layout_accepts_valid_board() -> None:
    layout = build_layout()

    assert layout.start == Coord(row=0, col=0)
    assert layout.walls[0].as_tuple() == (1, 1)


def test_layout_rejects_out_of_bounds_cells() -> None:
    with pytest.raises(ValidationError, match="start must be inside"):
        build_layout(start={"row": 3, "col": 0})
    with pytest.raises(ValidationError, match="finish must be inside"):
        build_layout(finish={"row": 0, "col": 4})
    with pytest.raises(ValidationError, match="outside the grid"):
        build_layout(walls=[{"row": 9, "col": 9}])


def test_layout_rejects_overlapping_cells() -> None:
    with pytest.raises(ValidationError, match="start and finish must differ"):
        build_layout(finish={"row": 0, "col": 0})
    with pytest.raises(ValidationError, match="cannot cover"):
        build_layout(walls=[{"row": 2, "col": 3}])


def test_layout_rejects_unknown_fields_and_negative_coords() -> None:
    with pytest.raises(ValidationError):
        build_layout(diagonal=True)
    with pytest.raises(ValidationError):
        Coord(row=-1, col=0)


def test_report_serializes_trace_and_path() -> None:
    layout = build_layout(walls=[])
    report = SearchReport(
        layout=layout,
        trace=[VisitRecord(index=0, row=0, col=0, distance=0)],
        path=[Coord(row=0, col=0)],
        reached=False,
    )

    dumped = report.model_dump()

    assert dumped["trace"][0]["distance"] == 0
    assert dumped["path"] == [{"row": 0, "col": 0}]
    assert SearchReport.model_validate(dumped) == report
