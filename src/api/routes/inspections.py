"""Inspection number routes."""

from fastapi import APIRouter, Depends, HTTPException

from src.adapters.clock import SystemClock
from src.adapters.rules_port import RulesPortAdapter
from src.adapters.sqlite.repos import SQLiteInspectionNumberRepo
from src.api.deps import get_clock, get_inspection_repo, get_rules_port
from src.api.schemas import ApiResponse, InspectionNumberModel, InspectionNumberRequest
from src.components.inspection_numbering import GenerateNumberInput, run_generate

router = APIRouter()


@router.post("/number", response_model=ApiResponse)
def generate_inspection_number(
    body: InspectionNumberRequest,
    repo: SQLiteInspectionNumberRepo = Depends(get_inspection_repo),
    clock: SystemClock = Depends(get_clock),
    rules: RulesPortAdapter = Depends(get_rules_port),
) -> ApiResponse:
    """
    Issue the next inspection number for a station.

    The date defaults to today and the work week to the fiscal week of the date.
    Pass reserve=false to preview the number without recording it.
    """
    result = run_generate(
        GenerateNumberInput(station=body.station, date=body.date, week=body.ww, reserve=body.reserve),
        repo=repo,
        clock=clock,
        rules=rules,
    )

    if not result.success or result.issued is None:
        error = result.errors[0]
        raise HTTPException(
            status_code=400,
            detail={"code": error.code, "message": error.message, "field": error.field},
        )

    issued = result.issued
    return ApiResponse(
        data=InspectionNumberModel(
            inspection_no=issued.inspection_no,
            station=issued.station,
            prefix=issued.prefix,
            running_number=issued.running_number,
            fy=issued.fiscal_year,
            ww=issued.week,
            date=issued.issued_on,
        ),
        message="Inspection number generated",
    )
