"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from crossedwires.models import SAMPLE_INPUT
from crossedwires.services.puzzle_service import InputTooLarge, PuzzleService
from crossedwires.api.schemas import (
    FrameRequest, FrameResponse, RuleInfo, SampleResponse, SolveRequest, SolveResponse,
)

router = APIRouter()

# Shared service instance
_service = PuzzleService()


@router.post("/solve", response_model=SolveResponse)
async def solve_puzzle(request: SolveRequest) -> SolveResponse:
    """Parse both wires, find their crossings and derive the answers."""
    try:
        report = _service.solve(request.input, request.config)
    except InputTooLarge as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc

    options = request.options
    if not options.show_intersections:
        report = report.model_copy(update={"intersections": []})

    closest = report.get_solution("part1.closest")
    fastest = report.get_solution("part2.fastest")

    return SolveResponse(
        report=report,
        solution1=closest.display() if options.show_solution1 and closest and closest.found else None,
        solution2=fastest.display() if options.show_solution2 and fastest and fastest.found else None,
        rule_count=len(_service.list_rules()),
    )


@router.post("/frame", response_model=FrameResponse)
async def frame(request: FrameRequest) -> FrameResponse:
    """Wire geometry revealed after `step` steps of animation."""
    try:
        report = _service.solve(request.input)
        traces, revealed = _service.frame(request.input, request.step)
    except InputTooLarge as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from exc

    return FrameResponse(
        step=request.step,
        endstep=report.endstep,
        traces=traces,
        intersections=revealed,
    )


@router.get("/sample", response_model=SampleResponse)
async def sample() -> SampleResponse:
    """The bundled puzzle input."""
    return SampleResponse(input=SAMPLE_INPUT)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available solution rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/rules/{rule_id}", response_model=RuleInfo)
async def get_rule(rule_id: str) -> RuleInfo:
    rule = _service.get_rule(rule_id)
    if rule is None:
        raise HTTPException(status_code=404, detail=f"unknown rule {rule_id!r}")
    return RuleInfo(**rule)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
