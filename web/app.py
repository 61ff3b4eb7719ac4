"""FastAPI web adapter for the signal CPU simulator."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional

from signalcpu import run_program, RunOptions
from signalcpu.runner import SIGNAL_CYCLES


# Constants
MAX_PROGRAM_SIZE = 50 * 1024  # 50KB


# Request/Response models
class RunOptionsModel(BaseModel):
    initial_register: int = 1
    signal_cycles: list[int] = Field(default_factory=lambda: list(SIGNAL_CYCLES))
    max_cycles: int = Field(default=100_000, ge=1, le=1_000_000)
    trace: bool = True


class RunRequest(BaseModel):
    program: str
    options: Optional[RunOptionsModel] = None


class ErrorResponse(BaseModel):
    type: str
    message: str
    cycle: int
    line_index: Optional[int] = None
    source_text: Optional[str] = None


class RunResponse(BaseModel):
    status: str
    cycles_executed: int
    final_state: dict
    signal_strength_sum: int
    signal_cycles: list[int]
    trace: list[dict]
    error: Optional[ErrorResponse] = None


# Create FastAPI app
app = FastAPI(
    title="Signal CPU Simulator",
    description="Web API for running noop/addx programs cycle by cycle",
    version="0.1.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/api/run", response_model=RunResponse)
async def run_code(request: RunRequest):
    """Execute a program and report its per-cycle register trace.

    Args:
        request: Program text and execution options

    Returns:
        Execution result with signal-strength sum, trace, and final state
    """
    # Validate program size
    if len(request.program) > MAX_PROGRAM_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"Program size exceeds limit of {MAX_PROGRAM_SIZE} bytes",
        )

    opts = request.options or RunOptionsModel()

    for cycle in opts.signal_cycles:
        if cycle < 1:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid signal cycle: {cycle}",
            )

    run_opts = RunOptions(
        initial_register=opts.initial_register,
        signal_cycles=tuple(opts.signal_cycles),
        max_cycles=opts.max_cycles,
        trace=opts.trace,
    )

    result = run_program(request.program, options=run_opts)

    return result.to_dict()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
