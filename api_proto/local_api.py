from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from nonogram import solve, solve_puzzle
from nonogram.config import DEFAULT_PUZZLES_PATH
from nonogram.errors import PuzzleNotFoundError
from nonogram.logging_utils import get_logger
from nonogram.postprocess.render_result import build_result
from nonogram.puzzles.loader import load_puzzle

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    rows: list[list[int]]  # 行ヒント（上から）
    cols: list[list[int]]  # 列ヒント（左から）
    max_iterations: int | None = None


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives row / column clues and returns the propagation result.
    """
    try:
        result = solve(request.rows, request.cols, max_iterations=request.max_iterations)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Solver error")
        raise HTTPException(status_code=500, detail=str(e))
    return build_result(result)


@app.get("/api/puzzles/{number}/solve")
async def api_solve_puzzle(number: int):
    """
    Solve a puzzle from the default puzzle file by its number.
    """
    try:
        puzzle = load_puzzle(number, DEFAULT_PUZZLES_PATH)
    except (PuzzleNotFoundError, FileNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = solve_puzzle(puzzle)
    except Exception as e:
        logger.exception("Solver error")
        raise HTTPException(status_code=500, detail=str(e))
    return build_result(result, puzzle)
