# -*- coding: utf-8 -*-
"""
数独ソルバーの HTTP API です。

起動例::

    uvicorn sudone.api:app --reload
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import solve
from .errors import InvalidDataError
from .logging_utils import get_logger

logger = get_logger()

app = FastAPI(title="sudone")


class SolveRequest(BaseModel):
    board: List[List[Union[int, str, None]]]  # 2D array, 0 / "" / "." / null = blank
    block_size: Optional[int] = None


@app.post("/api/solve")
async def api_solve(request: SolveRequest) -> Any:
    """
    Solver API endpoint.
    Receives grid data (2D array), converts to DataFrame, and calls the solver.
    """
    try:
        # DataFrame にすると長さの違う行が NaN で埋められるので、先に確認する
        side = len(request.board)
        if any(len(row) != side for row in request.board):
            raise InvalidDataError("Board must be square (N^2 x N^2).")

        # 2D配列をDataFrameに変換
        df = pd.DataFrame(request.board)
        return solve(df, block_size=request.block_size)
    except InvalidDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Unexpected error in /api/solve")
        raise HTTPException(status_code=500, detail=str(e))
