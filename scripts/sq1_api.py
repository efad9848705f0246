#!/usr/bin/env python3
from __future__ import annotations

import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sq1vis.compiler import CompilerConfig, InputMode, expand_scramble, invert_scramble, resolve_state
from sq1vis.pieces import parse_state_pieces

logger = logging.getLogger(__name__)


def _create_config() -> CompilerConfig:
    separator = os.environ.get("SQ1VIS_STATE_SEPARATOR", "").strip() or "|"
    return CompilerConfig(separator=separator)


config = _create_config()
app = FastAPI(title="Square-1 Scramble Visualizer API", version="1.0.0")


class StateRequest(BaseModel):
    input: str = Field(description="Scramble, algorithm or 24-digit state encoding")
    mode: InputMode = Field(default="scramble", description="How to read input")


class ScrambleRequest(BaseModel):
    scramble: str


@app.post("/api/state")
def api_resolve_state(payload: StateRequest) -> dict:
    try:
        state = resolve_state(payload.input, mode=payload.mode, config=config)
    except ValueError as exc:
        logger.warning("Rejected %s input %r: %s", payload.mode, payload.input, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {
        "ok": True,
        "data": {
            "mode": payload.mode,
            "state": state.to_string(config.separator),
            "top": state.top,
            "bottom": state.bottom,
        },
    }


@app.post("/api/expand")
def api_expand(payload: ScrambleRequest) -> dict:
    try:
        expanded = expand_scramble(payload.scramble)
    except ValueError as exc:
        logger.warning("Rejected scramble %r: %s", payload.scramble, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"ok": True, "data": {"scramble": payload.scramble, "expanded": expanded}}


@app.post("/api/invert")
def api_invert(payload: ScrambleRequest) -> dict:
    try:
        inverted = invert_scramble(expand_scramble(payload.scramble))
    except ValueError as exc:
        logger.warning("Rejected scramble %r: %s", payload.scramble, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"ok": True, "data": {"scramble": payload.scramble, "inverted": inverted}}


@app.get("/api/pieces")
def api_state_pieces(state: str = Query(...)) -> dict:
    try:
        layers = parse_state_pieces(state)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {
        "ok": True,
        "data": {layer: [asdict(token) for token in tokens] for layer, tokens in layers.items()},
    }


@app.get("/health")
def health() -> dict:
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("scripts.sq1_api:app", host="127.0.0.1", port=8008, reload=True)
