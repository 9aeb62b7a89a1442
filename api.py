from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from refcount.model import ConfigurationError, CountOptions, ReferenceDump
from refcount.pipeline import count_dump
from refcount.render import render_result


logger = logging.getLogger(__name__)

app = FastAPI(title="Reference Count Service")


class CountRequest(BaseModel):
	dump: ReferenceDump
	baseline: Optional[ReferenceDump] = None
	options: CountOptions = CountOptions()
	baseline_options: Optional[CountOptions] = None


class CountResponse(BaseModel):
	overall_count: int
	lines: List[str]


@app.get("/health")
def health() -> dict:
	return {"status": "ok"}


@app.post("/count", response_model=CountResponse)
def count(req: CountRequest) -> CountResponse:
	result = count_dump(req.dump, req.options)
	baseline_options = req.baseline_options or req.options
	baseline = count_dump(req.baseline, baseline_options) if req.baseline is not None else None
	try:
		lines = render_result(result, baseline)
	except ConfigurationError as e:
		logger.warning("Rejected comparison: %s", e)
		raise HTTPException(status_code=400, detail=str(e))
	return CountResponse(overall_count=result.overall_count, lines=lines)


def create_app() -> FastAPI:
	return app
