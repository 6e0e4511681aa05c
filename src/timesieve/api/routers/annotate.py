"""
API routes for link annotation.

Endpoints
---------
- ``POST /annotate``: run the sieve pipeline over one document.
- ``GET /sieves``: list registered sieve names.

Annotation is fast and deterministic, so it runs inline in the request;
there is no job queue.
"""

from __future__ import annotations

from fastapi import APIRouter

from timesieve.api.schemas import AnnotateRequest, AnnotateResponse, SieveScore
from timesieve.core.corpus import Corpus
from timesieve.core.settings import load_settings
from timesieve.pipelines.tlink_pipeline import run_sieves
from timesieve.sieves.registry import available_sieves, build_sieves

router = APIRouter(tags=["Annotation"])


@router.post("/annotate", response_model=AnnotateResponse, summary="Propose TLinks")
async def annotate_document(request: AnnotateRequest) -> AnnotateResponse:
    """
    Apply sieves to the posted document and return the accepted links.

    Unknown sieve names raise ``ValueError``, which the app maps to HTTP 400.
    """
    names = request.sieves if request.sieves else load_settings().sieves
    sieves = build_sieves(names, surface_check=request.surface_check)

    doc = request.document
    result = run_sieves(Corpus([doc]), doc.name, sieves)

    return AnnotateResponse(
        document=doc.name,
        tlinks=result["tlinks"],
        evaluation=[
            SieveScore(
                sieve=s.sieve,
                proposed=s.proposed,
                matched=s.matched,
                correct=s.correct,
                precision=s.precision,
            )
            for s in result["evaluation"]
        ],
    )


@router.get("/sieves", summary="List registered sieves")
async def list_sieves() -> dict[str, list[str]]:
    return {"sieves": list(available_sieves())}


__all__ = ["router"]
