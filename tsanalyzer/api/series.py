import logging

from fastapi import APIRouter, HTTPException

from tsanalyzer.api.schemas import MapIn, MapOut, SliceIn, SliceOut, VariationIn, VariationOut
from tsanalyzer.core.errors import SeriesError
from tsanalyzer.observability.metrics import observe_series
from tsanalyzer.services.analysis import series_map, series_slice, series_variation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/series")


def _bad_request(exc: Exception) -> HTTPException:
    logger.warning("Rejected series request: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


@router.post("/variation", response_model=VariationOut)
async def variation(body: VariationIn):
    """
    Accepts a JSON payload with 'values' and optional 'periods'.
    Returns consecutive differences and percent changes.
    Responds with 400 Bad Request when a prior value is zero.
    """
    observe_series("variation", len(body.values))
    try:
        return VariationOut(**series_variation(body.values, body.periods))
    except (SeriesError, ValueError) as exc:
        raise _bad_request(exc) from exc


@router.post("/slice", response_model=SliceOut)
async def slice_values(body: SliceIn):
    """
    Returns the values in [start, end).
    Responds with 400 Bad Request for out-of-range bounds.
    """
    observe_series("slice", len(body.values))
    try:
        return SliceOut(**series_slice(body.values, body.start, body.end))
    except SeriesError as exc:
        raise _bad_request(exc) from exc


@router.post("/map", response_model=MapOut)
async def map_values(body: MapIn):
    """
    Applies a named transform (scale, shift, abs, label) to every value.
    Responds with 400 Bad Request for unknown transforms.
    """
    observe_series("map", len(body.values))
    try:
        return MapOut(**series_map(body.values, body.transform, body.argument))
    except (SeriesError, ValueError, TypeError) as exc:
        raise _bad_request(exc) from exc
