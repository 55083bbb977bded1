"""
ColorScheme v1 API Routes
Implements /v1/scheme generation and the preset interchange endpoints.
"""
import time
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import Response

from colorscheme.config import config
from colorscheme.schemas import (
    ErrorResponse, SchemeCatalog, SchemeDebug, SchemeRequest, SchemeResponse, ShareResponse
)
from colorscheme.services.colors import PRESETS, Scheme, SchemeConfigError, scheme_names
from colorscheme.services.colors.wheel import SCHEME_ALIASES
from colorscheme.services.presets import (
    Preset, PresetFormatError, preset_from_json, preset_from_params,
    preset_to_json, random_preset, share_url
)
from colorscheme.utils.ids import generate_request_id
from colorscheme.utils.logging import get_logger
from colorscheme.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Color Schemes"])


def build_scheme(request: SchemeRequest) -> Scheme:
    """
    Apply a scheme request to a fresh Scheme.

    A variation named in the request replaces the preset derived from hex.

    Raises:
        SchemeConfigError: For any rejected configuration value
    """
    scheme = Scheme()
    if request.hex is not None:
        scheme.from_hex(request.hex.lstrip("#"))
    elif request.hue is not None:
        scheme.from_hue(request.hue)

    scheme.scheme(request.scheme).distance(request.distance)
    scheme.web_safe(request.web_safe).add_complement(request.add_complement)

    if request.variation is not None:
        scheme.variation(request.variation)
    return scheme


@router.post("/scheme",
             response_model=SchemeResponse,
             responses={400: {"model": ErrorResponse}},
             summary="Generate Color Scheme",
             description="Derive related hues from a base hue or hex color and render their tonal variants")
def generate_scheme(request: SchemeRequest) -> SchemeResponse:
    request_id = generate_request_id()
    start_time = time.time()
    logger = get_logger()
    metrics = get_metrics()
    metrics.increment_request_count()

    logger.info(f"Scheme request {request_id} started", extra={
        "request_id": request_id,
        "scheme": request.scheme,
        "hue": request.hue,
        "hex": request.hex,
        "variation": request.variation
    })

    try:
        scheme = build_scheme(request)
        config_time = time.time()
        colorset = scheme.colorset()
    except SchemeConfigError as e:
        metrics.increment_failure_count(type(e).__name__)
        logger.warning(f"Scheme request {request_id} rejected", extra={
            "request_id": request_id,
            "error": str(e)
        })
        raise HTTPException(status_code=400, detail=str(e))

    total_time = time.time() - start_time
    colors = [color for group in colorset for color in group]
    metrics.record_scheme(scheme.scheme(), len(colors), total_time * 1000)
    logger.info(f"Scheme request {request_id} completed", extra={
        "request_id": request_id,
        "total_colors": len(colors),
        "total_time_ms": round(total_time * 1000, 2)
    })

    return SchemeResponse(
        scheme=scheme.scheme(),
        hue=scheme.channel(0).get_hue(),
        colors=colors,
        colorset=colorset,
        debug=SchemeDebug(
            request_id=request_id,
            timing_ms={
                "configure": round((config_time - start_time) * 1000, 3),
                "total": round(total_time * 1000, 3)
            }
        )
    )


@router.get("/schemes", response_model=SchemeCatalog, summary="List Scheme Kinds and Variations")
def list_schemes() -> SchemeCatalog:
    return SchemeCatalog(
        schemes=list(scheme_names()),
        aliases={alias: kind.value for alias, kind in SCHEME_ALIASES.items()},
        variations={name: list(values) for name, values in PRESETS.items()}
    )


@router.get("/presets/random", response_model=Preset, summary="Random Preset")
def get_random_preset() -> Preset:
    """Preset built from a randomly rotated scheme."""
    get_metrics().increment_preset_count()

    # Misconfigured environment, not a bad request
    if not config.validate_scheme(config.RANDOM_SCHEME):
        raise HTTPException(status_code=500, detail="Invalid random preset scheme")
    if not config.validate_variation(config.RANDOM_VARIATION):
        raise HTTPException(status_code=500, detail="Invalid random preset variation")

    try:
        return random_preset()
    except SchemeConfigError as e:
        get_logger().error("Random preset generation failed", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/presets/parse", response_model=Preset, responses={400: {"model": ErrorResponse}},
            summary="Parse Shared Preset")
def parse_preset(
    primary: str = Query(..., description="Primary color #RRGGBB"),
    bg_color: str = Query("transparent", alias="bgColor", description="Background color or 'transparent'")
) -> Preset:
    """Validate a preset received through share link query parameters."""
    get_metrics().increment_preset_count()
    try:
        return preset_from_params({"primary": primary, "bgColor": bg_color})
    except PresetFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/presets/share", response_model=ShareResponse, summary="Share Preset")
def share_preset(
    preset: Preset,
    base_url: str = Query(..., description="Page URL the preset should be attached to")
) -> ShareResponse:
    get_metrics().increment_preset_count()
    return ShareResponse(url=share_url(base_url, preset))


@router.post("/presets/export", summary="Export Preset")
def export_preset(preset: Preset) -> Response:
    """Preset as a downloadable JSON file."""
    get_metrics().increment_preset_count()
    return Response(
        content=preset_to_json(preset),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{config.PRESET_FILENAME}"'}
    )


@router.post("/presets/import", response_model=Preset, responses={400: {"model": ErrorResponse}},
             summary="Import Preset")
async def import_preset(request: Request) -> Preset:
    """Validate a preset JSON document sent as the raw request body."""
    get_metrics().increment_preset_count()
    body = await request.body()
    try:
        preset = preset_from_json(body)
    except PresetFormatError as e:
        get_logger().warning("Preset import rejected", extra={"error": str(e)})
        raise HTTPException(status_code=400, detail=str(e))
    return preset


def catalog_summary() -> Dict[str, Any]:
    """Counts shown on the service root endpoint."""
    return {
        "schemes": len(scheme_names()),
        "variations": len(PRESETS)
    }
