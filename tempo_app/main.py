"""
main.py

FastAPI entry point.
- renders the calculator page (index.html)
- serves static files (app.js/app.css)
- registers the API routers

Run with: uvicorn tempo_app.main:app
"""

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from tempo_app.config import CONFIG
from tempo_app.core.notation import MODE_PRESETS
from tempo_app.core.time_signature import DEFAULT_TIME_SIGNATURE, TIME_SIGNATURES
from tempo_app.api.routes_calc import router as calc_router
from tempo_app.api.routes_copy import router as copy_router
from tempo_app.api.routes_meta import router as meta_router
from tempo_app.api.routes_taps import router as taps_router


app = FastAPI(title="Delay, Reverb, and LFO Calculator")


# templates / static files
templates = Jinja2Templates(directory=str(CONFIG.templates_dir))
app.mount("/static", StaticFiles(directory=str(CONFIG.static_dir)), name="static")

# API routers
app.include_router(calc_router)
app.include_router(copy_router)
app.include_router(meta_router)
app.include_router(taps_router)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    """
    Calculator page. Tables are filled in by static/app.js via /api/calc.
    """
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "default_bpm": f"{CONFIG.default_bpm:.0f}",
            "min_bpm": CONFIG.min_bpm,
            "max_bpm": CONFIG.max_bpm,
            "bpm_presets": CONFIG.bpm_presets,
            "modes": list(MODE_PRESETS.values()),
            "time_signatures": TIME_SIGNATURES,
            "default_time_signature": DEFAULT_TIME_SIGNATURE.id,
            "copy_message_ms": CONFIG.copy_message_ms,
        },
    )
