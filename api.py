import logging
from typing import List

from fastapi import FastAPI, HTTPException

from scrape_similar import (
    SYSTEM_PRESETS,
    InvalidScrapeConfigError,
    NoMatchingElementError,
    ParserError,
    Preset,
    ScrapeConfig,
    Scraper,
    ScrapeResult,
    SelectorSyntaxError,
    get_preset,
)
from scrape_similar.models import BaseModel
from scrape_similar.settings import settings

# --- Globals ---
logging.basicConfig(level=settings.LOG_LEVEL)
log = logging.getLogger("scrape_similar_api")


# --- FastAPI App Initialization ---
app = FastAPI(
    title="Scrape Similar API",
    description="Evaluate XPath selectors, guess scrape configs and extract rows from HTML snapshots.",
)


# --- API Request/Response Models ---
class DocumentRequest(BaseModel):
    html: str


class ScrapeRequest(DocumentRequest):
    config: ScrapeConfig | None = None
    preset_id: str | None = None
    hide_empty: bool = False


class ScrapeResponse(BaseModel):
    result: ScrapeResult
    summary: str


class GuessRequest(DocumentRequest):
    xpath: str


class CountRequest(DocumentRequest):
    selector: str


class CountResponse(BaseModel):
    selector: str
    count: int


class MinimizeResponse(BaseModel):
    xpath: str
    selector: str


# --- Helpers ---
def _scraper_for(request: DocumentRequest) -> Scraper:
    size = len(request.html.encode("utf-8"))
    if size > settings.MAX_DOCUMENT_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Document is {size} bytes; the limit is {settings.MAX_DOCUMENT_BYTES}.",
        )
    try:
        return Scraper.from_html(request.html)
    except ParserError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _selector_invalid(e: SelectorSyntaxError) -> HTTPException:
    log.warning(f"Selector invalid: {e.selector!r}")
    return HTTPException(status_code=422, detail=f"Selector invalid: {e.selector}")


def _resolve_config(request: ScrapeRequest) -> ScrapeConfig:
    if request.preset_id:
        preset = get_preset(request.preset_id)
        if preset is None:
            raise HTTPException(status_code=404, detail=f"Unknown preset '{request.preset_id}'")
        return preset.config
    if request.config is None:
        raise HTTPException(status_code=400, detail="Either `config` or `preset_id` is required.")
    try:
        return request.config.ensure_executable()
    except InvalidScrapeConfigError as e:
        raise HTTPException(status_code=400, detail=f"{e.reason}: {e}")


# --- API Endpoints ---
@app.post("/scrape", response_model=ScrapeResponse)
def scrape(request: ScrapeRequest):
    """
    Runs a scrape config (inline or a built-in preset) against the HTML snapshot.

    Every matched element becomes a row; empty rows are only left out when
    `hide_empty` is set. A malformed main selector answers 422 "Selector invalid".
    """
    config = _resolve_config(request)
    scraper = _scraper_for(request)
    try:
        if settings.MAX_MATCHES:
            matches = scraper.count(config.main_selector)
            if matches > settings.MAX_MATCHES:
                raise HTTPException(
                    status_code=413,
                    detail=f"Main selector matches {matches} nodes; the limit is {settings.MAX_MATCHES}.",
                )
        result = scraper.scrape(config)
    except SelectorSyntaxError as e:
        raise _selector_invalid(e)

    summary = result.summary()
    if request.hide_empty:
        result = result.model_copy(update={"data": result.rows(hide_empty=True)})
    log.info(f"Scrape '{config.main_selector}': {summary}")
    return {"result": result, "summary": summary}


@app.post("/guess", response_model=ScrapeConfig)
def guess(request: GuessRequest):
    """
    Guesses a scrape config from the first element matched by `xpath`,
    keeping `xpath` as the main selector.
    """
    scraper = _scraper_for(request)
    try:
        return scraper.guess_config_from_selector(request.xpath)
    except SelectorSyntaxError as e:
        raise _selector_invalid(e)
    except NoMatchingElementError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/minimize", response_model=MinimizeResponse)
def minimize(request: GuessRequest):
    """Returns the exact XPath and the minimized selector of the first element matched by `xpath`."""
    scraper = _scraper_for(request)
    try:
        elements = scraper.select(request.xpath)
        if not elements:
            raise HTTPException(status_code=404, detail=f"No elements found for selector '{request.xpath}'")
        return {"xpath": scraper.xpath_for(elements[0]), "selector": scraper.minimize(elements[0])}
    except SelectorSyntaxError as e:
        raise _selector_invalid(e)


@app.post("/count", response_model=CountResponse)
def count(request: CountRequest):
    """Counts the matches of `selector` (used to highlight matches before scraping)."""
    scraper = _scraper_for(request)
    try:
        return {"selector": request.selector, "count": scraper.count(request.selector)}
    except SelectorSyntaxError as e:
        raise _selector_invalid(e)


@app.get("/presets", response_model=List[Preset])
def list_presets():
    """Lists the built-in presets."""
    return list(SYSTEM_PRESETS)


@app.get("/presets/{preset_id}", response_model=Preset)
def read_preset(preset_id: str):
    preset = get_preset(preset_id)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Unknown preset '{preset_id}'")
    return preset


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api:app", host="127.0.0.1", port=8000, reload=True)
