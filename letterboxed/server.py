import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from letterboxed.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("letterboxed")

# Populated at startup
_wordlist: list[str] | None = None


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _wordlist
        _apply_log_level()

        from letterboxed.solver import load_wordlist
        logger.info("Loading wordlist from %s", settings.WORDLIST_PATH)
        try:
            _wordlist = load_wordlist(str(settings.WORDLIST_PATH))
            logger.info("Wordlist loaded (%d words)", len(_wordlist))
        except FileNotFoundError:
            _wordlist = None
            logger.warning("Wordlist %s not found; requests must supply their own words", settings.WORDLIST_PATH)

        yield

    application = FastAPI(title="Letterboxed Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "wordlist_loaded": _wordlist is not None,
            "word_count": len(_wordlist) if _wordlist is not None else 0,
        }

    @application.post("/solve")
    async def solve(request: Request):
        from fastapi.concurrency import run_in_threadpool
        from letterboxed.puzzle import MalformedPuzzle
        from letterboxed.report import solve_puzzle
        from letterboxed.settings import coerce_field
        from letterboxed.solver import SearchLimitExceeded

        body = await _read_json_object(request)

        puzzle_spec = body.get("puzzle")
        if not isinstance(puzzle_spec, str):
            raise HTTPException(400, "Missing 'puzzle' string, e.g. 'abc,def,ghi,jkl'")

        words = body.get("words")
        if words is None:
            if _wordlist is None:
                raise HTTPException(503, "No wordlist loaded and none supplied in the request")
            words = _wordlist
        elif not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise HTTPException(400, "'words' must be a list of strings")

        try:
            show_best = coerce_field(bool, body.get("best_words", settings.SHOW_BEST_WORDS))
        except ValueError as e:
            raise HTTPException(400, f"'best_words': {e}")
        logger.info("POST /solve puzzle=%s words=%d", puzzle_spec, len(words))

        # The search is CPU-bound; keep it off the event loop
        try:
            report = await run_in_threadpool(
                solve_puzzle,
                puzzle_spec,
                words,
                min_length=settings.MIN_WORD_LENGTH,
                show_best_words=show_best,
                max_states=settings.MAX_STATES,
            )
        except MalformedPuzzle as e:
            raise HTTPException(400, str(e))
        except SearchLimitExceeded as e:
            raise HTTPException(422, str(e))

        return JSONResponse(report.to_dict())

    @application.get("/api/settings")
    async def api_get_settings():
        from letterboxed.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from letterboxed.settings import update_settings, get_editable_settings
        body = await _read_json_object(request)
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        _apply_log_level()
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


async def _read_json_object(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(400, "Request body must be JSON")
    if not isinstance(body, dict):
        raise HTTPException(400, "Request body must be a JSON object")
    return body


def _apply_log_level():
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)


app = create_app()
