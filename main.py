import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from practice.problems import UnknownOperatorError

# Routers
from routers.health import router as health_router
from routers.problems import router as problems_router
from routers.sessions import router as sessions_router
from routers.settings import router as settings_router

logger = logging.getLogger("calcu-later")
logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Calcu-later – Practice API")

# Allow calls from the front-end dev server
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnknownOperatorError)
def unknown_operator(request: Request, exc: UnknownOperatorError):
    logger.error("unknown operator reached %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(settings_router)  # /settings
app.include_router(problems_router)  # /problems, /analysis/...
app.include_router(sessions_router)  # /sessions/...
app.include_router(health_router)  # /health/...
