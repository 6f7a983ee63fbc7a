import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import profile as profile_router
from .routers import stars as stars_router
from .routers import year_cycles as year_cycles_router
from .routers import dst as dst_router
from .routers import solar_terms as solar_terms_router
from .middleware.logging import LoggingMiddleware


app = FastAPI(title="ninestar-ki", version="0.1.0")

app_env = os.getenv("APP_ENV")
is_dev = app_env is None or app_env.lower() in {"dev", "development"}

if is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=86400,
    )
else:
    allowed = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "").split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=86400,
    )

app.add_middleware(LoggingMiddleware)

app.include_router(profile_router.router)
app.include_router(stars_router.router)
app.include_router(year_cycles_router.router)
app.include_router(dst_router.router)
app.include_router(solar_terms_router.router)


@app.get("/__health")
def health():
    return {"ok": True}


@app.get("/")
def root():
    return {"message": "Nine Star Ki API is running. See /__health and /docs."}
