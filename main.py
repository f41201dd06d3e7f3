from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import configure_logging
from routers import cities, compare

configure_logging()

app = FastAPI(
    title="Kedarnath Stay Compare",
    description="Side-by-side comparison of stop-over cities on the Kedarnath Yatra route",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(cities.router)
app.include_router(compare.router)


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": "Kedarnath Stay Compare API is running",
        "docs":    "/docs"
    }
