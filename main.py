from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging
from dotenv import load_dotenv

from db import engine, init_db
from results.routes import router as results_router

load_dotenv()

logging.basicConfig(level=logging.INFO)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app = FastAPI(title="Dormitory Evaluation Results")

def startup_message() -> str:
    return f"Starting {app.title} on {engine.url.get_backend_name()}"

logging.info(startup_message())

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

init_db()

app.include_router(results_router)

@app.get("/", tags=["meta"])
def root():
    return {"service": "dormitory-evaluation-results", "status": "ok"}
