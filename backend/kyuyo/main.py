from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from kyuyo import models
from kyuyo.config import settings
from kyuyo.database import SessionLocal, engine
from kyuyo.routers import dashboard, payslip, settings as settings_router
from kyuyo.services.navigation import seed_navigation

# Ensure application logs show informative messages
logging.basicConfig(
    level=settings.log_level,
    format="%(levelname)s:%(name)s:%(message)s"
)

models.Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = SessionLocal()
    try:
        seed_navigation(db)
    finally:
        db.close()
    yield


app = FastAPI(title="KyuyoNote API", lifespan=lifespan)

app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])
app.include_router(payslip.router, prefix="/api/payslips", tags=["payslips"])
app.include_router(settings_router.router, prefix="/api/settings", tags=["settings"])


@app.get("/")
def read_root():
    return {"message": "KyuyoNote API"}
