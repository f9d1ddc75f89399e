from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.dashboard import DashboardData
from ..services.dashboard import get_dashboard_data

router = APIRouter()


@router.get("/", response_model=DashboardData)
def dashboard(db: Session = Depends(get_db)):
    return get_dashboard_data(db)
