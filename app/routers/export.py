from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session
from app.database import get_db
import app.services.export_service as svc

router = APIRouter(prefix="/api", tags=["export"])


@router.get("/export/roster.xlsx")
def export_roster(db: Session = Depends(get_db)):
    xlsx_bytes = svc.export_roster_excel(db)
    return Response(
        content=xlsx_bytes,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=rozpis-pocitacu.xlsx"},
    )
