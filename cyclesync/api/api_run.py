from datetime import date
import logging

from fastapi import Depends, FastAPI, Query, Response

from cyclesync.api.dependencies import get_today, parse_date_or_400
from cyclesync.api.routes import insights, logs, plan
from cyclesync.infra.Plan_Repository import PlanRepository
from cyclesync.infra.pdf_utils import generate_pdf_for_week
from cyclesync.utilities.config import LOG_LEVEL
from cyclesync.utilities.dates import monday_of

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("cyclesync_app")

# Initialize FastAPI app
app = FastAPI(title="CycleSync Training Log API")

# Include routers
app.include_router(logs.router)
app.include_router(plan.router)
app.include_router(insights.router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/export_pdf")
def export_pdf(start: str = Query(..., description="Any date in the week"), today: date = Depends(get_today)):
    week_start = monday_of(parse_date_or_400(start, "week start"))
    week = PlanRepository().get_week(week_start, today)
    pdf_bytes = generate_pdf_for_week(week)
    logger.info("Exported plan week %s as PDF", week_start)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="plan_{week_start}.pdf"'}
    )
