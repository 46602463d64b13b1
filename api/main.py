"""FastAPI application"""
from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel
import io
import logging

from config.settings import settings
from date_analyzer import DateAnalyzer, DateInput, ValidationError
from reports import ReportGenerator, format_month

logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.log_level.upper()
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Math Date API",
    description="API for discovering mathematical patterns in dates",
    version="1.0.0"
)

# Initialization
analyzer = DateAnalyzer()
report_generator = ReportGenerator()


# Request models
class DateRequest(BaseModel):
    day: int
    month: int
    year: int


def _run_analysis(day: int, month: int, year: int):
    try:
        return analyzer.analyze(DateInput(day=day, month=month, year=year))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"errors": e.errors})


# API endpoints
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Math Date API",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/api/months")
async def get_months():
    """Month options for date pickers"""
    return {
        "success": True,
        "data": [{"value": m, "label": format_month(m)} for m in range(1, 13)]
    }


@app.post("/api/analyze")
async def analyze_date(request: DateRequest):
    """Analyze a date"""
    result = _run_analysis(request.day, request.month, request.year)

    return {
        "success": True,
        "data": result.model_dump()
    }


@app.post("/api/analyze/report")
async def analyze_date_report(request: DateRequest, explain: bool = False):
    """Analyze a date and render a text report"""
    result = _run_analysis(request.day, request.month, request.year)

    try:
        report = report_generator.generate_text_report(result, explain=explain)
    except ValueError as e:
        logger.error(f"Failed to render report: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "success": True,
        "report": report,
        "data": result.model_dump()
    }


@app.get("/api/analyze/colors")
async def analyze_date_colors(day: int, month: int, year: int):
    """Colour swatches derived from a date"""
    result = _run_analysis(day, month, year)

    try:
        image = report_generator.generate_color_swatches(result)
    except (ValueError, OSError) as e:
        logger.error(f"Failed to render swatches: {e}", exc_info=True)
        raise HTTPException(status_code=400, detail=str(e))

    return StreamingResponse(
        io.BytesIO(image),
        media_type="image/png",
        headers={"Content-Disposition": "attachment; filename=colors.png"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
