import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from centinela.analysis import alert_info, alert_levels, summarize_trend
from centinela.core.logging_config import configure_logging
from centinela.core.settings import get_settings
from centinela.output import chart_points
from centinela.simulation import TelemetryEngine

configure_logging()
logger = logging.getLogger(__name__)

STATIC_PATH = Path("web")


def create_app(engine: Optional[TelemetryEngine] = None) -> FastAPI:
    """Crea la API web sobre un motor de telemetría.

    Args:
        engine: Motor a exponer (por defecto uno construido desde `get_settings()`)

    Returns:
        Aplicación FastAPI que inicia el motor al arrancar y lo detiene al apagarse
    """
    app = FastAPI(title="Centinela de Taludes - API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.engine = engine if engine is not None else TelemetryEngine.from_settings(get_settings())

    @app.get("/api/snapshot")
    def get_snapshot(request: Request):
        """Snapshot actual: lectura, nivel de alerta y ventana de tendencia."""
        snapshot = request.app.state.engine.current_snapshot()
        data = snapshot.to_dict()
        info = alert_info(snapshot.alert_level)
        data["alert"] = {"label": info.label, "description": info.description, "color": info.color}
        return data

    @app.get("/api/trend")
    def get_trend(request: Request, span: int = Query(3, ge=1, le=50)):
        """Tendencia con puntos de gráfico ya escalados y resumen estadístico."""
        window = request.app.state.engine.current_window()
        samples = window.samples
        return {
            "capacity": window.capacity,
            "samples": [s.to_dict() for s in samples],
            "points": [{"x": x, "y": y} for x, y in chart_points(samples)],
            "summary": summarize_trend(window, span=span),
        }

    @app.get("/api/alert-levels")
    def get_alert_levels():
        """Niveles de alerta con sus rangos y metadatos de presentación."""
        return {"levels": alert_levels()}

    @app.get("/")
    def index(request: Request):
        file = STATIC_PATH / "index.html"
        if file.exists():
            return FileResponse(str(file))
        return JSONResponse({"ok": True, "message": "API Viva", "running": request.app.state.engine.running})

    # ========================================================================
    # CICLO DE VIDA DEL MOTOR
    # ========================================================================

    @app.on_event("startup")
    def start_engine():
        """Inicia el motor de telemetría al montar la aplicación."""
        eng = app.state.engine
        eng.start()
        logger.info("✅ Motor iniciado - lecturas cada %.1fs, tendencia cada %.1fs", eng.fast_interval_s, eng.slow_interval_s)

    @app.on_event("shutdown")
    def stop_engine():
        """Detiene el motor al apagar la aplicación."""
        app.state.engine.stop()
        logger.info("🛑 Motor detenido")

    return app


app = create_app()
