"""Constantes globales: umbrales, límites de sensores y configuración de referencia."""

import math

# Estados posibles del sistema (claves de AlertLevel)
STATE_SAFE = "SAFE"
STATE_WARNING = "WARNING"
STATE_CRITICAL = "CRITICAL"

# Umbrales fijos de movimiento de talud (mm), comparación estricta ">"
SLOPE_WARNING_MM = 7.0
SLOPE_CRITICAL_MM = 10.0

# Límites (inferior, superior) por campo escalar de la lectura
FIELD_BOUNDS = {
    "radar": (0.0, math.inf),  # mm
    "lidar": (0.0, math.inf),  # mm
    "wind_speed": (0.0, math.inf),  # km/h
    "temperature": (-10.0, 35.0),  # °C
    "humidity": (0.0, 100.0),  # %
    "acoustic": (0.0, math.inf),  # dB
    "slope_movement": (0.0, math.inf),  # mm
}

# Amplitud total de la perturbación por tick: uniform(-δ/2, δ/2)
FIELD_DELTAS = {
    "radar": 0.5,
    "lidar": 0.3,
    "wind_speed": 2.0,
    "temperature": 0.5,
    "humidity": 2.0,
    "acoustic": 5.0,
    "slope_movement": 0.8,
}

# Cadencias de referencia (segundos)
DEFAULT_FAST_INTERVAL_S = 2.0
DEFAULT_SLOW_INTERVAL_S = 30.0

# Capacidad de la ventana de tendencia
DEFAULT_WINDOW_CAPACITY = 7

# Lectura semilla al iniciar el motor
SEED_READING_VALUES = {
    "radar": 2.3,
    "lidar": 1.8,
    "weather": {"wind_speed": 12.5, "temperature": 18.0, "humidity": 65.0},
    "acoustic": 45.0,
    "slope_movement": 8.2,
}

# Tendencia semilla (mm), una muestra cada 30 min desde las 00:00
SEED_TREND_MM = (5.2, 5.8, 6.1, 6.8, 7.2, 7.9, 8.2)
SEED_TREND_STEP_MIN = 30

# Metadatos de presentación por nivel
ALERT_METADATA = {
    STATE_SAFE: {"label": "SAFE", "description": "All systems normal", "color": "green"},
    STATE_WARNING: {"label": "WARNING", "description": "Increased monitoring required", "color": "yellow"},
    STATE_CRITICAL: {"label": "CRITICAL", "description": "Immediate evacuation recommended", "color": "red"},
}

# Formatos de consola disponibles
CONSOLE_FORMATS = ("rich", "plain", "json")

# Niveles de logging aceptados
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
