"""Funciones para renderizar snapshots en consola (rich/plain/json)."""

import json
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from centinela.analysis.indicators import summarize_trend
from centinela.analysis.thresholds import alert_info
from centinela.analysis.window import RollingWindow
from centinela.core.models import TelemetrySnapshot
from centinela.output.formatters import format_clock, format_number


def build_summary(snapshot: TelemetrySnapshot) -> Dict:
    """Arma el resumen serializable que consumen los tres formatos de consola."""
    info = alert_info(snapshot.alert_level)
    reading = snapshot.reading
    window = RollingWindow(max(1, len(snapshot.window)), snapshot.window)
    return {
        "time": snapshot.updated_at.isoformat(),
        "clock": format_clock(snapshot.updated_at),
        "state": snapshot.alert_level.name,
        "alert": {"label": info.label, "description": info.description, "color": info.color},
        "sensors": {
            "radar_mm": round(reading.radar, 1),
            "lidar_mm": round(reading.lidar, 1),
            "wind_speed_km_h": round(reading.weather.wind_speed, 1),
            "temperature_c": round(reading.weather.temperature, 0),
            "humidity_pct": round(reading.weather.humidity, 0),
            "acoustic_db": round(reading.acoustic, 0),
            "slope_movement_mm": round(reading.slope_movement, 1),
        },
        "trend": [{"time": s.label, "movement_mm": round(s.movement, 2)} for s in snapshot.window],
        "trend_summary": summarize_trend(window),
    }


def print_snapshot_console(snapshot: TelemetrySnapshot, console_format: str, console: Optional[Console] = None) -> None:
    """Renderiza un snapshot por consola en formato rich/plain/json.

    Args:
        snapshot: Snapshot del motor
        console_format: Formato de salida ("rich", "plain", "json")
        console: Consola rich a usar (opcional, solo formato "rich")
    """
    summary = build_summary(snapshot)

    if console_format == "json":
        print(json.dumps(summary, ensure_ascii=False, indent=2))
        return

    if console_format == "rich":
        _print_rich_console(summary, console or Console())
        return

    _print_plain_console(summary)


def _print_rich_console(summary: Dict, console: Console) -> None:
    """Imprime en formato rich con colores y tablas."""
    alert = summary["alert"]
    state_style = f"bold {alert['color']}"
    console.rule(f"SNAPSHOT @ {summary['time']}")
    console.print(
        Panel(
            f"{alert['label']} - {alert['description']}\n"
            f"Movimiento del talud: {format_number(summary['sensors']['slope_movement_mm'], 1)} mm",
            title="Estado",
            style=state_style,
        )
    )

    labels = {
        "radar_mm": "Radar - desplazamiento (mm)",
        "lidar_mm": "LiDAR - deformación superficial (mm)",
        "wind_speed_km_h": "Viento (km/h)",
        "temperature_c": "Temperatura (°C)",
        "humidity_pct": "Humedad relativa (%)",
        "acoustic_db": "Acústica (dB)",
    }
    t = Table(show_header=True, header_style="bold")
    t.add_column("Sensor")
    t.add_column("Valor")
    for key, label in labels.items():
        t.add_row(label, str(summary["sensors"][key]))
    console.print(Panel(t, title="Sensores en vivo"))

    tt = Table(show_header=True, header_style="bold")
    tt.add_column("Hora")
    tt.add_column("Movimiento (mm)")
    for row in summary["trend"]:
        tt.add_row(row["time"], format_number(row["movement_mm"], 1))
    trend = summary["trend_summary"]
    caption = (
        f"máx={format_number(trend['max_mm'], 1)} mm | "
        f"variación={format_number(trend['change_mm'], 1)} mm | "
        f"EMA={format_number(trend['ema_mm'], 2)} mm"
    )
    console.print(Panel(tt, title="Tendencia de movimiento", subtitle=caption))


def _print_plain_console(summary: Dict) -> None:
    """Imprime en formato plain text sin colores."""
    sensors = summary["sensors"]
    print(f"\n=== {summary['time']} ===")
    print(f"Estado: {summary['alert']['label']} ({summary['alert']['description']})")
    print("Sensores:")
    print(f"  - Radar (mm): {sensors['radar_mm']}")
    print(f"  - LiDAR (mm): {sensors['lidar_mm']}")
    print(
        f"  - Clima: {sensors['wind_speed_km_h']} km/h, "
        f"{sensors['temperature_c']:.0f}°C, {sensors['humidity_pct']:.0f}% RH"
    )
    print(f"  - Acústica (dB): {sensors['acoustic_db']:.0f}")
    print(f"  - Movimiento del talud (mm): {sensors['slope_movement_mm']}")
    trend = " ".join(f"{row['time']}={format_number(row['movement_mm'], 1)}" for row in summary["trend"])
    print(f"Tendencia: {trend}")
    print(f"Última actualización: {summary['clock']}")
