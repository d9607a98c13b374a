from __future__ import annotations

from datetime import datetime, time, timedelta
from zoneinfo import ZoneInfo

from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from config import settings


def appointment_window(
    appointment: AppointmentEntity,
    tz_name: str = settings.CLINIC_TIMEZONE,
) -> tuple[datetime, datetime]:
    """Início/fim (timezone-aware) da consulta, no fuso da clínica."""
    start = datetime.combine(
        appointment.date,
        time.fromisoformat(appointment.time),
        tzinfo=ZoneInfo(tz_name),
    )
    return start, start + timedelta(minutes=appointment.duration or settings.SLOT_MINUTES)
