from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

import structlog

from clinic_core.core.application.dtos.dashboard_dto import DashboardMetricsDTO
from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity, AppointmentStatus
from clinic_core.core.domain.entities.company_config_entity import CompanyConfigEntity
from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity
from config import settings

logger = structlog.get_logger(__name__)

_UPCOMING = (AppointmentStatus.SCHEDULED, AppointmentStatus.CONFIRMED)


def total_slots_for(
    company: CompanyConfigEntity | None,
    day: date,
    default_total_slots: int = settings.DEFAULT_TOTAL_SLOTS,
    slot_minutes: int = settings.SLOT_MINUTES,
) -> int:
    """Capacidade do dia em slots; dia fechado ou sem configuração usa o padrão."""
    if company is None:
        return default_total_slots
    hours = company.business_hours.for_date(day)
    if not hours.is_open:
        return default_total_slots
    try:
        working_hours = hours.working_hours
    except ValueError:
        logger.warning("metrics.invalid_business_hours", open=hours.open, close=hours.close)
        return default_total_slots
    return working_hours * 60 // slot_minutes


def occupancy_rate(booked: int, total_slots: int) -> int:
    if total_slots <= 0:
        return 0
    rate = round(booked / total_slots * 100)
    return max(0, min(rate, 100))


def compute_metrics(  # noqa: PLR0913
    appointments: Iterable[AppointmentEntity],
    financial_entries: Iterable[FinancialEntryEntity],
    company: CompanyConfigEntity | None,
    now: datetime | date,
    default_total_slots: int = settings.DEFAULT_TOTAL_SLOTS,
    slot_minutes: int = settings.SLOT_MINUTES,
) -> DashboardMetricsDTO:
    """
    Indicadores do painel para o dia de `now`.

    `now` é lido uma única vez; consultas com status desconhecido ficam fora
    de todas as contagens.
    """
    today = now.date() if isinstance(now, datetime) else now
    current_time = now.strftime("%H:%M") if isinstance(now, datetime) else ""

    by_status: Counter[AppointmentStatus] = Counter()
    upcoming: list[str] = []
    for apt in appointments:
        if apt.date != today:
            continue
        status = apt.known_status
        if status is None:
            continue
        by_status[status] += 1
        if status in _UPCOMING and apt.time and apt.time >= current_time:
            upcoming.append(apt.time)

    monthly_revenue = sum(
        (
            entry.amount
            for entry in financial_entries
            if entry.is_income
            and entry.date.year == today.year
            and entry.date.month == today.month
        ),
        Decimal("0"),
    )

    today_patients = sum(by_status.values())
    slots = total_slots_for(company, today, default_total_slots, slot_minutes)

    return DashboardMetricsDTO(
        today_patients=today_patients,
        scheduled_appointments=by_status[AppointmentStatus.SCHEDULED],
        waiting_patients=by_status[AppointmentStatus.CONFIRMED],
        in_consultation_patients=by_status[AppointmentStatus.IN_PROGRESS],
        completed_today=by_status[AppointmentStatus.COMPLETED],
        monthly_revenue=monthly_revenue,
        occupancy_rate=occupancy_rate(today_patients, slots),
        total_slots=max(slots, 0),
        next_appointment=min(upcoming) if upcoming else None,
    )
