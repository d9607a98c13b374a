from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import structlog

from clinic_core.adapters.observability.metrics import STATUS_PROJECTION_SKIPPED
from clinic_core.core.application.dtos.dashboard_dto import PatientWithStatusDTO
from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity, AppointmentStatus
from clinic_core.core.domain.entities.patient_entity import PatientEntity
from clinic_core.core.domain.services.status_rules import patient_status_for, priority_of

logger = structlog.get_logger(__name__)


def _supersedes(candidate: AppointmentEntity, current: AppointmentEntity) -> bool:
    """
    Maior prioridade vence. Empate: horário mais tarde vence; mesmo horário,
    vence a consulta que aparece depois na entrada.
    """
    cand_rank = priority_of(AppointmentStatus(candidate.status))
    curr_rank = priority_of(AppointmentStatus(current.status))
    if cand_rank != curr_rank:
        return cand_rank > curr_rank
    return (candidate.time or "") >= (current.time or "")


def project_today(
    patients: Iterable[PatientEntity],
    appointments: Iterable[AppointmentEntity],
    today: date,
) -> list[PatientWithStatusDTO]:
    """
    Status "ao vivo" de cada paciente com consulta hoje.

    Garante no máximo uma linha por paciente; pacientes sem consulta hoje
    ficam de fora. Linhas ordenadas pelo horário (sem horário primeiro).
    """
    patients_by_id = {p.id: p for p in patients}
    chosen: dict[str, AppointmentEntity] = {}
    skipped = {"unknown_patient": 0, "unknown_status": 0}

    for apt in appointments:
        if apt.date != today:
            continue
        if apt.known_status is None:
            skipped["unknown_status"] += 1
            logger.debug("status_projection.skip", appointment_id=apt.id, reason="unknown_status", status=apt.status)
            continue
        if apt.patient_id not in patients_by_id:
            skipped["unknown_patient"] += 1
            logger.debug("status_projection.skip", appointment_id=apt.id, reason="unknown_patient")
            continue

        current = chosen.get(apt.patient_id)
        if current is None or _supersedes(apt, current):
            chosen[apt.patient_id] = apt

    for reason, total in skipped.items():
        if total:
            STATUS_PROJECTION_SKIPPED.labels(reason=reason).inc(total)

    rows = [
        PatientWithStatusDTO(
            patient=patients_by_id[patient_id],
            status=patient_status_for(AppointmentStatus(apt.status)),
            appointment_time=apt.time or None,
            current_appointment=apt,
        )
        for patient_id, apt in chosen.items()
    ]
    return sorted(rows, key=lambda row: row.appointment_time or "")
