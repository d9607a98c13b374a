"""Tabelas de status: mapeamento consulta → paciente e prioridade de exibição."""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from clinic_core.core.domain.entities.appointment_entity import AppointmentStatus


class PatientStatus(str, Enum):
    WAITING = "waiting"
    IN_CONSULTATION = "in-consultation"
    COMPLETED = "completed"
    SCHEDULED = "scheduled"


# Cancelados e faltas continuam "scheduled" no painel, mas não estão ativos.
PATIENT_STATUS_BY_APPOINTMENT = MappingProxyType({
    AppointmentStatus.CONFIRMED: PatientStatus.WAITING,
    AppointmentStatus.IN_PROGRESS: PatientStatus.IN_CONSULTATION,
    AppointmentStatus.COMPLETED: PatientStatus.COMPLETED,
    AppointmentStatus.CANCELLED: PatientStatus.SCHEDULED,
    AppointmentStatus.NO_SHOW: PatientStatus.SCHEDULED,
    AppointmentStatus.SCHEDULED: PatientStatus.SCHEDULED,
})

# Maior valor vence quando o paciente tem mais de uma consulta no dia.
STATUS_PRIORITY = MappingProxyType({
    AppointmentStatus.IN_PROGRESS: 5,
    AppointmentStatus.CONFIRMED: 4,
    AppointmentStatus.SCHEDULED: 3,
    AppointmentStatus.COMPLETED: 2,
    AppointmentStatus.CANCELLED: 1,
    AppointmentStatus.NO_SHOW: 1,
})


def patient_status_for(status: AppointmentStatus) -> PatientStatus:
    return PATIENT_STATUS_BY_APPOINTMENT[status]


def priority_of(status: AppointmentStatus) -> int:
    return STATUS_PRIORITY[status]
