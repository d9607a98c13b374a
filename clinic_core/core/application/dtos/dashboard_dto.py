from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.entities.patient_entity import PatientEntity
from clinic_core.core.domain.services.status_rules import PatientStatus


@dataclass(frozen=True)
class PatientWithStatusDTO:
    patient: PatientEntity
    status: PatientStatus
    appointment_time: str | None
    current_appointment: AppointmentEntity

    @property
    def patient_id(self) -> str:
        return self.patient.id


@dataclass(frozen=True)
class DashboardMetricsDTO:
    today_patients: int = 0
    scheduled_appointments: int = 0
    waiting_patients: int = 0
    in_consultation_patients: int = 0
    completed_today: int = 0
    monthly_revenue: Decimal = Decimal("0")
    occupancy_rate: int = 0
    total_slots: int = 0
    next_appointment: str | None = None
