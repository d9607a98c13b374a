"""
Fábricas de entidades para os testes.

Valores padrão cobrem o caso comum; cada teste sobrescreve só o que importa.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from itertools import count

from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.entities.financial_entry_entity import FinancialEntryEntity
from clinic_core.core.domain.entities.patient_entity import PatientEntity

TODAY = date(2026, 10, 19)  # segunda-feira

_ids = count(1)


def patient(patient_id: str, name: str | None = None, **kw) -> PatientEntity:
    return PatientEntity(id=patient_id, name=name or f"Paciente {patient_id}", **kw)


def appointment(
    patient_id: str,
    status: str = "scheduled",
    time: str = "09:00",
    day: date = TODAY,
    **kw,
) -> AppointmentEntity:
    kw.setdefault("id", f"apt-{next(_ids)}")
    return AppointmentEntity(patient_id=patient_id, date=day, time=time, status=status, **kw)


def entry(
    entry_type: str,
    category: str,
    amount: int | str | Decimal,
    day: date = TODAY,
    **kw,
) -> FinancialEntryEntity:
    kw.setdefault("id", f"fin-{next(_ids)}")
    return FinancialEntryEntity(
        type=entry_type,
        category=category,
        amount=Decimal(amount),
        date=day,
        **kw,
    )
