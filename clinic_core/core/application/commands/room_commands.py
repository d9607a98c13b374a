from dataclasses import dataclass

from clinic_core.core.application.cqrs import CommandDTO


@dataclass(frozen=True, slots=True)
class AllocateRoomCommand(CommandDTO):
    appointment_id: str
    # Sem profissional explícito, usa o doctor_id da consulta
    professional_id: str | None = None


@dataclass(frozen=True, slots=True)
class DeallocateRoomCommand(CommandDTO):
    appointment_id: str
