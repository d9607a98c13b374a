from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from clinic_core.core.application.dtos.store_payload_dtos import (
    AppointmentPayloadDTO,
    CompanyPayloadDTO,
    FinancialEntryPayloadDTO,
    PatientPayloadDTO,
)
from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.entities.company_config_entity import (
    WEEKDAYS,
    BusinessHours,
    CompanyConfigEntity,
    DayHours,
)
from clinic_core.core.domain.entities.financial_entry_entity import (
    EntryType,
    FinancialEntryEntity,
)
from clinic_core.core.domain.entities.patient_entity import PatientEntity

logger = structlog.get_logger(__name__)

E = TypeVar("E")


class MappingError(Exception):
    """Erro no mapeamento payload ➜ Entity."""


class StorePayloadMapper:
    """Converte linhas camelCase do store remoto nas entidades de domínio."""

    # ───────────────────────── helpers ──────────────────────────
    @staticmethod
    def _validate(model: type[BaseModel], row: dict[str, Any]) -> Any:
        try:
            return model.model_validate(row)
        except ValidationError as exc:
            logger.error(
                "payload.invalid",
                model=model.__name__,
                row_id=row.get("id") if isinstance(row, dict) else None,
                errors=exc.error_count(),
            )
            raise MappingError(str(exc)) from exc

    # ───────────────────────── pacientes ────────────────────────
    @classmethod
    def map_patient(cls, row: dict[str, Any]) -> PatientEntity:
        dto: PatientPayloadDTO = cls._validate(PatientPayloadDTO, row)
        return PatientEntity(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            cpf=dto.cpf,
            birth_date=dto.birthDate,
            gender=dto.gender,
            created_at=dto.createdAt,
        )

    # ───────────────────────── agendamentos ─────────────────────
    @classmethod
    def map_appointment(cls, row: dict[str, Any]) -> AppointmentEntity:
        # status desconhecido é mantido; a projeção decide o que ignorar
        dto: AppointmentPayloadDTO = cls._validate(AppointmentPayloadDTO, row)
        return AppointmentEntity(
            id=dto.id,
            patient_id=dto.patientId,
            date=dto.date,
            time=dto.time,
            status=dto.status,
            price=dto.price,
            paid=dto.paid,
            doctor_id=dto.doctorId,
            doctor_name=dto.doctorName,
            duration=dto.duration,
            type=dto.type,
        )

    # ───────────────────────── financeiro ───────────────────────
    @classmethod
    def map_financial_entry(cls, row: dict[str, Any]) -> FinancialEntryEntity:
        dto: FinancialEntryPayloadDTO = cls._validate(FinancialEntryPayloadDTO, row)
        try:
            entry_type = EntryType(dto.type)
        except ValueError as exc:
            logger.error("payload.invalid", model="FinancialEntryPayloadDTO", row_id=dto.id, type=dto.type)
            raise MappingError(f"tipo de lançamento inválido: {dto.type!r}") from exc
        return FinancialEntryEntity(
            id=dto.id,
            type=entry_type.value,
            category=dto.category,
            amount=dto.amount,
            date=dto.date,
            description=dto.description,
        )

    # ───────────────────────── empresa ──────────────────────────
    @classmethod
    def map_company(cls, row: dict[str, Any]) -> CompanyConfigEntity:
        dto: CompanyPayloadDTO = cls._validate(CompanyPayloadDTO, row)
        defaults = BusinessHours()
        days = {}
        for weekday in WEEKDAYS:
            payload = dto.businessHours.get(weekday)
            days[weekday] = (
                DayHours(open=payload.open, close=payload.close, is_open=payload.isOpen)
                if payload is not None
                else getattr(defaults, weekday)
            )
        return CompanyConfigEntity(
            id=dto.id,
            name=dto.name,
            cnpj=dto.cnpj,
            business_hours=BusinessHours(**days),
        )

    # ───────────────────────── lote ─────────────────────────────
    @staticmethod
    def map_many(mapper: Callable[[dict[str, Any]], E], rows: Iterable[dict[str, Any]]) -> list[E]:
        """Mapeia um lote; linhas inválidas são descartadas e registradas."""
        out: list[E] = []
        skipped = 0
        for row in rows:
            try:
                out.append(mapper(row))
            except MappingError:
                skipped += 1
        if skipped:
            logger.warning("payload.rows_skipped", mapper=getattr(mapper, "__name__", "?"), skipped=skipped)
        return out
