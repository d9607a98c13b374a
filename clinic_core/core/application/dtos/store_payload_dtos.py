import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ───────────────────────────────────────────────
# Linhas do store remoto (camelCase) → validação
# ───────────────────────────────────────────────


def _iso_day(value: object) -> object:
    # "2026-10-19T13:00:00Z" → "2026-10-19"
    if isinstance(value, str) and len(value) > 10:
        return value[:10]
    return value


class _StoreRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PatientPayloadDTO(_StoreRow):
    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    cpf: str | None = None
    birthDate: dt.date | None = Field(None, alias="birthDate")
    gender: str | None = None
    createdAt: dt.datetime | None = Field(None, alias="createdAt")

    @field_validator("birthDate", mode="before")
    @classmethod
    def _birth_day(cls, v):
        return _iso_day(v) or None


class AppointmentPayloadDTO(_StoreRow):
    id: str
    patientId: str = Field(alias="patientId")
    date: dt.date
    time: str = ""
    status: str
    price: Decimal = Decimal("0")
    paid: bool = False
    doctorId: str | None = Field(None, alias="doctorId")
    doctorName: str | None = Field(None, alias="doctorName")
    duration: int = 30
    type: str = "consultation"

    @field_validator("date", mode="before")
    @classmethod
    def _day(cls, v):
        return _iso_day(v)

    @field_validator("time", mode="before")
    @classmethod
    def _hhmm(cls, v):
        # Postgres devolve "HH:MM:SS"
        return (v or "")[:5]


class FinancialEntryPayloadDTO(_StoreRow):
    id: str
    type: str
    category: str
    amount: Decimal
    date: dt.date
    description: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _day(cls, v):
        return _iso_day(v)

    @field_validator("amount")
    @classmethod
    def _non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("amount deve ser >= 0")
        return v


class DayHoursPayloadDTO(_StoreRow):
    open: str = "08:00"
    close: str = "18:00"
    isOpen: bool = Field(True, alias="isOpen")


class CompanyPayloadDTO(_StoreRow):
    id: str
    name: str
    cnpj: str | None = None
    businessHours: dict[str, DayHoursPayloadDTO] = Field(default_factory=dict, alias="businessHours")
