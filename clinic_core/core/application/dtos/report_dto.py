from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from clinic_core.core.domain.entities.appointment_entity import AppointmentEntity
from clinic_core.core.domain.entities.period_entity import PeriodRange


@dataclass(frozen=True)
class CategoryTotalDTO:
    category: str
    amount: Decimal
    share: float  # % sobre o total do mesmo tipo


@dataclass(frozen=True)
class IncomeStatementDTO:
    revenue: tuple[CategoryTotalDTO, ...] = ()
    expenses: tuple[CategoryTotalDTO, ...] = ()
    total_revenue: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")

    @property
    def net_result(self) -> Decimal:
        return self.total_revenue - self.total_expenses

    @property
    def margin(self) -> float:
        if not self.total_revenue:
            return 0.0
        return round(float(self.net_result / self.total_revenue * 100), 2)


@dataclass(frozen=True)
class PeriodReportDTO:
    period: PeriodRange
    label: str
    total_patients: int
    total_appointments: int
    completed_appointments: int
    cancelled_appointments: int
    appointments_by_status: dict[str, int] = field(default_factory=dict)
    appointments_by_doctor: dict[str, int] = field(default_factory=dict)
    income_statement: IncomeStatementDTO = field(default_factory=IncomeStatementDTO)


@dataclass(frozen=True)
class MonthlyTrendDTO:
    year: int
    month: int
    label: str
    appointments: int
    revenue: Decimal
    expenses: Decimal

    @property
    def profit(self) -> Decimal:
        return self.revenue - self.expenses


@dataclass(frozen=True)
class PatientHistoryDTO:
    total_appointments: int
    last_appointment: AppointmentEntity | None = None
    last_exam: AppointmentEntity | None = None

    @property
    def is_new(self) -> bool:
        return self.total_appointments == 0
