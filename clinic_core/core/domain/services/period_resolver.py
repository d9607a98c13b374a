"""
Resolução de períodos (dia / semana / mês / personalizado).

Todas as funções são puras e trabalham com `datetime.date`; o chamador é
responsável por validar strings ISO antes de chegar aqui. Qualquer
`PeriodRange` devolvido por este módulo respeita `start_date <= end_date`.
"""
from __future__ import annotations

import calendar
from collections.abc import Callable, Iterable
from datetime import date, timedelta
from typing import TypeVar

from clinic_core.core.domain.entities.period_entity import PeriodRange, PeriodType

T = TypeVar("T")

MONTHS = {
    1: "janeiro", 2: "fevereiro", 3: "março", 4: "abril",
    5: "maio", 6: "junho", 7: "julho", 8: "agosto",
    9: "setembro", 10: "outubro", 11: "novembro", 12: "dezembro",
}

ABBREVIATED_MONTHS = {
    1: "jan", 2: "fev", 3: "mar", 4: "abr",
    5: "mai", 6: "jun", 7: "jul", 8: "ago",
    9: "set", 10: "out", 11: "nov", 12: "dez",
}


# ───────────────────────── helpers ──────────────────────────
def _week_bounds(reference: date) -> tuple[date, date]:
    start = reference - timedelta(days=reference.weekday())  # segunda-feira
    return start, start + timedelta(days=6)


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def _shift_month(reference: date, months: int) -> tuple[int, int]:
    index = reference.year * 12 + (reference.month - 1) + months
    return index // 12, index % 12 + 1


# ───────────────────────── construção ──────────────────────────
def custom(start: date, end: date) -> PeriodRange:
    """Período personalizado; datas invertidas são trocadas (min/max)."""
    return PeriodRange(PeriodType.CUSTOM, min(start, end), max(start, end))


def period_for(period_type: PeriodType | str, reference: date) -> PeriodRange:
    """Janela alinhada ao calendário que contém `reference`."""
    period_type = PeriodType(period_type)
    if period_type is PeriodType.DAY:
        return PeriodRange(period_type, reference, reference)
    if period_type is PeriodType.WEEK:
        return PeriodRange(period_type, *_week_bounds(reference))
    if period_type is PeriodType.MONTH:
        return PeriodRange(period_type, *_month_bounds(reference.year, reference.month))
    return custom(reference, reference)


def today(period_type: PeriodType | str, now: date) -> PeriodRange:
    return period_for(period_type, now)


def change_type(period: PeriodRange, new_type: PeriodType | str) -> PeriodRange:
    """
    Troca o tipo mantendo a data inicial como referência.
    Para `custom` a janela atual é preservada.
    """
    new_type = PeriodType(new_type)
    if new_type is PeriodType.CUSTOM:
        return custom(period.start_date, period.end_date)
    return period_for(new_type, period.start_date)


# ───────────────────────── consulta ──────────────────────────
def resolve(period: PeriodRange) -> tuple[date, date]:
    start, end = period.start_date, period.end_date
    return (start, end) if start <= end else (end, start)


def contains(period: PeriodRange, day: date) -> bool:
    start, end = resolve(period)
    return start <= day <= end


def filter_by_period(items: Iterable[T], period: PeriodRange, key: Callable[[T], date | None]) -> list[T]:
    """Itens cuja data (via `key`) cai dentro do período. Datas ausentes são descartadas."""
    start, end = resolve(period)
    out: list[T] = []
    for item in items:
        value = key(item)
        if value is not None and start <= value <= end:
            out.append(item)
    return out


# ───────────────────────── navegação ──────────────────────────
def navigate(period: PeriodRange, direction: int) -> PeriodRange:
    """
    Avança (+1) ou recua (-1) exatamente uma unidade do período.

    - day/week: desloca 1 ou 7 dias mantendo o alinhamento;
    - month: cai sempre no primeiro/último dia do mês vizinho;
    - custom: desloca pela largura da janela, preservando-a.
    """
    if direction not in (1, -1):
        raise ValueError(f"direção inválida: {direction!r} (use +1 ou -1)")

    start, end = resolve(period)
    period_type = PeriodType(period.type)

    if period_type is PeriodType.DAY:
        return period_for(period_type, start + timedelta(days=direction))
    if period_type is PeriodType.WEEK:
        return period_for(period_type, start + timedelta(days=7 * direction))
    if period_type is PeriodType.MONTH:
        year, month = _shift_month(start, direction)
        return PeriodRange(period_type, *_month_bounds(year, month))

    width = timedelta(days=(end - start).days + 1)
    return custom(start + width * direction, end + width * direction)


# ───────────────────────── rótulos ──────────────────────────
def _short(day: date, with_year: bool = False) -> str:
    text = f"{day.day:02d} {ABBREVIATED_MONTHS[day.month]}"
    return f"{text} {day.year}" if with_year else text


def label(period: PeriodRange) -> str:
    """Rótulo pt-BR para exibição; não faz parte de nenhum contrato numérico."""
    start, end = resolve(period)
    period_type = PeriodType(period.type)
    if period_type is PeriodType.DAY:
        return f"{start.day:02d} de {MONTHS[start.month]} de {start.year}"
    if period_type is PeriodType.WEEK:
        return f"{_short(start)} - {_short(end, with_year=True)}"
    if period_type is PeriodType.MONTH:
        return f"{MONTHS[start.month]} de {start.year}"
    return f"{_short(start, with_year=True)} - {_short(end, with_year=True)}"
