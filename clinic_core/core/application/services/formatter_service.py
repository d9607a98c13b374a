from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from clinic_core.core.domain.entities.period_entity import PeriodRange
from clinic_core.core.domain.services import period_resolver


class FormatterService:
    """
    Formatação pt-BR para a camada de apresentação
    (R$ 1.234,56, DD/MM/YYYY, rótulos de período e de mês).
    """

    def __init__(self, currency_symbol: str = "R$"):
        self.currency_symbol = currency_symbol

    def format_currency(self, amount: Decimal | float | int) -> str:
        amt = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        sign = "-" if amt < 0 else ""
        us_str = f"{abs(amt):,.2f}"  # ex.: "1,234.56"
        integer_part, decimal_part = us_str.split(".")
        return f"{sign}{self.currency_symbol} {integer_part.replace(',', '.')},{decimal_part}"

    def format_date(self, d: date | datetime) -> str:
        if isinstance(d, datetime):
            d = d.date()
        return d.strftime("%d/%m/%Y")

    def format_percentage(self, pct: float | int) -> str:
        return f"{pct:.0f}%"

    def format_period(self, period: PeriodRange) -> str:
        return period_resolver.label(period)

    def format_month(self, year: int, month: int) -> str:
        return f"{period_resolver.ABBREVIATED_MONTHS[month]}/{year}"
