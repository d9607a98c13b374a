from datetime import datetime
from zoneinfo import ZoneInfo

from config import settings


def clinic_now(tz_name: str = settings.CLINIC_TIMEZONE) -> datetime:
    """Relógio de parede da clínica; lido uma vez por consulta/comando."""
    return datetime.now(ZoneInfo(tz_name))
