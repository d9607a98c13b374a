from decouple import config

# -------------------------------
# Logging
# -------------------------------
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
JSON_LOGS = config("JSON_LOGS", default=False, cast=bool)

# -------------------------------
# Clínica
# -------------------------------
CLINIC_TIMEZONE = config("CLINIC_TIMEZONE", default="America/Sao_Paulo")

# Capacidade usada quando o dia está fechado ou sem horário configurado
DEFAULT_TOTAL_SLOTS = config("DEFAULT_TOTAL_SLOTS", default=20, cast=int)
SLOT_MINUTES = config("SLOT_MINUTES", default=30, cast=int)

# -------------------------------
# Financeiro
# -------------------------------
DEFAULT_CASH_BALANCE = config("DEFAULT_CASH_BALANCE", default="15000")
