"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ADMIN_ACCOUNT_ID = "admin"
ADMIN_USERNAME = "adm"
DEFAULT_ADMIN_PASSWORD = "adm"

DEFAULT_PASSWORD_MIN_LENGTH = 4
DEFAULT_SESSION_DAYS = 7

COUNTER_MAX = 10
AMOUNT_MAX = "999.99"
HOURS_MAX = "999.9"
WORK_TIME_MAX = "999"
RSO_MAX_DIGITS = 6

EXPORT_SHEET_NAME = "Relatorios"
EXPORT_FILENAME = "relatorio_atividades.xlsx"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
