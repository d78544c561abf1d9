"""
Fechas en UTC para payloads de respuesta (health, errores).
"""
from datetime import datetime, timezone


class DateTimeUtils:
    """Helpers de fecha/hora; todo se expresa en UTC."""

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """
        ISO 8601 con offset. Un datetime naive se interpreta como UTC
        (SQLite devuelve fechas sin zona horaria).
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.isoformat()

    @classmethod
    def now_iso(cls) -> str:
        return cls.to_iso_string(cls.now_utc())
