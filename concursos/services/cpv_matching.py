import re

from sqlalchemy.sql.elements import ColumnElement

from concursos.models.cpvs import Cpv

# Хвост из двух и более нулей обозначает более широкую категорию CPV
_TRAILING_ZEROS = re.compile(r"^(\d*?)(00+)$")


def cpv_prefix(code: str) -> str | None:
    """Возвращает префикс для поиска по дочерним кодам или None для точного совпадения.

    "72000000" -> "72", "72100000" -> "721", "72131000" -> "72131", "72131001" -> None
    """
    match = _TRAILING_ZEROS.match(code.strip())
    if not match:
        return None
    return match.group(1)


def cpv_code_clause(code: str) -> ColumnElement:
    prefix = cpv_prefix(code)
    if prefix is None:
        return Cpv.code == code.strip()
    return Cpv.code.like(f"{prefix}%")
