from fastapi import HTTPException, Path

from concursos.core.logging_config import logger


def parse_announcement_id(raw: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail="Invalid announcement ID")


async def announcement_id_path(announcement_id: str = Path(..., description="ID анонса")) -> int:
    return parse_announcement_id(announcement_id)


def internal_error(message: str, error: Exception) -> HTTPException:
    """Логирует ошибку со стеком и возвращает 500 без внутренних деталей кроме текста ошибки."""
    logger.error(f"{message}: {str(error)}", exc_info=True)
    return HTTPException(status_code=500, detail={"message": message, "error": str(error)})
