import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from concursos.api.v1 import routes
from concursos.core.config import settings
from concursos.core.logging_config import logger

app = FastAPI(
    title="Concursos",
    description="Pesquisa e acompanhamento de anúncios de procedimentos de contratação pública.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

app.include_router(routes.router)

if __name__ == "__main__":
    logger.info(f"Starting API on port {settings.APP_PORT}")
    uvicorn.run("concursos.main:app", host="0.0.0.0", port=settings.APP_PORT)
