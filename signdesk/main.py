from fastapi import FastAPI

from signdesk.api.http.documents import router as documents_router
from signdesk.core.config import settings
from signdesk.core.logging import configure_logging

configure_logging(settings.log_level)

app = FastAPI(
    title="SignDesk",
    description="Изменение документов команды с проверкой прав и журналом аудита",
    version="1.0.0"
)

# Подключаем роутеры
app.include_router(documents_router)


@app.get("/health")
async def health():
    """Проверка доступности сервиса"""
    return {"status": "ok"}
