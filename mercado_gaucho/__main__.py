# mercado_gaucho/__main__.py
# Локальный запуск: python -m mercado_gaucho

import uvicorn

from mercado_gaucho.core.config import settings
from mercado_gaucho.core.logging_config import LOGGING_CONFIG

if __name__ == "__main__":
    uvicorn.run(
        "mercado_gaucho.main:app",
        host="0.0.0.0",
        port=settings.API_PORT,
        reload=not settings.IS_PRODUCTION,
        log_config=LOGGING_CONFIG,
    )
