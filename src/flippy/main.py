# src/flippy/main.py
# Este arquivo é o ponto de entrada da aplicação FastAPI.

import logging
import uvicorn
from fastapi import FastAPI
from src.flippy.api.routes import router
from src.flippy.config.env import Config

logging.basicConfig(level=Config.LOG_LEVEL)

app = FastAPI(title="flippy")

# Incluindo as rotas da API
app.include_router(router)


if __name__ == "__main__":
    uvicorn.run(app, host=Config.HOST, port=Config.PORT)
