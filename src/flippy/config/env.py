# src/flippy/config/env.py
# Este arquivo contém a configuração de variáveis de ambiente do flippy.

import os
from dotenv import load_dotenv

# Carregar variáveis de ambiente do arquivo .env
load_dotenv()


def parse_tokens(raw):
    """Converte a lista de tokens separada por vírgulas em um conjunto"""
    if not raw:
        return frozenset()
    return frozenset(token.strip() for token in raw.split(",") if token.strip())


def parse_flag(raw):
    return (raw or "").strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # Segredos do Slack
    SLACK_TOKENS = parse_tokens(os.getenv("SLACK_TOKEN"))
    SLACK_TRIGGERWORD = os.getenv("SLACK_TRIGGERWORD", "")

    # Se ligado, falhas de autenticação retornam 403 em vez de seguir em frente
    STRICT_AUTH = parse_flag(os.getenv("FLIPPY_STRICT_AUTH"))

    # Servidor e logs
    LOG_LEVEL = os.getenv("FLIPPY_LOG_LEVEL", "INFO").upper()
    HOST = os.getenv("FLIPPY_HOST", "0.0.0.0")
    PORT = int(os.getenv("FLIPPY_PORT", "8080"))
