# src/flippy/core/exceptions.py
# Exceções usadas no processamento dos comandos do Slack.


class FlippyError(Exception):
    """Erro base do flippy"""


class DecodeError(FlippyError):
    """O corpo da requisição não pôde ser convertido em um comando"""


class AuthError(FlippyError):
    """Token ou palavra de gatilho não reconhecidos"""
