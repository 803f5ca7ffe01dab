# src/flippy/services/validator.py
# Este arquivo contém a classe RequestValidator, que converte o formulário do Slack
# em um SlackCommand e confere o token e a palavra de gatilho.

import logging
import re
from src.flippy.config.env import Config
from src.flippy.core.exceptions import AuthError, DecodeError
from src.flippy.models.payload import SlackCommand

logger = logging.getLogger(__name__)

# Um "%" que não é seguido por dois dígitos hexadecimais
BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


def check_urlencoded(body: bytes):
    """Rejeita corpos x-www-form-urlencoded com escapes inválidos"""
    match = BAD_ESCAPE.search(body)
    if match:
        raise DecodeError(f"escape inválido na posição {match.start()}")


# Nome do campo no formulário -> nome do campo no SlackCommand
FORM_FIELDS = {
    "token": "token",
    "trigger_word": "trigger_word",
    "text": "text",
}


class RequestValidator:
    def __init__(self, allowed_tokens=None, trigger_word=None):
        # Se não passar os valores, utiliza os da configuração
        self.allowed_tokens = frozenset(
            Config.SLACK_TOKENS if allowed_tokens is None else allowed_tokens
        )
        self.trigger_word = (
            Config.SLACK_TRIGGERWORD if trigger_word is None else trigger_word
        )

    def parse(self, form) -> SlackCommand:
        """Extrai os campos esperados do formulário já decodificado"""
        values = {}
        for form_name, field_name in FORM_FIELDS.items():
            value = form.get(form_name)
            if value is None:
                raise DecodeError(f"campo obrigatório ausente: {form_name}")
            if not isinstance(value, str):
                raise DecodeError(f"campo com tipo inválido: {form_name}")
            values[field_name] = value

        command = SlackCommand(**values)
        logger.info(
            "Comando recebido: trigger_word=%r text=%r",
            command.trigger_word,
            command.text,
        )
        return command

    def validate(self, command: SlackCommand):
        """Lança AuthError se o token ou a palavra de gatilho não baterem"""
        if (
            command.token not in self.allowed_tokens
            or command.trigger_word != self.trigger_word
        ):
            logger.debug("triggerword=%s", command.trigger_word)
            raise AuthError("token ou palavra de gatilho inválidos")
