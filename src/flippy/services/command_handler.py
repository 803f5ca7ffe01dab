# src/flippy/services/command_handler.py
# Este módulo é responsável por transformar um comando validado na resposta do Slack

import logging
from src.flippy.core.exceptions import AuthError
from src.flippy.core.flipper import build_response_text, flip
from src.flippy.models.payload import SlackCommand, SlackResponse
from src.flippy.services.validator import RequestValidator

logger = logging.getLogger(__name__)


class CommandHandler:
    def __init__(self, validator: RequestValidator, strict_auth=False):
        self.validator = validator
        self.strict_auth = strict_auth

    def handle(self, command: SlackCommand) -> SlackResponse:
        """Valida o comando e monta a resposta com o texto virado"""
        try:
            self.validator.validate(command)
        except AuthError as e:
            logger.error("Falha na validação do comando: %s", e)
            # Por padrão a falha só é registrada e a resposta sai mesmo assim
            if self.strict_auth:
                raise

        flipped = flip(command.text, self.validator.trigger_word)
        response = SlackResponse(text=build_response_text(flipped))
        logger.debug("payload=%s", response.model_dump())
        return response
