# src/flippy/api/routes.py
# Este arquivo contém as rotas da API FastAPI para o flippy.

import logging
from fastapi import APIRouter, Depends, Request, Response, status
from starlette.exceptions import HTTPException
from src.flippy.config.env import Config
from src.flippy.core.exceptions import AuthError, DecodeError
from src.flippy.models.payload import SlackResponse
from src.flippy.services.command_handler import CommandHandler
from src.flippy.services.validator import RequestValidator, check_urlencoded

logger = logging.getLogger(__name__)


# Instâncias dos objetos são criadas por dependências
def get_config():
    return Config


def get_validator(config=Depends(get_config)) -> RequestValidator:
    return RequestValidator(config.SLACK_TOKENS, config.SLACK_TRIGGERWORD)


def get_command_handler(
    validator: RequestValidator = Depends(get_validator),
    config=Depends(get_config),
) -> CommandHandler:
    return CommandHandler(validator, strict_auth=config.STRICT_AUTH)


router = APIRouter()


# Rota para a raiz
@router.get("/")
async def root():
    return {"message": "API is running"}


@router.post("/slack", response_model=SlackResponse)
async def slack(
    request: Request,
    command_handler: CommandHandler = Depends(get_command_handler),
):
    """Endpoint que recebe o slash command do Slack e devolve o texto virado"""
    try:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("application/x-www-form-urlencoded"):
            check_urlencoded(await request.body())
        # O Starlette transforma erros de multipart em HTTPException(400)
        form = await request.form()
        command = command_handler.validator.parse(form)
    except (DecodeError, HTTPException, ValueError) as e:
        # Sem detalhes: a resposta é igual à de uma rota inexistente
        logger.error("Erro ao ler o formulário: %s", e)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    try:
        return command_handler.handle(command)
    except AuthError:
        return Response(status_code=status.HTTP_403_FORBIDDEN)
