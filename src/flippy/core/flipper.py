# src/flippy/core/flipper.py
# Este arquivo contém as funções puras que viram o texto de cabeça para baixo.

from src.flippy.core.flip_table import FLIP_TABLE, FLIPPER_FACE, TABLE_GLYPH


def strip_trigger_word(text: str, trigger_word: str) -> str:
    """Remove a primeira ocorrência da palavra de gatilho (e um espaço logo após)"""
    text = text.strip(" ")
    if not trigger_word:
        return text

    index = text.find(trigger_word)
    if index == -1:
        return text

    end = index + len(trigger_word)
    if text[end:end + 1] == " ":
        end += 1
    return text[:index] + text[end:]


def substitute(text: str, table=FLIP_TABLE) -> str:
    """Troca cada caractere pelo seu equivalente invertido, sem mudar a ordem"""
    return "".join(table.get(char, char) for char in text)


def reverse_text(text: str) -> str:
    """Inverte o texto por code point (str do Python já é uma sequência deles)"""
    return text[::-1]


def flip(text: str, trigger_word: str = "", table=FLIP_TABLE) -> str:
    """Vira o texto: remove o gatilho, substitui, coloca a mesa na frente e inverte tudo"""
    remaining = strip_trigger_word(text, trigger_word)
    flipped = substitute(remaining, table) if remaining else ""
    return reverse_text(TABLE_GLYPH + " " + flipped)


def build_response_text(flipped: str) -> str:
    return FLIPPER_FACE + flipped
