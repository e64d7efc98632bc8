from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Papel do usuário, resolvido uma única vez no login."""

    ADMIN = "admin"
    OFFICER = "officer"


class Rank(str, Enum):
    """Graduação/Posto."""

    SOLDADO = "Soldado PM"
    CABO = "Cabo PM"
    TERCEIRO_SGT = "3º Sgt PM"
    SEGUNDO_SGT = "2º Sgt PM"
    PRIMEIRO_SGT = "1º Sgt PM"
    SUBTENENTE = "Subten PM"
    TENENTE = "Tenente PM"
    CAPITAO = "Capitão PM"


class Platoon(str, Enum):
    """Pelotão de lotação do policial (cadastro de usuário)."""

    PRIMEIRO = "1º pelotão"
    SEGUNDO = "2º pelotão"
    TERCEIRO = "3º pelotão"
    SEGUNDA_CIA = "2ª Cia"


class IntegratedTeam(str, Enum):
    """Equipes integradas informadas no relatório; base do gráfico por unidade."""

    PRIMEIRO = "1º pel."
    SEGUNDO = "2º pel."
    TERCEIRO = "3º pel."
    SEGUNDA_CIA = "2ª Cia."


class FormPlatoon(str, Enum):
    PRIMEIRO = "1º"
    SEGUNDO = "2º"
    TERCEIRO = "3º"
    SEGUNDA_CIA = "2ª Cia."


class ScaleType(str, Enum):
    ORDINARIA = "Ordinária"
    DEJEM = "DEJEM"
