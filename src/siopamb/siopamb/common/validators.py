from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import PasswordMismatchError, PasswordTooShortError, ValidationError


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise PasswordTooShortError(f"{field_name} deve ter pelo menos {min_len} caracteres")
    return value


def require_matching(value: str, confirmation: str) -> str:
    if value != confirmation:
        raise PasswordMismatchError("As senhas não coincidem.")
    return value


def is_letters_and_spaces(value: str) -> bool:
    return all(ch.isalpha() or ch.isspace() for ch in value)


def require_letters(value: str, field_name: str, *, allow_blank: bool = False) -> str:
    value = (value or "").strip()
    if not value:
        if allow_blank:
            return ""
        raise ValidationError(f"{field_name} não pode ficar em branco")
    if not is_letters_and_spaces(value):
        raise ValidationError(f"{field_name}: apenas letras são permitidas")
    return value


def normalize_display_name(value: str) -> str:
    """'jOAO' -> 'Joao': first letter upper, rest lower."""
    value = value.strip()
    return value[:1].upper() + value[1:].lower()


def parse_int_in_range(raw, field_name: str, *, minimum: int, maximum: int, default: int = 0) -> int:
    if raw is None or str(raw).strip() == "":
        return default
    try:
        number = int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"{field_name}: valor inválido")
    if number < minimum or number > maximum:
        raise ValidationError(f"{field_name}: informe um valor entre {minimum} e {maximum}")
    return number


def parse_decimal_in_range(raw, field_name: str, *, maximum: Decimal, places: int) -> Decimal | None:
    if raw is None or str(raw).strip() == "":
        return None
    try:
        number = Decimal(str(raw).strip().replace(",", "."))
    except InvalidOperation:
        raise ValidationError(f"{field_name}: valor inválido")
    if not number.is_finite() or number < 0 or number > maximum:
        raise ValidationError(f"{field_name}: informe um valor entre 0 e {maximum}")
    quantum = Decimal(1).scaleb(-places)
    if number != number.quantize(quantum):
        raise ValidationError(f"{field_name}: no máximo {places} casa(s) decimal(is)")
    return number.quantize(quantum)
