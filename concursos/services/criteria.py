from typing import Iterable

PRICE_ONLY = "precos"
OTHER = "outros"

PRICE_TERMS = ("preço", "preco")


def factor_label(factor) -> str:
    return (factor.other_factor_name or factor.factor_name or "").lower()


def is_price_factor(factor) -> bool:
    label = factor_label(factor)
    return any(term in label for term in PRICE_TERMS)


def criteria_type(factors: Iterable) -> str:
    """"precos" when every adjudication factor is about price, otherwise "outros".

    An announcement without factors is "outros".
    """
    factors = list(factors)
    if factors and all(is_price_factor(factor) for factor in factors):
        return PRICE_ONLY
    return OTHER
