"""Corpo de erro estruturado do gateway (api-error-response).

Além da mensagem principal, o gateway devolve uma árvore de erros de
validação agrupados por entidade (ex.: errors/credit-card/errors) e, em
falhas de processamento, a transação recusada.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import Field, field_validator

from app.domain.entity import GatewayEntity
from app.domain.merchant_account import MerchantAccount  # noqa: TC001
from app.domain.transaction import Transaction  # noqa: TC001

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class ValidationErrorDetail:
    """Erro de validação individual.

    Attributes:
        code: Código numérico do gateway (ex: "81715")
        attribute: Campo rejeitado (ex: "number")
        message: Texto legível
        path: Entidades aninhadas até o erro (ex: ("customer", "credit_card"))
    """

    code: str
    attribute: str
    message: str
    path: tuple[str, ...] = ()


class ApiErrorResponse(GatewayEntity):
    xml_root = "api-error-response"

    message: str = ""
    errors: dict[str, Any] = Field(default_factory=dict)
    transaction: Transaction | None = None
    merchant_account: MerchantAccount | None = None

    @field_validator("errors", mode="before")
    @classmethod
    def _empty_errors(cls, value: Any) -> Any:
        # <errors/> sem filhos chega como texto vazio
        if value == "":
            return {}
        return value

    def validation_errors(self) -> list[ValidationErrorDetail]:
        """Achata a árvore de erros na ordem do documento."""
        return list(_walk_errors(self.errors, ()))


def _walk_errors(node: dict[str, Any], path: tuple[str, ...]) -> Iterator[ValidationErrorDetail]:
    for key, value in node.items():
        if key == "errors" and isinstance(value, list):
            for item in value:
                if isinstance(item, dict):
                    yield ValidationErrorDetail(
                        code=str(item.get("code") or ""),
                        attribute=str(item.get("attribute") or ""),
                        message=str(item.get("message") or ""),
                        path=path,
                    )
        elif isinstance(value, dict):
            yield from _walk_errors(value, (*path, key))


__all__ = ["ApiErrorResponse", "ValidationErrorDetail"]
