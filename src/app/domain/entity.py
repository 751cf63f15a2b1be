"""Base dos modelos de domínio decodificados a partir do XML do gateway.

Cada entidade declara a root tag que a identifica no documento. Campos
ausentes no XML (inclusive os marcados como nil) ficam como None.
"""

from __future__ import annotations

from typing import ClassVar, get_args

from pydantic import BaseModel, ConfigDict


class GatewayEntity(BaseModel):
    """Entidade decodificável a partir de um documento XML do gateway."""

    model_config = ConfigDict(extra="ignore")

    xml_root: ClassVar[str]


class GatewayEntityList(GatewayEntity):
    """Container para respostas em formato de lista.

    A root pode vir com type="array" ou apenas com os itens repetidos.

    Subclasses informam em ``items_field`` o campo que recebe os itens.
    """

    items_field: ClassVar[str]

    @classmethod
    def item_key(cls) -> str:
        """Chave snake_case da tag de cada item (ex: add-on → add_on)."""
        (item_model,) = get_args(cls.model_fields[cls.items_field].annotation)
        return item_model.xml_root.replace("-", "_")

    def items(self) -> list[GatewayEntity]:
        return list(getattr(self, self.items_field))


__all__ = ["GatewayEntity", "GatewayEntityList"]
