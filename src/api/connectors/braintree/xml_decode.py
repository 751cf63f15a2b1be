"""Decode de documentos XML do gateway para modelos Pydantic.

Conversão do XML para valores Python antes da validação:
- tags com hífen viram chaves snake_case (last-4 → last_4)
- elementos com type="array" viram listas (a tag do item é descartada)
- elementos com filhos viram dicts; tags repetidas acumulam em lista
- folhas viram seu texto; elemento vazio vira "" (presente, não ausente)

Elementos ausentes simplesmente não aparecem no dict, e o modelo aplica o
default. Por isso o buffer precisa chegar aqui sem elementos nil.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from lxml import etree
from pydantic import ValidationError

from api.connectors.braintree.errors import ParseError
from api.connectors.braintree.xml_nil import make_parser

if TYPE_CHECKING:
    from app.domain.entity import GatewayEntity, GatewayEntityList

EntityT = TypeVar("EntityT", bound="GatewayEntity")
ListT = TypeVar("ListT", bound="GatewayEntityList")

ARRAY_TYPE = "array"


def parse_document(buffer: bytes, accessor: str | None = None) -> etree._Element:
    """Parseia o buffer e retorna a root.

    Raises:
        ParseError: Se o XML estiver malformado ou vazio.
    """
    try:
        return etree.fromstring(buffer, parser=make_parser())
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise ParseError(f"malformed XML: {exc}", accessor) from exc


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def field_name(element: etree._Element) -> str:
    return local_name(element).replace("-", "_")


def element_to_value(element: etree._Element) -> Any:
    """Converte um elemento (e seus filhos) em dict/list/str."""
    children = [child for child in element if isinstance(child.tag, str)]

    if element.get("type") == ARRAY_TYPE:
        return [element_to_value(child) for child in children]

    if not children:
        return element.text or ""

    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(field_name(child), []).append(element_to_value(child))
    return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}


def decode_entity(
    buffer: bytes,
    model: type[EntityT],
    accessor: str | None = None,
) -> EntityT:
    """Decodifica o documento inteiro no modelo informado.

    A root tag precisa ser a declarada em ``model.xml_root``.

    Raises:
        ParseError: XML malformado, root divergente ou campo incompatível.
    """
    value = element_to_value(_parse_root(buffer, model.xml_root, accessor))
    if value == "":
        value = {}
    return validate_value(value, model, accessor)


def decode_list(
    buffer: bytes,
    model: type[ListT],
    accessor: str | None = None,
) -> list[Any]:
    """Decodifica uma resposta em lista e retorna apenas os itens, em ordem."""
    value = element_to_value(_parse_root(buffer, model.xml_root, accessor))
    if isinstance(value, list):
        value = {model.items_field: value}
    elif isinstance(value, dict) and model.item_key() in value:
        # Root sem type="array": itens chegam pela tag do item (um ou vários)
        items = value.pop(model.item_key())
        value[model.items_field] = items if isinstance(items, list) else [items]
    elif value == "":
        value = {}
    return validate_value(value, model, accessor).items()


def validate_value(value: Any, model: type[EntityT], accessor: str | None = None) -> EntityT:
    if not isinstance(value, dict):
        raise ParseError(f"<{model.xml_root}> has no child elements", accessor)
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise ParseError(
            f"invalid <{model.xml_root}> document: {exc.error_count()} field error(s)",
            accessor,
        ) from exc


def _parse_root(buffer: bytes, expected: str, accessor: str | None) -> etree._Element:
    root = parse_document(buffer, accessor)
    root_name = local_name(root)
    if root_name != expected:
        raise ParseError(f"expected <{expected}> document, got <{root_name}>", accessor)
    return root
