"""Remoção de elementos marcados como nil em documentos XML do gateway.

O gateway representa valores ausentes como ``<campo nil="true"/>``. Se o
elemento permanecer no documento, o decode o veria como presente e vazio
(``""``), o que quebra campos numéricos/datas e mascara a ausência.
Removê-lo faz o campo cair no default (None) do modelo.
"""

from __future__ import annotations

from lxml import etree

NIL_ATTRIBUTE = "nil"


def make_parser() -> etree.XMLParser:
    """Parser lxml sem resolução de entidades nem acesso à rede."""
    return etree.XMLParser(resolve_entities=False, no_network=True)


def is_nil_element(element: etree._Element) -> bool:
    """True se o elemento tem atributo ``nil`` (qualquer namespace) = true."""
    for name, value in element.attrib.items():
        if etree.QName(name).localname == NIL_ATTRIBUTE and value.strip().lower() == "true":
            return True
    return False


def strip_nil_elements(buffer: bytes) -> bytes:
    """Remove do documento todos os elementos marcados como nil.

    A root nunca é removida. Sem elementos nil, retorna o próprio buffer
    (sem reserializar).

    Raises:
        etree.XMLSyntaxError: Se o buffer não for XML bem formado.
    """
    root = etree.fromstring(buffer, parser=make_parser())

    # Coleta antes de remover para não mutar a árvore durante a iteração
    nil_elements = [
        element
        for element in root.iterdescendants()
        if isinstance(element.tag, str) and is_nil_element(element)
    ]
    if not nil_elements:
        return buffer

    for element in nil_elements:
        parent = element.getparent()
        if parent is None:
            continue
        _remove_preserving_tail(parent, element)

    return etree.tostring(root, encoding="UTF-8")


def _remove_preserving_tail(parent: etree._Element, element: etree._Element) -> None:
    tail = element.tail
    if tail:
        previous = element.getprevious()
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail
    parent.remove(element)
