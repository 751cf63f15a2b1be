"""Testes da remoção de elementos nil."""

from __future__ import annotations

import pytest
from lxml import etree

from api.connectors.braintree.xml_nil import is_nil_element, strip_nil_elements


class TestStripNilElements:
    """Testes para strip_nil_elements."""

    def test_removes_nil_marked_element(self) -> None:
        """Elemento com nil="true" some do documento."""
        xml = b'<customer><id>1</id><company nil="true"/></customer>'

        result = strip_nil_elements(xml)

        assert b"company" not in result
        assert b"<id>1</id>" in result

    def test_removes_nested_nil_elements(self) -> None:
        """Remove nil em qualquer profundidade."""
        xml = (
            b"<credit-card><billing-address><company nil=\"true\"/>"
            b"<postal-code>60622</postal-code></billing-address></credit-card>"
        )

        result = strip_nil_elements(xml)

        root = etree.fromstring(result)
        assert root.find("billing-address/company") is None
        assert root.findtext("billing-address/postal-code") == "60622"

    def test_returns_same_buffer_without_nil_elements(self) -> None:
        """Sem elementos nil o buffer original é devolvido intacto."""
        xml = b'<?xml version="1.0"?>\n<customer><id>1</id></customer>'

        assert strip_nil_elements(xml) is xml

    def test_nil_false_is_kept(self) -> None:
        """nil="false" não marca ausência."""
        xml = b'<customer><company nil="false">ACME</company></customer>'

        result = strip_nil_elements(xml)

        assert etree.fromstring(result).findtext("company") == "ACME"

    def test_namespaced_nil_attribute_is_removed(self) -> None:
        """xsi:nil="true" também é tratado como nil."""
        xml = (
            b'<customer xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
            b'<id>1</id><company xsi:nil="true"/></customer>'
        )

        result = strip_nil_elements(xml)

        assert b"company" not in result

    def test_nil_value_is_case_insensitive(self) -> None:
        """Valor TRUE (maiúsculo) também remove o elemento."""
        xml = b'<customer><company nil="TRUE"/></customer>'

        assert b"company" not in strip_nil_elements(xml)

    def test_root_is_never_removed(self) -> None:
        """Root marcada como nil permanece no documento."""
        xml = b'<customer nil="true"><id nil="true"/></customer>'

        root = etree.fromstring(strip_nil_elements(xml))

        assert root.tag == "customer"
        assert len(root) == 0

    def test_preserves_tail_text(self) -> None:
        """Texto após o elemento removido é preservado."""
        xml = b'<note>antes<skip nil="true"/>depois</note>'

        root = etree.fromstring(strip_nil_elements(xml))

        assert root.text == "antesdepois"

    def test_malformed_xml_raises(self) -> None:
        """XML malformado propaga XMLSyntaxError (quem chama decide o fallback)."""
        with pytest.raises(etree.XMLSyntaxError):
            strip_nil_elements(b"<customer><id>1</customer>")


class TestIsNilElement:
    """Testes para is_nil_element."""

    def test_element_without_attributes(self) -> None:
        assert is_nil_element(etree.fromstring(b"<id>1</id>")) is False

    def test_element_with_other_attributes(self) -> None:
        assert is_nil_element(etree.fromstring(b'<amount type="decimal">1</amount>')) is False

    def test_element_with_nil_true(self) -> None:
        assert is_nil_element(etree.fromstring(b'<amount nil="true"/>')) is True
