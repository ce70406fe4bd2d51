"""
Solr XML document encoder.

Turns a fetched record into the body of a Solr XML update request:

    <add><doc><field name="sku">A1</field>...</doc></add>

Characters that XML 1.0 does not allow (most C0 controls, lone surrogates,
U+FFFE and U+FFFF) are stripped from field names and values, so the output is
always well-formed. Field order follows the record's iteration order.

Stripping can make two field names equal (`"a\\x00"` and `"a"` both become
`"a"`). Both fields are still emitted, Solr treats the repeated name as a
multi-valued field, and a warning is logged with the colliding name.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ElementTree
from typing import Any, Mapping

from solr_indexer.utils.logging import get_logger

log = get_logger(__name__)

_ILLEGAL_XML_CHARS = re.compile(
    "[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    return _ILLEGAL_XML_CHARS.sub("", str(value))


def encode_document(record: Mapping[str, Any]) -> bytes:
    """
    Encode `record` as a UTF-8 Solr `<add>` document, one `<field>` per entry.

    `None` values become empty fields; other values use their string form.
    """
    add = ElementTree.Element("add")
    doc = ElementTree.SubElement(add, "doc")
    seen = set()
    for name, value in record.items():
        field_name = _to_text(name)
        if field_name in seen:
            log.warning(
                "Duplicate field name after stripping illegal characters",
                extra={"field": field_name},
            )
        seen.add(field_name)
        field = ElementTree.SubElement(doc, "field", {"name": field_name})
        field.text = _to_text(value)
    return ElementTree.tostring(add, encoding="utf-8", xml_declaration=False)


__all__ = ["encode_document"]
