# headercomment:header:start
#
#   project      : HeaderComment
#   file         : test_inserter.py
#   file_relpath : tests/pipeline/test_inserter.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Tests for prolog-aware header insertion on text."""

from __future__ import annotations

from headercomment.pipeline.inserter import insert_header
from tests.conftest import parametrize

JS_HEADER: str = "/**\n * Hello World\n */\n"
XML_HEADER: str = "<!--\n // Hello World\n-->\n"


def test_plain_prepend_for_javascript() -> None:
    """Non-prolog types get header, separator, then the content."""
    assert insert_header("Hello World", "js", JS_HEADER, "\n") == (
        "/**\n * Hello World\n */\n\nHello World"
    )


def test_unknown_type_prepends() -> None:
    """Types outside the prolog table are always prepended to."""
    assert insert_header("x", "appcache", "#\n# H\n#\n", "\n") == "#\n# H\n#\n\nx"


def test_xml_declaration_stays_first() -> None:
    """The XML declaration is kept on the first line."""
    content: str = '<?xml version="1.0"?>\n<root/>\n'

    result: str = insert_header(content, "xml", XML_HEADER, "\n")

    assert result == '<?xml version="1.0"?>\n\n' + XML_HEADER + "\n<root/>\n"


def test_html_doctype_stays_first_case_insensitive() -> None:
    """Doctype detection ignores case and keeps the original spelling."""
    content: str = "<!DocType html>\n<html></html>"

    result: str = insert_header(content, ".HTML", "H", "\n")

    assert result == "<!DocType html>\n\nH\n<html></html>"


def test_svg_uses_xml_declaration() -> None:
    """SVG files are checked for an XML declaration."""
    assert insert_header('<?xml version="1.0"?>\n<svg/>', "svg", "H", "\n") == (
        '<?xml version="1.0"?>\n\nH\n<svg/>'
    )


def test_doctype_in_xml_file_is_not_a_prolog() -> None:
    """Each type only recognizes its own prolog."""
    assert insert_header("<!DOCTYPE x>\n<x/>", "xml", "H", "\n") == "H\n<!DOCTYPE x>\n<x/>"


def test_prolog_type_without_prolog_prepends() -> None:
    """Prolog-capable files without a prolog get the header in front."""
    assert insert_header("<html>\n</html>", "html", "H", "\n") == "H\n<html>\n</html>"


def test_single_line_prolog_file() -> None:
    """A file made of the prolog alone ends with header and separator."""
    assert insert_header('<?xml version="1.0"?>', "xml", "H", "\n") == (
        '<?xml version="1.0"?>\n\nH\n'
    )


def test_crlf_first_line_keeps_carriage_return() -> None:
    """Only ``\\n`` splits lines: the ``\\r`` stays part of the prolog line."""
    content: str = '<?xml version="1.0"?>\r\n<root/>\r\n'

    result: str = insert_header(content, "xml", "H", "\n")

    assert result == '<?xml version="1.0"?>\r\n\nH\n<root/>\r\n'


def test_indented_prolog_is_recognized_and_kept_verbatim() -> None:
    """Leading whitespace does not prevent detection and is re-emitted."""
    assert insert_header("  <?xml?>\nbody", "xml", "H", "\n") == "  <?xml?>\n\nH\nbody"


def test_custom_separator() -> None:
    """The separator joins header and content."""
    assert insert_header("Hello World", "js", JS_HEADER, "// \n") == (
        "/**\n * Hello World\n */\n// \nHello World"
    )


def test_empty_content() -> None:
    """Empty content yields header and separator."""
    assert insert_header("", "html", "H", "\n") == "H\n"


def test_inserting_twice_adds_two_headers() -> None:
    """Insertion does not detect an existing header."""
    once: str = insert_header("body", "py", "#\n# H\n#\n", "\n")

    assert insert_header(once, "py", "#\n# H\n#\n", "\n").count("# H") == 2


@parametrize("file_type", ["xml", ".xml", "XML", ".XmL"])
def test_file_type_normalization(file_type: str) -> None:
    """Extension tokens are normalized before lookup."""
    assert insert_header("<?xml?>\nx", file_type, "H", "\n") == "<?xml?>\n\nH\nx"
