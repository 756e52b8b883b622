"""Tests for cjk_fontsel.template.generate_xml."""

import defusedxml.ElementTree as ET

from cjk_fontsel.template import generate_xml


def _rules(document: str) -> list[tuple[str, str, dict[str, str]]]:
    root = ET.fromstring(document)
    rules = []
    for match in root.findall("match"):
        generic = match.find("test/string").text
        edit = match.find("edit")
        rules.append((generic, edit.find("string").text, dict(edit.attrib)))
    return rules


class TestGenerateXml:
    """Tests for the rendered fontconfig document."""

    def test_three_rules_bind_each_family(self) -> None:
        """serif, sans-serif and monospace each get their own family."""
        document = generate_xml("A", "B", "C")
        rules = _rules(document)

        assert [(g, f) for g, f, _ in rules] == [
            ("serif", "B"),
            ("sans-serif", "A"),
            ("monospace", "C"),
        ]
        for _, _, attrib in rules:
            assert attrib == {"name": "family", "mode": "prepend", "binding": "strong"}

    def test_header_and_doctype(self) -> None:
        """The document starts with the XML declaration and fontconfig doctype."""
        lines = generate_xml("A", "B", "C").splitlines()
        assert lines[0] == '<?xml version="1.0"?>'
        assert lines[1] == '<!DOCTYPE fontconfig SYSTEM "fonts.dtd">'
        assert lines[2] == "<fontconfig>"
        assert lines[-1] == "</fontconfig>"

    def test_match_targets_pattern(self) -> None:
        """Every rule matches on the pattern with qual=any."""
        root = ET.fromstring(generate_xml("A", "B", "C"))
        matches = root.findall("match")
        assert len(matches) == 3
        for match in matches:
            assert match.get("target") == "pattern"
            assert match.find("test").attrib == {"qual": "any", "name": "family"}

    def test_deterministic(self) -> None:
        """Identical inputs render identical output."""
        args = ("Noto Sans CJK JP", "Noto Serif CJK JP", "Sarasa Mono J")
        assert generate_xml(*args) == generate_xml(*args)

    def test_names_are_escaped(self) -> None:
        """Markup characters in family names stay text."""
        document = generate_xml("A & B", "<Serif>", 'Mono "J"')
        assert "A &amp; B" in document
        assert "&lt;Serif&gt;" in document

        assert [f for _, f, _ in _rules(document)] == ["<Serif>", "A & B", 'Mono "J"']

    def test_non_ascii_names(self) -> None:
        """Japanese family names are embedded as-is."""
        document = generate_xml("源ノ角ゴシック", "源ノ明朝", "Ricty")
        assert "<string>源ノ角ゴシック</string>" in document
