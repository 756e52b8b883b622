"""Fontconfig document rendering."""

from __future__ import annotations

from xml.sax.saxutils import escape

_RULE = """    <match target="pattern">
        <test qual="any" name="family">
            <string>{generic}</string>
        </test>
        <edit name="family" mode="prepend" binding="strong">
            <string>{family}</string>
        </edit>
    </match>
"""

_DOCUMENT = """<?xml version="1.0"?>
<!DOCTYPE fontconfig SYSTEM "fonts.dtd">
<fontconfig>
{rules}</fontconfig>
"""


def generate_xml(sans: str, serif: str, monospace: str) -> str:
    """Render the fontconfig rules that prefer the given families.

    One rule per generic family (serif, sans-serif, monospace, in that order)
    prepends the family name with strong binding. Names are XML-escaped.
    """
    rules = "".join(
        _RULE.format(generic=generic, family=escape(family))
        for generic, family in (
            ("serif", serif),
            ("sans-serif", sans),
            ("monospace", monospace),
        )
    )
    return _DOCUMENT.format(rules=rules)
