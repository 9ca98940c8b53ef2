# Path: xml_validator/output/tips.py
"""
Correction tips printed after a failed validation.
"""

DETECTED_PROBLEMS: tuple = (
    "Special characters immediately after <![CDATA[ marker",
    "Unescaped ']]>' sequences within CDATA content",
    "Unclosed CDATA sections (missing ]]>)",
    "Nested CDATA sections (not allowed in XML)",
    "Control characters (non-printable ASCII 0-31) in CDATA sections",
    "Malformed hex color codes (should be #RGB, #RRGGBB, or #RRGGBBAA)",
    "Improperly closed SVG elements",
    "SVG attributes without proper quoting",
)

CORRECTION_TIPS: tuple = (
    "CDATA sections: <![CDATA[content]]> with no special characters after opening marker",
    "Hex colors: Use standard formats like #RGB, #RRGGBB, #RRGGBBAA",
    "SVG elements: Self-closing tags must end with />",
    'SVG attributes: Always use quotes for attribute values: width="100"',
    "Control characters: Remove bytes 0x00-0x1F other than tab, CR and LF",
)

CLOSING_NOTE: str = "For WordPress import files, CDATA errors are particularly important to fix."


__all__ = ['DETECTED_PROBLEMS', 'CORRECTION_TIPS', 'CLOSING_NOTE']
