#!/usr/bin/env python3
"""
Replace the marker-delimited activity section of a README.
"""

START_MARKER = "<!--START_SECTION:productive-box-in-readme-->"
END_MARKER = "<!--END_SECTION:productive-box-in-readme-->"


def build_section(body: str) -> str:
    return f"{START_MARKER}\n{body}\n{END_MARKER}"


def replace_section(content: str, body: str) -> str:
    """
    Swap the span from the first start marker to the nearest following end
    marker (both inclusive) for a freshly built section.

    Documents without a complete marker pair get the section appended.
    """
    section = build_section(body)
    start = content.find(START_MARKER)
    end = content.find(END_MARKER, start + len(START_MARKER)) if start != -1 else -1
    if start == -1 or end == -1:
        if not content:
            return f"{section}\n"
        if not content.endswith("\n"):
            content += "\n"
        return f"{content}\n{section}\n"
    return content[:start] + section + content[end + len(END_MARKER):]
