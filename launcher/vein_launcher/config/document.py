"""
In-memory INI document
----------------------
Holds one INI file as an ordered list of raw lines. Every mutation works on
that list and ``serialize()`` writes it back, so lines the launcher does not
own (comments, unrelated sections, unknown keys) survive byte for byte.

Grammar understood here is the Unreal flavour used by Game.ini / Engine.ini:

    [Section]
    Key=Value
    +Key=Another value for Key
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional
from .codec import escape_for_pattern

HEADER_RE = re.compile(r"^\[.*\]")

HEADER = "header"
ENTRY = "entry"
CONTINUATION = "continuation"
OTHER = "other"


@dataclass(frozen=True)
class IniLine:
    index: int
    raw: str
    kind: str
    section: Optional[str]
    key: Optional[str] = None
    value: Optional[str] = None


def _section_name(raw: str) -> str:
    # only a verbatim "[Name]" line names a section; "[URL] " is a different one
    return raw[1:-1] if raw.endswith("]") else raw


def parse_line(index: int, raw: str, section: Optional[str]) -> IniLine:
    if HEADER_RE.match(raw):
        return IniLine(index, raw, HEADER, _section_name(raw))
    s = raw.strip()
    if not s or s[0] in ";#" or "=" not in s:
        return IniLine(index, raw, OTHER, section)
    key, value = s.split("=", 1)
    if key.startswith("+"):
        return IniLine(index, raw, CONTINUATION, section, key[1:].strip(), value.strip())
    return IniLine(index, raw, ENTRY, section, key.strip(), value.strip())


def first_line(value: str) -> str:
    return value.split("\n", 1)[0]


def build_multi_block(key: str, raw: str) -> List[str]:
    """
    Turn ``"111,222,333"`` into ``key=111``, ``+key=222``, ``+key=333``.

    The first element always becomes the bare ``key=`` line; when it is empty
    the whole block is empty, which means "delete the key". Empty elements
    after the first are dropped. Elements are kept verbatim, only the first
    line of ``raw`` is used.
    """
    ids = first_line(raw).split(",")
    if not ids[0]:
        return []
    block = [f"{key}={ids[0]}"]
    block += [f"+{key}={i}" for i in ids[1:] if i]
    return block


class IniDocument:
    def __init__(self, lines: Optional[List[str]] = None):
        self.lines: List[str] = list(lines or [])

    @classmethod
    def parse(cls, text: str) -> "IniDocument":
        if not text:
            return cls()
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls(lines)

    @classmethod
    def load(cls, path: Path) -> "IniDocument":
        return cls.parse(path.read_text(encoding="utf-8"))

    def serialize(self) -> str:
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"

    # ------------------------------------------------------------------ #
    # read side

    def records(self) -> List[IniLine]:
        out: List[IniLine] = []
        section: Optional[str] = None
        for i, raw in enumerate(self.lines):
            rec = parse_line(i, raw, section)
            if rec.kind == HEADER:
                section = rec.section
            out.append(rec)
        return out

    def has_header(self, section: str) -> bool:
        return f"[{section}]" in self.lines

    def get(self, section: str, key: str) -> Optional[str]:
        for rec in self.records():
            if rec.kind == ENTRY and rec.section == section and rec.key == key:
                return rec.value
        return None

    def get_multi(self, section: str, key: str) -> List[str]:
        return [
            rec.value for rec in self.records()
            if rec.kind in (ENTRY, CONTINUATION) and rec.section == section and rec.key == key
        ]

    def as_dict(self) -> Dict[str, Dict[str, List[str]]]:
        """Section -> key -> values. Keys outside any section land under ``""``."""
        result: Dict[str, Dict[str, List[str]]] = {}
        for rec in self.records():
            if rec.kind == HEADER:
                result.setdefault(rec.section, {})
            elif rec.kind in (ENTRY, CONTINUATION):
                result.setdefault(rec.section or "", {}).setdefault(rec.key, []).append(rec.value)
        return result

    # ------------------------------------------------------------------ #
    # write side

    def set_value(self, section: str, key: str, value: str) -> None:
        """Upsert ``key=value`` into ``[section]``, creating the section at the end if needed."""
        new_line = f"{key}={first_line(value)}"
        recs = self.records()

        matches = [r for r in recs if r.kind == ENTRY and r.section == section and r.key == key]
        if matches:
            first, dupes = matches[0], matches[1:]
            self.lines[first.index] = new_line
            for r in reversed(dupes):
                del self.lines[r.index]
            return

        headers = [r for r in recs if r.kind == HEADER and r.section == section]
        if not headers:
            if self.lines and self.lines[-1].strip():
                self.lines.append("")
            self.lines += [f"[{section}]", new_line]
            return

        # append behind the last non-blank line of the section
        pos = headers[0].index
        for r in recs[pos + 1:]:
            if r.kind == HEADER:
                break
            if r.raw.strip():
                pos = r.index
        self.lines.insert(pos + 1, new_line)

    def normalize_key(self, section: str, key: str) -> None:
        """Strip whitespace around ``=`` on ``key`` lines of ``[section]``."""
        pattern = re.compile(rf"^({escape_for_pattern(key)})\s*=\s*")
        for rec in self.records():
            if rec.kind == ENTRY and rec.section == section:
                self.lines[rec.index] = pattern.sub(r"\1=", rec.raw, count=1)

    def set_multi(self, section: str, key: str, raw: str) -> None:
        """
        Replace every ``key=`` / ``+key=`` line of ``[section]`` with the block
        built from the comma separated ``raw`` value, anchored right after the
        section header. An empty block removes the key.
        """
        block = build_multi_block(key, raw)
        header = f"[{section}]"

        if not self.has_header(section):
            if block:
                self.lines += ["", header, *block]
            return

        out: List[str] = []
        in_section = False
        for line in self.lines:
            if line == header:
                in_section = True
                out.append(line)
                out.extend(block)
                continue
            if HEADER_RE.match(line):
                in_section = False
            if in_section and (line.startswith(f"{key}=") or line.startswith(f"+{key}=")):
                continue
            out.append(line)
        self.lines = out
