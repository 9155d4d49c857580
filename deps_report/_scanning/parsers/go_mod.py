"""Parser for Go go.mod files."""

import re
from typing import List, Optional, Tuple

GO_MOD_FILE = "go.mod"

# Any require directive
_REQUIRE_RE = re.compile(r"^require(\s|\(|$)")

# Single require: require github.com/foo/bar v1.2.3
_SINGLE_RE = re.compile(r"^require\s+(\S+)\s+(\S+)$")

# Empty block on one line: require ()
_EMPTY_BLOCK_RE = re.compile(r"^require\s*\(\s*\)$")

# Start of a require block: require (
_BLOCK_START_RE = re.compile(r"^require\s*\($")

# Inside require block: github.com/foo/bar v1.2.3
_BLOCK_ENTRY_RE = re.compile(r"^(\S+)\s+(\S+)$")


def _strip_comment(line: str) -> str:
    """Drop a trailing // comment, including ``// indirect`` markers."""
    index = line.find("//")
    if index != -1:
        line = line[:index]
    return line.strip()


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in "\"`":
        return token[1:-1]
    return token


def _entry(match: Optional[re.Match]) -> Optional[Tuple[str, str]]:
    if not match:
        return None
    return _unquote(match.group(1)), _unquote(match.group(2))


def parse_go_mod(content: str) -> List[Tuple[str, str]]:
    """
    Extract (module, version) pairs from the require directives of a go.mod.

    Both the single-line form and the parenthesised block form are
    understood. Indirect requirements are kept; every other directive
    (module, go, replace, exclude, retract, ...) is ignored.

    Args:
        content: Text of the go.mod file

    Returns:
        Pairs in file order

    Raises:
        ValueError: If a require directive is malformed or a require block
            is never closed
    """
    requires: List[Tuple[str, str]] = []
    block_start: Optional[int] = None

    for line_num, raw_line in enumerate(content.splitlines(), start=1):
        line = _strip_comment(raw_line)
        if not line:
            continue

        if block_start is not None:
            if line == ")":
                block_start = None
                continue
            entry = _entry(_BLOCK_ENTRY_RE.match(line))
            if entry is None:
                raise ValueError(f"line {line_num}: invalid require entry {line!r}")
        elif _EMPTY_BLOCK_RE.match(line):
            continue
        elif _BLOCK_START_RE.match(line):
            block_start = line_num
            continue
        elif _REQUIRE_RE.match(line):
            entry = _entry(_SINGLE_RE.match(line))
            if entry is None:
                raise ValueError(f"line {line_num}: invalid require directive {line!r}")
        else:
            continue

        requires.append(entry)

    if block_start is not None:
        raise ValueError(f"line {block_start}: require block is never closed")

    return requires
