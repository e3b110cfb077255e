"""Turn flat documentation paths into a decorated directory tree.

Paths are folded into nested dicts (directories map to dicts, files map
to None) and rendered with box-drawing connectors, siblings ordered the
way a Spanish-locale comparison orders them.
"""

import unicodedata
from typing import Iterable, Optional

from pyuca import Collator

TreeNode = dict[str, Optional["TreeNode"]]

ROOT_LINE = "documentation/ 📁"
DIR_ICON = "📁"
DOC_ICON = "🧩"

BRANCH = "├── "
CORNER = "└── "
BLANK = "    "
VERTICAL = "│   "

_collator = Collator()

# Private-use code point; its implicit UCA weight is above every letter.
_AFTER_N = "\U0010FFFD"


def spanish_sort_key(name: str) -> tuple:
    """Collation key ordering names as Spanish does.

    Root UCA order (accent and case aware) with ñ sorted as its own
    letter right after n.
    """
    text = unicodedata.normalize("NFC", name)
    text = text.replace("ñ", "n" + _AFTER_N).replace("Ñ", "N" + _AFTER_N)
    return (_collator.sort_key(text), name)


def build_tree(paths: Iterable[str]) -> TreeNode:
    """Build a nested dict from slash-separated relative paths.

    The last segment of a path always becomes a file marker, replacing
    any directory already stored under that name.
    """
    root: TreeNode = {}
    for path in paths:
        parts = path.split("/")
        node = root
        for i, part in enumerate(parts):
            if not part:
                continue
            if i == len(parts) - 1:
                node[part] = None
            else:
                child = node.get(part)
                if child is None:
                    child = node[part] = {}
                node = child
    return root


def render_tree(node: TreeNode, prefix: str = "", is_last: bool = True) -> str:
    """Render a tree node as indented lines, each ending in a newline.

    Only .md files are shown. Child lines are indented with a blank or a
    vertical segment depending on whether *this* node was the last entry
    of its parent listing.
    """
    entries = sorted(node.items(), key=lambda item: spanish_sort_key(item[0]))
    next_prefix = prefix + (BLANK if is_last else VERTICAL)
    lines = []
    for idx, (name, child) in enumerate(entries):
        last = idx == len(entries) - 1
        connector = CORNER if last else BRANCH
        if child is None:
            if name.endswith(".md"):
                lines.append(f"{prefix}{connector}{name} {DOC_ICON}\n")
        else:
            lines.append(f"{prefix}{connector}{name}/ {DIR_ICON}\n")
            lines.append(render_tree(child, next_prefix, last))
    return "".join(lines)


def render_documentation(paths: Iterable[str]) -> str:
    """Full listing under a synthetic documentation/ root line."""
    tree = build_tree(paths)
    output = f"{ROOT_LINE}\n" + render_tree(tree, "", True)
    return output.removesuffix("\n")
