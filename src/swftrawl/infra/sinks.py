"""Infrastructure: write item lists to files and streams.

Three sinks, one per :class:`~swftrawl.core.models.OutputKind`:

* :func:`write_list` — UTF-8 text, one item per line.
* :func:`write_exclude_xml` — ``<excludeAssets>`` manifest.
* :func:`stream_items` — one item per line on a text stream.

Files are written to a temporary sibling and then moved into place, so
an existing destination is either fully replaced or left untouched.
``OSError`` is re-raised as :class:`~swftrawl.exceptions.OutputWriteError`.
"""

from __future__ import annotations

import os
import stat
import tempfile
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from swftrawl.exceptions import OutputWriteError

EXCLUDE_ROOT_TAG = "excludeAssets"
EXCLUDE_ITEM_TAG = "asset"
EXCLUDE_NAME_ATTR = "name"


def _target_mode(path: Path) -> int:
    """Permission bits the written file should end up with.

    An existing destination keeps its mode; a new one gets the usual
    ``0o666`` masked by the process umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(path: Path, data: bytes) -> None:
    """Replace *path* with *data* in a single rename."""
    directory = path.resolve().parent
    try:
        handle = tempfile.NamedTemporaryFile(
            mode="wb",
            dir=directory,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        )
    except OSError as exc:
        raise OutputWriteError(
            f"Could not write {path}: {exc.strerror or exc}",
            hint="Check that the destination directory exists and is writable.",
        ) from exc

    temp_path = Path(handle.name)
    try:
        with handle:
            handle.write(data)
        os.chmod(temp_path, _target_mode(path))
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"Could not write {path}: {exc.strerror or exc}") from exc

    try:
        os.replace(temp_path, path)
    except OSError as exc:
        temp_path.unlink(missing_ok=True)
        raise OutputWriteError(f"Could not replace {path}: {exc.strerror or exc}") from exc


# ---------------------------------------------------------------------------
# Plain list
# ---------------------------------------------------------------------------

def render_list(items: Sequence[str]) -> str:
    """Return *items* as newline-terminated lines."""
    return "".join(f"{item}\n" for item in items)


def write_list(items: Sequence[str], output_path: str | Path) -> Path:
    """Write *items* to *output_path*, overwriting any existing file."""
    path = Path(output_path)
    _write_atomic(path, render_list(items).encode("utf-8"))
    return path


# ---------------------------------------------------------------------------
# Exclusion manifest
# ---------------------------------------------------------------------------

def build_exclude_tree(names: Sequence[str]) -> ET.ElementTree:
    """Build ``<excludeAssets><asset name="..."/>...</excludeAssets>``.

    *names* should be a merged item list; marker lines passed here
    would end up as literal asset names.
    """
    root = ET.Element(EXCLUDE_ROOT_TAG)
    for name in names:
        ET.SubElement(root, EXCLUDE_ITEM_TAG, {EXCLUDE_NAME_ATTR: name})
    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    return tree


def render_exclude_xml(names: Sequence[str]) -> bytes:
    """Serialise the manifest for *names* as indented UTF-8 XML."""
    tree = build_exclude_tree(names)
    body = ET.tostring(tree.getroot(), encoding="unicode", short_empty_elements=True)
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'.encode("utf-8")


def write_exclude_xml(names: Sequence[str], output_path: str | Path) -> Path:
    """Write the exclusion manifest for *names* to *output_path*."""
    path = Path(output_path)
    _write_atomic(path, render_exclude_xml(names))
    return path


# ---------------------------------------------------------------------------
# Stream
# ---------------------------------------------------------------------------

def stream_items(items: Sequence[str], stream: TextIO) -> None:
    """Write each item on its own line to *stream*."""
    for item in items:
        stream.write(f"{item}\n")
    stream.flush()
