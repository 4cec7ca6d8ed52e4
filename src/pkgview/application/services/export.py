"""Serialise installed packages into a ``packages.config`` document."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO, Iterable

from ...domain.models.core import Package


def build_packages_document(packages: Iterable[Package]) -> ET.ElementTree:
    root = ET.Element("packages")
    for package in packages:
        ET.SubElement(root, "package", {"id": package.id, "version": str(package.version)})
    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    return tree


def write_packages_config(packages: Iterable[Package], stream: BinaryIO) -> None:
    """Write the ``<packages>`` document to *stream* as UTF-8."""
    tree = build_packages_document(packages)
    tree.write(stream, encoding="utf-8", xml_declaration=True)
