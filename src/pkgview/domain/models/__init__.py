from .core import ListViewMode, Package, PackageRecord, PackageVersion, SortColumn, parse_version

__all__ = ["ListViewMode", "Package", "PackageRecord", "PackageVersion", "SortColumn", "parse_version"]
