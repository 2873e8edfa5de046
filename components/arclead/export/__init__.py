from arclead.export.core import ExportKey, export_artists, export_filmography

__all__ = ["ExportKey", "export_artists", "export_filmography"]
