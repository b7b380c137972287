from .catalog_loader import default_catalog, load_catalog

__all__ = ["default_catalog", "load_catalog"]
