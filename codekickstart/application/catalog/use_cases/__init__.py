from .catalog_use_case import CatalogUseCase

__all__ = ["CatalogUseCase"]
