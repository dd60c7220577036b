from .interfaces import ChatStrategy, ProviderFactory
from .registry import FactoryRegistry, get_factory_registry

__all__ = ["ChatStrategy", "ProviderFactory", "FactoryRegistry", "get_factory_registry"]
