from .composition_root import ComposedClients, CompositionRoot, bootstrap_clients

__all__ = ["CompositionRoot", "ComposedClients", "bootstrap_clients"]
