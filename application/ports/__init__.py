"""
Interfaces (Ports) for the Fitness Dashboard.

This package defines abstract interfaces that decouple application logic from
infrastructure (remote gateway, local storage). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import Gateway, KeyValueStore

    class DashboardLoader:
        def __init__(self, gateway: Gateway):
            self.gateway = gateway
"""

# Remote gateway
from application.ports.gateway import (
    AuthGateway,
    AuthResult,
    Gateway,
    InsertQuery,
    QueryResult,
    Row,
    SessionListener,
    TableGateway,
    Unsubscribe,
)

# Local storage
from application.ports.key_value_store import KeyValueStore, StoreListener

__all__ = [
    # Gateway
    "Gateway",
    "AuthGateway",
    "TableGateway",
    "InsertQuery",
    "QueryResult",
    "AuthResult",
    "Row",
    "SessionListener",
    "Unsubscribe",
    # Local storage
    "KeyValueStore",
    "StoreListener",
]
