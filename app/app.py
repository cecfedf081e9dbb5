"""Flask application class carrying the service container."""

from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from flask import Flask
from flask.json.provider import DefaultJSONProvider

if TYPE_CHECKING:
    from app.services.container import ServiceContainer


class MarketplaceJSONProvider(DefaultJSONProvider):
    """JSON provider emitting ISO 8601 timestamps instead of HTTP dates."""

    @staticmethod
    def default(o: Any) -> Any:
        if isinstance(o, datetime | date):
            return o.isoformat()
        return DefaultJSONProvider.default(o)


class App(Flask):
    """Flask subclass exposing the dependency injection container."""

    json_provider_class = MarketplaceJSONProvider

    container: "ServiceContainer"
