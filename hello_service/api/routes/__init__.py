from hello_service.api.routes import hello_routes

__all__ = ["hello_routes"]
