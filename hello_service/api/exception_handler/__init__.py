from hello_service.api.exception_handler.response_exception_handler import response_exception

__all__ = ["response_exception"]
