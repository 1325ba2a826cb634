__all__ = (
    "InvalidReducerError",
    "StoreError",
)


class StoreError(Exception):
    pass


class InvalidReducerError(StoreError, TypeError):
    pass
