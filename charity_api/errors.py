class CharityError(Exception):
    """Infrastructure or provider failure; reported to clients as a generic 500."""


class StorageError(CharityError):
    pass


class NotificationError(CharityError):
    pass


class ProviderError(CharityError):
    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
