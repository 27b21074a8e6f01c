from enum import StrEnum


class AuthProviderName(StrEnum):
    GOOGLE = "google"
    YANDEX = "yandex"

    @classmethod
    def values(cls) -> set[str]:
        return {item.value for item in cls.__members__.values()}
