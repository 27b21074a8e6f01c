from design_patterns.auth.enums import AuthProviderName
from design_patterns.auth.providers import AbstractAuthProvider, GoogleAuth, YandexAuth
from design_patterns.core.errors.exceptions import UnknownProviderException
from loggers import get_logger

logger = get_logger(__name__)

PROVIDERS: dict[AuthProviderName, type[AbstractAuthProvider]] = {
    AuthProviderName.GOOGLE: GoogleAuth,
    AuthProviderName.YANDEX: YandexAuth,
}


def auth_factory(provider: str) -> AbstractAuthProvider:
    """
    Return the auth provider registered under ``provider``.

    Names are matched exactly. An unknown name is a configuration error and
    raises UnknownProviderException instead of falling back to a default.
    """
    if provider not in AuthProviderName.values():
        logger.error(f"Unknown auth provider requested: {provider!r}")
        raise UnknownProviderException(
            f"unknown provider {provider}",
            {"provider": provider, "supported": sorted(AuthProviderName.values())},
        )
    return PROVIDERS[AuthProviderName(provider)]()
