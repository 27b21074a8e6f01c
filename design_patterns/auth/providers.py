from abc import ABC, abstractmethod

from design_patterns.auth.schemas import Customer, Seller


class AbstractAuthProvider(ABC):
    @abstractmethod
    def new_customer(self) -> Customer:
        """Create a customer whose name comes from the provider account."""
        pass

    @abstractmethod
    def new_seller(self) -> Seller:
        """Create a seller whose name comes from the provider account."""
        pass


class YandexAuth(AbstractAuthProvider):
    def new_customer(self) -> Customer:
        customer = Customer()
        customer.set_name("Yandex Customer")
        return customer

    def new_seller(self) -> Seller:
        seller = Seller()
        seller.set_name("Yandex Seller")
        return seller


class GoogleAuth(AbstractAuthProvider):
    def new_customer(self) -> Customer:
        customer = Customer()
        # name is taken from the Google account
        customer.set_name("Google Customer")
        return customer

    def new_seller(self) -> Seller:
        seller = Seller()
        # name is taken from the Google account
        seller.set_name("Google Seller")
        return seller
