from dataclasses import dataclass


@dataclass
class Customer:
    name: str = ""

    def set_name(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return f"Customer: {self.name}"


@dataclass
class Seller:
    name: str = ""

    def set_name(self, name: str) -> None:
        self.name = name

    def __str__(self) -> str:
        return f"Seller: {self.name}"
