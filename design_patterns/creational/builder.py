"""
Builder Pattern
===============

Core Design: Construct complex objects step by step, separating the
construction of an object from its representation.

Participants:
1. Product - Car, Invoice, User/Address
2. Builder - CarBuilder (mutable, fluent)
3. Immutable Builder - InvoiceBuilder (every setter returns a new builder)
4. Nested Builders - UserBuilder composed with AddressBuilder

Features:
- Method chaining for readable construction
- Optional properties without telescoping constructors
- Validation of required fields at build() time
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Optional


# ==================== MUTABLE BUILDER ====================
# Car built step-by-step with chained setters

@dataclass
class Car:
    """Car with several optional properties"""
    model_name: str
    engine_type: Optional[str] = None
    color: Optional[str] = None
    wheels: Optional[str] = None


class CarBuilderInterface(ABC):

    @abstractmethod
    def set_engine_type(self, engine_type: str) -> 'CarBuilderInterface':
        pass

    @abstractmethod
    def set_color(self, color: str) -> 'CarBuilderInterface':
        pass

    @abstractmethod
    def set_wheels(self, wheels: str) -> 'CarBuilderInterface':
        pass

    @abstractmethod
    def build(self) -> Car:
        pass


class CarBuilder(CarBuilderInterface):
    """Builds a Car, model name is the only required property"""

    def __init__(self, model_name: str):
        self._car = Car(model_name)

    def set_engine_type(self, engine_type: str) -> 'CarBuilder':
        self._car.engine_type = engine_type
        return self

    def set_color(self, color: str) -> 'CarBuilder':
        self._car.color = color
        return self

    def set_wheels(self, wheels: str) -> 'CarBuilder':
        self._car.wheels = wheels
        return self

    def build(self) -> Car:
        return self._car


# ==================== IMMUTABLE BUILDER ====================
# Each step returns a fresh builder, the receiver never changes

@dataclass(frozen=True)
class Invoice:
    name: str
    product: str
    feature: str


@dataclass(frozen=True)
class _InvoiceDraft:
    name: Optional[str] = None
    product: Optional[str] = None
    feature: Optional[str] = None


class InvoiceBuilder:
    """
    Immutable invoice builder.

    Use InvoiceBuilder.create() to start. Every setter returns a new
    builder so partially built drafts can be shared and branched safely.
    build() only succeeds once all fields are present.
    """

    def __init__(self, draft: _InvoiceDraft):
        self._draft = draft

    @classmethod
    def create(cls) -> 'InvoiceBuilder':
        return cls(_InvoiceDraft())

    def set_name(self, name: str) -> 'InvoiceBuilder':
        return InvoiceBuilder(replace(self._draft, name=name))

    def set_product(self, product: str) -> 'InvoiceBuilder':
        return InvoiceBuilder(replace(self._draft, product=product))

    def set_feature(self, feature: str) -> 'InvoiceBuilder':
        return InvoiceBuilder(replace(self._draft, feature=feature))

    def missing_fields(self):
        return [name for name in ("name", "product", "feature")
                if getattr(self._draft, name) is None]

    def build(self) -> Invoice:
        missing = self.missing_fields()
        if missing:
            raise ValueError(f"Invoice is missing fields: {', '.join(missing)}")
        return Invoice(self._draft.name, self._draft.product, self._draft.feature)


# ==================== NESTED BUILDERS ====================

@dataclass
class Address:
    street: str
    door_no: int
    city: str


@dataclass
class User:
    name: Optional[str] = None
    age: Optional[int] = None
    address: Optional[Address] = None


class AddressBuilder:

    def build(self, city: str, door_no: int, street: str) -> Address:
        return Address(street=street, door_no=door_no, city=city)


class UserBuilder:

    def __init__(self):
        self._user = User()

    def set_name(self, name: str) -> 'UserBuilder':
        self._user.name = name
        return self

    def set_age(self, age: int) -> 'UserBuilder':
        self._user.age = age
        return self

    def set_address(self, address: Address) -> 'UserBuilder':
        self._user.address = address
        return self

    def build(self) -> User:
        return self._user


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("BUILDER PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Car built with chained setters:")
    car = (CarBuilder("BMW")
           .set_color("white")
           .set_engine_type("V8")
           .set_wheels("4")
           .build())
    print(f"  {car}")
    print()

    print("2. Immutable invoice builder:")
    base = InvoiceBuilder.create().set_name("QUARTERLY_INVOICE")
    invoice = base.set_feature("AI").set_product("SALES").build()
    print(f"  {invoice}")
    try:
        base.build()
    except ValueError as exc:
        print(f"  Base draft untouched and incomplete: {exc}")
    print()

    print("3. User with nested address builder:")
    address = AddressBuilder().build("chennai", 10, "dev 1st street")
    user = UserBuilder().set_name("user1").set_address(address).set_age(25).build()
    print(f"  {user}")
    print()

    print("=" * 60)
    print("DESIGN PATTERNS & STRATEGIES:")
    print("=" * 60)
    print("1. Builder - Step-by-step construction")
    print("2. Fluent Interface - Chained setters")
    print("3. Immutability - Setters return new builders")
    print("=" * 60)


if __name__ == "__main__":
    main()
